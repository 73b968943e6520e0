import pytest
from typing import AsyncGenerator
from httpx import AsyncClient, ASGITransport

from elroute.main import app
from tests.fixtures.test_data import DictGeocoder, make_vehicle, meridian_point


@pytest.fixture
async def client() -> AsyncGenerator[AsyncClient, None]:
    """Test client against the ASGI app."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
def vehicle():
    """Vehicle with a 400 km declared range."""
    return make_vehicle(400.0)


@pytest.fixture
def meridian_geocoder():
    """
    Places along 10°E: Start at 60°N, then 1°, 2° and 3° further north
    (~111, ~222 and ~334 km away).
    """
    return DictGeocoder({
        "Start": meridian_point(60.0),
        "Near": meridian_point(61.0),
        "Middle": meridian_point(62.0),
        "Far": meridian_point(63.0),
    })
