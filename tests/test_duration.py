"""
Unit tests for travel duration estimation.
Tests corridor matching, route-type adjustment and fallbacks.
"""

import pytest

from elroute.schemas.trip import RouteType
from elroute.services.duration import (
    CORRIDORS,
    Corridor,
    estimate_duration,
    find_corridor,
    route_time_multiplier,
)


class TestFindCorridor:
    """Tests for find_corridor function."""

    def test_matches_case_insensitively(self):
        corridor = find_corridor("ÅLESUND sentrum", "bergen")
        assert corridor is not None
        assert corridor.name == "Fureåsen/Ålesund-Bergen"

    def test_matches_in_reverse_direction(self):
        corridor = find_corridor("Bergen", "Fureåsen")
        assert corridor.name == "Fureåsen/Ålesund-Bergen"

    def test_first_match_wins(self):
        """An earlier, more specific entry shadows a later broader one."""
        corridors = (
            Corridor("Specific", ("ålesund",), ("bergen",), 100, 100.0),
            Corridor("Broad", ("ålesund",), ("bergen",), 999, 999.0),
        )
        assert find_corridor("Ålesund", "Bergen", corridors).name == "Specific"

    def test_unknown_pair(self):
        assert find_corridor("Paris", "Berlin") is None

    def test_empty_input(self):
        assert find_corridor("", "Bergen") is None

    def test_priority_list_is_not_empty(self):
        assert len(CORRIDORS) > 5


class TestRouteTimeMultiplier:
    """Tests for route_time_multiplier function."""

    @pytest.mark.parametrize("route_type,expected", [
        (RouteType.FASTEST, 0.95),
        ("shortest", 1.10),
        ("ECO", 1.05),
        ("scenic", 1.0),
    ])
    def test_multiplier(self, route_type, expected):
        assert route_time_multiplier(route_type) == expected


class TestEstimateDuration:
    """Tests for estimate_duration function."""

    def test_corridor_shortest(self):
        """Shortest: 540 min * 1.10, 480 km * 0.95."""
        estimate = estimate_duration("Ålesund", "Bergen", RouteType.SHORTEST)
        assert estimate.minutes == 594
        assert estimate.distance_km == 456.0
        assert estimate.corridor == "Fureåsen/Ålesund-Bergen"

    def test_corridor_fastest(self):
        """Fastest: 540 min * 0.95, 480 km * 1.02."""
        estimate = estimate_duration("Ålesund", "Bergen", RouteType.FASTEST)
        assert estimate.minutes == 513
        assert estimate.distance_km == 489.6

    def test_corridor_eco(self):
        """Eco: 540 min * 1.05, 480 km * 1.08."""
        estimate = estimate_duration("Bergen", "Ålesund", "eco")
        assert estimate.minutes == 567
        assert estimate.distance_km == 518.4

    def test_unknown_route_type_is_unadjusted(self):
        estimate = estimate_duration("Ålesund", "Bergen", "scenic")
        assert estimate.minutes == 540
        assert estimate.distance_km == 480.0

    def test_generic_baseline_for_unknown_pair(self):
        """180 min / 200 km baseline, adjusted for shortest."""
        estimate = estimate_duration("Paris", "Berlin", RouteType.SHORTEST)
        assert estimate.minutes == 198
        assert estimate.distance_km == 190.0
        assert estimate.corridor is None

    def test_generic_baseline_fastest(self):
        estimate = estimate_duration("Paris", "Berlin", RouteType.FASTEST)
        assert estimate.minutes == 171
        assert estimate.distance_km == 204.0

    def test_corridor_skips_geocoder(self, meridian_geocoder):
        estimate_duration("Ålesund", "Bergen", geocoder=meridian_geocoder)
        assert meridian_geocoder.calls == []

    def test_great_circle_fallback(self, meridian_geocoder):
        """
        111.195 km straight line * 1.3 road factor = 144.55 km at 75 km/h
        = 115.64 min; shortest gives 127 min and 137.3 km.
        """
        estimate = estimate_duration("Start", "Near", RouteType.SHORTEST, geocoder=meridian_geocoder)
        assert estimate.minutes == 127
        assert estimate.distance_km == 137.3
        assert estimate.corridor is None

    def test_geocoder_miss_uses_generic_baseline(self, meridian_geocoder):
        estimate = estimate_duration("Start", "Atlantis", RouteType.SHORTEST, geocoder=meridian_geocoder)
        assert estimate.minutes == 198
        assert estimate.distance_km == 190.0

    def test_via_sums_both_legs(self):
        """Oslo-Lillehammer corridor (140/180) plus generic leg (180/200)."""
        estimate = estimate_duration("Oslo", "Trondheim", RouteType.SHORTEST, via="Lillehammer")
        assert estimate.minutes == 352
        assert estimate.distance_km == 361.0
        assert estimate.corridor == "Oslo-Lillehammer"

    def test_blank_via_is_ignored(self):
        estimate = estimate_duration("Ålesund", "Bergen", RouteType.SHORTEST, via="  ")
        assert estimate.minutes == 594

    def test_never_negative(self):
        estimate = estimate_duration("", "", RouteType.ECO)
        assert estimate.minutes >= 0
        assert estimate.distance_km >= 0
