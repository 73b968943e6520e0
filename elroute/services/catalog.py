"""
Static reference catalogs: vehicles, charging stations, ferry timetables
and known places.

These stand in for the data layer's `list_*` collaborators. Everything here
is an immutable tuple of frozen models, so callers can share it freely.
"""

import logging
from typing import Optional, Protocol, Tuple

from elroute.schemas.trip import ChargingStation, Coordinate, FerryRoute, Vehicle

logger = logging.getLogger(__name__)


class Geocoder(Protocol):
    """Resolves a free-text address to a coordinate, or None."""

    def geocode(self, address: str) -> Optional[Coordinate]:
        ...


# ==================== Vehicles ====================

VEHICLE_CATALOG: Tuple[Vehicle, ...] = (
    Vehicle(id="tesla-model3", brand="Tesla", model="Model 3", battery_capacity_kwh=75, range_km=560, consumption_kwh_per_100km=14.3),
    Vehicle(id="tesla-models", brand="Tesla", model="Model S", battery_capacity_kwh=100, range_km=652, consumption_kwh_per_100km=16.5),
    Vehicle(id="tesla-modelx", brand="Tesla", model="Model X", battery_capacity_kwh=100, range_km=560, consumption_kwh_per_100km=20.6),
    Vehicle(id="tesla-modely", brand="Tesla", model="Model Y", battery_capacity_kwh=75, range_km=533, consumption_kwh_per_100km=15.6),
    Vehicle(id="tesla-cybertruck", brand="Tesla", model="Cybertruck", battery_capacity_kwh=123, range_km=515, consumption_kwh_per_100km=23.9),
    Vehicle(id="vw-id3", brand="Volkswagen", model="ID.3", battery_capacity_kwh=58, range_km=426, consumption_kwh_per_100km=15.4),
    Vehicle(id="vw-id4", brand="Volkswagen", model="ID.4", battery_capacity_kwh=77, range_km=520, consumption_kwh_per_100km=16.2),
    Vehicle(id="skoda-enyaq", brand="Škoda", model="Enyaq iV", battery_capacity_kwh=82, range_km=534, consumption_kwh_per_100km=16.7),
    Vehicle(id="bmw-i4", brand="BMW", model="i4", battery_capacity_kwh=83.9, range_km=590, consumption_kwh_per_100km=16.1),
    Vehicle(id="bmw-ix", brand="BMW", model="iX", battery_capacity_kwh=111.5, range_km=630, consumption_kwh_per_100km=19.8),
    Vehicle(id="audi-etrongt", brand="Audi", model="e-tron GT", battery_capacity_kwh=93.4, range_km=487, consumption_kwh_per_100km=19.6),
    Vehicle(id="audi-q4etron", brand="Audi", model="Q4 e-tron", battery_capacity_kwh=82, range_km=520, consumption_kwh_per_100km=17.0),
    Vehicle(id="mercedes-eqs", brand="Mercedes-Benz", model="EQS", battery_capacity_kwh=107.8, range_km=770, consumption_kwh_per_100km=15.7),
    Vehicle(id="mercedes-eqc", brand="Mercedes-Benz", model="EQC", battery_capacity_kwh=80, range_km=417, consumption_kwh_per_100km=20.2),
    Vehicle(id="hyundai-ioniq5", brand="Hyundai", model="IONIQ 5", battery_capacity_kwh=77.4, range_km=481, consumption_kwh_per_100km=18.0),
    Vehicle(id="hyundai-ioniq6", brand="Hyundai", model="IONIQ 6", battery_capacity_kwh=77.4, range_km=614, consumption_kwh_per_100km=14.3),
    Vehicle(id="kia-ev6", brand="Kia", model="EV6", battery_capacity_kwh=77.4, range_km=528, consumption_kwh_per_100km=16.5),
    Vehicle(id="kia-ev9", brand="Kia", model="EV9", battery_capacity_kwh=99.8, range_km=563, consumption_kwh_per_100km=19.5),
    Vehicle(id="nissan-leaf", brand="Nissan", model="Leaf", battery_capacity_kwh=62, range_km=385, consumption_kwh_per_100km=17.0),
    Vehicle(id="nissan-ariya", brand="Nissan", model="Ariya", battery_capacity_kwh=87, range_km=520, consumption_kwh_per_100km=18.1),
    Vehicle(id="ford-mustangmache", brand="Ford", model="Mustang Mach-E", battery_capacity_kwh=98.8, range_km=610, consumption_kwh_per_100km=17.7),
    Vehicle(id="polestar-2", brand="Polestar", model="2", battery_capacity_kwh=78, range_km=540, consumption_kwh_per_100km=16.3),
    Vehicle(id="polestar-3", brand="Polestar", model="3", battery_capacity_kwh=111, range_km=628, consumption_kwh_per_100km=19.4),
)


def list_vehicles() -> Tuple[Vehicle, ...]:
    return VEHICLE_CATALOG


def get_vehicle(vehicle_id: str) -> Optional[Vehicle]:
    """Look up a catalog vehicle by id (case-insensitive)."""
    wanted = vehicle_id.strip().lower()
    for vehicle in VEHICLE_CATALOG:
        if vehicle.id == wanted:
            return vehicle
    return None


# ==================== Ferries ====================

def _every(start_hour: int, end_hour: int, minutes: Tuple[int, ...]) -> list:
    return [f"{h:02d}:{m:02d}" for h in range(start_hour, end_hour + 1) for m in minutes]


FERRY_ROUTES: Tuple[FerryRoute, ...] = (
    FerryRoute(
        name="Sulesund-Hareid",
        operator="Fjord1",
        from_port="Sulesund",
        to_port="Hareid",
        from_coordinate=Coordinate(latitude=62.3953, longitude=6.1681),
        to_coordinate=Coordinate(latitude=62.3722, longitude=6.0311),
        scheduled_times=_every(6, 22, (0, 30)),
        duration_minutes=25,
    ),
    FerryRoute(
        name="Molde-Vestnes",
        operator="Fjord1",
        from_port="Molde",
        to_port="Vestnes",
        from_coordinate=Coordinate(latitude=62.7378, longitude=7.1591),
        to_coordinate=Coordinate(latitude=62.6000, longitude=7.0833),
        scheduled_times=_every(6, 22, (0,)),
        duration_minutes=25,
    ),
    FerryRoute(
        name="Mortavika-Arsvågen",
        operator="Boreal",
        from_port="Mortavika",
        to_port="Arsvågen",
        from_coordinate=Coordinate(latitude=59.2394, longitude=5.5656),
        to_coordinate=Coordinate(latitude=59.1892, longitude=5.4431),
        scheduled_times=_every(6, 22, (15, 45)),
        duration_minutes=25,
    ),
    FerryRoute(
        name="Flakk-Rørvik",
        operator="FosenNamsos",
        from_port="Flakk",
        to_port="Rørvik",
        from_coordinate=Coordinate(latitude=63.4500, longitude=10.2000),
        to_coordinate=Coordinate(latitude=63.5167, longitude=10.1500),
        scheduled_times=_every(6, 22, (30,)),
        duration_minutes=25,
    ),
    FerryRoute(
        name="Stavanger-Tau",
        operator="Kolumbus",
        from_port="Stavanger",
        to_port="Tau",
        from_coordinate=Coordinate(latitude=58.9700, longitude=5.7331),
        to_coordinate=Coordinate(latitude=59.0667, longitude=6.0000),
        scheduled_times=_every(6, 21, (0, 30)) + ["22:00"],
        duration_minutes=40,
    ),
    FerryRoute(
        name="Lavik-Oppedal",
        operator="Fjord1",
        from_port="Lavik",
        to_port="Oppedal",
        from_coordinate=Coordinate(latitude=61.1000, longitude=5.5167),
        to_coordinate=Coordinate(latitude=61.0333, longitude=5.7000),
        scheduled_times=[
            "05:40", "06:20", "07:00", "07:40", "08:20", "09:00", "09:40",
            "10:20", "11:00", "11:40", "12:20", "13:00", "13:40", "14:20",
            "15:00", "15:40", "16:20", "17:00", "17:40", "18:20", "19:00",
            "19:40", "20:20", "21:00", "21:40", "22:20", "23:00",
        ],
        duration_minutes=20,
    ),
    FerryRoute(
        name="Bergen-Stavanger",
        operator="Fjordline",
        from_port="Bergen",
        to_port="Stavanger",
        from_coordinate=Coordinate(latitude=60.3913, longitude=5.3221),
        to_coordinate=Coordinate(latitude=58.9700, longitude=5.7331),
        scheduled_times=["08:00", "22:30"],
        duration_minutes=270,
    ),
    FerryRoute(
        name="Hirtshals-Kristiansand",
        operator="Color Line",
        from_port="Hirtshals",
        to_port="Kristiansand",
        from_coordinate=Coordinate(latitude=57.5942, longitude=9.9611),
        to_coordinate=Coordinate(latitude=58.1467, longitude=7.9956),
        scheduled_times=["08:30", "14:30", "20:30"],
        duration_minutes=135,
    ),
    FerryRoute(
        name="Bodø-Værøy",
        operator="Torghatten",
        from_port="Bodø",
        to_port="Værøy",
        from_coordinate=Coordinate(latitude=67.2804, longitude=14.4049),
        to_coordinate=Coordinate(latitude=67.6667, longitude=12.6667),
        scheduled_times=["08:30", "16:00"],
        duration_minutes=120,
    ),
    FerryRoute(
        name="Åndalsnes-Valldal",
        operator="Fjord1",
        from_port="Åndalsnes",
        to_port="Valldal",
        from_coordinate=Coordinate(latitude=62.5667, longitude=7.6833),
        to_coordinate=Coordinate(latitude=62.3000, longitude=7.7167),
        scheduled_times=["08:00", "12:00", "16:00", "20:00"],
        duration_minutes=35,
    ),
    FerryRoute(
        name="Flåm-Gudvangen",
        operator="Fjord1",
        from_port="Flåm",
        to_port="Gudvangen",
        from_coordinate=Coordinate(latitude=60.8628, longitude=7.1131),
        to_coordinate=Coordinate(latitude=60.8833, longitude=6.8500),
        scheduled_times=["09:00", "13:00", "17:00"],
        duration_minutes=120,
    ),
)


def list_ferry_routes() -> Tuple[FerryRoute, ...]:
    return FERRY_ROUTES


# ==================== Charging stations ====================

def _station(station_id, name, lat, lng, available, total, cost, fast=True) -> ChargingStation:
    return ChargingStation(
        id=station_id,
        name=name,
        coordinate=Coordinate(latitude=lat, longitude=lng),
        available=available,
        total=total,
        fast_charger=fast,
        cost_per_unit=cost,
    )


CHARGING_STATIONS: Tuple[ChargingStation, ...] = (
    _station("tesla-oslo-gronland", "Tesla Supercharger Grønland", 59.9103, 10.7578, 12, 16, 4.95),
    _station("fortum-oslo-city", "Fortum Oslo City", 59.9127, 10.7461, 3, 4, 3.50, fast=False),
    _station("tesla-drammen", "Tesla Supercharger Drammen", 59.7389, 10.2041, 8, 10, 4.95),
    _station("tesla-hamar", "Tesla Supercharger Hamar", 60.7945, 11.0680, 6, 8, 4.95),
    _station("circlek-lillehammer", "Circle K Charge Lillehammer", 61.1134, 10.4567, 7, 10, 4.35),
    _station("shell-otta", "Shell Recharge Otta", 61.7734, 9.5467, 4, 6, 4.15),
    _station("ionity-dombas", "Ionity Dombås", 62.0758, 9.1304, 3, 4, 6.90),
    _station("hallingkraft-gol", "Hallingkraft Gol", 60.6834, 8.9267, 6, 8, 3.45),
    _station("tesla-bergen", "Tesla Supercharger Bergen", 60.3372, 5.4108, 9, 12, 4.95),
    _station("recharge-bergen-sentrum", "Recharge Bergen Sentrum", 60.3913, 5.3221, 4, 6, 3.95),
    _station("eviny-forde", "Eviny Lading Førde", 61.4534, 5.8567, 3, 4, 3.35),
    _station("eviny-geiranger", "Eviny Lading Geiranger", 62.1034, 7.2067, 3, 4, 3.35),
    _station("tesla-alesund", "Tesla Supercharger Ålesund", 62.4722, 6.1549, 6, 8, 4.95),
    _station("more-alesund-ost", "Møre Energi Ålesund Øst", 62.4634, 6.2367, 6, 8, 3.55),
    _station("shell-molde", "Shell Recharge Molde", 62.7374, 7.1567, 4, 6, 4.15),
    _station("tesla-trondheim", "Tesla Supercharger Trondheim", 63.3546, 10.3734, 6, 8, 4.95),
    _station("tesla-stavanger", "Tesla Supercharger Stavanger", 58.8516, 5.7375, 8, 10, 4.95),
    _station("tesla-kristiansand", "Tesla Supercharger Kristiansand", 58.1875, 8.0754, 6, 8, 4.95),
)


def list_charging_stations() -> Tuple[ChargingStation, ...]:
    return CHARGING_STATIONS


# ==================== Places ====================

KNOWN_PLACES: Tuple[Tuple[str, Coordinate], ...] = (
    ("fureåsen", Coordinate(latitude=62.4500, longitude=6.3300)),
    ("ålesund", Coordinate(latitude=62.4722, longitude=6.1549)),
    ("oslo", Coordinate(latitude=59.9139, longitude=10.7522)),
    ("bergen", Coordinate(latitude=60.3913, longitude=5.3221)),
    ("trondheim", Coordinate(latitude=63.4305, longitude=10.3951)),
    ("stavanger", Coordinate(latitude=58.9700, longitude=5.7331)),
    ("kristiansand", Coordinate(latitude=58.1467, longitude=7.9956)),
    ("tromsø", Coordinate(latitude=69.6492, longitude=18.9553)),
    ("drammen", Coordinate(latitude=59.7431, longitude=10.2048)),
    ("fredrikstad", Coordinate(latitude=59.2181, longitude=10.9298)),
    ("sandefjord", Coordinate(latitude=59.1272, longitude=10.2167)),
    ("tønsberg", Coordinate(latitude=59.2676, longitude=10.4065)),
    ("larvik", Coordinate(latitude=59.0537, longitude=10.0357)),
    ("hamar", Coordinate(latitude=60.7945, longitude=11.0680)),
    ("lillehammer", Coordinate(latitude=61.1161, longitude=10.4669)),
    ("dombås", Coordinate(latitude=62.0767, longitude=9.1181)),
    ("molde", Coordinate(latitude=62.7378, longitude=7.1591)),
    ("bodø", Coordinate(latitude=67.2804, longitude=14.4049)),
    ("moss", Coordinate(latitude=59.4315, longitude=10.6588)),
)


class KnownPlacesGeocoder:
    """
    Offline geocoder over a fixed table of Norwegian places.

    Matches case-insensitively by substring, ignoring anything in
    parentheses ("Bergen (Vestland)" resolves to Bergen). The first entry in
    table order wins.
    """

    def __init__(self, places: Tuple[Tuple[str, Coordinate], ...] = KNOWN_PLACES):
        self._places = places

    def geocode(self, address: str) -> Optional[Coordinate]:
        cleaned = address.lower().split("(")[0].strip()
        if not cleaned:
            return None
        for place, coordinate in self._places:
            if place in cleaned:
                return coordinate
        logger.debug("No known place matches %r", address)
        return None
