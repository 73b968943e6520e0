"""
Unit tests for mandatory charging stop selection.

Places sit on the 10°E meridian (see conftest). With a 400 km vehicle on
the shortest route at 80% battery: effective range 340 km, current range
272 km, critical floor 34 km, so 238 km are usable before the floor.
"""

import pytest

from elroute.core.exceptions import GeocodingFailure, NoReachableStation
from elroute.services.charging_stop import find_mandatory_charging_stop
from tests.fixtures.test_data import make_station


class TestFindMandatoryChargingStop:
    """Tests for find_mandatory_charging_stop function."""

    def test_no_stop_when_destination_within_reach(self, vehicle, meridian_geocoder):
        """Start -> Near is ~111 km, well below 238 km."""
        stop = find_mandatory_charging_stop(
            "Start", "Near", vehicle, 80, [make_station("a", 60.5)], meridian_geocoder,
        )
        assert stop is None

    def test_nearest_available_station_wins(self, vehicle, meridian_geocoder):
        stations = [
            make_station("b", 61.5, available=1),
            make_station("a", 60.5, available=2),
            make_station("c", 60.1, available=0),
        ]
        stop = find_mandatory_charging_stop("Start", "Far", vehicle, 80, stations, meridian_geocoder)

        assert stop.station.id == "a"
        assert stop.distance_from_origin_km == 55.6

    def test_arrival_battery(self, vehicle, meridian_geocoder):
        """80% - 55.6 km / 340 km."""
        stop = find_mandatory_charging_stop(
            "Start", "Far", vehicle, 80, [make_station("a", 60.5)], meridian_geocoder,
        )
        assert stop.arrival_battery_percent == pytest.approx(63.6, abs=0.05)

    def test_station_within_usable_range_only(self, vehicle, meridian_geocoder):
        """A station at 62.5°N is ~278 km away, past the 238 km limit."""
        stations = [make_station("far", 62.5), make_station("reach", 62.0)]
        stop = find_mandatory_charging_stop("Start", "Far", vehicle, 80, stations, meridian_geocoder)
        assert stop.station.id == "reach"

    def test_ties_keep_first_station(self, vehicle, meridian_geocoder):
        stations = [make_station("first", 60.5), make_station("second", 60.5)]
        stop = find_mandatory_charging_stop("Start", "Far", vehicle, 80, stations, meridian_geocoder)
        assert stop.station.id == "first"

    def test_all_unavailable_raises(self, vehicle, meridian_geocoder):
        stations = [make_station("a", 60.5, available=0), make_station("b", 61.0, available=0)]
        with pytest.raises(NoReachableStation) as exc_info:
            find_mandatory_charging_stop("Start", "Far", vehicle, 80, stations, meridian_geocoder)
        assert exc_info.value.usable_before_critical_km == pytest.approx(238.0)
        assert "charge at origin" in str(exc_info.value)

    def test_no_station_in_reach_raises(self, vehicle, meridian_geocoder):
        with pytest.raises(NoReachableStation):
            find_mandatory_charging_stop(
                "Start", "Far", vehicle, 80, [make_station("far", 62.5)], meridian_geocoder,
            )

    def test_empty_station_list_raises(self, vehicle, meridian_geocoder):
        with pytest.raises(NoReachableStation):
            find_mandatory_charging_stop("Start", "Far", vehicle, 80, [], meridian_geocoder)

    def test_trailer_shrinks_reach(self, vehicle, meridian_geocoder):
        """
        With a trailer: effective 221 km, current 176.8 km, floor 22.1 km,
        154.7 km usable, so a station ~167 km away is out of reach.
        """
        stations = [make_station("b", 61.5)]
        assert find_mandatory_charging_stop(
            "Start", "Far", vehicle, 80, stations, meridian_geocoder,
        ).station.id == "b"
        with pytest.raises(NoReachableStation):
            find_mandatory_charging_stop(
                "Start", "Far", vehicle, 80, stations, meridian_geocoder, trailer_weight_kg=500,
            )

    def test_unknown_origin_raises(self, vehicle, meridian_geocoder):
        with pytest.raises(GeocodingFailure) as exc_info:
            find_mandatory_charging_stop("Atlantis", "Far", vehicle, 80, [], meridian_geocoder)
        assert exc_info.value.address == "Atlantis"

    def test_unknown_destination_raises(self, vehicle, meridian_geocoder):
        with pytest.raises(GeocodingFailure) as exc_info:
            find_mandatory_charging_stop("Start", "Atlantis", vehicle, 80, [], meridian_geocoder)
        assert exc_info.value.address == "Atlantis"


class TestMandatoryStopChargingEstimate:
    """
    Energy, time and cost at the chosen stop (60 kWh, 15 kWh/100 km).

    At 40% battery the vehicle reaches station "a" (55.6 km) with 23.65%
    (14.19 kWh) and charges up to the 70% target (42 kWh): 27.81 kWh.
    """

    def test_fast_charger(self, vehicle, meridian_geocoder):
        """27.81 kWh at 50 kW is 33.4 min; 4.5 NOK/kWh."""
        stop = find_mandatory_charging_stop(
            "Start", "Far", vehicle, 40, [make_station("a", 60.5)], meridian_geocoder,
        )
        assert stop.energy_to_charge_kwh == pytest.approx(27.8, abs=0.05)
        assert stop.charging_minutes == 34
        assert stop.charging_cost == pytest.approx(125.15, abs=0.01)

    def test_normal_charger(self, vehicle, meridian_geocoder):
        """27.81 kWh at 22 kW is 75.8 min; 3.0 NOK/kWh."""
        stop = find_mandatory_charging_stop(
            "Start", "Far", vehicle, 40,
            [make_station("a", 60.5, fast_charger=False, cost_per_unit=3.0)],
            meridian_geocoder,
        )
        assert stop.charging_minutes == 76
        assert stop.charging_cost == pytest.approx(83.43, abs=0.01)

    def test_charges_only_what_the_remainder_needs(self, vehicle, meridian_geocoder):
        """
        From station "b" (166.8 km) 166.8 km remain: 166.8 / 100 * 17.65
        derated kWh/100 km * 1.2 = 35.32 kWh, below the 42 kWh target.
        Arrival at 30.94% (18.57 kWh) leaves 16.75 kWh to add.
        """
        stop = find_mandatory_charging_stop(
            "Start", "Far", vehicle, 80, [make_station("b", 61.5)], meridian_geocoder,
        )
        assert stop.energy_to_charge_kwh == pytest.approx(16.8, abs=0.05)
