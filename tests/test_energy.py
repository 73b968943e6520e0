"""
Unit tests for the EV energy model.
Tests range derating, charging decisions and charging time estimates.
"""

import pytest

from elroute.schemas.trip import RouteType
from elroute.services.energy import (
    charging_plan,
    clamp_battery_percentage,
    effective_range_km,
    plan_charging,
    usable_range_km,
)


class TestEffectiveRange:
    """Tests for effective_range_km function (400 km declared range)."""

    def test_shortest_applies_seasonal_derating(self, vehicle):
        """400 * 1.0 * 0.85."""
        assert effective_range_km(vehicle, 0, RouteType.SHORTEST) == pytest.approx(340.0)

    def test_fastest_modifier(self, vehicle):
        """400 * 0.95 * 0.85."""
        assert effective_range_km(vehicle, 0, RouteType.FASTEST) == pytest.approx(323.0)

    def test_eco_modifier(self, vehicle):
        """400 * 1.10 * 0.85."""
        assert effective_range_km(vehicle, 0, RouteType.ECO) == pytest.approx(374.0)

    def test_trailer_penalty(self, vehicle):
        """400 * 0.65 * 0.85."""
        assert effective_range_km(vehicle, 750, RouteType.SHORTEST) == pytest.approx(221.0)

    def test_trailer_penalty_is_binary(self, vehicle):
        light = effective_range_km(vehicle, 1, RouteType.SHORTEST)
        heavy = effective_range_km(vehicle, 2500, RouteType.SHORTEST)
        assert light == pytest.approx(heavy)

    def test_unknown_route_type_uses_neutral_modifier(self, vehicle):
        assert effective_range_km(vehicle, 0, "scenic") == pytest.approx(340.0)

    def test_never_exceeds_declared_range(self, vehicle):
        for route_type in RouteType:
            assert effective_range_km(vehicle, 0, route_type) <= vehicle.range_km


class TestUsableRange:
    """Tests for usable_range_km function."""

    def test_half_battery(self, vehicle):
        assert usable_range_km(vehicle, 50) == pytest.approx(170.0)

    def test_battery_is_clamped(self, vehicle):
        assert usable_range_km(vehicle, 150) == pytest.approx(340.0)
        assert usable_range_km(vehicle, -10) == 0.0


class TestClampBattery:

    @pytest.mark.parametrize("value,expected", [(-5, 0.0), (0, 0.0), (55, 55.0), (100, 100.0), (120, 100.0)])
    def test_clamp(self, value, expected):
        assert clamp_battery_percentage(value) == expected


class TestChargingPlan:
    """Tests for charging_plan function."""

    def test_no_charging_within_safe_range(self):
        plan = charging_plan(200, 340, 340, 100)
        assert plan.required is False
        assert plan.stops == 0
        assert plan.minutes == 0

    def test_zero_distance(self):
        plan = charging_plan(0, 340, 0, 0)
        assert plan.required is False

    def test_safety_topup_for_low_battery(self):
        """Range suffices but battery < 40% on a trip > 150 km."""
        plan = charging_plan(200, 1000, 350, 35)
        assert plan.required is True
        assert plan.stops == 1
        assert plan.minutes == 30

    def test_no_topup_at_threshold_distance(self):
        plan = charging_plan(150, 1000, 350, 35)
        assert plan.required is False

    def test_no_topup_at_threshold_battery(self):
        plan = charging_plan(200, 1000, 400, 40)
        assert plan.required is False

    def test_single_stop_normal_battery(self):
        """
        Safe range 306 km, 194 km remaining, 238 km per stop -> 1 stop.
        25 min first stop + 15 min search.
        """
        plan = charging_plan(500, 340, 340, 100)
        assert plan.required is True
        assert plan.stops == 1
        assert plan.minutes == 40

    def test_critical_battery_two_stops(self):
        """
        Safe range 45.9 km, 454.1 km remaining -> 2 stops.
        60 + 35 + 2 * 15.
        """
        plan = charging_plan(500, 340, 51, 15)
        assert plan.stops == 2
        assert plan.minutes == 125

    def test_low_battery_two_stops(self):
        """
        Safe range 91.8 km, 408.2 km remaining -> 2 stops.
        40 + 35 + 2 * 15.
        """
        plan = charging_plan(500, 340, 102, 30)
        assert plan.stops == 2
        assert plan.minutes == 105

    def test_eco_search_buffer(self):
        """25 min first stop + 20 min eco search."""
        plan = charging_plan(500, 340, 340, 100, RouteType.ECO)
        assert plan.minutes == 45

    def test_carries_ranges(self):
        plan = charging_plan(500, 340, 170, 50)
        assert plan.effective_range_km == 340
        assert plan.current_range_km == 170

    def test_zero_effective_range_rejected(self):
        with pytest.raises(ValueError):
            charging_plan(100, 0, 0, 0)

    def test_stops_grow_with_distance(self):
        stops = [charging_plan(d, 340, 340, 100).stops for d in (300, 600, 900, 1200)]
        assert stops == sorted(stops)


class TestPlanCharging:
    """Tests for plan_charging function (vehicle level)."""

    def test_full_battery_short_trip(self, vehicle):
        """100% battery, no trailer, 100 km: well inside 306 km safe range."""
        plan = plan_charging(vehicle, 100, 0, 100)
        assert plan.required is False
        assert plan.stops == 0
        assert plan.minutes == 0

    def test_one_stop_for_500_km(self, vehicle):
        plan = plan_charging(vehicle, 100, 0, 500, RouteType.SHORTEST)
        assert plan.stops == 1
        assert plan.minutes == 40

    def test_three_stops_for_1000_km(self, vehicle):
        """694 km beyond safe range / 238 km per stop -> 3; 25 + 2 * 35 + 3 * 15."""
        plan = plan_charging(vehicle, 100, 0, 1000, RouteType.SHORTEST)
        assert plan.stops == 3
        assert plan.minutes == 140

    def test_trailer_forces_charging(self, vehicle):
        """With a trailer, 100% covers only 221 * 0.9 = 198.9 km."""
        without = plan_charging(vehicle, 100, 0, 250, RouteType.SHORTEST)
        with_trailer = plan_charging(vehicle, 100, 900, 250, RouteType.SHORTEST)
        assert without.required is False
        assert with_trailer.required is True

    def test_out_of_range_inputs_are_clamped(self, vehicle):
        plan = plan_charging(vehicle, 180, -300, 200, RouteType.SHORTEST)
        assert plan.current_range_km == pytest.approx(340.0)
        assert plan.required is False
