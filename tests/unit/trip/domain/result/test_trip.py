from decimal import Decimal

import pytest

from janitor.trip.domain.result import PlanResult, Trip


class TestTrip:
    def test_total_weight(self, create_bags):
        trip = Trip(bags=tuple(create_bags("1.99", "1.01")))

        assert trip.total_weight.value == Decimal("3.00")
        assert trip.weights == [Decimal("1.99"), Decimal("1.01")]
        assert len(trip) == 2

    def test_list_is_stored_as_tuple(self, create_bags):
        bags = create_bags("1.5")
        trip = Trip(bags=bags)  # type: ignore[arg-type]

        assert trip.bags == tuple(bags)

    def test_empty_trip_raises_error(self):
        with pytest.raises(ValueError, match="Trip must contain at least one bag"):
            Trip(bags=())


class TestPlanResult:
    def test_empty_result(self):
        result = PlanResult()

        assert result.total_trips == 0
        assert result.trip_groups == ()

    def test_total_trips_counts_groups(self, create_bags):
        a, b, c = create_bags("2.5", "1.5", "1.5")
        result = PlanResult(trip_groups=(Trip(bags=(a,)), Trip(bags=(b, c))))

        assert result.total_trips == 2
