from datetime import timedelta
from decimal import Decimal

import pytest

from services.inventory.domain.entity import Inventory
from services.inventory.domain.value_object import (
    FlightNumber,
    InventoryId,
    Route,
    SeatSet,
)
from services.shared.domain import IsoDateTime, Money
from services.shared.domain.exception import BusinessRuleViolationException


def _build(**overrides) -> Inventory:
    departure = IsoDateTime.from_string("2030-01-01T09:00:00")
    params = {
        "id": InventoryId(value="inv-001"),
        "airline": "Indigo",
        "flight_number": FlightNumber("IN123"),
        "route": Route(origin="HYD", destination="BLR"),
        "departure_time": departure,
        "arrival_time": departure.plus(timedelta(hours=1)),
        "total_seats": 3,
        "price": Money.inr(Decimal("4500")),
        "available_seats": SeatSet.generate(3),
    }
    params.update(overrides)
    return Inventory(**params)


class TestInventoryInvariants:
    """Inventory 生成時の不変条件"""

    def test_same_origin_and_destination_is_rejected(self):
        with pytest.raises(
            BusinessRuleViolationException,
            match="Origin and destination cannot be the same",
        ):
            _build(route=Route(origin="HYD", destination="hyd"))

    def test_arrival_before_departure_is_rejected(self):
        departure = IsoDateTime.from_string("2030-01-01T09:00:00")
        with pytest.raises(
            BusinessRuleViolationException, match="Arrival must be after departure"
        ):
            _build(arrival_time=departure)

    def test_zero_seats_is_rejected(self):
        with pytest.raises(
            BusinessRuleViolationException, match="Total seats must be > 0"
        ):
            _build(total_seats=0, available_seats=SeatSet())

    def test_available_seats_outside_seat_map_is_rejected(self):
        with pytest.raises(BusinessRuleViolationException):
            _build(available_seats=SeatSet.of(["S1", "S9"]))


class TestInventorySeats:
    """空席の確保・解放・付け替え"""

    def test_reserve_removes_seats(self, create_inventory):
        inventory = create_inventory(total_seats=5)

        inventory.reserve(SeatSet.of(["S1", "S2"]))

        assert inventory.available_seats.to_list() == ["S3", "S4", "S5"]

    def test_reserve_unavailable_seat_raises_error(self, create_inventory):
        inventory = create_inventory(available_seats=["S3", "S4", "S5"])

        with pytest.raises(
            BusinessRuleViolationException, match="Some selected seats are unavailable"
        ):
            inventory.reserve(SeatSet.of(["S1"]))
        assert inventory.available_seats.to_list() == ["S3", "S4", "S5"]

    def test_swap_to_empty_request_returns_held_seats(self, create_inventory):
        """保持中の座席は座席マップに含まれるものだけが空席に戻る"""
        inventory = create_inventory(available_seats=["S3"])

        inventory.swap(held=SeatSet.of(["S1", "S99"]), requested=SeatSet())

        assert inventory.available_seats.to_list() == ["S1", "S3"]

    def test_swap_can_keep_overlapping_seat(self, create_inventory):
        """保持中の座席を一時的に空席とみなして付け替える"""
        inventory = create_inventory(available_seats=["S3", "S4", "S5"])

        inventory.swap(
            held=SeatSet.of(["S1", "S2"]), requested=SeatSet.of(["S2", "S3"])
        )

        assert inventory.available_seats.to_list() == ["S1", "S4", "S5"]

    def test_swap_to_taken_seat_raises_error(self, create_inventory):
        inventory = create_inventory(available_seats=["S4", "S5"])

        with pytest.raises(
            BusinessRuleViolationException,
            match="One or more requested seats are not available",
        ):
            inventory.swap(held=SeatSet.of(["S1"]), requested=SeatSet.of(["S3"]))
        assert inventory.available_seats.to_list() == ["S4", "S5"]

    def test_has_departed(self, create_inventory):
        now = IsoDateTime.now()
        assert create_inventory(departure_in=timedelta(hours=-1)).has_departed(now)
        assert not create_inventory(departure_in=timedelta(hours=1)).has_departed(now)
