from decimal import Decimal

import pytest

from services.inventory.domain.factory import InventoryDetails, InventoryFactory
from services.inventory.domain.value_object import InventoryId
from services.shared.domain import Currency


@pytest.fixture
def details() -> InventoryDetails:
    return {
        "airline": "Indigo",
        "flight_number": "IN123",
        "origin": "HYD",
        "destination": "BLR",
        "departure_time": "2030-01-01T09:00:00",
        "arrival_time": "2030-01-01T10:30:00",
        "total_seats": 4,
        "price_amount": Decimal("4500"),
        "price_currency": "INR",
    }


class TestInventoryFactory:
    """InventoryFactory のテスト"""

    def test_create_initializes_all_seats_as_available(self, details):
        inventory = InventoryFactory().create(details)

        assert inventory.available_seats.to_list() == ["S1", "S2", "S3", "S4"]
        assert inventory.price.currency == Currency.inr()
        assert inventory.airline_logo_url is None
        assert inventory.version == 0

    def test_create_with_explicit_id(self, details):
        inventory_id = InventoryId.for_sample("IN123")

        inventory = InventoryFactory().create(details, inventory_id=inventory_id)

        assert inventory.id == inventory_id
