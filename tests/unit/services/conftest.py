from dataclasses import dataclass
from datetime import timedelta
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from services.booking.domain.entity import Booking
from services.booking.domain.value_object import BookingId, Passenger, Pnr
from services.inventory.domain.entity import Inventory
from services.inventory.domain.value_object import (
    FlightNumber,
    InventoryId,
    Route,
    SeatSet,
)
from services.shared.domain import Email, IsoDateTime, Money


@pytest.fixture
def mock_inventory_repository():
    """在庫リポジトリのモックフィクスチャ"""
    return MagicMock()


@pytest.fixture
def mock_booking_repository():
    """予約リポジトリのモックフィクスチャ"""
    return MagicMock()


@pytest.fixture
def create_inventory():
    """Inventory を生成する Factory fixture（Factories as fixtures パターン）

    出発時刻は既定で現在から3日後。
    """

    def _factory(
        inventory_id: str = "inv-001",
        total_seats: int = 5,
        available_seats: list[str] | None = None,
        departure_in: timedelta = timedelta(days=3),
        origin: str = "HYD",
        destination: str = "BLR",
        version: int = 0,
    ) -> Inventory:
        departure = IsoDateTime.now().plus(departure_in)
        seats = (
            SeatSet.generate(total_seats)
            if available_seats is None
            else SeatSet.of(available_seats)
        )
        return Inventory(
            id=InventoryId(value=inventory_id),
            airline="Indigo",
            flight_number=FlightNumber("IN123"),
            route=Route(origin=origin, destination=destination),
            departure_time=departure,
            arrival_time=departure.plus(timedelta(hours=1, minutes=30)),
            total_seats=total_seats,
            price=Money.inr(Decimal("4500")),
            available_seats=seats,
            version=version,
        )

    return _factory


@pytest.fixture
def create_booking():
    """Booking を生成する Factory fixture

    搭乗日は既定で現在から3日後（変更・キャンセル可能な期間）。
    """

    def _factory(
        pnr: str = "ABC123",
        flight_id: str = "inv-001",
        email: str = "a@x.com",
        seats: list[str] | None = None,
        passenger_count: int | None = None,
        journey_in: timedelta = timedelta(days=3),
        booked_at: str = "2025-01-01T00:00:00+00:00",
        canceled: bool = False,
    ) -> Booking:
        seat_numbers = SeatSet.of(seats if seats is not None else ["S1", "S2"])
        count = len(seat_numbers) if passenger_count is None else passenger_count
        return Booking(
            id=BookingId(value=f"id-{pnr}"),
            pnr=Pnr(pnr),
            flight_id=InventoryId(value=flight_id),
            email=Email(email),
            name="Asha",
            passengers=[
                Passenger(name=f"P{i}", gender="F", age=30) for i in range(count)
            ],
            seat_numbers=seat_numbers,
            meal_veg=False,
            booked_at=IsoDateTime.from_string(booked_at),
            journey_date=IsoDateTime.now().plus(journey_in),
            canceled=canceled,
        )

    return _factory


@dataclass
class FakeLambdaContext:
    """Logger.inject_lambda_context が参照する属性のみを持つ LambdaContext"""

    function_name: str = "test-function"
    memory_limit_in_mb: int = 128
    invoked_function_arn: str = (
        "arn:aws:lambda:ap-south-1:123456789012:function:test-function"
    )
    aws_request_id: str = "test-request-id"


@pytest.fixture
def lambda_context():
    return FakeLambdaContext()


@pytest.fixture
def api_event():
    """API Gateway (REST, Lambda プロキシ統合) のイベントを生成する"""

    def _factory(
        method: str = "GET",
        path: str = "/",
        body: str | None = None,
        path_parameters: dict | None = None,
        query: dict | None = None,
    ) -> dict:
        return {
            "resource": path,
            "path": path,
            "httpMethod": method,
            "headers": {"Content-Type": "application/json"},
            "queryStringParameters": query,
            "pathParameters": path_parameters,
            "body": body,
            "isBase64Encoded": False,
            "requestContext": {"requestId": "test-request", "stage": "prod"},
        }

    return _factory
