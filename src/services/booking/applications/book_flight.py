from aws_lambda_powertools import Logger

from services.booking.applications.seat_compensation import (
    compensate_seat_reservation,
)
from services.booking.domain.entity import Booking
from services.booking.domain.factory import BookingDetails, BookingFactory
from services.booking.domain.repository import BookingRepository
from services.inventory.domain.repository import InventoryRepository
from services.inventory.domain.value_object import InventoryId, SeatSet
from services.shared.domain import IsoDateTime
from services.shared.domain.exception import (
    BusinessRuleViolationException,
    InvalidInputException,
    ResourceNotFoundException,
)

logger = Logger(child=True)


class BookFlightService:
    """座席予約サービス

    在庫から座席を確保し、予約を作成する。
    在庫の更新 -> 予約の保存 の順に書き込み、予約の保存に失敗した場合は
    確保した座席を在庫に戻す補償処理を行う。
    """

    def __init__(
        self,
        inventory_repository: InventoryRepository,
        booking_repository: BookingRepository,
        factory: BookingFactory,
    ) -> None:
        self._inventory_repository = inventory_repository
        self._booking_repository = booking_repository
        self._factory = factory

    def book(self, flight_id: InventoryId, details: BookingDetails) -> Booking:
        """フライトの座席を予約する"""
        inventory = self._inventory_repository.find_by_id(flight_id)
        if inventory is None:
            raise ResourceNotFoundException("Flight not found")

        now = IsoDateTime.now()
        if inventory.has_departed(now):
            raise BusinessRuleViolationException(
                "Cannot book a flight that already departed"
            )

        seats = requested_seats(details["seat_numbers"])
        if not inventory.is_available(seats):
            raise BusinessRuleViolationException("Some selected seats are unavailable")

        if len(details["passengers"]) != len(seats):
            raise InvalidInputException("Passenger count must match selected seats")

        inventory.reserve(seats)
        booking = self._factory.create(inventory, details, seats, booked_at=now)

        self._inventory_repository.update(inventory)
        try:
            self._booking_repository.save(booking)
        except Exception:
            logger.exception(
                "Failed to save booking after reserving seats",
                extra={"flight_id": str(flight_id), "pnr": str(booking.pnr)},
            )
            compensate_seat_reservation(
                self._inventory_repository,
                inventory.id,
                release=seats,
                reclaim=SeatSet(),
            )
            raise

        return booking


def requested_seats(seat_numbers: list[str] | None) -> SeatSet:
    """リクエストされた座席番号を SeatSet に変換する

    空のリストと重複した座席番号は入力エラーとする。
    """
    if not seat_numbers:
        raise InvalidInputException("At least one seat must be selected")
    seats = SeatSet.of(seat_numbers)
    if len(seats) != len(seat_numbers):
        raise InvalidInputException("Duplicate seat numbers are not allowed")
    return seats
