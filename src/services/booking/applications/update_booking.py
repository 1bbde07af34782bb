from typing import TypedDict

from aws_lambda_powertools import Logger

from services.booking.applications.book_flight import requested_seats
from services.booking.applications.seat_compensation import (
    compensate_seat_reservation,
)
from services.booking.domain.entity import Booking
from services.booking.domain.repository import BookingRepository
from services.booking.domain.value_object import Passenger, PassengerDetails, Pnr
from services.inventory.domain.repository import InventoryRepository
from services.inventory.domain.value_object import SeatSet
from services.shared.domain import IsoDateTime
from services.shared.domain.exception import (
    InvalidInputException,
    ResourceNotFoundException,
)

logger = Logger(child=True)


class BookingChanges(TypedDict):
    """予約変更の入力データ構造（None の項目は変更しない）"""

    email: str
    name: str | None
    passengers: list[PassengerDetails] | None
    seat_numbers: list[str] | None
    meal_veg: bool | None


class UpdateBookingService:
    """予約変更サービス（予約者本人のみ）

    座席番号が指定された場合は、現在の座席を空席とみなした上で
    新しい座席に付け替える（在庫の更新 -> 予約の更新 の順に書き込む）。
    """

    def __init__(
        self,
        inventory_repository: InventoryRepository,
        booking_repository: BookingRepository,
    ) -> None:
        self._inventory_repository = inventory_repository
        self._booking_repository = booking_repository

    def update(self, pnr: Pnr, changes: BookingChanges) -> Booking:
        """予約内容を変更する"""
        booking = self._booking_repository.find_by_pnr(pnr)
        if booking is None:
            raise ResourceNotFoundException("PNR not found")

        booking.ensure_updatable(changes["email"], IsoDateTime.now())

        passengers = _to_passengers(changes["passengers"])
        if not changes["seat_numbers"]:
            booking.update_details(
                name=changes["name"],
                passengers=passengers,
                meal_veg=changes["meal_veg"],
            )
            self._booking_repository.update(booking)
            return booking

        return self._change_seats(booking, changes, passengers)

    def _change_seats(
        self,
        booking: Booking,
        changes: BookingChanges,
        passengers: list[Passenger] | None,
    ) -> Booking:
        new_seats = requested_seats(changes["seat_numbers"])
        effective = passengers if passengers is not None else booking.passengers
        if len(effective) != len(new_seats):
            raise InvalidInputException(
                "Passenger count must match the number of requested seats"
            )

        inventory = self._inventory_repository.find_by_id(booking.flight_id)
        if inventory is None:
            raise ResourceNotFoundException("Flight not found for this booking")

        old_seats = booking.seat_numbers
        inventory.swap(held=old_seats, requested=new_seats)
        booking.change_seats(
            new_seats,
            name=changes["name"],
            passengers=passengers,
            meal_veg=changes["meal_veg"],
        )

        self._inventory_repository.update(inventory)
        try:
            self._booking_repository.update(booking)
        except Exception:
            logger.exception(
                "Failed to update booking after swapping seats",
                extra={"pnr": str(booking.pnr), "flight_id": str(inventory.id)},
            )
            compensate_seat_reservation(
                self._inventory_repository,
                inventory.id,
                release=new_seats,
                reclaim=old_seats,
            )
            raise

        return booking


def _to_passengers(details: list[PassengerDetails] | None) -> list[Passenger] | None:
    if details is None:
        return None
    return [Passenger.from_details(p) for p in details]
