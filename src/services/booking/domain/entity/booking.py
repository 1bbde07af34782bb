from services.booking.domain.value_object import BookingId, Passenger, Pnr
from services.inventory.domain.value_object import InventoryId, SeatSet
from services.shared.domain import AggregateRoot, Email, IsoDateTime
from services.shared.domain.exception import (
    BusinessRuleViolationException,
    InvalidInputException,
)

# 出発時刻のこの時間前を過ぎるとキャンセル・変更できない
CHANGE_CUTOFF_HOURS = 24


class Booking(AggregateRoot[BookingId]):
    """フライト予約

    - 在庫 (Inventory) は flight_id で参照するのみで所有しない
    - 物理削除はせず、キャンセルは canceled フラグで表す
    """

    def __init__(
        self,
        id: BookingId,
        pnr: Pnr,
        flight_id: InventoryId,
        email: Email,
        name: str,
        passengers: list[Passenger],
        seat_numbers: SeatSet,
        meal_veg: bool,
        booked_at: IsoDateTime,
        journey_date: IsoDateTime,
        canceled: bool = False,
        canceled_at: IsoDateTime | None = None,
    ) -> None:
        super().__init__(id)

        self._pnr = pnr
        self._flight_id = flight_id
        self._email = email
        self._name = name
        self._passengers = list(passengers)
        self._seat_numbers = seat_numbers
        self._meal_veg = meal_veg
        self._booked_at = booked_at
        self._journey_date = journey_date
        self._canceled = canceled
        self._canceled_at = canceled_at

    @property
    def pnr(self) -> Pnr:
        return self._pnr

    @property
    def flight_id(self) -> InventoryId:
        return self._flight_id

    @property
    def email(self) -> Email:
        return self._email

    @property
    def name(self) -> str:
        return self._name

    @property
    def passengers(self) -> list[Passenger]:
        return list(self._passengers)

    @property
    def seat_numbers(self) -> SeatSet:
        return self._seat_numbers

    @property
    def meal_veg(self) -> bool:
        return self._meal_veg

    @property
    def booked_at(self) -> IsoDateTime:
        return self._booked_at

    @property
    def journey_date(self) -> IsoDateTime:
        return self._journey_date

    @property
    def canceled(self) -> bool:
        return self._canceled

    @property
    def canceled_at(self) -> IsoDateTime | None:
        return self._canceled_at

    def is_owned_by(self, email: str) -> bool:
        """予約者本人かどうか（メールアドレスの大文字小文字は無視）"""
        return self._email.matches(email)

    def is_within_cutoff(self, now: IsoDateTime) -> bool:
        """出発24時間前を過ぎているかどうか"""
        return not self._journey_date.minus_hours(CHANGE_CUTOFF_HOURS).is_after(now)

    def cancel(self, requester_email: str, now: IsoDateTime) -> None:
        """予約をキャンセルする

        座席は在庫に戻さない。
        """
        if not self.is_owned_by(requester_email):
            raise BusinessRuleViolationException("Only owner can cancel the booking")
        if self._canceled:
            raise BusinessRuleViolationException("Booking already cancelled")
        if self.is_within_cutoff(now):
            raise BusinessRuleViolationException(
                "Cancellation allowed only 24 hrs before journey"
            )
        self._canceled = True
        self._canceled_at = now

    def ensure_updatable(self, requester_email: str, now: IsoDateTime) -> None:
        """予約変更の事前条件を検証する"""
        if not self.is_owned_by(requester_email):
            raise BusinessRuleViolationException(
                "Only the booking owner can perform this update"
            )
        if self._canceled:
            raise BusinessRuleViolationException(
                "Cannot update a booking that is already cancelled"
            )
        if self.is_within_cutoff(now):
            raise BusinessRuleViolationException(
                "Updates are not allowed within 24 hours of the journey"
            )

    def update_details(
        self,
        name: str | None = None,
        passengers: list[Passenger] | None = None,
        meal_veg: bool | None = None,
    ) -> None:
        """座席以外の項目を更新する（None の項目は変更しない）"""
        if passengers is not None and len(passengers) != len(self._seat_numbers):
            raise InvalidInputException(
                "Passenger count must match the number of reserved seats"
            )
        self._merge(name, passengers, meal_veg)

    def change_seats(
        self,
        seat_numbers: SeatSet,
        name: str | None = None,
        passengers: list[Passenger] | None = None,
        meal_veg: bool | None = None,
    ) -> None:
        """座席を付け替え、あわせて他の項目を更新する

        在庫側の付け替え (Inventory.swap) が成功した後に呼び出す。
        """
        effective = passengers if passengers is not None else self._passengers
        if len(effective) != len(seat_numbers):
            raise InvalidInputException(
                "Passenger count must match the number of requested seats"
            )
        self._seat_numbers = seat_numbers
        self._merge(name, passengers, meal_veg)

    def _merge(
        self,
        name: str | None,
        passengers: list[Passenger] | None,
        meal_veg: bool | None,
    ) -> None:
        if name is not None:
            self._name = name
        if passengers is not None:
            self._passengers = list(passengers)
        if meal_veg is not None:
            self._meal_veg = meal_veg
