from services.booking.domain.entity import Booking
from services.booking.domain.repository import BookingRepository
from services.booking.domain.value_object import Pnr
from services.shared.domain import Email


class GetBookingService:
    """予約参照サービス"""

    def __init__(self, repository: BookingRepository) -> None:
        self._repository = repository

    def find_by_pnr(self, pnr: Pnr) -> Booking | None:
        return self._repository.find_by_pnr(pnr)

    def find_by_email(
        self, email: Email, include_cancelled: bool = True
    ) -> list[Booking]:
        """予約履歴を新しい順に返す"""
        bookings = self._repository.find_by_email(email)
        if not include_cancelled:
            bookings = [b for b in bookings if not b.canceled]
        return sorted(bookings, key=lambda b: b.booked_at.value, reverse=True)
