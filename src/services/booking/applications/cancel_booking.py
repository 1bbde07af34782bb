from services.booking.domain.entity import Booking
from services.booking.domain.repository import BookingRepository
from services.booking.domain.value_object import Pnr
from services.shared.domain import IsoDateTime
from services.shared.domain.exception import ResourceNotFoundException


class CancelBookingService:
    """予約キャンセルサービス（予約者本人のみ）

    キャンセルしても座席は在庫に戻さない。
    """

    def __init__(self, repository: BookingRepository) -> None:
        self._repository = repository

    def cancel(self, pnr: Pnr, email: str) -> Booking:
        """PNR とメールアドレスを指定して予約をキャンセルする"""
        booking = self._repository.find_by_pnr(pnr)
        if booking is None:
            raise ResourceNotFoundException("PNR not found")
        booking.cancel(requester_email=email, now=IsoDateTime.now())
        self._repository.update(booking)
        return booking
