from services.booking.applications.get_booking import GetBookingService
from services.booking.domain.value_object import Pnr
from services.shared.domain import Email


class TestGetBookingService:
    """GetBookingService のテスト"""

    def test_find_by_pnr_delegates_to_repository(
        self, mock_booking_repository, create_booking
    ):
        booking = create_booking(pnr="ABC123")
        mock_booking_repository.find_by_pnr.return_value = booking
        service = GetBookingService(repository=mock_booking_repository)

        assert service.find_by_pnr(Pnr("abc123")) is booking
        mock_booking_repository.find_by_pnr.assert_called_once_with(Pnr("ABC123"))

    def test_find_by_email_sorts_newest_first(
        self, mock_booking_repository, create_booking
    ):
        older = create_booking(pnr="OLD111", booked_at="2025-01-01T00:00:00")
        newer = create_booking(pnr="NEW111", booked_at="2025-02-01T00:00:00")
        mock_booking_repository.find_by_email.return_value = [older, newer]
        service = GetBookingService(repository=mock_booking_repository)

        result = service.find_by_email(Email("a@x.com"))

        assert [str(b.pnr) for b in result] == ["NEW111", "OLD111"]

    def test_cancelled_bookings_can_be_excluded(
        self, mock_booking_repository, create_booking
    ):
        active = create_booking(pnr="ACT111")
        cancelled = create_booking(pnr="CAN111", canceled=True)
        mock_booking_repository.find_by_email.return_value = [active, cancelled]
        service = GetBookingService(repository=mock_booking_repository)

        result = service.find_by_email(Email("a@x.com"), include_cancelled=False)

        assert [str(b.pnr) for b in result] == ["ACT111"]
