from datetime import timedelta

import pytest

from services.booking.applications.cancel_booking import CancelBookingService
from services.booking.domain.value_object import Pnr
from services.shared.domain.exception import (
    BusinessRuleViolationException,
    ResourceNotFoundException,
)


class TestCancelBookingService:
    """CancelBookingService のテスト"""

    def test_cancel_marks_booking_and_updates(
        self, mock_booking_repository, create_booking
    ):
        booking = create_booking(pnr="ABC123", email="a@x.com")
        mock_booking_repository.find_by_pnr.return_value = booking
        service = CancelBookingService(repository=mock_booking_repository)

        result = service.cancel(Pnr("ABC123"), "A@x.com")

        assert result.canceled is True
        assert result.canceled_at is not None
        mock_booking_repository.update.assert_called_once_with(booking)

    def test_seats_are_not_released(self, mock_booking_repository, create_booking):
        """キャンセルしても座席は予約に残り、在庫には触れない"""
        booking = create_booking(seats=["S1", "S2"])
        mock_booking_repository.find_by_pnr.return_value = booking
        service = CancelBookingService(repository=mock_booking_repository)

        service.cancel(booking.pnr, "a@x.com")

        assert booking.seat_numbers.to_list() == ["S1", "S2"]

    def test_unknown_pnr_raises_not_found(self, mock_booking_repository):
        mock_booking_repository.find_by_pnr.return_value = None
        service = CancelBookingService(repository=mock_booking_repository)

        with pytest.raises(ResourceNotFoundException, match="PNR not found"):
            service.cancel(Pnr("ZZZ999"), "a@x.com")

    def test_cancel_within_24_hours_is_rejected(
        self, mock_booking_repository, create_booking
    ):
        """搭乗10時間前のキャンセルは24時間ルールにより拒否される"""
        mock_booking_repository.find_by_pnr.return_value = create_booking(
            journey_in=timedelta(hours=10)
        )
        service = CancelBookingService(repository=mock_booking_repository)

        with pytest.raises(BusinessRuleViolationException, match="24 hrs"):
            service.cancel(Pnr("ABC123"), "a@x.com")

        mock_booking_repository.update.assert_not_called()
