from __future__ import annotations

from pydantic import BaseModel

from services.booking.domain.entity import Booking


class PassengerData(BaseModel):
    name: str
    gender: str
    age: int


class BookingData(BaseModel):
    """予約データのレスポンスモデル"""

    booking_id: str
    pnr: str
    flight_id: str
    email: str
    name: str
    passengers: list[PassengerData]
    seat_numbers: list[str]
    meal_veg: bool
    booked_at: str
    journey_date: str
    canceled: bool
    canceled_at: str | None = None


class BookingResponse(BaseModel):
    """予約（作成・参照・変更）の成功レスポンスモデル"""

    status: str = "success"
    data: BookingData


class BookingListResponse(BaseModel):
    """予約履歴の成功レスポンスモデル"""

    status: str = "success"
    data: list[BookingData]
    count: int


class CancelBookingResponse(BaseModel):
    """予約キャンセルの成功レスポンスモデル"""

    status: str = "success"
    message: str = "Booking cancelled successfully"
    pnr: str


def to_booking_data(booking: Booking) -> BookingData:
    """Booking エンティティをレスポンスデータに変換する"""
    return BookingData(
        booking_id=str(booking.id),
        pnr=str(booking.pnr),
        flight_id=str(booking.flight_id),
        email=str(booking.email),
        name=booking.name,
        passengers=[PassengerData(**p.to_details()) for p in booking.passengers],
        seat_numbers=booking.seat_numbers.to_list(),
        meal_veg=booking.meal_veg,
        booked_at=str(booking.booked_at),
        journey_date=str(booking.journey_date),
        canceled=booking.canceled,
        canceled_at=str(booking.canceled_at) if booking.canceled_at else None,
    )


def to_response(booking: Booking) -> BookingResponse:
    return BookingResponse(data=to_booking_data(booking))


def to_list_response(bookings: list[Booking]) -> BookingListResponse:
    return BookingListResponse(
        data=[to_booking_data(b) for b in bookings], count=len(bookings)
    )
