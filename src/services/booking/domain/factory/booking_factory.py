from typing import TypedDict

from services.booking.domain.entity import Booking
from services.booking.domain.value_object import (
    BookingId,
    Passenger,
    PassengerDetails,
    Pnr,
)
from services.inventory.domain.entity import Inventory
from services.inventory.domain.value_object import SeatSet
from services.shared.domain import Email, IsoDateTime


class BookingDetails(TypedDict):
    """予約の入力データ構造"""

    email: str
    name: str
    passengers: list[PassengerDetails]
    seat_numbers: list[str]
    meal_veg: bool


class BookingFactory:
    """フライト予約エンティティのファクトリ

    - PNR の採番（長さは 6 または 8）
    - プリミティブ型から Value Object への変換
    - 搭乗日は在庫の出発時刻をコピーする
    """

    def __init__(self, pnr_length: int = 6) -> None:
        if pnr_length not in Pnr.SUPPORTED_LENGTHS:
            raise ValueError(f"Unsupported PNR length: {pnr_length}")
        self._pnr_length = pnr_length

    def create(
        self,
        inventory: Inventory,
        details: BookingDetails,
        seats: SeatSet,
        booked_at: IsoDateTime,
    ) -> Booking:
        """新規予約エンティティを生成する

        Args:
            inventory: 予約対象の在庫（座席確保済み）
            details: 予約の入力データ
            seats: 確保した座席
            booked_at: 予約日時

        Returns:
            Booking: 生成された予約エンティティ（未キャンセル）
        """
        return Booking(
            id=BookingId.generate(),
            pnr=Pnr.generate(self._pnr_length),
            flight_id=inventory.id,
            email=Email(details["email"]),
            name=details["name"],
            passengers=[Passenger.from_details(p) for p in details["passengers"]],
            seat_numbers=seats,
            meal_veg=details["meal_veg"],
            booked_at=booked_at,
            journey_date=inventory.departure_time,
            canceled=False,
        )
