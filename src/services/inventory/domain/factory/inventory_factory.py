from decimal import Decimal
from typing import NotRequired, TypedDict

from services.inventory.domain.entity import Inventory
from services.inventory.domain.value_object import (
    FlightNumber,
    InventoryId,
    Route,
    SeatSet,
)
from services.shared.domain import IsoDateTime, Money


class InventoryDetails(TypedDict):
    """フライト在庫の入力データ構造"""

    airline: str
    flight_number: str
    origin: str
    destination: str
    departure_time: str
    arrival_time: str
    total_seats: int
    price_amount: Decimal
    price_currency: str
    airline_logo_url: NotRequired[str | None]


class InventoryFactory:
    """フライト在庫エンティティのファクトリ

    - 在庫IDの採番
    - プリミティブ型から Value Object への変換
    - 座席マップ S1..S{total_seats} を空席として初期化
    """

    def create(
        self, details: InventoryDetails, inventory_id: InventoryId | None = None
    ) -> Inventory:
        """新規在庫エンティティを生成する

        Args:
            details: フライト在庫の入力データ
            inventory_id: 省略時は新規に採番する（サンプルデータは固定IDを渡す）

        Returns:
            Inventory: 全座席が空席の在庫エンティティ
        """
        total_seats = details["total_seats"]

        return Inventory(
            id=inventory_id or InventoryId.generate(),
            airline=details["airline"],
            airline_logo_url=details.get("airline_logo_url"),
            flight_number=FlightNumber(details["flight_number"]),
            route=Route(origin=details["origin"], destination=details["destination"]),
            departure_time=IsoDateTime.from_string(details["departure_time"]),
            arrival_time=IsoDateTime.from_string(details["arrival_time"]),
            total_seats=total_seats,
            price=Money.of(details["price_amount"], details["price_currency"]),
            available_seats=SeatSet.generate(total_seats),
        )
