from __future__ import annotations

from pydantic import BaseModel

from services.inventory.domain.entity import Inventory


class InventoryData(BaseModel):
    """フライト在庫データのレスポンスモデル"""

    inventory_id: str
    airline: str
    airline_logo_url: str | None = None
    flight_number: str
    origin: str
    destination: str
    departure_time: str
    arrival_time: str
    total_seats: int
    price_amount: str
    price_currency: str
    available_seats: list[str]


class InventoryResponse(BaseModel):
    """在庫登録の成功レスポンスモデル"""

    status: str = "success"
    data: InventoryData


class InventoryListResponse(BaseModel):
    """フライト検索の成功レスポンスモデル"""

    status: str = "success"
    data: list[InventoryData]
    count: int


def to_inventory_data(inventory: Inventory) -> InventoryData:
    """Inventory エンティティをレスポンスデータに変換する"""
    return InventoryData(
        inventory_id=str(inventory.id),
        airline=inventory.airline,
        airline_logo_url=inventory.airline_logo_url,
        flight_number=str(inventory.flight_number),
        origin=inventory.route.origin,
        destination=inventory.route.destination,
        departure_time=str(inventory.departure_time),
        arrival_time=str(inventory.arrival_time),
        total_seats=inventory.total_seats,
        price_amount=str(inventory.price.amount),
        price_currency=str(inventory.price.currency),
        available_seats=inventory.available_seats.to_list(),
    )


def to_response(inventory: Inventory) -> InventoryResponse:
    return InventoryResponse(data=to_inventory_data(inventory))


def to_list_response(inventories: list[Inventory]) -> InventoryListResponse:
    return InventoryListResponse(
        data=[to_inventory_data(inv) for inv in inventories],
        count=len(inventories),
    )
