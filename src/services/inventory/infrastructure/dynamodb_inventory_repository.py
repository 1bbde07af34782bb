import os

import boto3
from boto3.dynamodb.conditions import Attr, Key
from botocore.exceptions import ClientError

from services.inventory.domain.entity import Inventory
from services.inventory.domain.repository import InventoryRepository
from services.inventory.domain.value_object import (
    FlightNumber,
    InventoryId,
    Route,
    SeatSet,
)
from services.shared.domain import IsoDateTime, Money
from services.shared.domain.exception.exceptions import (
    DuplicateResourceException,
    OptimisticLockException,
)

GSI1_NAME = "GSI1"


class DynamoDBInventoryRepository(InventoryRepository):
    """DynamoDBを使用したInventoryRepository の具象実装

    - PK: INVENTORY#{id} / SK: INVENTORY
    - GSI1PK: ROUTE#{origin}#{destination} / GSI1SK: 出発時刻（UTC ISO 8601, マイクロ秒までの固定長）
    """

    def __init__(self, table_name: str | None = None) -> None:
        self.table_name = table_name or os.getenv("TABLE_NAME")
        self.dynamodb = boto3.resource("dynamodb")
        self.table = self.dynamodb.Table(self.table_name)

    def save(self, inventory: Inventory) -> None:
        """在庫をDBに保存する"""
        item = {
            "PK": self._pk(inventory.id),
            "SK": "INVENTORY",
            "entity_type": "INVENTORY",
            "inventory_id": str(inventory.id),
            "airline": inventory.airline,
            "airline_logo_url": inventory.airline_logo_url,
            "flight_number": str(inventory.flight_number),
            "origin": inventory.route.origin,
            "destination": inventory.route.destination,
            "departure_time": inventory.departure_time.to_sort_key(),
            "arrival_time": inventory.arrival_time.to_sort_key(),
            "total_seats": inventory.total_seats,
            "price_amount": str(inventory.price.amount),
            "price_currency": str(inventory.price.currency),
            "available_seats": inventory.available_seats.to_list(),
            "version": inventory.version,
            "GSI1PK": self._route_key(
                inventory.route.origin, inventory.route.destination
            ),
            "GSI1SK": inventory.departure_time.to_sort_key(),
        }
        try:
            self.table.put_item(Item=item, ConditionExpression=Attr("PK").not_exists())
        except ClientError as e:
            if e.response["Error"]["Code"] == "ConditionalCheckFailedException":
                raise DuplicateResourceException(
                    f"Inventory already exists: {inventory.id}"
                ) from e
            raise

    def update(self, inventory: Inventory) -> None:
        """空席状況を更新する（version による楽観ロック）"""
        try:
            self.table.update_item(
                Key={"PK": self._pk(inventory.id), "SK": "INVENTORY"},
                UpdateExpression="SET available_seats = :seats, #version = :next",
                ConditionExpression=Attr("version").eq(inventory.version),
                ExpressionAttributeNames={"#version": "version"},
                ExpressionAttributeValues={
                    ":seats": inventory.available_seats.to_list(),
                    ":next": inventory.version + 1,
                },
            )
        except ClientError as e:
            if e.response["Error"]["Code"] == "ConditionalCheckFailedException":
                raise OptimisticLockException(
                    f"Inventory seat conflict: "
                    f"expected version {inventory.version}, "
                    f"inventory_id={inventory.id}"
                ) from e
            raise

    def find_by_id(self, inventory_id: InventoryId) -> Inventory | None:
        """在庫IDで検索"""
        response = self.table.get_item(
            Key={"PK": self._pk(inventory_id), "SK": "INVENTORY"},
            ConsistentRead=True,
        )
        item = response.get("Item")
        if not item:
            return None
        return self._to_entity(item)

    def find_by_route_and_departure_between(
        self,
        origin: str,
        destination: str,
        departure_from: IsoDateTime,
        departure_to: IsoDateTime,
    ) -> list[Inventory]:
        """GSI1 で路線と出発時刻の範囲を検索する（範囲は両端を含む）"""
        kwargs: dict = {
            "IndexName": GSI1_NAME,
            "KeyConditionExpression": Key("GSI1PK").eq(
                self._route_key(origin, destination)
            )
            & Key("GSI1SK").between(
                departure_from.to_sort_key(), departure_to.to_sort_key()
            ),
        }

        items: list[dict] = []
        while True:
            response = self.table.query(**kwargs)
            items.extend(response.get("Items", []))
            last_key = response.get("LastEvaluatedKey")
            if not last_key:
                break
            kwargs["ExclusiveStartKey"] = last_key

        return [self._to_entity(item) for item in items]

    @staticmethod
    def _pk(inventory_id: InventoryId) -> str:
        return f"INVENTORY#{inventory_id}"

    @staticmethod
    def _route_key(origin: str, destination: str) -> str:
        return f"ROUTE#{origin}#{destination}"

    def _to_entity(self, item: dict) -> Inventory:
        """DynamoDB アイテムをドメインエンティティに変換する"""
        return Inventory(
            id=InventoryId(value=item["inventory_id"]),
            airline=item["airline"],
            airline_logo_url=item.get("airline_logo_url"),
            flight_number=FlightNumber(value=item["flight_number"]),
            route=Route(origin=item["origin"], destination=item["destination"]),
            departure_time=IsoDateTime.from_string(item["departure_time"]),
            arrival_time=IsoDateTime.from_string(item["arrival_time"]),
            total_seats=int(item["total_seats"]),
            price=Money.of(item["price_amount"], item["price_currency"]),
            available_seats=SeatSet.of(item.get("available_seats", [])),
            version=int(item.get("version", 0)),
        )
