import os

import boto3
from boto3.dynamodb.conditions import Attr, Key
from botocore.exceptions import ClientError

from services.booking.domain.entity import Booking
from services.booking.domain.repository import BookingRepository
from services.booking.domain.value_object import BookingId, Passenger, Pnr
from services.inventory.domain.value_object import InventoryId, SeatSet
from services.shared.domain import Email, IsoDateTime
from services.shared.domain.exception.exceptions import (
    DuplicateResourceException,
    OptimisticLockException,
)

GSI1_NAME = "GSI1"


class DynamoDBBookingRepository(BookingRepository):
    """DynamoDBを使用したBookingRepository の具象実装

    - PK: BOOKING#{pnr} / SK: BOOKING
    - GSI1PK: EMAIL#{小文字のメールアドレス} / GSI1SK: BOOKED_AT#{予約日時}
    """

    def __init__(self, table_name: str | None = None) -> None:
        self.table_name = table_name or os.getenv("TABLE_NAME")
        self.dynamodb = boto3.resource("dynamodb")
        self.table = self.dynamodb.Table(self.table_name)

    def save(self, booking: Booking) -> None:
        """予約をDBに保存する"""

        item = {
            "PK": self._pk(booking.pnr),
            "SK": "BOOKING",
            "entity_type": "BOOKING",
            "booking_id": str(booking.id),
            "pnr": str(booking.pnr),
            "flight_id": str(booking.flight_id),
            "email": str(booking.email),
            "name": booking.name,
            "passengers": [p.to_details() for p in booking.passengers],
            "seat_numbers": booking.seat_numbers.to_list(),
            "meal_veg": booking.meal_veg,
            "booked_at": str(booking.booked_at),
            "journey_date": str(booking.journey_date),
            "canceled": booking.canceled,
            "canceled_at": self._to_optional_str(booking.canceled_at),
            "GSI1PK": f"EMAIL#{booking.email.normalized}",
            "GSI1SK": f"BOOKED_AT#{booking.booked_at}",
        }
        try:
            self.table.put_item(Item=item, ConditionExpression=Attr("PK").not_exists())
        except ClientError as e:
            if e.response["Error"]["Code"] == "ConditionalCheckFailedException":
                raise DuplicateResourceException(
                    f"Booking already exists: pnr={booking.pnr}"
                ) from e
            raise

    def update(self, booking: Booking) -> None:
        """予約の可変項目を更新する（保存済みの予約が未キャンセルの場合のみ）"""
        try:
            self.table.update_item(
                Key={"PK": self._pk(booking.pnr), "SK": "BOOKING"},
                UpdateExpression=(
                    "SET #name = :name, passengers = :passengers, "
                    "seat_numbers = :seats, meal_veg = :meal_veg, "
                    "canceled = :canceled, canceled_at = :canceled_at"
                ),
                ConditionExpression=Attr("canceled").eq(False),
                ExpressionAttributeNames={"#name": "name"},
                ExpressionAttributeValues={
                    ":name": booking.name,
                    ":passengers": [p.to_details() for p in booking.passengers],
                    ":seats": booking.seat_numbers.to_list(),
                    ":meal_veg": booking.meal_veg,
                    ":canceled": booking.canceled,
                    ":canceled_at": self._to_optional_str(booking.canceled_at),
                },
            )
        except ClientError as e:
            if e.response["Error"]["Code"] == "ConditionalCheckFailedException":
                raise OptimisticLockException(
                    f"Booking was cancelled concurrently: pnr={booking.pnr}"
                ) from e
            raise

    def find_by_pnr(self, pnr: Pnr) -> Booking | None:
        """PNRで検索"""
        response = self.table.get_item(
            Key={"PK": self._pk(pnr), "SK": "BOOKING"},
            ConsistentRead=True,
        )
        item = response.get("Item")
        if not item:
            return None
        return self._to_entity(item)

    def find_by_email(self, email: Email) -> list[Booking]:
        """GSI1 でメールアドレスの予約を新しい順に検索する"""
        kwargs: dict = {
            "IndexName": GSI1_NAME,
            "KeyConditionExpression": Key("GSI1PK").eq(f"EMAIL#{email.normalized}")
            & Key("GSI1SK").begins_with("BOOKED_AT#"),
            "ScanIndexForward": False,
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
    def _pk(pnr: Pnr) -> str:
        return f"BOOKING#{pnr}"

    @staticmethod
    def _to_optional_str(value: IsoDateTime | None) -> str | None:
        return str(value) if value is not None else None

    def _to_entity(self, item: dict) -> Booking:
        """DynamoDB アイテムをドメインエンティティに変換する"""
        canceled_at = item.get("canceled_at")
        return Booking(
            id=BookingId(value=item["booking_id"]),
            pnr=Pnr(value=item["pnr"]),
            flight_id=InventoryId(value=item["flight_id"]),
            email=Email(value=item["email"]),
            name=item["name"],
            passengers=[
                Passenger(name=p["name"], gender=p["gender"], age=int(p["age"]))
                for p in item.get("passengers", [])
            ],
            seat_numbers=SeatSet.of(item.get("seat_numbers", [])),
            meal_veg=bool(item.get("meal_veg", False)),
            booked_at=IsoDateTime.from_string(item["booked_at"]),
            journey_date=IsoDateTime.from_string(item["journey_date"]),
            canceled=bool(item.get("canceled", False)),
            canceled_at=IsoDateTime.from_string(canceled_at) if canceled_at else None,
        )
