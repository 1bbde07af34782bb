from datetime import datetime, timezone
from decimal import Decimal

from pydantic import BaseModel, Field, field_validator

from services.shared.utils import to_decimal

MAX_TOTAL_SEATS = 1000


def _parse_iso(v: str) -> datetime:
    try:
        dt = datetime.fromisoformat(v.replace("Z", "+00:00"))
    except ValueError as e:
        raise ValueError(f"Invalid ISO 8601 datetime: {v}") from e
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


class AddInventoryRequest(BaseModel):
    """フライト在庫登録リクエストモデル"""

    airline: str = Field(..., min_length=1, description="航空会社名")

    airline_logo_url: str | None = Field(default=None, description="ロゴ画像URL")

    flight_number: str = Field(
        ...,
        min_length=1,
        description="フライト番号",
        examples=["IN123", "6E2031", "SG8169X"],
    )

    origin: str = Field(..., min_length=1, description="出発地", examples=["HYD"])

    destination: str = Field(
        ..., min_length=1, description="到着地", examples=["BLR"]
    )

    departure_time: str = Field(
        ...,
        description="出発時刻（ISO 8601形式）",
        examples=["2025-01-01T09:00:00"],
    )

    arrival_time: str = Field(
        ...,
        description="到着時刻（ISO 8601形式）",
        examples=["2025-01-01T10:30:00"],
    )

    # 0 以下は業務ルール違反（409）として在庫エンティティ側で弾く。
    # 空席一覧は1アイテムに保存するため、上限は DynamoDB のアイテムサイズ（400KB）に収める
    total_seats: int = Field(
        ..., le=MAX_TOTAL_SEATS, description="総座席数", examples=[30]
    )

    price_amount: Decimal = Field(..., gt=0, description="料金", examples=[4500])

    price_currency: str = Field(
        default="INR",
        pattern="^[A-Z]{3}$",
        description="通貨コード（ISO 4217）",
        examples=["INR", "USD"],
    )

    @field_validator("departure_time")
    @classmethod
    def departure_must_be_future(cls, v: str) -> str:
        """出発時刻は未来でなければならない"""
        if _parse_iso(v) <= datetime.now(timezone.utc):
            raise ValueError("Departure must be in the future")
        return v

    @field_validator("arrival_time")
    @classmethod
    def arrival_must_be_iso(cls, v: str) -> str:
        _parse_iso(v)
        return v

    @field_validator("price_amount", mode="before")
    @classmethod
    def convert_price_to_decimal(cls, v: object) -> Decimal:
        return to_decimal(v)


class SearchInventoryRequest(BaseModel):
    """フライト検索リクエストモデル（クエリ文字列）"""

    origin: str = Field(..., min_length=1)
    destination: str = Field(..., min_length=1)
    departure_from: str = Field(..., alias="from", description="出発時刻の下限")
    departure_to: str = Field(..., alias="to", description="出発時刻の上限")

    @field_validator("departure_from", "departure_to")
    @classmethod
    def must_be_iso(cls, v: str) -> str:
        _parse_iso(v)
        return v
