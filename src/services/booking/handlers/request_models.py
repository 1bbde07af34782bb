from pydantic import BaseModel, Field

from services.booking.domain.value_object import Pnr
from services.shared.domain import ResourceNotFoundException

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


def to_pnr(value: str) -> Pnr:
    """パスパラメータの PNR を変換する（形式が不正なものは存在しない予約として扱う）"""
    try:
        return Pnr(value=value)
    except ValueError as e:
        raise ResourceNotFoundException("PNR not found") from e


class PassengerRequest(BaseModel):
    """搭乗者の入力スキーマ"""

    name: str = Field(..., min_length=1, description="搭乗者名")
    gender: str = Field(
        ..., pattern="^(M|F|Other)$", description="性別", examples=["M", "F", "Other"]
    )
    age: int = Field(..., ge=0, description="年齢")


class BookFlightRequest(BaseModel):
    """座席予約リクエストモデル"""

    name: str = Field(..., min_length=1, description="予約者名")

    email: str = Field(
        ...,
        pattern=EMAIL_PATTERN,
        description="連絡先メールアドレス",
        examples=["taro@example.com"],
    )

    passengers: list[PassengerRequest] = Field(..., min_length=1)

    # 空リストは予約サービス側で入力エラーにする
    seat_numbers: list[str] = Field(
        default_factory=list, description="座席番号", examples=[["S1", "S2"]]
    )

    meal_veg: bool = Field(default=False, description="ベジタリアン食の希望")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Taro Yamada",
                    "email": "taro@example.com",
                    "passengers": [{"name": "Taro Yamada", "gender": "M", "age": 30}],
                    "seat_numbers": ["S1"],
                    "meal_veg": False,
                }
            ]
        }
    }


class UpdateBookingRequest(BaseModel):
    """予約変更リクエストモデル（省略した項目は変更しない）"""

    email: str = Field(..., pattern=EMAIL_PATTERN, description="予約者のメールアドレス")
    name: str | None = Field(default=None, min_length=1)
    passengers: list[PassengerRequest] | None = Field(default=None, min_length=1)
    seat_numbers: list[str] | None = None
    meal_veg: bool | None = None


class CancelBookingRequest(BaseModel):
    """予約キャンセルリクエストモデル"""

    pnr: str = Field(..., min_length=1)
    email: str = Field(..., pattern=EMAIL_PATTERN)
