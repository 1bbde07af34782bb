from decimal import Decimal


def to_decimal(v: object) -> Decimal:
    """料金などの値を Decimal に変換する

    Pydantic の field_validator (mode="before") から呼び出す。
    float の誤差を避けるため str を経由して変換する。
    """
    if isinstance(v, Decimal):
        return v
    return Decimal(str(v))


def to_bool_flag(v: str | None, default: bool = False) -> bool:
    """クエリ文字列のフラグ（"true" / "false"）を bool に変換する"""
    if v is None or v == "":
        return default
    normalized = v.strip().lower()
    if normalized in ("true", "1", "yes"):
        return True
    if normalized in ("false", "0", "no"):
        return False
    raise ValueError(f"Invalid boolean flag: {v}")
