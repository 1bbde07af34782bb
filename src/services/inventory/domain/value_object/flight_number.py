from dataclasses import dataclass


@dataclass(frozen=True)
class FlightNumber:
    """フライト番号

    航空会社ごとに形式が異なるため、空でないことのみ検証し大文字に揃える。
    例: IN123, 6E2031, SG8169X
    """

    value: str

    def __post_init__(self) -> None:
        normalized = self.value.strip().upper()
        if not normalized:
            raise ValueError("Flight number cannot be empty")
        object.__setattr__(self, "value", normalized)

    def __str__(self) -> str:
        return self.value
