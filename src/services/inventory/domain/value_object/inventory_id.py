from __future__ import annotations

import uuid
from dataclasses import dataclass


@dataclass(frozen=True)
class InventoryId:
    """フライト在庫ID

    例: "3f2c0c1e9b3a4d0e8a6f1c2b7d9e4a10", "sample_IN123"
    """

    value: str

    def __post_init__(self) -> None:
        if not self.value or not self.value.strip():
            raise ValueError("Inventory id cannot be empty")

    def __str__(self) -> str:
        return self.value

    @classmethod
    def generate(cls) -> InventoryId:
        """新規の在庫IDを採番する"""
        return cls(value=uuid.uuid4().hex)

    @classmethod
    def for_sample(cls, flight_number: str) -> InventoryId:
        """サンプルデータ用の冪等な在庫IDを生成"""
        return cls(value=f"sample_{flight_number}")
