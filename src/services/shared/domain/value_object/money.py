from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from .currency import Currency


@dataclass(frozen=True)
class Money:
    """金額（通貨情報含む）"""

    amount: Decimal
    currency: Currency

    def __post_init__(self) -> None:
        if self.amount < 0:
            raise ValueError("Amount cannot be negative")

    def __str__(self) -> str:
        return f"{self.amount} {self.currency}"

    @classmethod
    def of(cls, amount: Decimal | str, currency_code: str) -> Money:
        """プリミティブ値から Money を生成"""
        return cls(Decimal(str(amount)), Currency(currency_code))

    @classmethod
    def inr(cls, amount: Decimal) -> Money:
        """インドルピーで Money を生成"""
        return cls(amount, Currency.inr())
