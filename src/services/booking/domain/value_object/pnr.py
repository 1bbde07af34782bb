from __future__ import annotations

import re
import secrets
import string
from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class Pnr:
    """PNR（Passenger Name Record）

    英大文字と数字からなる 6 文字または 8 文字の予約番号。
    暗号論的に安全な乱数で生成する。一意性は確率的にのみ保証される。
    """

    ALPHABET: ClassVar[str] = string.ascii_uppercase + string.digits
    SUPPORTED_LENGTHS: ClassVar[frozenset[int]] = frozenset({6, 8})
    PATTERN: ClassVar[re.Pattern[str]] = re.compile(r"^(?:[A-Z0-9]{6}|[A-Z0-9]{8})$")

    value: str

    def __post_init__(self) -> None:
        normalized = self.value.strip().upper()
        if not self.PATTERN.match(normalized):
            raise ValueError(f"Invalid PNR format: {self.value}")
        object.__setattr__(self, "value", normalized)

    def __str__(self) -> str:
        return self.value

    @classmethod
    def generate(cls, length: int = 6) -> Pnr:
        """新しい PNR を生成する"""
        if length not in cls.SUPPORTED_LENGTHS:
            raise ValueError(f"Unsupported PNR length: {length}. Supported: 6, 8")
        return cls("".join(secrets.choice(cls.ALPHABET) for _ in range(length)))
