from __future__ import annotations

import uuid
from dataclasses import dataclass


@dataclass(frozen=True)
class BookingId:
    """予約ID（内部識別子。利用者には PNR を公開する）"""

    value: str

    def __str__(self) -> str:
        return self.value

    @classmethod
    def generate(cls) -> BookingId:
        return cls(value=uuid.uuid4().hex)
