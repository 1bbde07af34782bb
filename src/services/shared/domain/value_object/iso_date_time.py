from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone


@dataclass(frozen=True)
class IsoDateTime:
    """日時(ISO 8601形式)

    内部的には常に UTC のタイムゾーン付き datetime を保持する。
    タイムゾーンを持たない入力は UTC として扱う。
    """

    value: datetime

    def __post_init__(self) -> None:
        dt = self.value
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=timezone.utc)
        object.__setattr__(self, "value", dt.astimezone(timezone.utc))

    @classmethod
    def from_string(cls, s: str) -> IsoDateTime:
        """ISO 8601 形式の文字列から生成"""
        try:
            dt = datetime.fromisoformat(s.replace("Z", "+00:00"))
        except ValueError as e:
            raise ValueError(f"Invalid ISO 8601 datetime: {s}") from e
        return cls(value=dt)

    @classmethod
    def now(cls) -> IsoDateTime:
        """現在日時（UTC）"""
        return cls(value=datetime.now(timezone.utc))

    def __str__(self) -> str:
        return self.value.isoformat(timespec="seconds")

    def to_sort_key(self) -> str:
        """マイクロ秒までの固定長表現（文字列の順序が時刻の順序と一致する）"""
        return self.value.isoformat(timespec="microseconds")

    def is_after(self, other: IsoDateTime) -> bool:
        """他の日時より後かどうか"""
        return self.value > other.value

    def minus_hours(self, hours: int) -> IsoDateTime:
        """指定時間だけ前の日時"""
        return IsoDateTime(value=self.value - timedelta(hours=hours))

    def plus(self, delta: timedelta) -> IsoDateTime:
        """指定した期間だけ後の日時"""
        return IsoDateTime(value=self.value + delta)
