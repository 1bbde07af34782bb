from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import ClassVar


@dataclass(frozen=True)
class SeatSet:
    """座席番号の集合

    空席一覧・予約済み座席はいずれもこの集合で扱う。
    順序は意味を持たず、重複は保持しない。
    永続化やレスポンスには to_list() で座席番号順に並べて渡す。
    """

    PREFIX: ClassVar[str] = "S"
    _ORDER: ClassVar[re.Pattern[str]] = re.compile(r"^([A-Za-z]*)(\d+)$")

    seats: frozenset[str] = field(default_factory=frozenset)

    @classmethod
    def of(cls, seat_numbers: Iterable[str]) -> SeatSet:
        normalized = []
        for seat in seat_numbers:
            if not seat or not seat.strip():
                raise ValueError("Seat number cannot be empty")
            normalized.append(seat.strip())
        return cls(seats=frozenset(normalized))

    @classmethod
    def generate(cls, total_seats: int) -> SeatSet:
        """座席マップ S1..S{total_seats} を生成する"""
        return cls(
            seats=frozenset(f"{cls.PREFIX}{i}" for i in range(1, total_seats + 1))
        )

    def __len__(self) -> int:
        return len(self.seats)

    def __iter__(self) -> Iterator[str]:
        return iter(self.to_list())

    def __contains__(self, seat: object) -> bool:
        return seat in self.seats

    def issubset(self, other: SeatSet) -> bool:
        return self.seats <= other.seats

    def union(self, other: SeatSet) -> SeatSet:
        return SeatSet(seats=self.seats | other.seats)

    def difference(self, other: SeatSet) -> SeatSet:
        return SeatSet(seats=self.seats - other.seats)

    def intersection(self, other: SeatSet) -> SeatSet:
        return SeatSet(seats=self.seats & other.seats)

    def to_list(self) -> list[str]:
        """座席番号順（S2 < S10）に並べたリスト"""
        return sorted(self.seats, key=self._sort_key)

    @classmethod
    def _sort_key(cls, seat: str) -> tuple:
        m = cls._ORDER.match(seat)
        if m is None:
            return (1, seat, 0)
        return (0, m.group(1), int(m.group(2)))
