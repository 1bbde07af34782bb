from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, TypedDict


class PassengerDetails(TypedDict):
    """搭乗者の入力データ構造"""

    name: str
    gender: str
    age: int


@dataclass(frozen=True)
class Passenger:
    """搭乗者

    性別は M / F / Other のいずれか。年齢は 0 以上。
    """

    GENDERS: ClassVar[frozenset[str]] = frozenset({"M", "F", "Other"})

    name: str
    gender: str
    age: int

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValueError("Passenger name required")
        if self.gender not in self.GENDERS:
            raise ValueError("Gender must be M, F or Other")
        if self.age < 0:
            raise ValueError("Age must be >= 0")
        object.__setattr__(self, "name", self.name.strip())

    @classmethod
    def from_details(cls, details: PassengerDetails) -> Passenger:
        return cls(
            name=details["name"], gender=details["gender"], age=int(details["age"])
        )

    def to_details(self) -> PassengerDetails:
        return {"name": self.name, "gender": self.gender, "age": self.age}
