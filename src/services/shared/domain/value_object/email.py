import re
from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class Email:
    """連絡先メールアドレス

    比較は大文字小文字を区別しない（matches を使う）。
    保存される値は入力のまま保持する。
    """

    value: str

    PATTERN: ClassVar[re.Pattern[str]] = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")

    def __post_init__(self) -> None:
        stripped = self.value.strip()
        if not self.PATTERN.match(stripped):
            raise ValueError(f"Invalid email address: {self.value}")
        object.__setattr__(self, "value", stripped)

    def __str__(self) -> str:
        return self.value

    @property
    def normalized(self) -> str:
        """検索キー用の小文字表現"""
        return self.value.lower()

    def matches(self, other: str) -> bool:
        """大文字小文字を無視して一致するかどうか"""
        return self.normalized == other.strip().lower()
