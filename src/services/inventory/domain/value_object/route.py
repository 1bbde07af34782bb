from dataclasses import dataclass


@dataclass(frozen=True)
class Route:
    """出発地と到着地の組

    検索は大文字小文字を区別するため、値は入力のまま保持する。
    """

    origin: str
    destination: str

    def __post_init__(self) -> None:
        origin = self.origin.strip()
        destination = self.destination.strip()
        if not origin:
            raise ValueError("Origin cannot be empty")
        if not destination:
            raise ValueError("Destination cannot be empty")
        object.__setattr__(self, "origin", origin)
        object.__setattr__(self, "destination", destination)

    def __str__(self) -> str:
        return f"{self.origin}-{self.destination}"

    def is_same_place(self) -> bool:
        """出発地と到着地が同じかどうか（大文字小文字は無視）"""
        return self.origin.lower() == self.destination.lower()
