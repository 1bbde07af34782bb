from services.inventory.domain.entity import Inventory
from services.inventory.domain.repository import InventoryRepository
from services.shared.domain import IsoDateTime


class SearchInventoryService:
    """フライト検索サービス（参照のみ）"""

    def __init__(self, repository: InventoryRepository) -> None:
        self._repository = repository

    def search(
        self,
        origin: str,
        destination: str,
        departure_from: IsoDateTime,
        departure_to: IsoDateTime,
    ) -> list[Inventory]:
        """出発地・到着地（大文字小文字を区別）と出発時刻の範囲で検索する"""
        if departure_from.is_after(departure_to):
            return []
        inventories = self._repository.find_by_route_and_departure_between(
            origin, destination, departure_from, departure_to
        )
        return sorted(inventories, key=lambda inv: inv.departure_time.value)
