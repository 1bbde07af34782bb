from abc import abstractmethod

from services.inventory.domain.entity import Inventory
from services.inventory.domain.value_object import InventoryId
from services.shared.domain import IsoDateTime, Repository


class InventoryRepository(Repository[Inventory]):
    """フライト在庫レポジトリ"""

    @abstractmethod
    def save(self, inventory: Inventory) -> None:
        """新規在庫を永続化する"""
        raise NotImplementedError

    @abstractmethod
    def update(self, inventory: Inventory) -> None:
        """空席状況を更新する（読み込み時の version が一致する場合のみ）"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, inventory_id: InventoryId) -> Inventory | None:
        """在庫IDで検索"""
        raise NotImplementedError

    @abstractmethod
    def find_by_route_and_departure_between(
        self,
        origin: str,
        destination: str,
        departure_from: IsoDateTime,
        departure_to: IsoDateTime,
    ) -> list[Inventory]:
        """出発地・到着地が一致し、出発時刻が期間内（両端を含む）の在庫を検索"""
        raise NotImplementedError
