from services.inventory.domain.entity import Inventory
from services.inventory.domain.factory import InventoryDetails, InventoryFactory
from services.inventory.domain.repository import InventoryRepository


class AddInventoryService:
    """フライト在庫登録サービス（管理者用）

    座席マップ S1..S{total_seats} を空席として生成し、永続化する。
    """

    def __init__(
        self, repository: InventoryRepository, factory: InventoryFactory
    ) -> None:
        self._repository = repository
        self._factory = factory

    def add(self, details: InventoryDetails) -> Inventory:
        """フライト在庫を登録する"""
        inventory = self._factory.create(details)
        self._repository.save(inventory)
        return inventory
