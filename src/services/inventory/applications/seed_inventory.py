from datetime import timedelta
from decimal import Decimal

from aws_lambda_powertools import Logger

from services.inventory.domain.entity import Inventory
from services.inventory.domain.factory import InventoryDetails, InventoryFactory
from services.inventory.domain.repository import InventoryRepository
from services.inventory.domain.value_object import InventoryId
from services.shared.domain import DuplicateResourceException, IsoDateTime

logger = Logger(child=True)

SAMPLE_FLIGHT_NUMBER = "IN123"


class SeedInventoryService:
    """サンプル在庫の投入サービス（デプロイ時に1回実行）

    固定IDで条件付き書き込みを行うため、何度実行しても1件しか作られない。
    """

    def __init__(
        self, repository: InventoryRepository, factory: InventoryFactory
    ) -> None:
        self._repository = repository
        self._factory = factory

    def seed(self) -> Inventory | None:
        """サンプル在庫を登録する（既に存在する場合は None）"""
        inventory = self._factory.create(
            self._sample_details(IsoDateTime.now()),
            inventory_id=InventoryId.for_sample(SAMPLE_FLIGHT_NUMBER),
        )
        try:
            self._repository.save(inventory)
        except DuplicateResourceException:
            logger.info(
                "Sample inventory already exists",
                extra={"inventory_id": str(inventory.id)},
            )
            return None
        logger.info(
            "Sample inventory created", extra={"inventory_id": str(inventory.id)}
        )
        return inventory

    @staticmethod
    def _sample_details(now: IsoDateTime) -> InventoryDetails:
        """2日後 09:00 (UTC) 発、所要1時間30分の HYD -> BLR 便"""
        departure = now.value.replace(hour=9, minute=0, second=0, microsecond=0)
        departure += timedelta(days=2)
        arrival = departure + timedelta(hours=1, minutes=30)
        return {
            "airline": "Indigo",
            "airline_logo_url": "",
            "flight_number": SAMPLE_FLIGHT_NUMBER,
            "origin": "HYD",
            "destination": "BLR",
            "departure_time": departure.isoformat(),
            "arrival_time": arrival.isoformat(),
            "total_seats": 30,
            "price_amount": Decimal("4500"),
            "price_currency": "INR",
        }
