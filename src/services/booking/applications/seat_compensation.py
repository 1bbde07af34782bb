from aws_lambda_powertools import Logger

from services.inventory.domain.repository import InventoryRepository
from services.inventory.domain.value_object import InventoryId, SeatSet

logger = Logger(child=True)


def compensate_seat_reservation(
    repository: InventoryRepository,
    inventory_id: InventoryId,
    release: SeatSet,
    reclaim: SeatSet,
) -> bool:
    """在庫更新後に予約の保存が失敗した場合の補償トランザクション

    最新の在庫を読み直し、release を空席に戻して reclaim を再確保する。
    補償自体が失敗した場合はログに残して False を返す（呼び出し元は元の例外を送出する）。
    """
    try:
        inventory = repository.find_by_id(inventory_id)
        if inventory is None:
            logger.error(
                "Inventory disappeared before compensation",
                extra={"inventory_id": str(inventory_id)},
            )
            return False
        inventory.swap(held=release, requested=reclaim)
        repository.update(inventory)
    except Exception:
        logger.exception(
            "Seat compensation failed; inventory needs manual reconciliation",
            extra={
                "inventory_id": str(inventory_id),
                "release": release.to_list(),
                "reclaim": reclaim.to_list(),
            },
        )
        return False

    logger.info(
        "Seat reservation compensated",
        extra={"inventory_id": str(inventory_id), "released": release.to_list()},
    )
    return True
