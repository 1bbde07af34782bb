from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.inventory.applications.seed_inventory import SeedInventoryService
from services.inventory.domain.factory import InventoryFactory
from services.inventory.infrastructure.dynamodb_inventory_repository import (
    DynamoDBInventoryRepository,
)

logger = Logger()

repository = DynamoDBInventoryRepository()
factory = InventoryFactory()
service = SeedInventoryService(repository=repository, factory=factory)


@logger.inject_lambda_context
def lambda_handler(event: dict, context: LambdaContext) -> dict:
    """サンプル在庫投入 Lambda Handler

    CDK Trigger からデプロイ時に呼び出される。
    失敗時は例外をそのまま送出し、デプロイを失敗させる。
    """
    logger.info("Seeding sample inventory")

    inventory = service.seed()
    if inventory is None:
        return {"status": "success", "message": "Sample inventory already exists"}
    return {"status": "success", "inventory_id": str(inventory.id)}
