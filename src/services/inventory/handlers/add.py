from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.inventory.applications.add_inventory import AddInventoryService
from services.inventory.domain.factory import InventoryDetails, InventoryFactory
from services.inventory.handlers.request_models import AddInventoryRequest
from services.inventory.handlers.response_models import to_response
from services.inventory.infrastructure.dynamodb_inventory_repository import (
    DynamoDBInventoryRepository,
)
from services.shared.domain import DomainException
from services.shared.utils import api_response, error_response

logger = Logger()

repository = DynamoDBInventoryRepository()
factory = InventoryFactory()
service = AddInventoryService(repository=repository, factory=factory)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """フライト在庫登録 Lambda Handler (POST /flight/airline/inventory/add)"""
    logger.info("Received add inventory request")

    try:
        request = AddInventoryRequest.model_validate(
            event.json_body if event.body else {}
        )
        inventory = service.add(_to_inventory_details(request))
    except (DomainException, ValueError) as e:
        logger.warning("Add inventory rejected", extra={"reason": str(e)})
        return error_response(e)
    except Exception as e:
        logger.exception("Failed to add inventory")
        return error_response(e)

    logger.info("Inventory added", extra={"inventory_id": str(inventory.id)})
    return api_response(201, to_response(inventory))


def _to_inventory_details(request: AddInventoryRequest) -> InventoryDetails:
    """リクエストボディから InventoryDetails を構築する"""

    return {
        "airline": request.airline,
        "airline_logo_url": request.airline_logo_url,
        "flight_number": request.flight_number,
        "origin": request.origin,
        "destination": request.destination,
        "departure_time": request.departure_time,
        "arrival_time": request.arrival_time,
        "total_seats": request.total_seats,
        "price_amount": request.price_amount,
        "price_currency": request.price_currency,
    }
