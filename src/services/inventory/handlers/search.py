from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.inventory.applications.search_inventory import SearchInventoryService
from services.inventory.handlers.request_models import SearchInventoryRequest
from services.inventory.handlers.response_models import to_list_response
from services.inventory.infrastructure.dynamodb_inventory_repository import (
    DynamoDBInventoryRepository,
)
from services.shared.domain import DomainException, IsoDateTime
from services.shared.utils import api_response, error_response

logger = Logger()

repository = DynamoDBInventoryRepository()
service = SearchInventoryService(repository=repository)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """フライト検索 Lambda Handler (POST /flight/search)"""

    params = event.query_string_parameters or {}
    logger.info("Searching flights", extra={"query": params})

    try:
        request = SearchInventoryRequest.model_validate(params)
        inventories = service.search(
            origin=request.origin,
            destination=request.destination,
            departure_from=IsoDateTime.from_string(request.departure_from),
            departure_to=IsoDateTime.from_string(request.departure_to),
        )
    except (DomainException, ValueError) as e:
        return error_response(e)
    except Exception as e:
        logger.exception("Failed to search flights")
        return error_response(e)

    return api_response(200, to_list_response(inventories))
