from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.booking.applications.get_booking import GetBookingService
from services.booking.handlers.request_models import to_pnr
from services.booking.handlers.response_models import to_response
from services.booking.infrastructure.dynamodb_booking_repository import (
    DynamoDBBookingRepository,
)
from services.shared.domain import DomainException
from services.shared.utils import ErrorResponse, api_response, error_response

logger = Logger()

repository = DynamoDBBookingRepository()
service = GetBookingService(repository=repository)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """チケット取得 Lambda Handler (GET /flight/ticket/{pnr})"""

    pnr = (event.path_parameters or {}).get("pnr")
    if not pnr:
        return api_response(400, ErrorResponse(error="pnr is required"))

    logger.info("Fetching ticket", extra={"pnr": pnr})

    try:
        booking = service.find_by_pnr(to_pnr(pnr))
    except (DomainException, ValueError) as e:
        return error_response(e)
    except Exception as e:
        logger.exception("Failed to fetch ticket")
        return error_response(e)

    if booking is None:
        return api_response(404, ErrorResponse(error=f"Booking not found: {pnr}"))
    return api_response(200, to_response(booking))
