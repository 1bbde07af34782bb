from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.booking.applications.cancel_booking import CancelBookingService
from services.booking.handlers.request_models import (
    CancelBookingRequest,
    to_pnr,
)
from services.booking.handlers.response_models import CancelBookingResponse
from services.booking.infrastructure.dynamodb_booking_repository import (
    DynamoDBBookingRepository,
)
from services.shared.domain import DomainException
from services.shared.utils import api_response, error_response

logger = Logger()

repository = DynamoDBBookingRepository()
service = CancelBookingService(repository=repository)


@logger.inject_lambda_context(clear_state=True)
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """予約キャンセル Lambda Handler (DELETE /flight/booking/cancel/{pnr}?email=)"""

    path_params = event.path_parameters or {}
    params = event.query_string_parameters or {}

    try:
        request = CancelBookingRequest.model_validate(
            {"pnr": path_params.get("pnr"), "email": params.get("email")}
        )
        logger.append_keys(pnr=request.pnr)
        logger.info("Received cancel booking request")
        booking = service.cancel(to_pnr(request.pnr), request.email)
    except (DomainException, ValueError) as e:
        logger.warning("Cancellation rejected", extra={"reason": str(e)})
        return error_response(e)
    except Exception as e:
        logger.exception("Failed to cancel booking")
        return error_response(e)

    logger.info("Booking cancelled")
    return api_response(200, CancelBookingResponse(pnr=str(booking.pnr)))
