from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.booking.applications.update_booking import (
    BookingChanges,
    UpdateBookingService,
)
from services.booking.handlers.request_models import (
    UpdateBookingRequest,
    to_pnr,
)
from services.booking.handlers.response_models import to_response
from services.booking.infrastructure.dynamodb_booking_repository import (
    DynamoDBBookingRepository,
)
from services.inventory.infrastructure.dynamodb_inventory_repository import (
    DynamoDBInventoryRepository,
)
from services.shared.domain import DomainException
from services.shared.utils import ErrorResponse, api_response, error_response

logger = Logger()

inventory_repository = DynamoDBInventoryRepository()
booking_repository = DynamoDBBookingRepository()
service = UpdateBookingService(
    inventory_repository=inventory_repository,
    booking_repository=booking_repository,
)


@logger.inject_lambda_context(clear_state=True)
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """予約変更 Lambda Handler (PUT /flight/booking/{pnr})"""

    # PUT /flight/booking/{id} の id は PNR
    pnr = (event.path_parameters or {}).get("id")
    if not pnr:
        return api_response(400, ErrorResponse(error="pnr is required"))

    logger.append_keys(pnr=pnr)
    logger.info("Received update booking request")

    try:
        request = UpdateBookingRequest.model_validate(
            event.json_body if event.body else {}
        )
        booking = service.update(to_pnr(pnr), _to_changes(request))
    except (DomainException, ValueError) as e:
        logger.warning("Update rejected", extra={"reason": str(e)})
        return error_response(e)
    except Exception as e:
        logger.exception("Failed to update booking")
        return error_response(e)

    logger.info("Booking updated")
    return api_response(200, to_response(booking))


def _to_changes(request: UpdateBookingRequest) -> BookingChanges:
    """リクエストボディから BookingChanges を構築する"""

    return {
        "email": request.email,
        "name": request.name,
        "passengers": (
            [p.model_dump() for p in request.passengers]
            if request.passengers is not None
            else None
        ),
        "seat_numbers": request.seat_numbers,
        "meal_veg": request.meal_veg,
    }
