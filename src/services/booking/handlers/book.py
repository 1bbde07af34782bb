import os

from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.booking.applications.book_flight import BookFlightService
from services.booking.domain.factory import BookingDetails, BookingFactory
from services.booking.handlers.request_models import BookFlightRequest
from services.booking.handlers.response_models import to_response
from services.booking.infrastructure.dynamodb_booking_repository import (
    DynamoDBBookingRepository,
)
from services.inventory.domain.value_object import InventoryId
from services.inventory.infrastructure.dynamodb_inventory_repository import (
    DynamoDBInventoryRepository,
)
from services.shared.domain import DomainException
from services.shared.utils import ErrorResponse, api_response, error_response

logger = Logger()

inventory_repository = DynamoDBInventoryRepository()
booking_repository = DynamoDBBookingRepository()
factory = BookingFactory(pnr_length=int(os.getenv("PNR_LENGTH", "6")))
service = BookFlightService(
    inventory_repository=inventory_repository,
    booking_repository=booking_repository,
    factory=factory,
)


@logger.inject_lambda_context(clear_state=True)
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """座席予約 Lambda Handler (POST /flight/booking/{flight_id})"""

    # POST /flight/booking/{id} の id は便 ID
    flight_id = (event.path_parameters or {}).get("id")
    if not flight_id:
        return api_response(400, ErrorResponse(error="flight_id is required"))

    logger.append_keys(flight_id=flight_id)
    logger.info("Received book flight request")

    try:
        request = BookFlightRequest.model_validate(
            event.json_body if event.body else {}
        )
        booking = service.book(
            InventoryId(value=flight_id), _to_booking_details(request)
        )
    except (DomainException, ValueError) as e:
        logger.warning("Booking rejected", extra={"reason": str(e)})
        return error_response(e)
    except Exception as e:
        logger.exception("Failed to book flight")
        return error_response(e)

    logger.info("Flight booked", extra={"pnr": str(booking.pnr)})
    return api_response(201, to_response(booking))


def _to_booking_details(request: BookFlightRequest) -> BookingDetails:
    """リクエストボディから BookingDetails を構築する"""

    return {
        "email": request.email,
        "name": request.name,
        "passengers": [p.model_dump() for p in request.passengers],
        "seat_numbers": request.seat_numbers,
        "meal_veg": request.meal_veg,
    }
