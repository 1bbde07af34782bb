from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.booking.applications.get_booking import GetBookingService
from services.booking.handlers.response_models import to_list_response
from services.booking.infrastructure.dynamodb_booking_repository import (
    DynamoDBBookingRepository,
)
from services.shared.domain import DomainException, Email
from services.shared.utils import (
    ErrorResponse,
    api_response,
    error_response,
    to_bool_flag,
)

logger = Logger()

repository = DynamoDBBookingRepository()
service = GetBookingService(repository=repository)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """予約履歴取得 Lambda Handler (GET /flight/booking/history/{email})

    includeCancelled=true を指定しない限り、キャンセル済みの予約は含めない。
    """

    email = (event.path_parameters or {}).get("email")
    if not email:
        return api_response(400, ErrorResponse(error="email is required"))

    params = event.query_string_parameters or {}
    logger.info("Listing booking history")

    try:
        include_cancelled = to_bool_flag(params.get("includeCancelled"))
        bookings = service.find_by_email(
            Email(value=email), include_cancelled=include_cancelled
        )
    except (DomainException, ValueError) as e:
        return error_response(e)
    except Exception as e:
        logger.exception("Failed to list booking history")
        return error_response(e)

    return api_response(200, to_list_response(bookings))
