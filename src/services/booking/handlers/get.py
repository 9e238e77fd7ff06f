from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.booking.domain.value_object import BookingId
from services.booking.handlers.dependencies import (
    get_cors_allow_origin,
    get_get_booking_service,
)
from services.booking.handlers.errors import to_error_response
from services.booking.handlers.response_models import to_booking_dict
from services.shared.domain.exception import MissingFieldException
from services.shared.utils import api_response, cors_headers, preflight_response

logger = Logger()

ALLOWED_METHODS = "GET,OPTIONS"


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """予約詳細取得 Lambda Handler"""

    headers = cors_headers(ALLOWED_METHODS, get_cors_allow_origin())
    if event.http_method == "OPTIONS":
        return preflight_response(headers)

    path_params = event.path_parameters or {}
    booking_id = (path_params.get("id") or "").strip()

    try:
        if not booking_id:
            raise MissingFieldException("id")

        logger.info("Fetching booking", extra={"booking_id": booking_id})
        booking = get_get_booking_service().get(BookingId(value=booking_id))
    except Exception as e:
        return to_error_response(e, headers, "Failed to fetch booking")

    return api_response(200, {"booking": to_booking_dict(booking)}, headers)
