from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.booking.handlers.dependencies import (
    get_cors_allow_origin,
    get_list_user_bookings_service,
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
    """ユーザーの予約一覧取得 Lambda Handler

    /bookings/user/{user_id} と /bookings?user_id= の両方を受け付ける。
    """

    headers = cors_headers(ALLOWED_METHODS, get_cors_allow_origin())
    if event.http_method == "OPTIONS":
        return preflight_response(headers)

    path_params = event.path_parameters or {}
    query_params = event.query_string_parameters or {}
    user_id = (path_params.get("user_id") or query_params.get("user_id") or "").strip()

    try:
        if not user_id:
            raise MissingFieldException("user_id")

        logger.info("Listing bookings", extra={"user_id": user_id})
        bookings = get_list_user_bookings_service().list(user_id)
    except Exception as e:
        return to_error_response(e, headers, "Failed to fetch bookings")

    return api_response(
        200,
        {
            "bookings": [to_booking_dict(booking) for booking in bookings],
            "count": len(bookings),
        },
        headers,
    )
