from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.booking.handlers.dependencies import (
    get_cors_allow_origin,
    get_create_booking_service,
)
from services.booking.handlers.errors import to_error_response
from services.booking.handlers.request_models import CreateBookingRequest
from services.booking.handlers.response_models import to_booking_dict
from services.shared.utils import api_response, cors_headers, preflight_response

logger = Logger()

ALLOWED_METHODS = "POST,OPTIONS"


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """予約作成 Lambda Handler"""

    headers = cors_headers(ALLOWED_METHODS, get_cors_allow_origin())
    if event.http_method == "OPTIONS":
        return preflight_response(headers)

    try:
        body = event.json_body if event.body else {}
        request = CreateBookingRequest.model_validate(body)

        logger.info(
            "Received create booking request",
            extra={"user_id": request.user_id, "flight_id": request.flight_id},
        )

        booking = get_create_booking_service().create(request.to_details())
    except Exception as e:
        return to_error_response(e, headers, "Failed to create booking")

    logger.info("Booking created", extra={"booking_id": str(booking.id)})
    return api_response(
        201,
        {"message": "Booking created successfully", "booking": to_booking_dict(booking)},
        headers,
    )
