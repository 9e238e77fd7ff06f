from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.booking.handlers.dependencies import (
    get_cors_allow_origin,
    get_occupied_seats_service,
)
from services.booking.handlers.errors import to_error_response
from services.booking.handlers.request_models import OccupiedSeatsQuery
from services.booking.handlers.response_models import to_occupied_seats_dict
from services.shared.domain.exception import MissingFieldException
from services.shared.utils import api_response, cors_headers, preflight_response

logger = Logger()

ALLOWED_METHODS = "GET,OPTIONS"


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """使用済み座席照会 Lambda Handler"""

    headers = cors_headers(ALLOWED_METHODS, get_cors_allow_origin())
    if event.http_method == "OPTIONS":
        return preflight_response(headers)

    try:
        query = OccupiedSeatsQuery.model_validate(event.query_string_parameters or {})
        if not query.flight_id or not query.flight_id.strip():
            raise MissingFieldException("flight_id")

        occupied = get_occupied_seats_service().occupied_seats(
            query.flight_id.strip(), query.departure_date or None
        )
    except Exception as e:
        return to_error_response(e, headers, "Failed to fetch occupied seats")

    logger.info(
        "Occupied seats fetched",
        extra={
            "flight_id": query.flight_id,
            "departure_date": query.departure_date,
            "count": len(occupied),
        },
    )
    return api_response(200, to_occupied_seats_dict(occupied), headers)
