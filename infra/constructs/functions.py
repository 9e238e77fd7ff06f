from aws_cdk import aws_dynamodb as dynamodb
from aws_cdk import aws_lambda as _lambda
from constructs import Construct

SERVICE_NAME = "booking-service"


class Functions(Construct):
    """予約 API の Lambda 関数を管理する Construct"""

    def __init__(
        self,
        scope: Construct,
        id: str,
        bookings_table: dynamodb.Table,
        seat_claims_table: dynamodb.Table,
        common_layer: _lambda.LayerVersion,
    ) -> None:
        super().__init__(scope, id)

        self._environment = {
            "BOOKINGS_TABLE": bookings_table.table_name,
            "SEAT_CLAIMS_TABLE": seat_claims_table.table_name,
            "POWERTOOLS_SERVICE_NAME": SERVICE_NAME,
        }

        self.create_booking = self._create_function(
            "CreateBookingLambda",
            "services.booking.handlers.create.lambda_handler",
            common_layer,
        )

        self.cancel_booking = self._create_function(
            "CancelBookingLambda",
            "services.booking.handlers.cancel.lambda_handler",
            common_layer,
        )

        for fn in [self.create_booking, self.cancel_booking]:
            bookings_table.grant_read_write_data(fn)
            seat_claims_table.grant_read_write_data(fn)

        self.get_booking = self._create_function(
            "GetBookingLambda",
            "services.booking.handlers.get.lambda_handler",
            common_layer,
        )

        self.list_user_bookings = self._create_function(
            "ListUserBookingsLambda",
            "services.booking.handlers.list_by_user.lambda_handler",
            common_layer,
        )

        self.occupied_seats = self._create_function(
            "OccupiedSeatsLambda",
            "services.booking.handlers.occupied_seats.lambda_handler",
            common_layer,
        )

        for fn in [self.get_booking, self.list_user_bookings, self.occupied_seats]:
            bookings_table.grant_read_data(fn)

    def _create_function(
        self,
        id: str,
        handler: str,
        common_layer: _lambda.LayerVersion,
    ) -> _lambda.Function:
        return _lambda.Function(
            self,
            id,
            runtime=_lambda.Runtime.PYTHON_3_14,
            handler=handler,
            code=_lambda.Code.from_asset("src"),
            layers=[common_layer],
            environment=dict(self._environment),
        )
