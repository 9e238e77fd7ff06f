from aws_cdk import aws_apigateway as apigw
from aws_cdk import aws_lambda as _lambda
from constructs import Construct


class Api(Construct):
    """API Gateway Construct

    OPTIONS は各 Lambda でも応答するが、プリフライトは API Gateway 側で返す。
    """

    def __init__(
        self,
        scope: Construct,
        id: str,
        create_booking: _lambda.IFunction,
        get_booking: _lambda.IFunction,
        list_user_bookings: _lambda.IFunction,
        occupied_seats: _lambda.IFunction,
        cancel_booking: _lambda.IFunction,
        allow_origins: list[str] | None = None,
    ) -> None:
        super().__init__(scope, id)

        self.rest_api = apigw.RestApi(
            self,
            "BookingRestApi",
            rest_api_name="Flight Booking API",
            deploy_options=apigw.StageOptions(
                stage_name="prod",
                throttling_burst_limit=10,
                throttling_rate_limit=5,
            ),
            default_cors_preflight_options=apigw.CorsOptions(
                allow_origins=allow_origins or apigw.Cors.ALL_ORIGINS,
                allow_methods=["GET", "POST", "OPTIONS"],
                allow_headers=["Content-Type", "Authorization"],
            ),
        )

        # POST /bookings, GET /bookings?user_id=
        bookings = self.rest_api.root.add_resource("bookings")
        bookings.add_method("POST", apigw.LambdaIntegration(create_booking))
        bookings.add_method("GET", apigw.LambdaIntegration(list_user_bookings))

        # GET /bookings/occupied-seats
        bookings.add_resource("occupied-seats").add_method(
            "GET", apigw.LambdaIntegration(occupied_seats)
        )

        # GET /bookings/user/{user_id}
        bookings.add_resource("user").add_resource("{user_id}").add_method(
            "GET", apigw.LambdaIntegration(list_user_bookings)
        )

        # GET /bookings/{id}, POST /bookings/{id}/cancel
        booking = bookings.add_resource("{id}")
        booking.add_method("GET", apigw.LambdaIntegration(get_booking))
        booking.add_resource("cancel").add_method(
            "POST", apigw.LambdaIntegration(cancel_booking)
        )
