from aws_cdk import CfnOutput, Stack
from constructs import Construct

from infra.constructs import Api, Database, Functions, Layers


class FlightBookingStack(Stack):
    def __init__(self, scope: Construct, construct_id: str, **kwargs) -> None:
        super().__init__(scope, construct_id, **kwargs)

        database = Database(self, "Database")
        layers = Layers(self, "Layers")

        fns = Functions(
            self,
            "Functions",
            bookings_table=database.bookings_table,
            seat_claims_table=database.seat_claims_table,
            common_layer=layers.common_layer,
        )

        api = Api(
            self,
            "Api",
            create_booking=fns.create_booking,
            get_booking=fns.get_booking,
            list_user_bookings=fns.list_user_bookings,
            occupied_seats=fns.occupied_seats,
            cancel_booking=fns.cancel_booking,
        )

        CfnOutput(self, "ApiUrl", value=api.rest_api.url)
        CfnOutput(self, "BookingsTableName", value=database.bookings_table.table_name)
