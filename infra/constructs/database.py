from aws_cdk import RemovalPolicy
from aws_cdk import aws_dynamodb as dynamodb
from constructs import Construct


class Database(Construct):
    """DynamoDB Construct

    - BookingsTable: 予約（PK: id）。ユーザー別・便別の GSI を持つ
    - SeatClaimsTable: 便・出発日・座席ごとの座席クレーム（PK: claim_key）
    """

    def __init__(self, scope: Construct, id: str) -> None:
        super().__init__(scope, id)

        self.bookings_table = dynamodb.Table(
            self,
            "BookingsTable",
            partition_key=dynamodb.Attribute(
                name="id", type=dynamodb.AttributeType.STRING
            ),
            billing_mode=dynamodb.BillingMode.PAY_PER_REQUEST,
            removal_policy=RemovalPolicy.DESTROY,
        )

        self.bookings_table.add_global_secondary_index(
            index_name="UserBookingsIndex",
            partition_key=dynamodb.Attribute(
                name="user_id", type=dynamodb.AttributeType.STRING
            ),
            sort_key=dynamodb.Attribute(
                name="booking_date", type=dynamodb.AttributeType.STRING
            ),
        )

        self.bookings_table.add_global_secondary_index(
            index_name="FlightBookingsIndex",
            partition_key=dynamodb.Attribute(
                name="flight_id", type=dynamodb.AttributeType.STRING
            ),
        )

        self.seat_claims_table = dynamodb.Table(
            self,
            "SeatClaimsTable",
            partition_key=dynamodb.Attribute(
                name="claim_key", type=dynamodb.AttributeType.STRING
            ),
            billing_mode=dynamodb.BillingMode.PAY_PER_REQUEST,
            removal_policy=RemovalPolicy.DESTROY,
        )
