from aws_cdk import aws_apigateway as apigw
from aws_cdk import aws_lambda as _lambda
from constructs import Construct


class Api(Construct):
    """API Gateway Construct

    在庫 API と予約 API を1つの RestApi にまとめる。
    各ルートは Lambda プロキシ統合で、ステータスコードは Lambda 側で決定する。
    """

    def __init__(
        self,
        scope: Construct,
        id: str,
        inventory_add: _lambda.IFunction,
        inventory_search: _lambda.IFunction,
        booking_book: _lambda.IFunction,
        booking_get_ticket: _lambda.IFunction,
        booking_history: _lambda.IFunction,
        booking_cancel: _lambda.IFunction,
        booking_update: _lambda.IFunction,
    ) -> None:
        super().__init__(scope, id)

        self.rest_api = apigw.RestApi(
            self,
            "FlightRestApi",
            rest_api_name="Flight Booking API",
            deploy_options=apigw.StageOptions(
                stage_name="prod",
                throttling_burst_limit=20,
                throttling_rate_limit=10,
            ),
        )

        flight = self.rest_api.root.add_resource("flight")

        # POST /flight/airline/inventory/add
        inventory = flight.add_resource("airline").add_resource("inventory")
        inventory.add_resource("add").add_method(
            "POST", apigw.LambdaIntegration(inventory_add)
        )

        # POST /flight/search?origin=&destination=&from=&to=
        flight.add_resource("search").add_method(
            "POST", apigw.LambdaIntegration(inventory_search)
        )

        # POST /flight/booking/{flight_id}, PUT /flight/booking/{pnr}
        # API Gateway は同じ階層に異なる名前のパスパラメータを置けないため共通化する
        booking = flight.add_resource("booking")
        booking_target = booking.add_resource("{id}")
        booking_target.add_method("POST", apigw.LambdaIntegration(booking_book))
        booking_target.add_method("PUT", apigw.LambdaIntegration(booking_update))

        # GET /flight/booking/history/{email}
        booking.add_resource("history").add_resource("{email}").add_method(
            "GET", apigw.LambdaIntegration(booking_history)
        )

        # DELETE /flight/booking/cancel/{pnr}?email=
        booking.add_resource("cancel").add_resource("{pnr}").add_method(
            "DELETE", apigw.LambdaIntegration(booking_cancel)
        )

        # GET /flight/ticket/{pnr}
        flight.add_resource("ticket").add_resource("{pnr}").add_method(
            "GET", apigw.LambdaIntegration(booking_get_ticket)
        )
