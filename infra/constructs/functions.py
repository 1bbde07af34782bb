import datetime

from aws_cdk import Duration
from aws_cdk import aws_dynamodb as dynamodb
from aws_cdk import aws_lambda as _lambda
from constructs import Construct


class Functions(Construct):
    """Lambda 関数を管理する Construct"""

    def __init__(
        self,
        scope: Construct,
        id: str,
        table: dynamodb.Table,
        common_layer: _lambda.ILayerVersion,
        pnr_length: int = 6,
        log_level: str = "INFO",
    ) -> None:
        super().__init__(scope, id)

        self._table = table
        self._common_layer = common_layer
        self._log_level = log_level

        # 在庫 (inventory-service)
        self.inventory_add = self._create_function(
            "InventoryAddLambda",
            "services.inventory.handlers.add.lambda_handler",
            "inventory-service",
        )
        self.inventory_search = self._create_function(
            "InventorySearchLambda",
            "services.inventory.handlers.search.lambda_handler",
            "inventory-service",
        )
        self.inventory_seed = self._create_function(
            "InventorySeedLambda",
            "services.inventory.handlers.seed.lambda_handler",
            "inventory-service",
        )

        # 予約 (booking-service)
        booking_env = {"PNR_LENGTH": str(pnr_length)}
        self.booking_book = self._create_function(
            "BookingBookLambda",
            "services.booking.handlers.book.lambda_handler",
            "booking-service",
            booking_env,
        )
        self.booking_get_ticket = self._create_function(
            "BookingGetTicketLambda",
            "services.booking.handlers.get_ticket.lambda_handler",
            "booking-service",
        )
        self.booking_history = self._create_function(
            "BookingHistoryLambda",
            "services.booking.handlers.history.lambda_handler",
            "booking-service",
        )
        self.booking_cancel = self._create_function(
            "BookingCancelLambda",
            "services.booking.handlers.cancel.lambda_handler",
            "booking-service",
        )
        self.booking_update = self._create_function(
            "BookingUpdateLambda",
            "services.booking.handlers.update.lambda_handler",
            "booking-service",
        )

        for fn in [
            self.inventory_add,
            self.inventory_seed,
            self.booking_book,
            self.booking_cancel,
            self.booking_update,
        ]:
            table.grant_read_write_data(fn)

        for fn in [
            self.inventory_search,
            self.booking_get_ticket,
            self.booking_history,
        ]:
            table.grant_read_data(fn)

        self.all_functions = [
            self.inventory_add,
            self.inventory_search,
            self.inventory_seed,
            self.booking_book,
            self.booking_get_ticket,
            self.booking_history,
            self.booking_cancel,
            self.booking_update,
        ]

    def _create_function(
        self,
        id: str,
        handler: str,
        service_name: str,
        extra_env: dict[str, str] | None = None,
    ) -> _lambda.Function:
        return _lambda.Function(
            self,
            id,
            runtime=_lambda.Runtime.PYTHON_3_14,
            handler=handler,
            code=_lambda.Code.from_asset("src"),
            layers=[self._common_layer],
            timeout=Duration.seconds(10),
            environment={
                "TABLE_NAME": self._table.table_name,
                "POWERTOOLS_SERVICE_NAME": service_name,
                "POWERTOOLS_LOG_LEVEL": self._log_level,
                "DEPLOY_TIME": datetime.datetime.now(datetime.timezone.utc).isoformat(),
                **(extra_env or {}),
            },
        )
