from aws_cdk import Stack, triggers
from constructs import Construct

from infra.constructs import (
    Api,
    Database,
    Deployment,
    Functions,
    Layers,
    Observability,
)


class FlightBookingStack(Stack):
    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        enable_observability: bool = True,
        **kwargs,
    ) -> None:
        super().__init__(scope, construct_id, **kwargs)

        database = Database(self, "Database")
        layers = Layers(self, "Layers")

        fns = Functions(
            self,
            "Functions",
            table=database.table,
            common_layer=layers.common_layer,
            pnr_length=int(self.node.try_get_context("pnr_length") or 6),
        )

        # 座席を書き換える関数のみカナリアで切り替える
        deployment = Deployment(
            self,
            "Deployment",
            booking_book=fns.booking_book,
            booking_update=fns.booking_update,
        )

        Api(
            self,
            "Api",
            inventory_add=fns.inventory_add,
            inventory_search=fns.inventory_search,
            booking_book=deployment.booking_book_alias,
            booking_get_ticket=fns.booking_get_ticket,
            booking_history=fns.booking_history,
            booking_cancel=fns.booking_cancel,
            booking_update=deployment.booking_update_alias,
        )

        # デプロイ後にサンプル便を1件投入する (既に存在すればスキップ)
        triggers.Trigger(
            self,
            "SeedInventoryTrigger",
            handler=fns.inventory_seed,
            execute_after=[database],
        )

        if enable_observability:
            Observability(
                self,
                "Observability",
                functions=fns.all_functions,
            )
