from aws_cdk import Duration
from aws_cdk import aws_cloudwatch as cloudwatch
from aws_cdk import aws_codedeploy as codedeploy
from aws_cdk import aws_lambda as _lambda
from constructs import Construct

CANARY_CONFIG = codedeploy.LambdaDeploymentConfig.CANARY_10_PERCENT_5_MINUTES


class Deployment(Construct):
    """座席を書き換える関数のカナリアデプロイを管理する Construct

    予約・予約変更は在庫の空席を更新するため、新バージョンへの切り替えは
    10% のトラフィックで 5 分間様子を見てから行う。
    """

    def __init__(
        self,
        scope: Construct,
        id: str,
        booking_book: _lambda.Function,
        booking_update: _lambda.Function,
        error_rate_threshold: float = 5,
    ) -> None:
        super().__init__(scope, id)

        self._error_rate_threshold = error_rate_threshold

        self.booking_book_alias = self._canary_alias("BookingBook", booking_book)
        self.booking_update_alias = self._canary_alias(
            "BookingUpdate", booking_update
        )

    def _canary_alias(self, name: str, fn: _lambda.Function) -> _lambda.Alias:
        alias = fn.add_alias("Prod")

        # 4xx はレスポンスとして返るため、ここで拾うのは未処理例外のみ
        errors = alias.metric_errors(statistic="Sum", period=Duration.minutes(1))
        invocations = alias.metric_invocations(
            statistic="Sum", period=Duration.minutes(1)
        )
        rollback_alarm = cloudwatch.MathExpression(
            expression="IF(invocations > 0, 100 * errors / invocations, 0)",
            using_metrics={"errors": errors, "invocations": invocations},
            label=f"{name} error rate (%)",
        ).create_alarm(
            self,
            f"{name}RollbackAlarm",
            threshold=self._error_rate_threshold,
            evaluation_periods=2,
            comparison_operator=(
                cloudwatch.ComparisonOperator.GREATER_THAN_OR_EQUAL_TO_THRESHOLD
            ),
            treat_missing_data=cloudwatch.TreatMissingData.NOT_BREACHING,
        )

        codedeploy.LambdaDeploymentGroup(
            self,
            f"{name}DeploymentGroup",
            alias=alias,
            deployment_config=CANARY_CONFIG,
            alarms=[rollback_alarm],
            auto_rollback=codedeploy.AutoRollbackConfig(
                failed_deployment=True, deployment_in_alarm=True
            ),
        )

        return alias
