from aws_cdk import CfnStack, RemovalPolicy, SecretValue
from aws_cdk import aws_lambda as _lambda
from aws_cdk import aws_secretsmanager as secretsmanager
from constructs import Construct
from datadog_cdk_constructs_v2 import DatadogLambda


class Observability(Construct):
    """Datadog で Lambda を計装する Construct

    SSM の SecureString に置いた API Key を Secrets Manager に取り込み、
    Forwarder をデプロイしたうえで全関数にトレースとログ転送を設定する。
    """

    def __init__(
        self,
        scope: Construct,
        id: str,
        functions: list[_lambda.Function],
        datadog_api_key_ssm_parameter_name: str = "/flight-booking/datadog-api-key",
        service_name: str = "flight-booking",
        env: str = "dev",
    ) -> None:
        super().__init__(scope, id)

        self.api_key_secret = secretsmanager.Secret(
            self,
            "DatadogApiKeySecret",
            secret_string_value=SecretValue.ssm_secure(
                datadog_api_key_ssm_parameter_name
            ),
            removal_policy=RemovalPolicy.DESTROY,
        )

        # CloudWatch Logs -> Datadog の転送用
        CfnStack(
            self,
            "DatadogForwarder",
            template_url="https://datadog-cloudformation-template.s3.amazonaws.com/aws/forwarder/latest.yaml",
            parameters={
                "DdApiKeySecretArn": self.api_key_secret.secret_arn,
                "DdSite": "datadoghq.com",
                "FunctionName": f"{service_name}-datadog-forwarder",
            },
        )

        # 予約リクエストのペイロードにはメールアドレスが含まれるため送らない
        datadog_lambda = DatadogLambda(
            self,
            "DatadogLambda",
            python_layer_version=122,
            extension_layer_version=92,
            api_key_secret_arn=self.api_key_secret.secret_arn,
            enable_datadog_tracing=True,
            enable_datadog_logs=True,
            capture_lambda_payload=False,
            site="datadoghq.com",
            service=service_name,
            env=env,
        )
        datadog_lambda.add_lambda_functions(functions)
