import aws_cdk as core
import aws_cdk.assertions as assertions

from flight_booking_stack import FlightBookingStack


def test_stack_created():
    # レイヤーのバンドリング（pip install）を行わずに合成する
    app = core.App(context={"aws:cdk:bundling-stacks": []})
    stack = FlightBookingStack(app, "FlightBookingStack", enable_observability=False)
    template = assertions.Template.from_stack(stack)

    template.resource_count_is("AWS::DynamoDB::Table", 1)
    template.resource_count_is("AWS::ApiGateway::RestApi", 1)
    template.resource_count_is("AWS::CodeDeploy::DeploymentGroup", 2)
    template.has_resource_properties(
        "AWS::ApiGateway::Method", {"HttpMethod": "DELETE"}
    )
    template.resource_count_is("Custom::Trigger", 1)
