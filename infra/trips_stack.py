"""Table, function and REST API for the trips service."""

from pathlib import Path

from aws_cdk import BundlingOptions, CfnOutput, Duration, RemovalPolicy, Stack
from aws_cdk import aws_apigateway as apigw
from aws_cdk import aws_dynamodb as dynamodb
from aws_cdk import aws_lambda as _lambda
from constructs import Construct

SRC_DIR = Path(__file__).resolve().parent.parent / "src"

TABLE_NAME = "kilometer-trips"


class TripsStack(Stack):
    def __init__(self, scope: Construct, construct_id: str, *, bundle: bool = True, **kwargs) -> None:
        super().__init__(scope, construct_id, **kwargs)

        table = dynamodb.Table(self, "KilometerTrips",
            table_name=TABLE_NAME,
            partition_key=dynamodb.Attribute(name="id", type=dynamodb.AttributeType.STRING),
            billing_mode=dynamodb.BillingMode.PAY_PER_REQUEST,
            removal_policy=RemovalPolicy.RETAIN,
        )

        # pydantic is not part of the Lambda runtime, so the asset is built with pip
        bundling = None
        if bundle:
            bundling = BundlingOptions(
                image=_lambda.Runtime.PYTHON_3_12.bundling_image,
                command=[
                    "bash", "-c",
                    "pip install -r requirements.txt -t /asset-output && cp -au core handlers /asset-output",
                ],
            )

        trip_function = _lambda.Function(self, "TripFunction",
            runtime=_lambda.Runtime.PYTHON_3_12,
            handler="handlers.trips.handler",
            code=_lambda.Code.from_asset(str(SRC_DIR), bundling=bundling),
            timeout=Duration.seconds(10),
            environment={
                "TABLE_NAME": table.table_name,
            },
        )

        table.grant_read_write_data(trip_function)

        api = apigw.RestApi(self, "TripApi",
            rest_api_name="Kilometer Trip Service",
            default_cors_preflight_options=apigw.CorsOptions(
                allow_origins=apigw.Cors.ALL_ORIGINS,
                allow_methods=apigw.Cors.ALL_METHODS,
                allow_headers=["Content-Type"],
            ),
        )

        integration = apigw.LambdaIntegration(trip_function)
        trips = api.root.add_resource("trips")
        for method in ("GET", "POST", "DELETE"):
            trips.add_method(method, integration)

        CfnOutput(self, "ApiUrl", value=api.url, description="API Gateway URL")
