from aws_cdk import Duration
from aws_cdk import aws_lambda as _lambda
from constructs import Construct


class Functions(Construct):
    """Lambda 関数を管理する Construct"""

    def __init__(
        self,
        scope: Construct,
        id: str,
        common_layer: _lambda.LayerVersion,
    ) -> None:
        super().__init__(scope, id)

        self.plan_trips = self._create_function(
            "PlanTripsLambda",
            "janitor.trip.handlers.plan.lambda_handler",
            "trip-service",
            common_layer,
        )

    def _create_function(
        self,
        id: str,
        handler: str,
        service_name: str,
        common_layer: _lambda.LayerVersion,
    ) -> _lambda.Function:
        return _lambda.Function(
            self,
            id,
            runtime=_lambda.Runtime.PYTHON_3_13,
            handler=handler,
            code=_lambda.Code.from_asset("src"),
            layers=[common_layer],
            timeout=Duration.seconds(10),
            environment={
                "POWERTOOLS_SERVICE_NAME": service_name,
                "POWERTOOLS_LOG_LEVEL": "INFO",
                "TRIP_CAPACITY": "3.0",
                "HEAVY_THRESHOLD": "1.99",
            },
        )
