from aws_cdk import CfnOutput, Stack
from constructs import Construct

from infra.constructs import Api, Functions, Layers


class JanitorStack(Stack):
    def __init__(self, scope: Construct, construct_id: str, **kwargs) -> None:
        super().__init__(scope, construct_id, **kwargs)

        layers = Layers(self, "Layers")

        fns = Functions(
            self,
            "Functions",
            common_layer=layers.common_layer,
        )

        api = Api(
            self,
            "Api",
            plan_trips=fns.plan_trips,
        )

        CfnOutput(self, "ApiUrl", value=api.rest_api.url)
