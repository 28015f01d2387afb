import shutil
from decimal import Decimal

import pytest

pytest.importorskip("aws_cdk")
if shutil.which("node") is None:
    pytest.skip("Node.js is required by aws_cdk", allow_module_level=True)

import aws_cdk as core  # noqa: E402
import aws_cdk.assertions as assertions  # noqa: E402

from janitor.trip.domain.service import CAPACITY, HEAVY_THRESHOLD  # noqa: E402
from janitor_stack import JanitorStack  # noqa: E402


@pytest.fixture(scope="module")
def template():
    # バンドリングを行わずに合成する
    app = core.App(context={"aws:cdk:bundling-stacks": []})
    stack = JanitorStack(app, "JanitorStack")
    return assertions.Template.from_stack(stack)


def test_plan_trips_function_created(template):
    template.has_resource_properties(
        "AWS::Lambda::Function",
        {
            "Handler": "janitor.trip.handlers.plan.lambda_handler",
            "Environment": {
                "Variables": assertions.Match.object_like(
                    {
                        "POWERTOOLS_SERVICE_NAME": "trip-service",
                        "TRIP_CAPACITY": "3.0",
                        "HEAVY_THRESHOLD": "1.99",
                    }
                )
            },
        },
    )


def test_common_layer_created(template):
    template.resource_count_is("AWS::Lambda::LayerVersion", 1)


def test_plans_resource_created(template):
    template.has_resource_properties("AWS::ApiGateway::Resource", {"PathPart": "plans"})
    template.has_resource_properties(
        "AWS::ApiGateway::Method", {"HttpMethod": "POST"}
    )


def test_planner_env_matches_domain_defaults(template):
    functions = template.find_resources("AWS::Lambda::Function")
    variables = next(iter(functions.values()))["Properties"]["Environment"][
        "Variables"
    ]

    assert Decimal(variables["TRIP_CAPACITY"]) == CAPACITY
    assert Decimal(variables["HEAVY_THRESHOLD"]) == HEAVY_THRESHOLD
