import os

from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from janitor.shared.utils import api_response, get_logger, to_decimal
from janitor.trip.applications.calculate_trips import CalculateTripsService
from janitor.trip.domain.service import CAPACITY, HEAVY_THRESHOLD, TripPlanner
from janitor.trip.handlers.request_models import PlanTripsRequest
from janitor.trip.handlers.response_models import error_response, to_response
from janitor.trip.session import (
    AddBag,
    BagsLoaded,
    CalculateTrips,
    SessionError,
    SessionState,
    initial_state,
    reduce,
)

logger = get_logger()

planner = TripPlanner(
    capacity=to_decimal(os.environ.get("TRIP_CAPACITY", CAPACITY)),
    heavy_threshold=to_decimal(os.environ.get("HEAVY_THRESHOLD", HEAVY_THRESHOLD)),
)
service = CalculateTripsService(planner=planner)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """運搬計画作成 Lambda Handler

    重量入力を 1 件ずつセッションに追加し、最初に不正な入力があれば
    その位置を返す。すべて受け付けた場合は運搬計画を返す。
    """

    logger.info("Received plan trips request")

    try:
        request = PlanTripsRequest.model_validate_json(event.body or "")
    except ValidationError as e:
        logger.warning("Invalid plan trips request", extra={"errors": e.errors()})
        return api_response(
            400,
            error_response(
                "VALIDATION_ERROR",
                "Invalid request body",
                e.errors(include_url=False, include_context=False),
            ),
        )

    try:
        return _plan(request)
    except Exception:
        logger.exception("Failed to plan trips")
        return api_response(
            500, error_response("INTERNAL_ERROR", "Internal server error")
        )


def _plan(request: PlanTripsRequest) -> dict:
    state: SessionState = initial_state()

    for index, weight_input in enumerate(request.weights):
        state = reduce(state, AddBag(weight_input=weight_input), service.calculate)
        if isinstance(state, BagsLoaded) and state.input_error is not None:
            logger.warning(
                "Rejected bag weight",
                extra={
                    "index": index,
                    "weight_input": weight_input,
                    "error_code": state.input_error.value,
                },
            )
            return api_response(
                400,
                error_response(
                    state.input_error.value,
                    state.input_error.message,
                    [{"index": index, "input": weight_input}],
                ),
            )

    logger.info("Calculating trips", extra={"bag_count": len(request.weights)})
    state = reduce(state, CalculateTrips(), service.calculate)

    if isinstance(state, SessionError):
        logger.error("Trip calculation failed", extra={"reason": state.message})
        return api_response(
            500, error_response("CALCULATION_FAILED", state.message)
        )

    logger.info(
        "Planned trips", extra={"total_trips": state.trips_result.total_trips}
    )
    return api_response(200, to_response(state.trips_result))
