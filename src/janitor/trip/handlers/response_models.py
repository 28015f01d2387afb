from __future__ import annotations

from pydantic import BaseModel

from janitor.trip.domain.result import PlanResult


class TripData(BaseModel):
    """1回分の運搬データ"""

    weights: list[str]
    total_weight: str


class PlanData(BaseModel):
    """運搬計画データのレスポンスモデル"""

    total_trips: int
    trip_groups: list[TripData]


class SuccessResponse(BaseModel):
    """成功レスポンスモデル"""

    status: str = "success"
    data: PlanData


class ErrorResponse(BaseModel):
    """エラーレスポンスモデル"""

    status: str = "error"
    error_code: str
    message: str
    details: list | None = None


def to_response(result: PlanResult) -> SuccessResponse:
    """PlanResult をレスポンスモデルに変換する"""
    return SuccessResponse(
        data=PlanData(
            total_trips=result.total_trips,
            trip_groups=[
                TripData(
                    weights=[str(weight) for weight in trip.weights],
                    total_weight=str(trip.total_weight.value),
                )
                for trip in result.trip_groups
            ],
        )
    )


def error_response(
    error_code: str, message: str, details: list | None = None
) -> ErrorResponse:
    """エラーレスポンスを生成"""
    return ErrorResponse(
        error_code=error_code,
        message=message,
        details=details,
    )
