from pydantic import BaseModel, Field, field_validator

from janitor.shared.utils import to_weight_input


class PlanTripsRequest(BaseModel):
    """運搬計画リクエストモデル"""

    weights: list[str] = Field(
        ...,
        description="ゴミ袋の重量入力（kg、小数点はカンマも可）",
        examples=[["1.5", "2,0", "1.01"]],
    )

    @field_validator("weights", mode="before")
    @classmethod
    def convert_weights_to_str(cls, v: object) -> object:
        if isinstance(v, list):
            return [to_weight_input(item) for item in v]
        return v
