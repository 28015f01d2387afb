from dataclasses import dataclass
from decimal import Decimal

import pytest

from janitor.trip.domain.entity import GarbageBag
from janitor.trip.domain.value_object import BagId, Weight


@pytest.fixture
def create_bag():
    """GarbageBag を生成する Factory fixture（Factories as fixtures パターン）"""
    counter = {"n": 0}

    def _factory(weight: Decimal | str, bag_id: str | None = None) -> GarbageBag:
        counter["n"] += 1
        return GarbageBag(
            id=BagId(value=bag_id or f"bag-{counter['n']}"),
            weight=Weight(Decimal(str(weight))),
        )

    return _factory


@pytest.fixture
def create_bags(create_bag):
    """重量のリストから GarbageBag のリストを生成する"""

    def _factory(*weights: str) -> list[GarbageBag]:
        return [create_bag(weight) for weight in weights]

    return _factory


@pytest.fixture
def lambda_context():
    """Lambda コンテキストのスタブ"""

    @dataclass
    class LambdaContext:
        function_name: str = "plan-trips"
        memory_limit_in_mb: int = 128
        invoked_function_arn: str = (
            "arn:aws:lambda:ap-northeast-1:123456789012:function:plan-trips"
        )
        aws_request_id: str = "52fdfc07-2182-154f-163f-5f0f9a621d72"

    return LambdaContext()
