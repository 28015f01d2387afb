from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class AddBag:
    """重量入力からゴミ袋を追加する"""

    weight_input: str


@dataclass(frozen=True)
class CalculateTrips:
    """現在のゴミ袋で運搬計画を作成する"""


@dataclass(frozen=True)
class ClearBags:
    """ゴミ袋をすべて破棄する"""


@dataclass(frozen=True)
class ClearError:
    """入力エラーを解除する"""


Intent = Union[AddBag, CalculateTrips, ClearBags, ClearError]
