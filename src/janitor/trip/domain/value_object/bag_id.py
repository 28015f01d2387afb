from __future__ import annotations

import uuid
from dataclasses import dataclass


@dataclass(frozen=True)
class BagId:
    """ゴミ袋ID（Value Object）

    一覧表示での識別にのみ使用し、運搬計画のアルゴリズムでは参照しない。
    """

    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise ValueError("BagId cannot be empty")

    def __str__(self) -> str:
        return self.value

    @classmethod
    def generate(cls) -> BagId:
        """新しい一意な BagId を生成"""
        return cls(value=str(uuid.uuid4()))
