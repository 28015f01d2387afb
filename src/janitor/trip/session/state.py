from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from janitor.trip.domain.entity import GarbageBag
from janitor.trip.domain.enum import InputError
from janitor.trip.domain.result import PlanResult


@dataclass(frozen=True)
class BagsLoaded:
    """作業中の状態（セッションの初期状態）"""

    bags: tuple[GarbageBag, ...] = ()
    trips_result: Optional[PlanResult] = None
    input_error: Optional[InputError] = None


@dataclass(frozen=True)
class SessionError:
    """計算に失敗した終端状態"""

    message: str


SessionState = Union[BagsLoaded, SessionError]
