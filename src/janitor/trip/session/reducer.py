"""セッションの状態遷移

reduce は (状態, インテント) から次の状態を返す純粋関数。
状態は常に置き換えられ、元の状態は変更されない。
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from dataclasses import replace
from typing import Optional

from janitor.trip.domain.entity import GarbageBag
from janitor.trip.domain.exception import InvalidBagWeightException
from janitor.trip.domain.factory import GarbageBagFactory
from janitor.trip.domain.result import PlanResult
from janitor.trip.domain.service import plan
from janitor.trip.session.intent import (
    AddBag,
    CalculateTrips,
    ClearBags,
    ClearError,
    Intent,
)
from janitor.trip.session.state import BagsLoaded, SessionError, SessionState

Calculator = Callable[[Sequence[GarbageBag]], PlanResult]

_factory = GarbageBagFactory()


def initial_state() -> SessionState:
    return BagsLoaded()


def reduce(
    state: SessionState,
    intent: Intent,
    calculate: Calculator = plan,
) -> SessionState:
    """インテントを適用した次の状態を返す"""
    if isinstance(intent, AddBag):
        return _add_bag(state, intent.weight_input)
    if isinstance(intent, CalculateTrips):
        return _calculate_trips(state, calculate)
    if isinstance(intent, ClearBags):
        return BagsLoaded()
    if isinstance(intent, ClearError):
        return _clear_error(state)
    raise TypeError(f"Unknown intent: {intent!r}")


def replay(
    intents: Iterable[Intent],
    state: Optional[SessionState] = None,
    calculate: Calculator = plan,
) -> SessionState:
    """インテントを順に適用した最終状態を返す"""
    current = initial_state() if state is None else state
    for intent in intents:
        current = reduce(current, intent, calculate)
    return current


def _add_bag(state: SessionState, weight_input: str) -> SessionState:
    try:
        bag = _factory.create_from_input(weight_input)
    except InvalidBagWeightException as e:
        # 既存のゴミ袋は保持し、エラーだけを設定する
        if isinstance(state, BagsLoaded):
            return replace(state, input_error=e.error)
        return BagsLoaded(input_error=e.error)

    if isinstance(state, BagsLoaded):
        return replace(
            state,
            bags=state.bags + (bag,),
            input_error=None,
            trips_result=None,
        )
    return BagsLoaded(bags=(bag,))


def _calculate_trips(state: SessionState, calculate: Calculator) -> SessionState:
    if not isinstance(state, BagsLoaded):
        return state
    try:
        trips_result = calculate(state.bags)
    except Exception as e:
        return SessionError(message=f"Failed to calculate trips: {e}")
    return replace(state, trips_result=trips_result)


def _clear_error(state: SessionState) -> SessionState:
    if isinstance(state, BagsLoaded):
        return replace(state, input_error=None)
    return state
