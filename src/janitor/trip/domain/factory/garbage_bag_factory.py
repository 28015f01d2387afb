from __future__ import annotations

import re
from decimal import Decimal, InvalidOperation

from janitor.trip.domain.entity import GarbageBag
from janitor.trip.domain.enum import InputError
from janitor.trip.domain.exception import InvalidBagWeightException
from janitor.trip.domain.value_object import BagId, Weight

# 下限は含まない（1.00 は不可）、上限は含む（3.00 は可）
MIN_BAG_WEIGHT = Decimal("1.0")
MAX_BAG_WEIGHT = Decimal("3.0")

_DECIMAL_PATTERN = re.compile(
    r"(?P<mantissa>[+-]?(\d+(\.\d*)?|\.\d+))([eE](?P<exponent>[+-]?\d+))?"
)


class GarbageBagFactory:
    """ゴミ袋エンティティのファクトリ

    - BagId の採番
    - 入力文字列から Weight への変換と範囲チェック
    """

    def create(self, weight: Weight | Decimal | int | float | str) -> GarbageBag:
        """検証済みの重量からゴミ袋を生成する"""
        if not isinstance(weight, Weight):
            weight = Weight.kg(weight)
        return GarbageBag(id=BagId.generate(), weight=weight)

    def create_from_input(self, raw_input: str) -> GarbageBag:
        """入力文字列を検証してゴミ袋を生成する

        Args:
            raw_input: 利用者が入力した重量（小数点はカンマも可）

        Returns:
            GarbageBag: 生成されたゴミ袋

        Raises:
            InvalidBagWeightException: 数値でない、または範囲外の場合
        """
        value = self._parse(raw_input)
        if value is None:
            raise InvalidBagWeightException(InputError.INVALID_FORMAT, raw_input)
        if value <= MIN_BAG_WEIGHT:
            raise InvalidBagWeightException(InputError.WEIGHT_TOO_LOW, raw_input)
        if value > MAX_BAG_WEIGHT:
            raise InvalidBagWeightException(InputError.WEIGHT_TOO_HIGH, raw_input)
        return self.create(Weight(value))

    @staticmethod
    def _parse(raw_input: str) -> Decimal | None:
        normalized = raw_input.strip().replace(",", ".")
        match = _DECIMAL_PATTERN.fullmatch(normalized)
        if match is None:
            return None
        try:
            return Decimal(normalized)
        except InvalidOperation:
            return _saturate(Decimal(match["mantissa"]), match["exponent"] or "0")


def _saturate(mantissa: Decimal, exponent: str) -> Decimal:
    """指数が Decimal の表現範囲を超える値を 0 または ±Infinity に丸める

    範囲チェックでは 0 は下限未満、+Infinity は上限超過として扱われる。
    """
    if mantissa.is_zero() or exponent.startswith("-"):
        return Decimal(0)
    return Decimal("Infinity").copy_sign(mantissa)
