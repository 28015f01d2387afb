from decimal import Decimal


def to_decimal(v: object) -> Decimal:
    """任意の値を Decimal に変換する

    すでに Decimal の場合はそのまま返し、それ以外は str 経由で変換する。
    float も str 経由にすることで 1.01 が Decimal("1.01") になる。
    """
    if isinstance(v, Decimal):
        return v
    return Decimal(str(v))


def to_weight_input(v: object) -> object:
    """重量入力を文字列に揃える

    Pydantic の field_validator (mode="before") から呼び出すことを想定。
    数値は str に変換し、それ以外はそのまま返して型検証に任せる。
    bool は数値として扱わない。
    """
    if isinstance(v, (int, float, Decimal)) and not isinstance(v, bool):
        return str(v)
    return v
