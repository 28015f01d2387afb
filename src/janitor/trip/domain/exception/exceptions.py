from janitor.trip.domain.enum.input_error import InputError


class DomainException(Exception):
    """運搬計画ドメインの基底例外"""


class BusinessRuleViolationException(DomainException):
    """ゴミ袋や運搬計画のルールに違反した場合"""


class InvalidBagWeightException(BusinessRuleViolationException):
    """ゴミ袋の重量入力を受け付けられない場合

    Attributes:
        error: 入力エラーの分類（INVALID_FORMAT / WEIGHT_TOO_LOW / WEIGHT_TOO_HIGH）
        raw_input: 利用者が入力した文字列そのもの
    """

    def __init__(self, error: InputError, raw_input: str) -> None:
        super().__init__(error.message)
        self.error = error
        self.raw_input = raw_input
