from enum import Enum


class InputError(str, Enum):
    """重量入力エラーの種別

    判定順は INVALID_FORMAT -> WEIGHT_TOO_LOW -> WEIGHT_TOO_HIGH。
    """

    INVALID_FORMAT = "INVALID_FORMAT"
    WEIGHT_TOO_LOW = "WEIGHT_TOO_LOW"
    WEIGHT_TOO_HIGH = "WEIGHT_TOO_HIGH"

    @property
    def message(self) -> str:
        return _MESSAGES[self]


_MESSAGES = {
    InputError.INVALID_FORMAT: "Invalid number format",
    InputError.WEIGHT_TOO_LOW: "Weight must be at least 1.01 kg",
    InputError.WEIGHT_TOO_HIGH: "Weight must not exceed 3.0 kg",
}
