from .http_response import api_response
from .logger import get_logger
from .validators import to_decimal, to_weight_input

__all__ = ["api_response", "get_logger", "to_decimal", "to_weight_input"]
