from .api import Api
from .functions import Functions
from .layers import Layers

__all__ = ["Api", "Functions", "Layers"]
