from .input_error import InputError

__all__ = ["InputError"]
