from .exceptions import (
    BusinessRuleViolationException,
    DomainException,
    InvalidBagWeightException,
)

__all__ = [
    "DomainException",
    "BusinessRuleViolationException",
    "InvalidBagWeightException",
]
