"""Fractional order keys: short strings that always leave room in between."""

from .errors import (
    FracdexError,
    InvalidHeadError,
    InvalidKeyError,
    InvalidRangeError,
    KeyTooShortError,
    LengthMismatchError,
    RangeOverflowError,
    RangeUnderflowError,
)
from .keys import key_between, n_keys_between, validate_order_key

__version__ = "1.0.0"

__all__ = [
    "FracdexError",
    "InvalidHeadError",
    "InvalidKeyError",
    "InvalidRangeError",
    "KeyTooShortError",
    "LengthMismatchError",
    "RangeOverflowError",
    "RangeUnderflowError",
    "key_between",
    "n_keys_between",
    "validate_order_key",
]
