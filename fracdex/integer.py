from __future__ import annotations

from typing import Optional, Tuple

from .digits import BASE, MAX_DIGIT, MIN_DIGIT, b62decode, b62encode
from .errors import InvalidHeadError, KeyTooShortError, LengthMismatchError

# Head "A" followed by 26 zero digits: the smallest integer part there is.
SMALLEST_INTEGER = "A" + MIN_DIGIT * 26
ZERO = "a0"


# === Codec ===


def integer_length(head: str) -> int:
    """Return the length of the integer part that starts with ``head``.

    Heads ``a``..``z`` are the positive classes (lengths 2..27), heads
    ``Z``..``A`` the mirrored negative classes (lengths 2..27).
    """
    if "a" <= head <= "z":
        return ord(head) - ord("a") + 2
    if "A" <= head <= "Z":
        return ord("Z") - ord(head) + 2
    raise InvalidHeadError(head)


def split_key(key: str) -> Tuple[str, str]:
    """Split ``key`` into its integer and fractional parts."""
    if not key:
        raise KeyTooShortError(key)
    length = integer_length(key[0])
    if length > len(key):
        raise KeyTooShortError(key)
    return key[:length], key[length:]


def validate_integer(integer_part: str) -> None:
    if not integer_part:
        raise LengthMismatchError(integer_part)
    if len(integer_part) != integer_length(integer_part[0]):
        raise LengthMismatchError(integer_part)


# === Arithmetic ===


def increment_integer(integer_part: str) -> Optional[str]:
    """Return the integer part that follows ``integer_part``.

    ``None`` means ``integer_part`` is already the largest one (head ``z``
    with an all-``z`` magnitude).
    """
    validate_integer(integer_part)
    head, magnitude = integer_part[0], integer_part[1:]
    value = b62decode(magnitude) + 1
    if value < BASE ** len(magnitude):
        return head + b62encode(value, len(magnitude))

    # carried out of the magnitude: every digit wrapped to "0"
    if head == "Z":
        return ZERO
    if head == "z":
        return None
    new_head = chr(ord(head) + 1)
    if new_head > "a":
        return new_head + MIN_DIGIT * (len(magnitude) + 1)
    return new_head + MIN_DIGIT * (len(magnitude) - 1)


def decrement_integer(integer_part: str) -> Optional[str]:
    """Return the integer part that precedes ``integer_part``, or ``None``."""
    validate_integer(integer_part)
    head, magnitude = integer_part[0], integer_part[1:]
    value = b62decode(magnitude) - 1
    if value >= 0:
        return head + b62encode(value, len(magnitude))

    # borrowed out of the magnitude: every digit wrapped to "z"
    if head == "a":
        return "Z" + MAX_DIGIT
    if head == "A":
        return None
    new_head = chr(ord(head) - 1)
    if new_head < "Z":
        return new_head + MAX_DIGIT * (len(magnitude) + 1)
    return new_head + MAX_DIGIT * (len(magnitude) - 1)
