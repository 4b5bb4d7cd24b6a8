from __future__ import annotations

import logging
from typing import List, Optional

from .digits import MIN_DIGIT, is_base62
from .errors import InvalidKeyError, InvalidRangeError, RangeOverflowError, RangeUnderflowError
from .integer import (
    SMALLEST_INTEGER,
    ZERO,
    decrement_integer,
    increment_integer,
    split_key,
)
from .midpoint import midpoint

logger = logging.getLogger(__name__)


def validate_order_key(key: str) -> None:
    """Raise ``InvalidKeyError`` (or a subclass) unless ``key`` is a usable order key."""
    if key == SMALLEST_INTEGER:
        raise InvalidKeyError(key)
    # split_key rejects bad heads and keys shorter than their integer part
    _, fractional = split_key(key)
    if not is_base62(key) or fractional.endswith(MIN_DIGIT):
        raise InvalidKeyError(key)


def key_between(a: Optional[str] = None, b: Optional[str] = None) -> str:
    """Return an order key that sorts strictly between ``a`` and ``b``.

    ``None`` (or ``""``) on either side means unbounded. Appending or
    prepending only ever grows the integer part, so keys produced at the ends
    of a sequence stay short.
    """
    a = a or ""
    b = b or ""
    if a:
        validate_order_key(a)
    if b:
        validate_order_key(b)
    if a and b and a >= b:
        raise InvalidRangeError(a, b)

    if not a:
        if not b:
            return ZERO
        ib, fb = split_key(b)
        if ib == SMALLEST_INTEGER:
            return ib + midpoint("", fb)
        if ib < b:
            return ib
        res = decrement_integer(ib)
        if res is None:
            raise RangeUnderflowError(b)
        if res == SMALLEST_INTEGER:
            # the sentinel is not a usable key on its own
            return res + midpoint("", "")
        return res

    if not b:
        ia, fa = split_key(a)
        res = increment_integer(ia)
        if res is None:
            logger.debug("integer part %s exhausted, extending fraction of %s", ia, a)
            return ia + midpoint(fa, "")
        return res

    ia, fa = split_key(a)
    ib, fb = split_key(b)
    if ia == ib:
        return ia + midpoint(fa, fb)
    res = increment_integer(ia)
    if res is None:
        raise RangeOverflowError(a)
    if res < b:
        return res
    return ia + midpoint(fa, "")


def n_keys_between(a: Optional[str] = None, b: Optional[str] = None, n: int = 1) -> List[str]:
    """Return ``n`` ascending, distinct order keys strictly between ``a`` and ``b``."""
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    a = a or ""
    b = b or ""
    if n == 0:
        return []
    if n == 1:
        return [key_between(a, b)]

    if not b:
        c = key_between(a, b)
        result = [c]
        for _ in range(n - 1):
            c = key_between(c, b)
            result.append(c)
        return result

    if not a:
        c = key_between(a, b)
        result = [c]
        for _ in range(n - 1):
            c = key_between(a, c)
            result.append(c)
        result.reverse()
        return result

    mid = n // 2
    c = key_between(a, b)
    return [*n_keys_between(a, c, mid), c, *n_keys_between(c, b, n - mid - 1)]
