from typing import Any, Dict, Optional


class FracdexError(ValueError):
    """Base error for order key generation.

    ``code`` is the stable snake_case error kind reported by the HTTP API.
    """

    code = "fracdex_error"

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


# === Malformed keys ===


class InvalidKeyError(FracdexError):
    code = "invalid_key"

    def __init__(
        self,
        key: str,
        message: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message or f"invalid order key: {key}", details or {"key": key})
        self.key = key


class InvalidHeadError(InvalidKeyError):
    code = "invalid_head"

    def __init__(self, head: str) -> None:
        super().__init__(head, f"invalid order key head: {head}", {"head": head})
        self.head = head


class KeyTooShortError(InvalidKeyError):
    code = "key_too_short"


class LengthMismatchError(InvalidKeyError):
    code = "length_mismatch"

    # reports the integer part alone, under details["integer_part"]
    def __init__(self, integer_part: str) -> None:
        super().__init__(
            integer_part,
            f"invalid integer part of order key: {integer_part}",
            {"integer_part": integer_part},
        )
        self.integer_part = integer_part


# === Bounds ===


class InvalidRangeError(FracdexError):
    code = "invalid_range"

    def __init__(self, a: str, b: str) -> None:
        super().__init__(f"{a} >= {b}", {"before": a, "after": b})


class RangeUnderflowError(FracdexError):
    code = "range_underflow"

    def __init__(self, bound: str) -> None:
        super().__init__("range underflow", {"after": bound})


class RangeOverflowError(FracdexError):
    code = "range_overflow"

    def __init__(self, bound: str) -> None:
        super().__init__("range overflow", {"before": bound})
