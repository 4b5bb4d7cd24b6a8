from .digits import A2I, BASE, I2A, MAX_DIGIT, MIN_DIGIT


def midpoint(a: str, b: str) -> str:
    """Return a digit string strictly between ``a`` and ``b``.

    ``a == ""`` stands for the bottom of the range and ``b == ""`` for the
    top. When ``b`` is given, ``a < b`` must hold. Neither input may end in
    ``"0"``, and neither will the result.
    """
    if b:
        # strip the common prefix, reading a as padded with "0" digits
        n = 0
        while n < len(b) and (a[n] if n < len(a) else MIN_DIGIT) == b[n]:
            n += 1
        if n > 0:
            return b[:n] + midpoint(a[n:], b[n:])

    # first digits (or lack of a digit) differ
    digit_a = A2I[a[0]] if a else 0
    digit_b = A2I[b[0]] if b else BASE
    if digit_b - digit_a > 1:
        return I2A[(digit_a + digit_b + 1) // 2]

    # first digits are consecutive
    if len(b) > 1:
        return b[0]

    # b is empty or a single digit: keep a's first digit and extend past the
    # rest of a, e.g. midpoint("49", "5") -> "4" + midpoint("9", "") -> "4a".
    # A leading run of max digits in the rest can only be copied over.
    rest = a[1:]
    run = len(rest) - len(rest.lstrip(MAX_DIGIT))
    return I2A[digit_a] + rest[:run] + midpoint(rest[run:], "")
