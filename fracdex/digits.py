ALPHABET = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"
A2I = {ch: i for i, ch in enumerate(ALPHABET)}
I2A = {i: ch for i, ch in enumerate(ALPHABET)}
BASE = len(ALPHABET)
MIN_DIGIT = ALPHABET[0]
MAX_DIGIT = ALPHABET[-1]


def is_base62(text: str) -> bool:
    return all(ch in A2I for ch in text)


def b62decode(digits: str) -> int:
    """Decode a big-endian base62 digit string into an integer."""
    value = 0
    for ch in digits:
        value = value * BASE + A2I[ch]
    return value


def b62encode(value: int, width: int) -> str:
    """Encode ``value`` as exactly ``width`` base62 digits, zero padded."""
    if value < 0:
        raise ValueError(f"value must be non-negative, got {value}")
    if value >= BASE**width:
        raise ValueError(f"{value} does not fit into {width} base62 digits")
    out = []
    for _ in range(width):
        value, rem = divmod(value, BASE)
        out.append(I2A[rem])
    return "".join(reversed(out))
