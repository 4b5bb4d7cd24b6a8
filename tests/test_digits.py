import pytest

from fracdex.digits import ALPHABET, BASE, b62decode, b62encode, is_base62


def test_alphabet_is_sorted():
    assert BASE == 62
    assert "".join(sorted(ALPHABET)) == ALPHABET


def test_b62encode_pads_to_width():
    assert b62encode(0, 1) == "0"
    assert b62encode(61, 1) == "z"
    assert b62encode(62, 2) == "10"
    assert b62encode(5, 3) == "005"
    assert b62encode(0, 0) == ""


def test_b62encode_rejects_out_of_range():
    with pytest.raises(ValueError, match="non-negative"):
        b62encode(-1, 2)
    with pytest.raises(ValueError, match="does not fit"):
        b62encode(62, 1)


def test_b62decode():
    assert b62decode("") == 0
    assert b62decode("z") == 61
    assert b62decode("10") == 62
    assert b62decode(b62encode(123456, 4)) == 123456


def test_is_base62():
    assert is_base62("a0Vz")
    assert not is_base62("a0-")
    assert not is_base62("a0 ")
