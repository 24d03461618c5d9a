"""Tests for Golomb coding."""

import pytest

from engines.golomb import encode_golomb, golomb_code, parse_numbers


def test_ten_with_m4():
    """10 = 2*4 + 2, remainder at the cutoff takes b bits."""
    step = golomb_code(10, 4)
    assert (step.quotient, step.remainder) == (2, 2)
    assert step.unary_code == "110"
    assert step.binary_code == "10"
    assert step.code == "11010"


def test_truncated_binary_for_non_power_of_two():
    """M=3: remainder below cutoff uses b-1 bits, others are offset."""
    assert golomb_code(0, 3).code == "00"
    assert golomb_code(1, 3).code == "010"
    assert golomb_code(2, 3).code == "011"
    assert golomb_code(3, 3).code == "100"


def test_m5_cutoff():
    """M=5: b=3, cutoff=3."""
    assert golomb_code(42, 5).code == "111111110" + "10"
    assert golomb_code(4, 5).code == "0" + "111"


def test_m1_is_unary():
    """M=1 has no remainder bits."""
    step = golomb_code(3, 1)
    assert step.code == "1110"
    assert step.binary_code == ""


@pytest.mark.parametrize("n, m", [(0, 1), (7, 3), (42, 5), (100, 8), (13, 6)])
def test_split_invariant(n, m):
    """number = quotient * M + remainder with 0 <= remainder < M."""
    step = golomb_code(n, m)
    assert step.number == step.quotient * m + step.remainder
    assert 0 <= step.remainder < m


def test_parse_numbers_drops_bad_tokens():
    """Negative and non-numeric tokens are skipped; integer prefixes kept."""
    assert parse_numbers("4, -3, abc, 7x 3.9,,  12") == [4, 7, 3, 12]


def test_encode_sizes_and_steps():
    """32 bits per number; steps concatenate to the payload."""
    result = encode_golomb("42, 10, 5, 0, 12, 55", 5)
    assert result.original_size == 6 * 32
    assert result.compressed_size == len(result.encoded)
    assert ''.join(s.code for s in result.steps) == result.encoded
    assert [s.number for s in result.steps] == [42, 10, 5, 0, 12, 55]


def test_m_is_floored_and_clamped():
    """Fractional M is truncated; M below 1 becomes 1."""
    assert encode_golomb("10", 4.7) == encode_golomb("10", 4)
    assert encode_golomb("3", 0).encoded == "1110"
    assert encode_golomb("3", -2).encoded == "1110"


def test_no_valid_numbers():
    """Nothing parseable returns the zero result."""
    result = encode_golomb("abc, -1", 4)
    assert result.encoded == ""
    assert result.original_size == 0
    assert result.ratio == 0


def test_parse_numbers_hex_prefix():
    """A 0x prefix reads hexadecimal; a bare 0x is dropped."""
    assert parse_numbers("0x10 0XfF 0x 0xg -0x3") == [16, 255]


def test_parse_numbers_ascii_digits_only():
    """Non-ASCII digit characters are not numbers."""
    assert parse_numbers("٣ 7") == [7]
