"""Tests for arithmetic coding."""

import pytest

from engines.arithmetic import encode_arithmetic, probability_table


def test_baba_intervals():
    """BABA narrows to [0.625, 0.6875) and tags the midpoint."""
    result = encode_arithmetic("BABA")
    assert result.dictionary['A'].start == 0.0
    assert result.dictionary['A'].end == 0.5
    assert result.dictionary['B'].end == 1.0
    last = result.steps[-1]
    assert (last.low, last.high) == (0.625, 0.6875)
    assert result.encoded == "0.6562500000"
    assert last.range_str == "[0.625000, 0.687500)"


def test_tag_inside_final_interval():
    """The tag lies within the terminal interval."""
    result = encode_arithmetic("BABA")
    last = result.steps[-1]
    assert last.low < last.high
    assert last.low <= float(result.encoded) < last.high


def test_intervals_partition_unit():
    """Intervals are contiguous, ordered by symbol and cover [0, 1)."""
    table = probability_table({'c': 3, 'a': 1, 'b': 2})
    assert list(table) == ['a', 'b', 'c']
    assert table['a'].end == table['b'].start
    assert table['b'].end == table['c'].start
    assert table['c'].end == pytest.approx(1.0)


def test_intervals_shrink_monotonically():
    """Each step stays within the previous interval."""
    steps = encode_arithmetic("HELLO WORLD").steps
    low, high = 0.0, 1.0
    for step in steps:
        assert step.low < step.high
        assert low - 1e-12 <= step.low
        assert step.high <= high + 1e-12
        low, high = step.low, step.high


def test_entropy_bound_size():
    """Compressed size is ceil(n * H), not the tag length."""
    result = encode_arithmetic("BABA")
    assert result.compressed_size == 4
    assert result.original_size == 32
    assert result.ratio == 87.5
    assert encode_arithmetic("AAAA").compressed_size == 0


def test_long_input_is_truncated():
    """Only 15 symbols are coded and truncation is reported."""
    result = encode_arithmetic("ABCDEFGHIJKLMNOPQRST")
    assert result.truncated
    assert result.encoded.endswith("...")
    assert len(result.steps) == 15
    assert result.original_size == 15 * 8
    assert 'T' not in result.dictionary


def test_short_input_not_truncated():
    """Inputs within the limit are coded whole."""
    result = encode_arithmetic("ABCDEFGHIJKLMNO")
    assert not result.truncated
    assert not result.encoded.endswith("...")


def test_empty_input():
    """Empty input returns the zero result."""
    result = encode_arithmetic("")
    assert result.encoded == ""
    assert not result.truncated
