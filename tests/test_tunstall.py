"""Tests for Tunstall coding."""

from engines.tunstall import assign_codes, build_dictionary, encode_tunstall


def test_dictionary_growth_stops_at_capacity():
    """Skewed input grows to exactly 16 entries with 4-bit codes."""
    result = encode_tunstall("AAABAAACAAADAAAA")
    assert len(result.dictionary) == 16
    assert all(len(code) == 4 for code in result.dictionary.values())
    assert result.dictionary['B'] == "0000"
    assert result.dictionary['AAAB'] == "1001"
    assert result.dictionary['AAAAD'] == "1111"
    assert 'A' not in result.dictionary


def test_expanded_entries_removed():
    """The expanded sequence is replaced by its extensions."""
    seqs = [seq for seq, _ in build_dictionary("AAABAAACAAADAAAA")]
    assert 'AA' not in seqs
    assert 'AAAA' not in seqs
    assert len(seqs) == len(set(seqs))


def test_longest_match_and_err_fallback():
    """Longest entries win; an uncovered tail falls back to ERR per symbol."""
    result = encode_tunstall("AAABAAACAAADAAAA")
    assert [s.sequence for s in result.steps] == ['AAAB', 'AAAC', 'AAAD', 'A', 'A', 'A', 'A']
    assert result.encoded == "100110101011" + "ERR" * 4
    assert result.compressed_size == len(result.encoded)
    assert ''.join(s.code for s in result.steps) == result.encoded


def test_probabilities_multiply():
    """Extension probability is parent probability times symbol probability."""
    entries = dict(build_dictionary("AAABAAACAAADAAAA"))
    p_a = 13 / 16
    assert entries['AAAB'] == p_a * p_a * p_a * 0.0625
    assert entries['B'] == 0.0625


def test_wide_alphabet_widens_codes():
    """More than 16 symbols skips growth and keeps codes fixed width."""
    text = "ABCDEFGHIJKLMNOPQ"
    result = encode_tunstall(text)
    assert len(result.dictionary) == 17
    assert all(len(code) == 5 for code in result.dictionary.values())
    assert result.compressed_size == 17 * 5


def test_single_symbol_alphabet():
    """A lone symbol cannot grow the dictionary."""
    result = encode_tunstall("AAAA")
    assert result.dictionary == {'A': "0000"}
    assert result.encoded == "0000" * 4


def test_assign_codes_in_insertion_order():
    """Codes are indexes in dictionary order."""
    assert assign_codes([('x', 0.5), ('y', 0.5)]) == {'x': "0000", 'y': "0001"}


def test_empty_input():
    """Empty input returns the zero result."""
    assert encode_tunstall("").dictionary is None
