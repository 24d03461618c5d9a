"""Demonstration inputs and descriptions for each encoder."""

from typing import Dict, Tuple

from models.compression_params import AlgorithmType, CompressionParams


SCENARIOS: Dict[AlgorithmType, str] = {
    AlgorithmType.HUFFMAN: "kese sene keke ekle",
    AlgorithmType.RLE: "AAAAAAABBBCCDDDDDDEEE",
    AlgorithmType.GOLOMB: "42, 10, 5, 0, 12, 55",
    AlgorithmType.LZW: "taka tuka taka tuka taka tuka taka tuka taka tuka",
    AlgorithmType.ARITHMETIC: "BABA",
    AlgorithmType.TUNSTALL: "AAABAAACAAADAAAA",
}

# Golomb demo is tuned for a divisor of 5
SCENARIO_GOLOMB_M = 5


ALGORITHM_DETAILS: Dict[AlgorithmType, Dict[str, str]] = {
    AlgorithmType.HUFFMAN: {
        'name': "Huffman Coding",
        'description': "Assigns variable-length codes by symbol frequency.",
        'how_it_works': (
            "Counts symbol frequencies, then repeatedly merges the two least "
            "frequent nodes into a binary tree. Left branches read '0', right "
            "branches '1'. Frequent symbols sit near the root and get short codes."
        ),
        'best_case': "Skewed symbol distributions, e.g. natural language text.",
        'complexity': "O(n log n)",
    },
    AlgorithmType.RLE: {
        'name': "Run-Length Encoding (RLE)",
        'description': "Collapses consecutive repeated symbols.",
        'how_it_works': (
            "Stores each run of identical symbols as a count followed by the "
            "symbol, e.g. 'AAAAA' becomes '5A'."
        ),
        'best_case': "Long runs, e.g. simple bitmaps or fax scans.",
        'complexity': "O(n)",
    },
    AlgorithmType.GOLOMB: {
        'name': "Golomb Coding",
        'description': "Entropy code for geometrically distributed non-negative integers.",
        'how_it_works': (
            "Divides each number by a tunable M. The quotient is written in "
            "unary, the remainder in truncated binary. Efficient when small "
            "numbers are frequent and large ones rare."
        ),
        'best_case': "Motion vectors in video, residuals in audio coding.",
        'complexity': "O(n)",
    },
    AlgorithmType.LZW: {
        'name': "Lempel-Ziv-Welch (LZW)",
        'description': "Adaptive dictionary coder (GIF, TIFF).",
        'how_it_works': (
            "Starts with every single byte in the dictionary. While reading, "
            "each unseen sequence is added under a new code, so repeated "
            "sequences are emitted as a single code."
        ),
        'best_case': "Long inputs with repeated words and patterns.",
        'complexity': "O(n)",
    },
    AlgorithmType.ARITHMETIC: {
        'name': "Arithmetic Coding",
        'description': "Encodes the whole message as one number in [0, 1).",
        'how_it_works': (
            "Each symbol owns a probability interval. Reading a symbol narrows "
            "the current interval to that symbol's share; any number inside "
            "the final interval represents the message."
        ),
        'best_case': "Symbols carrying less than one bit of information, where Huffman falls short.",
        'complexity': "O(n)",
    },
    AlgorithmType.TUNSTALL: {
        'name': "Tunstall Coding",
        'description': "Maps variable-length input sequences to fixed-length codes.",
        'how_it_works': (
            "The dual of Huffman: instead of variable codes for fixed symbols, "
            "it grows a dictionary of likely symbol sequences and gives each "
            "one a fixed-width code."
        ),
        'best_case': "Heavily skewed probability distributions.",
        'complexity': "O(n)",
    },
}


def load_scenario(algorithm) -> Tuple[str, CompressionParams]:
    """Demo input and matching parameters for an algorithm."""
    params = CompressionParams(algorithm=algorithm)
    if params.algorithm == AlgorithmType.GOLOMB:
        params.golomb_m = SCENARIO_GOLOMB_M
    return SCENARIOS[params.algorithm], params
