"""Compression engines - pure computation, no UI dependencies."""

from .rle import encode_rle
from .huffman import encode_huffman, build_tree, generate_codes
from .lzw import encode_lzw
from .golomb import encode_golomb, parse_numbers, golomb_code
from .arithmetic import encode_arithmetic, probability_table
from .tunstall import encode_tunstall, build_dictionary, assign_codes
from .pipeline import compress, compare_all, ENCODERS

__all__ = [
    'encode_rle',
    'encode_huffman',
    'build_tree',
    'generate_codes',
    'encode_lzw',
    'encode_golomb',
    'parse_numbers',
    'golomb_code',
    'encode_arithmetic',
    'probability_table',
    'encode_tunstall',
    'build_dictionary',
    'assign_codes',
    'compress',
    'compare_all',
    'ENCODERS',
]
