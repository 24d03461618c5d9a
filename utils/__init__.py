"""Shared utilities."""

from .constants import (
    BITS_PER_SYMBOL,
    RLE_RUN_BITS,
    LZW_CODE_WIDTH,
    LZW_MAX_DICT_SIZE,
    GOLOMB_INT_BITS,
    GOLOMB_DEFAULT_M,
    ARITHMETIC_MAX_SYMBOLS,
    TUNSTALL_BIT_WIDTH,
    ERR_CODE,
)
from .metrics import compression_ratio, symbol_frequencies, shannon_entropy, Timer
from .sample_inputs import SCENARIOS, ALGORITHM_DETAILS, load_scenario
from .text_io import load_text, format_report, save_report

__all__ = [
    'BITS_PER_SYMBOL',
    'RLE_RUN_BITS',
    'LZW_CODE_WIDTH',
    'LZW_MAX_DICT_SIZE',
    'GOLOMB_INT_BITS',
    'GOLOMB_DEFAULT_M',
    'ARITHMETIC_MAX_SYMBOLS',
    'TUNSTALL_BIT_WIDTH',
    'ERR_CODE',
    'compression_ratio',
    'symbol_frequencies',
    'shannon_entropy',
    'Timer',
    'SCENARIOS',
    'ALGORITHM_DETAILS',
    'load_scenario',
    'load_text',
    'format_report',
    'save_report',
]
