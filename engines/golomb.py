"""Golomb coding of non-negative integers."""

import logging
import math
import re
from typing import List

from models.compression_result import CompressionResult
from models.trace_steps import GolombStep
from utils.constants import GOLOMB_DEFAULT_M, GOLOMB_INT_BITS
from utils.metrics import compression_ratio

logger = logging.getLogger(__name__)

_SEPARATORS = re.compile(r'[\s,]+')
_INT_PREFIX = re.compile(r'([+-]?)(?:0[xX]([0-9a-fA-F]*)|([0-9]+))')


def parse_numbers(text: str) -> List[int]:
    """Split on whitespace/commas and keep the non-negative integers.
    
    Each token is read up to its first non-digit ("12abc" -> 12, "3.7" -> 3);
    a "0x" prefix reads hexadecimal ("0x10" -> 16). Only ASCII digits count.
    Tokens with no leading digits and negative values are dropped.
    """
    numbers = []
    for token in _SEPARATORS.split(text):
        match = _INT_PREFIX.match(token)
        if match is None:
            continue
        sign, hex_digits, digits = match.groups()
        if hex_digits is not None:
            if not hex_digits:
                continue
            n = int(hex_digits, 16)
        else:
            n = int(digits)
        if sign == '-':
            n = -n
        if n >= 0:
            numbers.append(n)
    return numbers


def golomb_code(n: int, m: int) -> GolombStep:
    """Unary quotient followed by the truncated-binary remainder."""
    b = (m - 1).bit_length()  # ceil(log2(m))
    cutoff = (1 << b) - m
    q, r = divmod(n, m)
    
    unary = '1' * q + '0'
    if m == 1:
        binary = ''
    elif r < cutoff:
        binary = f"{r:0{b - 1}b}"
    else:
        binary = f"{r + cutoff:0{b}b}"
    
    return GolombStep(
        number=n,
        quotient=q,
        remainder=r,
        unary_code=unary,
        binary_code=binary,
        code=unary + binary,
    )


def encode_golomb(text: str, m=GOLOMB_DEFAULT_M) -> CompressionResult:
    """Encode the integers found in ``text`` with divisor ``m``.
    
    ``m`` is floored and clamped to at least 1. Each parsed number is charged
    32 bits in the original size.
    """
    numbers = parse_numbers(text)
    if not numbers:
        return CompressionResult.empty()
    
    m = max(1, int(math.floor(m)))
    steps = [golomb_code(n, m) for n in numbers]
    
    encoded = ''.join(step.code for step in steps)
    original_size = len(numbers) * GOLOMB_INT_BITS
    compressed_size = len(encoded)
    logger.debug("Golomb: %d numbers, M=%d, %d bits", len(numbers), m, compressed_size)
    
    return CompressionResult(
        encoded=encoded,
        original_size=original_size,
        compressed_size=compressed_size,
        ratio=compression_ratio(original_size, compressed_size),
        steps=steps,
    )
