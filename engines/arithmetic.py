"""Arithmetic coding by floating-point interval narrowing."""

import logging
import math
from typing import Dict

from models.compression_result import CompressionResult
from models.trace_steps import IntervalStep, ProbabilityInterval
from utils.constants import (
    ARITHMETIC_MAX_SYMBOLS,
    ARITHMETIC_TAG_DIGITS,
    BITS_PER_SYMBOL,
    TRUNCATION_MARKER,
)
from utils.metrics import compression_ratio, shannon_entropy, symbol_frequencies

logger = logging.getLogger(__name__)


def probability_table(freqs: Dict[str, int]) -> Dict[str, ProbabilityInterval]:
    """Contiguous [start, end) intervals over symbols in lexicographic order."""
    total = sum(freqs.values())
    table = {}
    start = 0.0
    for symbol in sorted(freqs):
        p = freqs[symbol] / total
        table[symbol] = ProbabilityInterval(start=start, end=start + p, probability=p)
        start += p
    return table


def encode_arithmetic(text: str) -> CompressionResult:
    """Narrow [0, 1) once per symbol and emit the midpoint of the final interval.
    
    Only the first 15 symbols are coded; longer input is truncated, flagged
    on the result and marked with a trailing '...' on the tag. The
    compressed size is the entropy bound ``ceil(n * H)`` rather than the
    length of the decimal tag.
    """
    if not text:
        return CompressionResult.empty()
    
    truncated = len(text) > ARITHMETIC_MAX_SYMBOLS
    if truncated:
        logger.info("Arithmetic input truncated from %d to %d symbols",
                    len(text), ARITHMETIC_MAX_SYMBOLS)
    safe_text = text[:ARITHMETIC_MAX_SYMBOLS]
    
    freqs = symbol_frequencies(safe_text)
    table = probability_table(freqs)
    
    low, high = 0.0, 1.0
    steps = []
    for symbol in safe_text:
        width = high - low
        interval = table[symbol]
        low, high = low + width * interval.start, low + width * interval.end
        steps.append(IntervalStep(symbol=symbol, low=low, high=high))
    
    tag = (low + high) / 2
    encoded = f"{tag:.{ARITHMETIC_TAG_DIGITS}f}"
    if truncated:
        encoded += TRUNCATION_MARKER
    
    original_size = len(safe_text) * BITS_PER_SYMBOL
    compressed_size = math.ceil(len(safe_text) * shannon_entropy(list(freqs.values())))
    
    return CompressionResult(
        encoded=encoded,
        original_size=original_size,
        compressed_size=compressed_size,
        ratio=compression_ratio(original_size, compressed_size),
        steps=steps,
        dictionary=table,
        truncated=truncated,
    )
