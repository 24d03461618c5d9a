"""Run-length encoding."""

import logging

from models.compression_result import CompressionResult
from models.trace_steps import RunStep
from utils.constants import BITS_PER_SYMBOL, RLE_RUN_BITS
from utils.metrics import compression_ratio

logger = logging.getLogger(__name__)


def encode_rle(text: str) -> CompressionResult:
    """Emit ``count`` then ``symbol`` for every run of equal symbols.
    
    Each run is charged a flat 16 bits regardless of how many digits the
    count takes.
    """
    if not text:
        return CompressionResult.empty()
    
    steps = []
    count = 1
    for i, symbol in enumerate(text):
        if i < len(text) - 1 and text[i + 1] == symbol:
            count += 1
            continue
        steps.append(RunStep(symbol=symbol, count=count, code=f"{count}{symbol}"))
        count = 1
    
    encoded = ''.join(step.code for step in steps)
    original_size = len(text) * BITS_PER_SYMBOL
    compressed_size = len(steps) * RLE_RUN_BITS
    logger.debug("RLE: %d runs over %d symbols", len(steps), len(text))
    
    return CompressionResult(
        encoded=encoded,
        original_size=original_size,
        compressed_size=compressed_size,
        ratio=compression_ratio(original_size, compressed_size),
        steps=steps,
    )
