"""LZW dictionary coding over the byte alphabet."""

import logging

from models.compression_result import CompressionResult
from models.trace_steps import LZWStep
from utils.constants import (
    BITS_PER_SYMBOL,
    EOF_MARKER,
    LZW_ALPHABET_SIZE,
    LZW_CODE_WIDTH,
    LZW_MAX_DICT_SIZE,
)
from utils.metrics import compression_ratio

logger = logging.getLogger(__name__)


def to_byte_symbols(text: str) -> str:
    """Map text onto one character per UTF-8 byte (ASCII is unchanged)."""
    return text.encode('utf-8', errors='surrogatepass').decode('latin-1')


def encode_lzw(text: str) -> CompressionResult:
    """Encode ``text`` as a space-separated sequence of LZW codes.
    
    Every code is charged 12 bits. Once the dictionary fills the 12-bit
    address space (4096 entries) it is frozen: codes are still emitted but
    no further sequences are added.
    """
    if not text:
        return CompressionResult.empty()
    
    symbols = to_byte_symbols(text)
    dictionary = {chr(i): i for i in range(LZW_ALPHABET_SIZE)}
    next_code = LZW_ALPHABET_SIZE
    
    w = ''
    output = []
    steps = []
    frozen = False
    for c in symbols:
        wc = w + c
        if wc in dictionary:
            w = wc
            continue
        
        code = dictionary[w]
        output.append(code)
        if next_code < LZW_MAX_DICT_SIZE:
            dictionary[wc] = next_code
            steps.append(LZWStep(len(steps) + 1, w, c, code, wc, next_code))
            next_code += 1
        else:
            if not frozen:
                logger.info("LZW dictionary full at %d entries; growth stopped", LZW_MAX_DICT_SIZE)
                frozen = True
            steps.append(LZWStep(len(steps) + 1, w, c, code))
        w = c
    
    if w:
        output.append(dictionary[w])
        steps.append(LZWStep(len(steps) + 1, w, EOF_MARKER, dictionary[w]))
    
    original_size = len(symbols) * BITS_PER_SYMBOL
    compressed_size = len(output) * LZW_CODE_WIDTH
    logger.debug("LZW: %d codes, dictionary size %d", len(output), len(dictionary))
    
    return CompressionResult(
        encoded=' '.join(str(code) for code in output),
        original_size=original_size,
        compressed_size=compressed_size,
        ratio=compression_ratio(original_size, compressed_size),
        steps=steps,
    )
