"""Tunstall coding: variable-length sequences to fixed-width codes."""

import logging
from typing import Dict, List, Tuple

from models.compression_result import CompressionResult
from models.trace_steps import TunstallStep
from utils.constants import (
    BITS_PER_SYMBOL,
    ERR_CODE,
    TUNSTALL_BIT_WIDTH,
    TUNSTALL_MAX_DICT_SIZE,
)
from utils.metrics import compression_ratio, symbol_frequencies

logger = logging.getLogger(__name__)


def build_dictionary(text: str) -> List[Tuple[str, float]]:
    """Grow the sequence dictionary by expanding the most probable entry.
    
    Each expansion replaces one entry with ``len(alphabet)`` extensions and
    stops once the next one would exceed 16 entries. Returns
    ``(sequence, probability)`` pairs in code order.
    """
    freqs = symbol_frequencies(text)
    total = len(text)
    probs = {symbol: count / total for symbol, count in freqs.items()}
    alphabet = list(probs)
    
    entries = [(symbol, p) for symbol, p in probs.items()]
    if len(alphabet) < 2:
        # a lone symbol expands into a single entry; size never changes
        return entries
    
    while len(entries) + len(alphabet) - 1 <= TUNSTALL_MAX_DICT_SIZE:
        entries.sort(key=lambda entry: entry[1], reverse=True)
        best_seq, best_prob = entries.pop(0)
        for symbol in alphabet:
            entries.append((best_seq + symbol, best_prob * probs[symbol]))
    return entries


def assign_codes(entries: List[Tuple[str, float]]) -> Dict[str, str]:
    """Fixed-width binary index per entry, 4 bits unless the alphabet alone overflows."""
    width = max(TUNSTALL_BIT_WIDTH, (len(entries) - 1).bit_length())
    if width > TUNSTALL_BIT_WIDTH:
        logger.warning("Tunstall alphabet of %d symbols exceeds %d codes; using %d-bit codes",
                       len(entries), TUNSTALL_MAX_DICT_SIZE, width)
    return {seq: f"{index:0{width}b}" for index, (seq, _) in enumerate(entries)}


def encode_tunstall(text: str) -> CompressionResult:
    """Tokenize ``text`` by longest dictionary match and emit one code per token.
    
    A position no entry matches emits 'ERR' and advances one symbol.
    """
    if not text:
        return CompressionResult.empty()
    
    codes = assign_codes(build_dictionary(text))
    by_length = sorted(codes, key=len, reverse=True)
    
    steps = []
    i = 0
    while i < len(text):
        for seq in by_length:
            if text.startswith(seq, i):
                steps.append(TunstallStep(sequence=seq, code=codes[seq]))
                i += len(seq)
                break
        else:
            logger.info("Tunstall: no dictionary match at position %d", i)
            steps.append(TunstallStep(sequence=text[i], code=ERR_CODE))
            i += 1
    
    encoded = ''.join(step.code for step in steps)
    original_size = len(text) * BITS_PER_SYMBOL
    compressed_size = len(encoded)
    
    return CompressionResult(
        encoded=encoded,
        original_size=original_size,
        compressed_size=compressed_size,
        ratio=compression_ratio(original_size, compressed_size),
        steps=steps,
        dictionary=codes,
    )
