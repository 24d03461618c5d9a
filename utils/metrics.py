"""Metrics: compression ratio, entropy, symbol statistics, timing."""

import time
from collections import Counter
from typing import Dict, Sequence, Union

import numpy as np
from scipy.stats import entropy


def compression_ratio(original_bits: int, compressed_bits: int) -> float:
    """Percentage size reduction; 0.0 when there is nothing to compress."""
    if original_bits == 0:
        return 0.0
    return (1.0 - compressed_bits / original_bits) * 100.0


def symbol_frequencies(text: str) -> Dict[str, int]:
    """Symbol counts in order of first occurrence."""
    return dict(Counter(text))


def shannon_entropy(counts: Union[Sequence[int], np.ndarray]) -> float:
    """Shannon entropy in bits per symbol of a count distribution."""
    counts = np.asarray(counts, dtype=np.float64)
    if counts.size == 0 or counts.sum() == 0:
        return 0.0
    return float(entropy(counts, base=2))


class Timer:
    """Simple timer for encoder runtime."""
    
    def __init__(self):
        self.encode_time_ms = 0.0
    
    def measure_encode(self, func, *args, **kwargs):
        start = time.perf_counter()
        result = func(*args, **kwargs)
        self.encode_time_ms = (time.perf_counter() - start) * 1000.0
        return result
