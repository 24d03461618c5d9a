"""Data models for compression parameters, results and traces."""

from .compression_params import AlgorithmType, CompressionParams
from .compression_result import CompressionResult
from .huffman_node import HuffmanNode
from .trace_steps import (
    RunStep,
    HuffmanCodeStep,
    LZWStep,
    GolombStep,
    IntervalStep,
    ProbabilityInterval,
    TunstallStep,
)

__all__ = [
    'AlgorithmType',
    'CompressionParams',
    'CompressionResult',
    'HuffmanNode',
    'RunStep',
    'HuffmanCodeStep',
    'LZWStep',
    'GolombStep',
    'IntervalStep',
    'ProbabilityInterval',
    'TunstallStep',
]
