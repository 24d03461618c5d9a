"""Compression parameters."""

from dataclasses import dataclass
from enum import Enum
from typing import Union


class AlgorithmType(str, Enum):
    """Available encoders."""

    HUFFMAN = 'HUFFMAN'
    RLE = 'RLE'
    GOLOMB = 'GOLOMB'
    TUNSTALL = 'TUNSTALL'
    ARITHMETIC = 'ARITHMETIC'
    LZW = 'LZW'


@dataclass
class CompressionParams:
    """Encoder selection and algorithm-specific parameters."""
    
    algorithm: Union[AlgorithmType, str] = AlgorithmType.HUFFMAN
    golomb_m: int = 4
    
    def __post_init__(self):
        if not isinstance(self.algorithm, AlgorithmType):
            name = str(self.algorithm).upper()
            if name not in AlgorithmType.__members__:
                choices = ', '.join(AlgorithmType.__members__)
                raise ValueError(f"Algorithm must be one of {choices}, got {self.algorithm!r}")
            self.algorithm = AlgorithmType[name]
