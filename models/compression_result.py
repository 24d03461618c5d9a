"""Compression result with size accounting and trace."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from models.huffman_node import HuffmanNode


@dataclass
class CompressionResult:
    """Output shared by every encoder.
    
    Sizes are in bits. ``steps`` holds one trace record per processed unit
    (run, symbol, number or token) for inspection only.
    """
    
    encoded: str
    original_size: int
    compressed_size: int
    ratio: float
    steps: List[Any] = field(default_factory=list)
    
    # Huffman / Tunstall codes, Arithmetic probability intervals
    dictionary: Optional[Dict[str, Any]] = None
    tree: Optional[HuffmanNode] = None
    
    # Arithmetic only: input was cut to the safe length
    truncated: bool = False
    
    @classmethod
    def empty(cls) -> 'CompressionResult':
        """Zero-valued result for empty or degenerate input."""
        return cls(encoded='', original_size=0, compressed_size=0, ratio=0.0)
