"""Huffman tree node."""

from dataclasses import dataclass
from typing import Iterator, Optional


@dataclass
class HuffmanNode:
    """Leaf (one symbol) or internal node (two children, summed frequency)."""
    
    freq: int
    symbol: Optional[str] = None
    left: Optional['HuffmanNode'] = None
    right: Optional['HuffmanNode'] = None
    node_id: str = ''
    
    @property
    def is_leaf(self) -> bool:
        return self.symbol is not None
    
    def leaves(self) -> Iterator['HuffmanNode']:
        """Yield leaves left to right."""
        stack = [self]
        while stack:
            node = stack.pop()
            if node.is_leaf:
                yield node
                continue
            # right first so the left subtree is visited first
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)
