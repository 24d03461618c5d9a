"""Huffman coding: frequency table, greedy tree merge, code table."""

import logging
from typing import Dict

from models.compression_result import CompressionResult
from models.huffman_node import HuffmanNode
from models.trace_steps import HuffmanCodeStep
from utils.constants import BITS_PER_SYMBOL
from utils.metrics import compression_ratio, symbol_frequencies

logger = logging.getLogger(__name__)


def build_tree(freqs: Dict[str, int]) -> HuffmanNode:
    """Merge the two lowest-frequency nodes until one root remains.
    
    The working list is re-sorted (stable, ascending) before every merge and
    new internal nodes are appended at the end, so ties keep first-seen order.
    """
    nodes = [
        HuffmanNode(freq=freq, symbol=symbol, node_id=f"leaf-{symbol}-{idx}")
        for idx, (symbol, freq) in enumerate(freqs.items())
    ]
    if not nodes:
        raise ValueError("Cannot build a Huffman tree without symbols")
    
    internal_id = 0
    while len(nodes) > 1:
        nodes.sort(key=lambda node: node.freq)
        left, right = nodes.pop(0), nodes.pop(0)
        nodes.append(HuffmanNode(
            freq=left.freq + right.freq,
            left=left,
            right=right,
            node_id=f"internal-{internal_id}",
        ))
        internal_id += 1
    return nodes[0]


def generate_codes(root: HuffmanNode) -> Dict[str, str]:
    """Walk the tree depth-first: '0' for left branches, '1' for right."""
    if root.is_leaf:
        # Lone symbol: no branch to label
        return {root.symbol: '0'}
    
    codes: Dict[str, str] = {}
    stack = [(root, '')]
    while stack:
        node, prefix = stack.pop()
        if node.is_leaf:
            codes[node.symbol] = prefix
            continue
        stack.append((node.right, prefix + '1'))
        stack.append((node.left, prefix + '0'))
    return codes


def encode_huffman(text: str) -> CompressionResult:
    """Encode ``text`` with a per-input Huffman code.
    
    The compressed size is the payload bit length only; the code table is
    not charged.
    """
    if not text:
        return CompressionResult.empty()
    
    freqs = symbol_frequencies(text)
    root = build_tree(freqs)
    codes = generate_codes(root)
    
    encoded = ''.join(codes[symbol] for symbol in text)
    original_size = len(text) * BITS_PER_SYMBOL
    compressed_size = len(encoded)
    logger.debug("Huffman: %d distinct symbols, %d payload bits", len(freqs), compressed_size)
    
    steps = [
        HuffmanCodeStep(symbol=symbol, code=code, freq=freqs[symbol])
        for symbol, code in codes.items()
    ]
    
    return CompressionResult(
        encoded=encoded,
        original_size=original_size,
        compressed_size=compressed_size,
        ratio=compression_ratio(original_size, compressed_size),
        steps=steps,
        dictionary=codes,
        tree=root,
    )
