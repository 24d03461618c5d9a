"""Dispatch from an algorithm selection to its encoder."""

import logging
from typing import Callable, Dict

from models.compression_params import AlgorithmType, CompressionParams
from models.compression_result import CompressionResult
from engines.rle import encode_rle
from engines.huffman import encode_huffman
from engines.lzw import encode_lzw
from engines.golomb import encode_golomb
from engines.arithmetic import encode_arithmetic
from engines.tunstall import encode_tunstall
from utils.constants import GOLOMB_DEFAULT_M
from utils.metrics import Timer

logger = logging.getLogger(__name__)


ENCODERS: Dict[AlgorithmType, Callable[[str, CompressionParams], CompressionResult]] = {
    AlgorithmType.RLE: lambda text, params: encode_rle(text),
    AlgorithmType.HUFFMAN: lambda text, params: encode_huffman(text),
    AlgorithmType.LZW: lambda text, params: encode_lzw(text),
    AlgorithmType.GOLOMB: lambda text, params: encode_golomb(text, params.golomb_m),
    AlgorithmType.ARITHMETIC: lambda text, params: encode_arithmetic(text),
    AlgorithmType.TUNSTALL: lambda text, params: encode_tunstall(text),
}


def compress(text: str, params: CompressionParams) -> CompressionResult:
    """Run the encoder selected by ``params`` on ``text``."""
    timer = Timer()
    encoder = ENCODERS[params.algorithm]
    result = timer.measure_encode(encoder, text, params)
    logger.debug(
        "%s: %d -> %d bits (%.2f%%) in %.3f ms",
        params.algorithm.value, result.original_size, result.compressed_size,
        result.ratio, timer.encode_time_ms,
    )
    return result


def compare_all(text: str, golomb_m: int = GOLOMB_DEFAULT_M) -> Dict[AlgorithmType, CompressionResult]:
    """Run every encoder on the same input."""
    return {
        algorithm: compress(text, CompressionParams(algorithm=algorithm, golomb_m=golomb_m))
        for algorithm in AlgorithmType
    }
