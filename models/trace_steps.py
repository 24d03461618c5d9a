"""Per-unit trace records for visualization."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class RunStep:
    """One RLE run."""
    
    symbol: str
    count: int
    code: str


@dataclass(frozen=True)
class HuffmanCodeStep:
    symbol: str
    code: str
    freq: int


@dataclass(frozen=True)
class LZWStep:
    """One LZW emission. The final flush has ``next_symbol == 'EOF'``."""
    
    step: int
    prefix: str
    next_symbol: str
    output: int
    added_to_dict: Optional[str] = None
    new_code: Optional[int] = None


@dataclass(frozen=True)
class GolombStep:
    """Quotient/remainder split of one number: number = quotient * M + remainder."""
    
    number: int
    quotient: int
    remainder: int
    unary_code: str
    binary_code: str
    code: str


@dataclass(frozen=True)
class IntervalStep:
    """Interval after narrowing on one symbol."""
    
    symbol: str
    low: float
    high: float
    
    @property
    def range_str(self) -> str:
        return f"[{self.low:.6f}, {self.high:.6f})"


@dataclass(frozen=True)
class ProbabilityInterval:
    """Half-open cumulative probability interval [start, end)."""
    
    start: float
    end: float
    probability: float


@dataclass(frozen=True)
class TunstallStep:
    sequence: str
    code: str
