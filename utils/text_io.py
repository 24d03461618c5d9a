"""Text input loading and plain-text result reports."""

from pathlib import Path

from models.compression_result import CompressionResult


def load_text(path: str) -> str:
    """Load a UTF-8 text file."""
    try:
        return Path(path).read_text(encoding='utf-8')
    except (OSError, UnicodeDecodeError) as e:
        raise ValueError(f"Could not load text from {path}: {e}") from e


def format_report(result: CompressionResult, title: str = "") -> str:
    """Human-readable summary of a result and its trace."""
    lines = []
    if title:
        lines.append(f"=== {title} ===")
    lines.append(f"Original:   {result.original_size} bits")
    lines.append(f"Compressed: {result.compressed_size} bits")
    lines.append(f"Ratio:      {result.ratio:.2f}%")
    if result.truncated:
        lines.append("Note:       input truncated for precision")
    lines.append(f"Encoded:    {result.encoded}")
    if result.steps:
        lines.append("")
        lines.append("Steps:")
        for i, step in enumerate(result.steps, start=1):
            lines.append(f"  {i:>3}. {step}")
    if result.dictionary:
        lines.append("")
        lines.append("Dictionary:")
        for key, value in result.dictionary.items():
            lines.append(f"  {key!r}: {value}")
    return "\n".join(lines)


def save_report(result: CompressionResult, path: str, title: str = "") -> None:
    """Write the report for ``result`` to ``path``."""
    Path(path).write_text(format_report(result, title) + "\n", encoding='utf-8')
