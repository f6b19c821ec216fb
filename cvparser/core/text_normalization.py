"""
Normalized views of extracted resume text.

Two read-only views are derived once per parse:
- scan_lower: the whole text lower-cased, used for every keyword test
- lines: trimmed, non-blank lines in document order, used for line heuristics
"""

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class NormalizedView:
    scan_lower: str
    lines: Tuple[str, ...]


def split_lines(text: Optional[str]) -> Tuple[str, ...]:
    """Trim every line and drop blank ones, preserving order."""
    if not text:
        return ()
    return tuple(ln.strip() for ln in text.splitlines() if ln.strip())


def normalize(text: Optional[str]) -> NormalizedView:
    # Lower-case the original text, not a line join, so multi-line matches still work.
    text = text or ""
    return NormalizedView(scan_lower=text.lower(), lines=split_lines(text))
