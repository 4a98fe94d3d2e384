"""
Delimiter-aware string splitting.

This package provides:
- Splitting on an ordered set of splitter tokens (first declared wins)
- Protected spans between delimiter pairs where no split happens
- A chunk-fed engine whose output does not depend on chunk boundaries
- A pull-based stream of part batches, one per chunk
"""

from .delimiters import Delimiter, resolve_delimiter
from .engine import EmitFn, SplitEngine, SplitStream
from .options import SplitOptions

__all__ = [
    "Delimiter",
    "EmitFn",
    "SplitEngine",
    "SplitOptions",
    "SplitStream",
    "resolve_delimiter",
]
