"""
String Splitter

Split strings on splitter tokens while protecting delimited spans, in one
pass or streamed chunk by chunk.
"""

from .api import split, stream_split
from .chunking import chunk
from .core.errors import InvalidArgumentError
from .io import split_file, stream_file
from .splitting import Delimiter, SplitEngine, SplitOptions, SplitStream

__version__ = "0.1.0"

__all__ = [
    "Delimiter",
    "InvalidArgumentError",
    "SplitEngine",
    "SplitOptions",
    "SplitStream",
    "__version__",
    "chunk",
    "split",
    "split_file",
    "stream_file",
    "stream_split",
]
