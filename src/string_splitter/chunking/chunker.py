"""
Fixed-size slicing of input text for streaming splits.
"""

from typing import Iterator, List, TextIO

from ..core.errors import InvalidArgumentError


def validate_chunk_size(chunk_size: int) -> int:
    """Return ``chunk_size`` if it is a positive integer, else raise."""
    if isinstance(chunk_size, bool) or not isinstance(chunk_size, int):
        raise InvalidArgumentError(
            f"chunk_size must be an integer, got {type(chunk_size).__name__}"
        )
    if chunk_size <= 0:
        raise InvalidArgumentError(f"chunk_size must be > 0, got {chunk_size}")
    return chunk_size


def chunk(text: str, chunk_size: int) -> List[str]:
    """
    Split text into contiguous slices of ``chunk_size`` characters.

    Every slice is full-size except possibly the last one, which holds the
    remainder. Empty text yields no slices.

    Args:
        text: Text to slice
        chunk_size: Characters per slice, must be > 0

    Returns:
        List of slices whose concatenation equals ``text``

    Raises:
        InvalidArgumentError: If ``text`` is not a string or ``chunk_size``
            is not a positive integer
    """
    if not isinstance(text, str):
        raise InvalidArgumentError(
            f"text must be a string, got {type(text).__name__}"
        )
    validate_chunk_size(chunk_size)

    return [
        text[start : start + chunk_size]
        for start in range(0, len(text), chunk_size)
    ]


def iter_chunks(stream: TextIO, chunk_size: int) -> Iterator[str]:
    """Lazily read ``chunk_size`` characters at a time from a text stream."""
    validate_chunk_size(chunk_size)
    while True:
        piece = stream.read(chunk_size)
        if not piece:
            return
        yield piece
