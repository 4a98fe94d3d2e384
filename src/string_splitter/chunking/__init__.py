"""
Chunking helpers that feed the streaming splitter.
"""

from .chunker import chunk, iter_chunks, validate_chunk_size

__all__ = ["chunk", "iter_chunks", "validate_chunk_size"]
