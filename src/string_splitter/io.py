"""
Splitting the contents of text files.
"""

import time
from pathlib import Path
from typing import Any, Iterator, List, Optional, Sequence, Union

from .chunking import iter_chunks, validate_chunk_size
from .core.config import SETTINGS
from .core.logging import log
from .splitting import EmitFn, SplitEngine, SplitOptions, SplitStream

PathLike = Union[str, Path]


def split_file(
    path: PathLike,
    splitters: Sequence[str],
    delimiters: Optional[Sequence[Any]] = None,
    remove_splitters: bool = True,
    trim_parts: bool = False,
    encoding: Optional[str] = None,
    *,
    emit: Optional[EmitFn] = None,
) -> List[str]:
    """
    Read a text file and split its whole contents.

    Args:
        path: File to read
        splitters: See ``string_splitter.split``
        delimiters: See ``string_splitter.split``
        remove_splitters: See ``string_splitter.split``
        trim_parts: See ``string_splitter.split``
        encoding: File encoding (defaults to SPLITTER_ENCODING)
        emit: Optional event callback

    Returns:
        All parts of the file contents
    """
    options = SplitOptions.create(splitters, delimiters, remove_splitters, trim_parts)
    file_path = Path(path)
    start_time = time.time()
    log.info("split_file.start", path=str(file_path))

    with open(file_path, "r", encoding=encoding or SETTINGS.SPLITTER_ENCODING, newline="") as f:
        text = f.read()
    parts = SplitEngine(options, emit=emit).convert(text)

    log.info(
        "split_file.end",
        path=str(file_path),
        chars=len(text),
        parts=len(parts),
        duration_ms=int((time.time() - start_time) * 1000),
    )
    return parts


def stream_file(
    path: PathLike,
    splitters: Sequence[str],
    delimiters: Optional[Sequence[Any]] = None,
    remove_splitters: bool = True,
    trim_parts: bool = False,
    chunk_size: Optional[int] = None,
    encoding: Optional[str] = None,
    *,
    emit: Optional[EmitFn] = None,
) -> Iterator[List[str]]:
    """
    Stream part batches from a text file read ``chunk_size`` characters at
    a time, without loading the whole file.

    Arguments are validated immediately; the file is opened on the first
    ``next()`` and closed once the stream is exhausted or discarded.
    Batches follow the same rules as ``string_splitter.stream_split``.
    """
    options = SplitOptions.create(splitters, delimiters, remove_splitters, trim_parts)
    size = validate_chunk_size(
        chunk_size if chunk_size is not None else SETTINGS.SPLITTER_CHUNK_SIZE
    )
    return _stream_file(
        Path(path),
        SplitEngine(options, emit=emit),
        size,
        encoding or SETTINGS.SPLITTER_ENCODING,
    )


def _stream_file(
    file_path: Path, engine: SplitEngine, chunk_size: int, encoding: str
) -> Iterator[List[str]]:
    log.info("stream_file.start", path=str(file_path), chunk_size=chunk_size)
    batches = 0
    with open(file_path, "r", encoding=encoding, newline="") as f:
        for batch in SplitStream(iter_chunks(f, chunk_size), engine):
            batches += 1
            yield batch
    log.info("stream_file.end", path=str(file_path), batches=batches)
