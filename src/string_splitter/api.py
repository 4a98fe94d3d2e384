"""
Entry points for splitting a string in one pass or as a stream of chunks.
"""

from typing import Any, List, Optional, Sequence

from .chunking import chunk
from .core.errors import InvalidArgumentError
from .splitting import EmitFn, SplitEngine, SplitOptions, SplitStream


def split(
    text: str,
    splitters: Sequence[str],
    delimiters: Optional[Sequence[Any]] = None,
    remove_splitters: bool = True,
    trim_parts: bool = False,
    *,
    emit: Optional[EmitFn] = None,
) -> List[str]:
    """
    Split ``text`` at each occurrence of any of the ``splitters``.

    When several splitters match at the same position, the one declared
    first wins. Text between an opening and a closing delimiter is never
    split; delimiter tokens are kept in the part.

    If using a line break as a splitter, list ``"\\r\\n"`` before ``"\\n"``
    so that Windows line endings do not leave a stray ``"\\r"`` behind.

    Args:
        text: Text to split
        splitters: Non-empty sequence of non-empty splitter tokens
        delimiters: Optional non-empty sequence of delimiter specs; a string
            is used as both the opening and closing token, a 2-element
            sequence gives ``(open, close)``
        remove_splitters: Drop splitter text (True) or keep it at the end of
            the part it terminates (False)
        trim_parts: Strip surrounding whitespace from each part
        emit: Optional event callback ``emit(event_type, **fields)``

    Returns:
        All parts in order, including empty ones

    Raises:
        InvalidArgumentError: If any argument is invalid

    Example:
        >>> split("1/ 2/ <3/ 4>/ 5", ["/"], delimiters=[["<", ">"]], trim_parts=True)
        ['1', '2', '<3/ 4>', '5']
    """
    options = SplitOptions.create(splitters, delimiters, remove_splitters, trim_parts)
    if not isinstance(text, str):
        raise InvalidArgumentError(
            f"text must be a string, got {type(text).__name__}"
        )
    return SplitEngine(options, emit=emit).convert(text)


def stream_split(
    text: str,
    splitters: Sequence[str],
    delimiters: Optional[Sequence[Any]] = None,
    remove_splitters: bool = True,
    trim_parts: bool = False,
    *,
    chunk_size: int,
    emit: Optional[EmitFn] = None,
) -> SplitStream:
    """
    Split ``text`` chunk by chunk, yielding parts as each chunk is consumed.

    ``text`` is cut into ``chunk_size`` slices up front. Each item of the
    returned stream is the list of parts completed by one slice; a part
    still open at the end of a slice is carried into the next. Concatenating
    all batches gives the same parts as ``split``.

    Every argument is validated here, before the first slice is consumed.

    Args:
        text: Text to split
        splitters: See ``split``
        delimiters: See ``split``
        remove_splitters: See ``split``
        trim_parts: See ``split``
        chunk_size: Characters per slice, must be > 0
        emit: Optional event callback ``emit(event_type, **fields)``

    Returns:
        Iterator of part batches

    Raises:
        InvalidArgumentError: If any argument is invalid
    """
    options = SplitOptions.create(splitters, delimiters, remove_splitters, trim_parts)
    chunks = chunk(text, chunk_size)
    return SplitStream(chunks, SplitEngine(options, emit=emit))
