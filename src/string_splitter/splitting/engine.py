"""
Delimiter-aware splitting engine shared by batch and streaming splits.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Iterable, Iterator, List, Optional, Tuple

from ..core.errors import InvalidArgumentError
from .delimiters import Delimiter
from .options import SplitOptions

EmitFn = Callable[..., None]


class _Match(Enum):
    """Outcome of testing one token at one position."""

    HIT = "hit"
    MISS = "miss"
    DEFER = "defer"


def _match_token(text: str, pos: int, token: str, final: bool) -> _Match:
    if text.startswith(token, pos):
        return _Match.HIT
    # The rest of the text is a strict prefix of the token; more input may complete it
    if not final and len(text) - pos < len(token) and token.startswith(text[pos:]):
        return _Match.DEFER
    return _Match.MISS


class SplitEngine:
    """
    Stateful converter that splits text on splitters outside delimiters.

    Text can be supplied whole through ``convert`` or piecewise through
    ``feed`` followed by ``close``. The state carried between ``feed`` calls
    (part buffer, open delimiter, unresolved tail) makes the result
    independent of where the input is cut.

    While a delimiter is open only its close token is looked for, so
    delimiters of the same pair never nest: the first close token after an
    open ends the span.
    """

    def __init__(self, options: SplitOptions, emit: Optional[EmitFn] = None):
        self.options = options
        self._emit = emit

        # Priority order when outside a delimiter: opens first, then splitters
        self._candidates: List[Tuple[str, Optional[Delimiter]]] = [
            (delimiter.open, delimiter) for delimiter in options.delimiters or ()
        ]
        self._candidates.extend((splitter, None) for splitter in options.splitters)
        self._lookahead = options.max_token_length

        self._reset()

    def _reset(self) -> None:
        self._buffer: List[str] = []
        self._buffer_len = 0
        # Span of the buffer covered by delimiters, kept intact by trimming
        self._protected_start: Optional[int] = None
        self._protected_end: Optional[int] = None
        self._inside: Optional[Delimiter] = None
        self._pending = ""
        self._completed: List[str] = []
        self._part_count = 0
        self._closed = False

    @property
    def inside(self) -> Optional[Delimiter]:
        """The delimiter currently open, if any."""
        return self._inside

    @property
    def pending(self) -> str:
        """Unresolved tail waiting for the next chunk."""
        return self._pending

    @property
    def closed(self) -> bool:
        return self._closed

    def feed(self, chunk: str) -> List[str]:
        """
        Consume one chunk of input.

        Args:
            chunk: Next slice of the input

        Returns:
            Parts completed while consuming this chunk
        """
        if self._closed:
            raise RuntimeError("SplitEngine is closed; create a new engine")
        if not isinstance(chunk, str):
            raise InvalidArgumentError(
                f"chunk must be a string, got {type(chunk).__name__}"
            )
        self._consume(self._pending + chunk, final=False)
        return self._drain()

    def close(self) -> List[str]:
        """
        Signal end of input and flush the trailing part.

        The trailing part is emitted even when empty, e.g. after a final
        splitter.

        Returns:
            Parts completed by resolving the tail and flushing
        """
        if self._closed:
            raise RuntimeError("SplitEngine is already closed")
        self._consume(self._pending, final=True)
        self._finish_part()
        self._closed = True
        if self._emit is not None:
            self._emit(
                "split.end",
                parts=self._part_count,
                unclosed_delimiter=self._inside is not None,
            )
        return self._drain()

    def convert(self, text: str) -> List[str]:
        """Split ``text`` in one pass on fresh state and return every part."""
        self._reset()
        parts = self.feed(text)
        parts.extend(self.close())
        return parts

    def _consume(self, text: str, final: bool) -> None:
        self._pending = ""
        pos = 0
        length = len(text)

        while pos < length:
            # Only the last few characters can be a partial token
            settled = final or length - pos >= self._lookahead
            if self._inside is not None:
                close_token = self._inside.close
                outcome = _match_token(text, pos, close_token, settled)
                if outcome is _Match.DEFER:
                    self._pending = text[pos:]
                    return
                if outcome is _Match.HIT:
                    self._append(close_token)
                    self._protected_end = self._buffer_len
                    self._inside = None
                    pos += len(close_token)
                else:
                    self._append(text[pos])
                    pos += 1
                continue

            hit: Optional[Tuple[str, Optional[Delimiter]]] = None
            for token, delimiter in self._candidates:
                outcome = _match_token(text, pos, token, settled)
                if outcome is _Match.MISS:
                    continue
                if outcome is _Match.DEFER:
                    # A higher-priority token may still match once more input arrives
                    self._pending = text[pos:]
                    return
                hit = (token, delimiter)
                break

            if hit is None:
                self._append(text[pos])
                pos += 1
                continue

            token, delimiter = hit
            if delimiter is not None:
                if self._protected_start is None:
                    self._protected_start = self._buffer_len
                self._append(token)
                self._inside = delimiter
            else:
                self._finish_part(token)
            pos += len(token)

    def _append(self, text: str) -> None:
        self._buffer.append(text)
        self._buffer_len += len(text)

    def _trim(self, part: str) -> str:
        if self._protected_start is None:
            return part.strip()
        start = self._protected_start
        end = len(part) if self._inside is not None else self._protected_end
        return part[:start].lstrip() + part[start:end] + part[end:].rstrip()

    def _finish_part(self, splitter: str = "") -> None:
        part = "".join(self._buffer)
        if self.options.trim_parts:
            part = self._trim(part)
        if not self.options.remove_splitters:
            part += splitter

        self._completed.append(part)
        if self._emit is not None:
            self._emit("split.part", index=self._part_count, chars=len(part))
        self._part_count += 1

        self._buffer = []
        self._buffer_len = 0
        self._protected_start = None
        self._protected_end = None

    def _drain(self) -> List[str]:
        parts, self._completed = self._completed, []
        return parts


_END: Any = object()


class SplitStream(Iterator[List[str]]):
    """
    Pull-based stream of part batches, one batch per input chunk.

    Each ``next()`` consumes exactly one chunk and returns the parts it
    completed (possibly none). The batch for the last chunk also carries
    the trailing part. Input without any chunk yields a single batch holding
    the empty trailing part. Single pass; not restartable.
    """

    def __init__(self, chunks: Iterable[str], engine: SplitEngine):
        self._chunks = iter(chunks)
        self._engine = engine
        self._lookahead: Any = _END
        self._started = False
        self._done = False

    @property
    def engine(self) -> SplitEngine:
        return self._engine

    def __iter__(self) -> "SplitStream":
        return self

    def __next__(self) -> List[str]:
        if self._done:
            raise StopIteration

        if not self._started:
            self._started = True
            self._lookahead = next(self._chunks, _END)
            if self._lookahead is _END:
                self._done = True
                return self._engine.close()

        current = self._lookahead
        self._lookahead = next(self._chunks, _END)
        batch = self._engine.feed(current)
        if self._lookahead is _END:
            batch.extend(self._engine.close())
            self._done = True
        return batch
