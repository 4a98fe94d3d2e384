"""
Delimiter pairs that protect spans of text from being split.
"""

from typing import Any, NamedTuple, Sequence

from ..core.errors import InvalidArgumentError


class Delimiter(NamedTuple):
    """An open/close token pair; ``open == close`` for symmetric delimiters."""

    open: str
    close: str

    @classmethod
    def symmetric(cls, token: str) -> "Delimiter":
        return cls(token, token)

    @classmethod
    def asymmetric(cls, open: str, close: str) -> "Delimiter":
        return cls(open, close)

    @property
    def is_symmetric(self) -> bool:
        return self.open == self.close


def resolve_delimiter(spec: Any) -> Delimiter:
    """
    Resolve a delimiter spec into a ``Delimiter``.

    A spec is either a single non-empty string, used as both the opening and
    closing token, or a 2-element sequence of non-empty strings
    ``(open, close)``.

    Raises:
        InvalidArgumentError: If the spec has any other shape
    """
    if isinstance(spec, Delimiter):
        tokens: Sequence[Any] = spec
    elif isinstance(spec, str):
        if not spec:
            raise InvalidArgumentError("delimiter must not be an empty string")
        return Delimiter.symmetric(spec)
    elif isinstance(spec, (list, tuple)):
        tokens = spec
    else:
        raise InvalidArgumentError(
            f"delimiter must be a string or an (open, close) pair, got {type(spec).__name__}"
        )

    if len(tokens) != 2:
        raise InvalidArgumentError(
            f"delimiter pair must have exactly 2 entries, got {len(tokens)}"
        )
    open_token, close_token = tokens
    if not isinstance(open_token, str) or not isinstance(close_token, str):
        raise InvalidArgumentError("delimiter pair entries must be strings")
    if not open_token or not close_token:
        raise InvalidArgumentError("delimiter pair entries must not be empty")
    return Delimiter.asymmetric(open_token, close_token)
