"""
Validated configuration shared by every chunk of one split.
"""

from typing import Any, Optional, Sequence, Tuple

from pydantic import BaseModel, ConfigDict, Field, StrictBool, ValidationError, field_validator

from ..core.errors import InvalidArgumentError
from .delimiters import Delimiter, resolve_delimiter


class SplitOptions(BaseModel):
    """Splitters, delimiters and output flags for a split."""

    model_config = ConfigDict(frozen=True)

    splitters: Tuple[str, ...] = Field(
        ..., description="Splitter tokens in priority order"
    )
    delimiters: Optional[Tuple[Delimiter, ...]] = Field(
        None, description="Protected span delimiters in priority order"
    )
    remove_splitters: StrictBool = True
    trim_parts: StrictBool = False

    @field_validator("splitters", mode="before")
    @classmethod
    def check_splitters(cls, value: Any) -> Tuple[str, ...]:
        if value is None:
            raise ValueError("splitters must be provided")
        if not isinstance(value, (list, tuple)):
            raise ValueError("splitters must be a sequence of strings")
        if not value:
            raise ValueError("splitters must not be empty")
        for splitter in value:
            if not isinstance(splitter, str):
                raise ValueError(
                    f"splitters must be strings, got {type(splitter).__name__}"
                )
            if not splitter:
                raise ValueError("splitters must not contain empty strings")
        return tuple(value)

    @field_validator("delimiters", mode="before")
    @classmethod
    def check_delimiters(cls, value: Any) -> Optional[Tuple[Delimiter, ...]]:
        if value is None:
            return None
        if not isinstance(value, (list, tuple)):
            raise ValueError("delimiters must be a sequence of delimiter specs")
        if not value:
            raise ValueError("delimiters must not be empty when provided")
        return tuple(resolve_delimiter(spec) for spec in value)

    @property
    def max_token_length(self) -> int:
        """Length of the longest splitter or delimiter token."""
        lengths = [len(s) for s in self.splitters]
        for delimiter in self.delimiters or ():
            lengths.extend((len(delimiter.open), len(delimiter.close)))
        return max(lengths)

    @classmethod
    def create(
        cls,
        splitters: Sequence[str],
        delimiters: Optional[Sequence[Any]] = None,
        remove_splitters: bool = True,
        trim_parts: bool = False,
    ) -> "SplitOptions":
        """Build options, raising ``InvalidArgumentError`` on bad input."""
        try:
            return cls(
                splitters=splitters,
                delimiters=delimiters,
                remove_splitters=remove_splitters,
                trim_parts=trim_parts,
            )
        except ValidationError as e:
            raise InvalidArgumentError(_describe(e)) from e


def _describe(error: ValidationError) -> str:
    """Render the first validation problem as ``field: message``."""
    first = error.errors()[0]
    field = ".".join(str(part) for part in first.get("loc", ())) or "options"
    message = first.get("msg", str(error))
    if message.startswith("Value error, "):
        message = message[len("Value error, ") :]
    return f"{field}: {message}"
