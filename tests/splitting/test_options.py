"""Tests for split option validation."""

import pytest
from pydantic import ValidationError

from string_splitter.core.errors import InvalidArgumentError
from string_splitter.splitting import Delimiter, SplitOptions

pytestmark = pytest.mark.unit


class TestSplitOptions:
    """Test that SplitOptions accepts valid configs and rejects the rest."""

    def test_defaults(self):
        options = SplitOptions.create([","])
        assert options.splitters == (",",)
        assert options.delimiters is None
        assert options.remove_splitters is True
        assert options.trim_parts is False

    def test_delimiters_resolved_in_order(self):
        options = SplitOptions.create([","], ['"', ["<", ">"]])
        assert options.delimiters == (Delimiter('"', '"'), Delimiter("<", ">"))
        assert all(isinstance(d, Delimiter) for d in options.delimiters)

    def test_splitter_order_kept(self):
        options = SplitOptions.create(["\r\n", "\n", ";"])
        assert options.splitters == ("\r\n", "\n", ";")

    def test_max_token_length(self):
        options = SplitOptions.create([",", "::"], [["<<", ">>>"]])
        assert options.max_token_length == 3

    def test_options_are_frozen(self):
        options = SplitOptions.create([","])
        with pytest.raises(ValidationError):
            options.trim_parts = True

    @pytest.mark.parametrize(
        "splitters, message",
        [
            (None, "splitters must be provided"),
            ([], "splitters must not be empty"),
            (",", "splitters must be a sequence"),
            ([""], "must not contain empty strings"),
            ([",", 1], "splitters must be strings"),
        ],
    )
    def test_invalid_splitters(self, splitters, message):
        with pytest.raises(InvalidArgumentError, match=message):
            SplitOptions.create(splitters)

    @pytest.mark.parametrize(
        "delimiters",
        [
            [],
            "<>",
            [["<"]],
            [["<", ">", "!"]],
            [["", ">"]],
            [""],
            [5],
        ],
    )
    def test_invalid_delimiters(self, delimiters):
        with pytest.raises(InvalidArgumentError, match="delimiters"):
            SplitOptions.create([","], delimiters)

    def test_non_boolean_flags_rejected(self):
        with pytest.raises(InvalidArgumentError, match="remove_splitters"):
            SplitOptions.create([","], remove_splitters="yes")  # type: ignore[arg-type]
        with pytest.raises(InvalidArgumentError, match="trim_parts"):
            SplitOptions.create([","], trim_parts=None)  # type: ignore[arg-type]

    def test_validation_error_is_chained(self):
        with pytest.raises(InvalidArgumentError) as exc_info:
            SplitOptions.create([])
        assert isinstance(exc_info.value.__cause__, ValidationError)
        assert isinstance(exc_info.value, ValueError)
