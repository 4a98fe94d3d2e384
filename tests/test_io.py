"""Tests for splitting file contents."""

import math
from unittest.mock import patch

import pytest

from string_splitter import InvalidArgumentError, split, split_file, stream_file
from string_splitter.core.config import Settings

pytestmark = pytest.mark.integration

SPLITTERS = ["\r\n", "\n"]
DELIMITERS = ['"']


class TestSplitFile:
    """Test one-shot file splitting."""

    def test_matches_split_of_contents(self, sample_file):
        parts = split_file(sample_file, SPLITTERS, DELIMITERS)
        assert parts == ["alpha", '"beta\r\ngamma"', "delta"]

    def test_line_endings_not_translated(self, sample_file):
        parts = split_file(sample_file, ["\n"], remove_splitters=False)
        assert parts == ["alpha\r\n", '"beta\r\n', 'gamma"\r\n', "delta"]

    def test_accepts_string_path(self, sample_file):
        assert split_file(str(sample_file), SPLITTERS) == split_file(sample_file, SPLITTERS)

    def test_encoding(self, tmp_path):
        path = tmp_path / "latin.txt"
        path.write_bytes("café;thé".encode("latin-1"))
        assert split_file(path, [";"], encoding="latin-1") == ["café", "thé"]

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            split_file(tmp_path / "missing.txt", [","])

    def test_invalid_options_checked_before_reading(self, tmp_path):
        with pytest.raises(InvalidArgumentError):
            split_file(tmp_path / "missing.txt", [])


class TestStreamFile:
    """Test lazy, chunked file splitting."""

    @pytest.mark.parametrize("size", [1, 2, 3, 7, 1000])
    def test_matches_split_file(self, sample_file, size):
        batches = list(stream_file(sample_file, SPLITTERS, DELIMITERS, chunk_size=size))
        flattened = [p for batch in batches for p in batch]
        assert flattened == split_file(sample_file, SPLITTERS, DELIMITERS)
        length = len(sample_file.read_bytes())
        assert len(batches) == math.ceil(length / size)

    def test_default_chunk_size_from_settings(self, sample_file):
        with patch("string_splitter.io.SETTINGS", Settings(SPLITTER_CHUNK_SIZE=4)):
            batches = list(stream_file(sample_file, SPLITTERS))
        assert len(batches) == math.ceil(len(sample_file.read_bytes()) / 4)

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.txt"
        path.write_text("")
        assert list(stream_file(path, [","], chunk_size=4)) == [[""]]

    def test_validation_is_eager(self, tmp_path):
        with pytest.raises(InvalidArgumentError):
            stream_file(tmp_path / "missing.txt", [","], chunk_size=0)

    def test_file_opened_lazily(self, tmp_path):
        batches = stream_file(tmp_path / "missing.txt", [","], chunk_size=4)
        with pytest.raises(FileNotFoundError):
            next(batches)

    def test_abandoned_stream_can_be_closed(self, sample_file):
        batches = stream_file(sample_file, SPLITTERS, chunk_size=2)
        next(batches)
        batches.close()
        with pytest.raises(StopIteration):
            next(batches)


def test_stream_file_agrees_with_split(tmp_path):
    text = "k1=<a;b>;k2=c;;k3=<d"
    path = tmp_path / "kv.txt"
    path.write_text(text)
    batches = stream_file(path, [";"], [["<", ">"]], chunk_size=3)
    assert [p for batch in batches for p in batch] == split(text, [";"], [["<", ">"]])
