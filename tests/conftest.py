"""Global test configuration for string_splitter tests."""

import pytest
import structlog


@pytest.fixture(autouse=True)
def reset_structlog():
    """Undo any structlog configuration a test (or the CLI) applied."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def quiet_cli(monkeypatch):
    """Silence CLI info logs so command output can be parsed."""
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    monkeypatch.setenv("LOG_FORMAT", "json")


@pytest.fixture
def sample_file(tmp_path):
    """A small file with CRLF line endings and a quoted field."""
    path = tmp_path / "sample.txt"
    path.write_bytes(b'alpha\r\n"beta\r\ngamma"\r\ndelta')
    return path
