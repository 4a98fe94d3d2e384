from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional, Dict, Any
from pathlib import Path

CONFIG_FILE_NAMES = (
    ".string-splitter.yaml",
    ".string-splitter.yml",
    ".string-splitter.toml",
)


def _find_config_file(config_file: Optional[str]) -> Optional[Path]:
    if config_file:
        return Path(config_file)
    for name in CONFIG_FILE_NAMES:
        candidate = Path(name)
        if candidate.exists():
            return candidate
    return None


def _read_config_file(path: Path) -> Dict[str, Any]:
    """Read a YAML or TOML settings file; unknown suffixes give no values."""
    if path.suffix in (".yaml", ".yml"):
        import yaml  # type: ignore[import-untyped]

        with open(path) as f:
            return yaml.safe_load(f) or {}
    if path.suffix == ".toml":
        import tomllib

        with open(path, "rb") as f:
            return tomllib.load(f)
    return {}


class Settings(BaseSettings):
    # Streaming
    SPLITTER_CHUNK_SIZE: int = 4096  # Characters per chunk for file streaming
    SPLITTER_ENCODING: str = "utf-8"  # Default encoding for file input

    # CLI
    SPLITTER_PAIR_SEPARATOR: str = ","  # Separates open/close in "<,>"

    # Observability
    LOG_FORMAT: str = "auto"  # json|plain|auto
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    @classmethod
    def load_config(cls, config_file: Optional[str] = None) -> "Settings":
        """
        Build settings from a config file with environment overrides.

        Without ``config_file``, the first of ``CONFIG_FILE_NAMES`` present in
        the working directory is used. A missing file yields plain defaults.
        """
        path = _find_config_file(config_file)
        values: Dict[str, Any] = {}
        if path is not None and path.exists():
            values = _read_config_file(path)

        # Values set through the environment or .env beat the file
        values.update(cls().model_dump(exclude_unset=True))
        return cls(**values)


# Process-wide defaults; the CLI builds its own via load_config()
SETTINGS = Settings()
