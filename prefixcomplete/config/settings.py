"""
Central configuration for prefixcomplete.

All tunables live here. Nothing is hardcoded in module code.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path


def _project_root() -> Path:
    """Walk up from this file to find the project root (where pyproject.toml lives)."""
    current = Path(__file__).resolve().parent
    while current != current.parent:
        if (current / "pyproject.toml").exists():
            return current
        current = current.parent
    # Fallback: two levels up from config/settings.py
    return Path(__file__).resolve().parent.parent.parent


@dataclass(frozen=True)
class AutocompleteSettings:
    """Settings for index construction and queries."""

    # Index variant used when the caller does not pick one: "trie" or "binary"
    default_implementation: str = "trie"

    # Default number of suggestions returned per prefix query
    max_suggestions: int = 10

    # Upper bound on k accepted from API callers
    max_top_k: int = 50

    # Terms file loaded by the API, relative to data_dir
    terms_file: str = "terms.txt"


@dataclass(frozen=True)
class LoggingSettings:
    """Settings for console and rotating file logging."""

    # Level name understood by the logging module, e.g. "DEBUG"
    level: str = "INFO"

    log_file: str = "prefixcomplete.log"

    # Rotate the log file at this size, keeping backup_count old files
    max_bytes: int = 10 * 1024 * 1024
    backup_count: int = 5


@dataclass(frozen=True)
class ApiSettings:
    """Settings for the HTTP server."""

    host: str = "127.0.0.1"
    port: int = 8000

    # Maximum prefix length (characters) accepted by the API
    max_prefix_length: int = 200


@dataclass
class Settings:
    """
    Top-level settings container.

    Usage:
        settings = get_settings()
        print(settings.autocomplete.default_implementation)
    """

    project_root: Path = field(default_factory=_project_root)
    autocomplete: AutocompleteSettings = field(default_factory=AutocompleteSettings)
    api: ApiSettings = field(default_factory=ApiSettings)
    logging: LoggingSettings = field(default_factory=LoggingSettings)

    @property
    def data_dir(self) -> Path:
        """Root directory for runtime data (terms files, logs)."""
        return self.project_root / "data"

    @property
    def terms_path(self) -> Path:
        """Terms file the API builds its index from."""
        return self.data_dir / self.autocomplete.terms_file

    @property
    def logs_dir(self) -> Path:
        """Root directory for log files."""
        return self.data_dir / "logs"

    def ensure_dirs(self) -> None:
        """Create all required data directories if they don't exist."""
        self.data_dir.mkdir(parents=True, exist_ok=True)
        self.logs_dir.mkdir(parents=True, exist_ok=True)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Returns the singleton Settings instance.

    Call this instead of constructing Settings() directly so the entire
    application shares one config object.
    """
    settings = Settings()
    settings.ensure_dirs()
    return settings
