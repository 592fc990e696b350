"""Runtime configuration for the docs server."""

from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass
from pathlib import Path

PAGES_PATH_ENV = "AGENT_STACK_DOCS_PATH"
LOG_LEVEL_ENV = "AGENT_STACK_DOCS_LOG_LEVEL"
DEFAULT_PAGES_DIR = "./pages"
DEFAULT_LOG_LEVEL = "WARNING"

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass(frozen=True)
class DocsConfig:
    """Where the pages live and how loudly to log about it."""

    pages_directory: Path
    log_level: str = DEFAULT_LOG_LEVEL

    def __post_init__(self) -> None:
        # frozen, so assign through object.__setattr__
        object.__setattr__(self, "pages_directory", Path(self.pages_directory).expanduser().resolve())

    @classmethod
    def from_env(cls, pages_directory: str | Path | None = None, log_level: str | None = None) -> DocsConfig:
        """Build a config from the environment; explicit arguments win."""
        return cls(
            pages_directory=pages_directory or os.environ.get(PAGES_PATH_ENV) or DEFAULT_PAGES_DIR,
            log_level=log_level or os.environ.get(LOG_LEVEL_ENV) or DEFAULT_LOG_LEVEL,
        )


def configure_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
    """Send log records to stderr. stdout belongs to the stdio transport."""
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        raise ValueError(f"Unknown log level '{level}'")
    logging.basicConfig(level=numeric, format=LOG_FORMAT, stream=sys.stderr, force=True)
