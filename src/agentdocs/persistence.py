"""Read-only access to the markdown content directory."""

from __future__ import annotations

import logging
from pathlib import Path

from agentdocs.models import PageInfo

logger = logging.getLogger(__name__)

PAGE_SUFFIX = ".md"


class PageStore:
    """Reads pages (``<name>.md`` files) from a single directory."""

    def __init__(self, pages_directory: str | Path):
        self.pages_directory = Path(pages_directory)

    def page_path(self, name: str) -> Path:
        return self.pages_directory / f"{name}{PAGE_SUFFIX}"

    def list_pages(self) -> list[str]:
        """Return sorted page names. An unreadable directory counts as empty."""
        try:
            names = [
                p.stem
                for p in self.pages_directory.iterdir()
                if p.suffix == PAGE_SUFFIX and p.is_file()
            ]
        except OSError as e:
            logger.warning("Error scanning pages directory %s: %s", self.pages_directory, e)
            return []
        return sorted(names)

    def read_page(self, name: str) -> PageInfo:
        """Read one page. Failures are reported in the PageInfo, not raised."""
        path = self.page_path(name)
        try:
            # newline="" keeps the file's line endings as they are on disk
            with path.open(encoding="utf-8", newline="") as f:
                content = f.read()
        except FileNotFoundError:
            logger.debug("Page %s not found at %s", name, path)
            return PageInfo.not_found(name)
        except (OSError, UnicodeDecodeError) as e:
            logger.info("Could not read page %s: %s", name, e)
            return PageInfo.read_error(name, e)
        return PageInfo.found(name, content)

    def page_size(self, name: str) -> int:
        return self.page_path(name).stat().st_size
