"""Resolve comma-separated page requests against the content directory."""

from __future__ import annotations

import logging
import re

from agentdocs.config import DocsConfig
from agentdocs.errors import InvalidPageNameError, PageLookupError
from agentdocs.models import PageInfo, ReadDocsResult
from agentdocs.persistence import PageStore

logger = logging.getLogger(__name__)

PAGE_NAME_RE = re.compile(r"[A-Za-z0-9_-]+")


def parse_request(request: str) -> list[str]:
    """Split on commas and strip whitespace. Empty names are kept."""
    return [name.strip() for name in request.split(",")]


def is_valid_page_name(name: str) -> bool:
    return PAGE_NAME_RE.fullmatch(name) is not None


def _invalid_name_message(name: str) -> str:
    return (
        f"Invalid page name '{name}'. "
        "Only alphanumeric characters, hyphens, and underscores are allowed."
    )


class PageResolver:
    """All-or-nothing lookup of documentation pages.

    A request either resolves every page it names or fails as a whole with an
    error listing each problem and the pages that are available.
    """

    def __init__(self, source: DocsConfig | PageStore):
        if isinstance(source, DocsConfig):
            source = PageStore(source.pages_directory)
        self.store = source

    def available_pages(self) -> list[str]:
        return self.store.list_pages()

    def resolve(self, request: str) -> ReadDocsResult:
        """Return every requested page or raise a DocsError subclass.

        Raises:
            InvalidPageNameError: a name failed validation. Nothing is read.
            PageLookupError: a valid name has no readable page.
        """
        names = parse_request(request)

        # Pass 1: validate everything before touching the filesystem.
        errors = [_invalid_name_message(n) for n in names if not is_valid_page_name(n)]
        if errors:
            available = self.available_pages()
            logger.info("Rejected request %r: %d invalid name(s)", request, len(errors))
            raise InvalidPageNameError(
                f"{' '.join(errors)} Available pages: {', '.join(available)}",
                problems=errors,
                available=available,
            )

        # Pass 2: read each page independently.
        infos: list[PageInfo] = [self.store.read_page(n) for n in names]

        result = ReadDocsResult()
        missing: list[str] = []
        for info in infos:
            if info.exists and info.content is not None:
                result.pages[info.name] = info.content
            else:
                missing.append(info.name)
                if info.error:
                    errors.append(info.error)

        if missing:
            available = self.available_pages()
            logger.info("Request %r missing page(s): %s", request, ", ".join(missing))
            raise PageLookupError(
                f"{', '.join(errors)}. Available pages: {', '.join(available)}",
                problems=errors,
                available=available,
                missing=missing,
            )

        logger.debug("Resolved %d page(s) for %r", len(result.pages), request)
        return result
