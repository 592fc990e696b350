"""Aggregated lookup failures."""

from __future__ import annotations


class DocsError(Exception):
    """A request that could not be answered in full.

    Carries every problem found in the request together with the pages that
    do exist, so a caller can correct itself without a separate listing call.
    """

    def __init__(self, message: str, problems: list[str], available: list[str]):
        super().__init__(message)
        self.problems = problems
        self.available = available


class InvalidPageNameError(DocsError):
    """One or more requested names are not valid page identifiers."""


class PageLookupError(DocsError):
    """One or more valid names could not be found or read."""

    def __init__(self, message: str, problems: list[str], available: list[str], missing: list[str]):
        super().__init__(message, problems, available)
        self.missing = missing
