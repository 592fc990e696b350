"""Page lookup types."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field


class PageStatus(enum.StrEnum):
    FOUND = "found"
    NOT_FOUND = "not_found"
    READ_ERROR = "read_error"


@dataclass
class PageInfo:
    """Outcome of reading a single page from the content directory."""

    name: str
    status: PageStatus
    content: str | None = None
    error: str | None = None  # reason, set for not_found / read_error

    @property
    def exists(self) -> bool:
        return self.status == PageStatus.FOUND

    @classmethod
    def found(cls, name: str, content: str) -> PageInfo:
        return cls(name=name, status=PageStatus.FOUND, content=content)

    @classmethod
    def not_found(cls, name: str) -> PageInfo:
        return cls(name=name, status=PageStatus.NOT_FOUND, error=f"Page '{name}' not found")

    @classmethod
    def read_error(cls, name: str, exc: Exception) -> PageInfo:
        return cls(
            name=name,
            status=PageStatus.READ_ERROR,
            error=f"Error reading page '{name}': {exc}",
        )


@dataclass
class ReadDocsResult:
    """Page name -> raw markdown for every requested page."""

    pages: dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {"pages": dict(self.pages)}
