"""MCP server exposing the docs page directory to AI assistants."""

from __future__ import annotations

import json
import logging
import sys
from typing import Annotated

from mcp.server.fastmcp import FastMCP
from mcp.server.fastmcp.exceptions import ToolError
from pydantic import Field

from agentdocs.config import DocsConfig, configure_logging
from agentdocs.errors import DocsError
from agentdocs.models import ReadDocsResult
from agentdocs.resolver import PageResolver

SERVER_NAME = "agent-stack"
SERVER_VERSION = "0.1.0"

READ_DOCS_DESCRIPTION = (
    "Read documentation pages. ALWAYS start with 'read-docs intro' to get "
    "orientation and table of contents."
)
PAGES_PARAM_DESCRIPTION = (
    'Comma-separated list of page names to read (e.g., "intro", "styling,database")'
)

logger = logging.getLogger(__name__)


def format_result(result: ReadDocsResult) -> str:
    """Serialize a successful lookup as the tool's JSON payload."""
    return json.dumps(result.to_dict(), indent=2)


def read_docs(resolver: PageResolver, pages: str) -> str:
    """Run one read-docs call, turning lookup failures into tool errors."""
    try:
        result = resolver.resolve(pages)
    except DocsError as e:
        raise ToolError(str(e)) from e
    return format_result(result)


def list_docs(resolver: PageResolver) -> str:
    return json.dumps({"pages": resolver.available_pages()}, indent=2)


def build_server(config: DocsConfig) -> FastMCP:
    """Create a FastMCP server bound to the configured pages directory."""
    resolver = PageResolver(config)
    mcp = FastMCP(
        SERVER_NAME,
        instructions="""\
Documentation pages for the agent stack, stored as markdown. Pages are \
addressed by name (the file name without ".md").

Start with read-docs "intro" for orientation and the table of contents. \
Several pages can be read in one call: "styling,database". A call either \
returns every requested page or fails with the reason for each bad name and \
the list of available pages.\
""",
    )

    @mcp.tool(name="read-docs", description=READ_DOCS_DESCRIPTION)
    def read_docs_tool(
        pages: Annotated[str, Field(description=PAGES_PARAM_DESCRIPTION)],
    ) -> str:
        return read_docs(resolver, pages)

    @mcp.tool(name="list-docs", description="List the names of all available documentation pages.")
    def list_docs_tool() -> str:
        return list_docs(resolver)

    return mcp


def serve(config: DocsConfig) -> None:
    """Run the server over stdio until the client disconnects."""
    configure_logging(config.log_level)
    logger.info("Agent Stack Docs Server starting...")
    logger.info("Server name: %s", SERVER_NAME)
    logger.info("Server version: %s", SERVER_VERSION)
    logger.info("Pages directory: %s", config.pages_directory)
    build_server(config).run(transport="stdio")


def main():
    """Entry point for the MCP server."""
    try:
        serve(DocsConfig.from_env())
    except Exception:
        logger.exception("Failed to start Agent Stack Docs Server")
        sys.exit(1)


if __name__ == "__main__":
    main()
