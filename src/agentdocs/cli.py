"""Typer CLI for agent-stack docs."""

from __future__ import annotations

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.markdown import Markdown
from rich.rule import Rule
from rich.table import Table

from agentdocs.config import DocsConfig
from agentdocs.errors import DocsError
from agentdocs.mcp_server import format_result, serve as serve_stdio
from agentdocs.persistence import PageStore
from agentdocs.resolver import PageResolver

app = typer.Typer(
    name="agent-stack-docs",
    help="Serve and browse markdown documentation pages for AI agents.",
    no_args_is_help=True,
)
console = Console()
err_console = Console(stderr=True)

PagesDirOption = Annotated[
    Optional[str],
    typer.Option(
        "--pages-dir",
        "-d",
        help="Directory of *.md pages (default: $AGENT_STACK_DOCS_PATH or ./pages)",
    ),
]


def _complete_page_name(incomplete: str) -> list[str]:
    """Shell completion for page names, including after a comma."""
    try:
        pages = PageResolver(DocsConfig.from_env()).available_pages()
    except Exception:
        return []
    head, _, tail = incomplete.rpartition(",")
    prefix = f"{head}," if head else ""
    return [f"{prefix}{p}" for p in pages if p.startswith(tail.strip())]


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


@app.command()
def serve(
    pages_dir: PagesDirOption = None,
    log_level: Annotated[Optional[str], typer.Option(help="Log level for stderr output")] = None,
) -> None:
    """Run the MCP server over stdio."""
    config = DocsConfig.from_env(pages_dir, log_level)
    try:
        serve_stdio(config)
    except ValueError as e:
        err_console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)


@app.command("pages")
def list_pages(pages_dir: PagesDirOption = None) -> None:
    """List the available pages."""
    config = DocsConfig.from_env(pages_dir)
    store = PageStore(config.pages_directory)
    names = store.list_pages()
    if not names:
        console.print(f"No pages found in {config.pages_directory}.")
        return

    table = Table(title="Pages")
    table.add_column("Name")
    table.add_column("Size", justify="right")
    for name in names:
        try:
            size = f"{store.page_size(name):,} B"
        except OSError:
            size = "?"
        table.add_row(name, size)
    console.print(table)
    console.print(f"[dim]{len(names)} page(s) in {config.pages_directory}[/dim]")


@app.command()
def read(
    pages: Annotated[
        str,
        typer.Argument(
            help='Comma-separated page names (e.g. "intro" or "styling,database")',
            autocompletion=_complete_page_name,
        ),
    ],
    pages_dir: PagesDirOption = None,
    as_json: Annotated[bool, typer.Option("--json", help="Print the read-docs JSON payload")] = False,
    raw: Annotated[bool, typer.Option("--raw", help="Print page markdown without rendering")] = False,
) -> None:
    """Read one or more pages, exactly as the read-docs tool would."""
    resolver = PageResolver(DocsConfig.from_env(pages_dir))
    try:
        result = resolver.resolve(pages)
    except DocsError as e:
        console.print(str(e), style="red", markup=False, soft_wrap=True)
        raise typer.Exit(1)

    if as_json:
        print(format_result(result))
        return

    for name, content in result.pages.items():
        if raw:
            print(content)
            continue
        console.print(Rule(f"[bold]{name}[/bold]"))
        console.print(Markdown(content))
