import json

from typer.testing import CliRunner

from agentdocs.cli import app

runner = CliRunner()


def test_read_json(pages_dir):
    result = runner.invoke(app, ["read", "intro,styling", "--pages-dir", str(pages_dir), "--json"])
    assert result.exit_code == 0, result.stdout
    assert json.loads(result.stdout) == {"pages": {"intro": "# Intro", "styling": "# Styling"}}


def test_read_raw(pages_dir):
    result = runner.invoke(app, ["read", "intro", "--pages-dir", str(pages_dir), "--raw"])
    assert result.exit_code == 0
    assert result.stdout == "# Intro\n"


def test_read_rendered(pages_dir):
    result = runner.invoke(app, ["read", "styling", "--pages-dir", str(pages_dir)])
    assert result.exit_code == 0
    assert "styling" in result.stdout
    assert "Styling" in result.stdout


def test_read_missing_page(pages_dir):
    result = runner.invoke(app, ["read", "intro,missing", "--pages-dir", str(pages_dir)])
    assert result.exit_code == 1
    assert "Page 'missing' not found" in result.stdout
    assert "Available pages: intro, styling" in result.stdout


def test_read_uses_env_directory(monkeypatch, pages_dir):
    monkeypatch.setenv("AGENT_STACK_DOCS_PATH", str(pages_dir))
    result = runner.invoke(app, ["read", "intro", "--raw"])
    assert result.exit_code == 0
    assert "# Intro" in result.stdout


def test_pages_table(pages_dir):
    result = runner.invoke(app, ["pages", "--pages-dir", str(pages_dir)])
    assert result.exit_code == 0
    assert "intro" in result.stdout
    assert "styling" in result.stdout


def test_pages_empty(empty_dir):
    result = runner.invoke(app, ["pages", "--pages-dir", str(empty_dir)])
    assert result.exit_code == 0
    assert "No pages found" in result.stdout
