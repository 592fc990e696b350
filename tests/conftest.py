import pytest


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def pages_dir(tmp_path):
    d = tmp_path / "pages"
    d.mkdir()
    (d / "intro.md").write_text("# Intro")
    (d / "styling.md").write_text("# Styling")
    return d


@pytest.fixture
def empty_dir(tmp_path):
    d = tmp_path / "empty"
    d.mkdir()
    return d
