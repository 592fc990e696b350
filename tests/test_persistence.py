from agentdocs.models import PageStatus
from agentdocs.persistence import PageStore


def test_list_pages_sorted_without_suffix(pages_dir):
    (pages_dir / "another-page.md").write_text("# Another")
    (pages_dir / "notes.txt").write_text("not a page")
    assert PageStore(pages_dir).list_pages() == ["another-page", "intro", "styling"]


def test_list_pages_is_not_recursive(pages_dir):
    nested = pages_dir / "nested"
    nested.mkdir()
    (nested / "deep.md").write_text("# Deep")
    (pages_dir / "folder.md").mkdir()
    assert PageStore(pages_dir).list_pages() == ["intro", "styling"]


def test_list_pages_missing_directory_is_empty(tmp_path):
    assert PageStore(tmp_path / "nope").list_pages() == []


def test_read_page_preserves_content_exactly(pages_dir):
    content = "# Title\r\n\r\n```js\nconst x = 1;\n```\nété\n"
    (pages_dir / "exact.md").write_bytes(content.encode("utf-8"))
    info = PageStore(pages_dir).read_page("exact")
    assert info.status == PageStatus.FOUND
    assert info.content == content


def test_read_page_not_found(pages_dir):
    info = PageStore(pages_dir).read_page("missing")
    assert info.status == PageStatus.NOT_FOUND
    assert info.error == "Page 'missing' not found"


def test_read_page_directory_is_read_error(pages_dir):
    (pages_dir / "folder.md").mkdir()
    info = PageStore(pages_dir).read_page("folder")
    assert info.status == PageStatus.READ_ERROR
    assert info.error.startswith("Error reading page 'folder': ")


def test_read_page_undecodable_is_read_error(pages_dir):
    (pages_dir / "binary.md").write_bytes(b"\xff\xfe\xfa")
    info = PageStore(pages_dir).read_page("binary")
    assert info.status == PageStatus.READ_ERROR
