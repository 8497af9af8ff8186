from pathlib import Path

from holograph.utils import (
    find_source_files,
    is_filesystem_root,
    is_markdown,
    is_stylesheet,
    rglob,
    titleize,
    ucfirst,
)


def test_rglob_recurses_and_sorts(tmp_path):
    (tmp_path / "b").mkdir()
    (tmp_path / "a" / "deep").mkdir(parents=True)
    (tmp_path / "b" / "two.css").write_text("", encoding="utf-8")
    (tmp_path / "a" / "deep" / "one.css").write_text("", encoding="utf-8")
    (tmp_path / "top.css").write_text("", encoding="utf-8")
    (tmp_path / "notes.md").write_text("", encoding="utf-8")

    found = rglob("*.css", tmp_path)

    assert found == [
        tmp_path / "a" / "deep" / "one.css",
        tmp_path / "b" / "two.css",
        tmp_path / "top.css",
    ]


def test_rglob_refuses_filesystem_root():
    assert rglob("*.css", "/") == []
    assert rglob("*.css", "\\") == []
    assert rglob("*.css", Path("/")) == []


def test_rglob_missing_directory(tmp_path):
    assert rglob("*.css", tmp_path / "missing") == []


def test_is_filesystem_root():
    assert is_filesystem_root("/")
    assert not is_filesystem_root("components")
    assert not is_filesystem_root(Path("/tmp"))


def test_find_source_files_merges_patterns(tmp_path):
    (tmp_path / "b.css").write_text("", encoding="utf-8")
    (tmp_path / "a.md").write_text("", encoding="utf-8")
    (tmp_path / "c.js").write_text("", encoding="utf-8")
    assert find_source_files(tmp_path) == [tmp_path / "a.md", tmp_path / "b.css"]


def test_string_helpers():
    assert ucfirst("buttons") == "Buttons"
    assert ucfirst("") == ""
    assert titleize("getting-started.md") == "Getting Started"
    assert titleize("base_css") == "Base Css"
    assert is_markdown(Path("a.MD"))
    assert is_stylesheet(Path("a.css"))
    assert not is_stylesheet(Path("a.scss"))
