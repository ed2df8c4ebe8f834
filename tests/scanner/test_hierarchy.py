"""Unit tests for hierarchy building and rendering."""

import os
from unittest.mock import patch

import pytest

from metatron.scanner.file_system_node import FileSystemNode
from metatron.scanner.hierarchy import build_hierarchy_tree, get_hierarchy, render_hierarchy, stream_hierarchy
from metatron.scanner.scan_options import ScanOptions


@pytest.fixture
def temp_directory(tmp_path):
    root = tmp_path / "project"
    (root / "alpha").mkdir(parents=True)
    (root / "alpha" / "b.txt").write_text("b")
    (root / "alpha" / "a.md").write_text("a")
    (root / "beta").mkdir()
    (root / "zeta.md").write_text("z")
    (root / "notes.txt").write_text("n")
    return root


def test_renders_full_tree_without_filters(temp_directory):
    result = get_hierarchy(str(temp_directory), "", False, "", [])
    assert result.success
    assert result.error is None
    assert result.hierarchy == (
        "📁 project\n"
        "├── 📁 alpha\n"
        "│   ├── 📄 a.md\n"
        "│   └── 📄 b.txt\n"
        "├── 📁 beta\n"
        "├── 📄 notes.txt\n"
        "└── 📄 zeta.md\n"
    )


def test_extension_filter_prunes_folders_without_matches(temp_directory):
    result = get_hierarchy(temp_directory, ".md")
    assert result.hierarchy == ("📁 project\n" "├── 📁 alpha\n" "│   └── 📄 a.md\n" "└── 📄 zeta.md\n")


def test_last_surviving_folder_gets_terminal_connector(tmp_path):
    root = tmp_path / "root"
    (root / "alpha").mkdir(parents=True)
    (root / "alpha" / "keep.md").write_text("k")
    (root / "beta").mkdir()
    (root / "beta" / "skip.txt").write_text("s")

    result = get_hierarchy(root, "md")
    assert result.hierarchy == "📁 root\n" "└── 📁 alpha\n" "    └── 📄 keep.md\n"


def test_nested_empty_branches_are_pruned(tmp_path):
    root = tmp_path / "root"
    (root / "a" / "b" / "c").mkdir(parents=True)
    (root / "a" / "b" / "c" / "only.txt").write_text("x")
    (root / "x" / "y").mkdir(parents=True)

    result = get_hierarchy(root, ".txt")
    assert result.hierarchy == (
        "📁 root\n" "└── 📁 a\n" "    └── 📁 b\n" "        └── 📁 c\n" "            └── 📄 only.txt\n"
    )


def test_empty_folders_shown_without_extension_filter(tmp_path):
    root = tmp_path / "root"
    (root / "empty").mkdir(parents=True)
    (root / "logs").mkdir()
    (root / "logs" / "app.log").write_text("x")

    # An ignore list alone does not hide folders.
    result = get_hierarchy(root, "", False, ".log")
    assert result.hierarchy == "📁 root\n" "├── 📁 empty\n" "└── 📁 logs\n"


def test_folders_only_has_no_files(tmp_path):
    (tmp_path / "folder").mkdir()
    (tmp_path / "file.txt").write_text("hello")

    result = get_hierarchy(str(tmp_path), "", True, "", [])
    assert result.success
    assert "📄" not in result.hierarchy
    assert "📁 folder" in result.hierarchy


def test_folders_only_keeps_folders_despite_extension_filter(temp_directory):
    result = get_hierarchy(temp_directory, ".nothing", True)
    assert result.hierarchy == "📁 project\n" "├── 📁 alpha\n" "└── 📁 beta\n"


def test_skips_ignored_folder_by_name(tmp_path):
    (tmp_path / "skipme").mkdir()
    (tmp_path / "skipme" / "a.txt").write_text("hello")
    (tmp_path / "keep").mkdir()
    (tmp_path / "keep" / "b.txt").write_text("hello")

    result = get_hierarchy(str(tmp_path), "", False, "", ["skipme"])
    assert result.success
    assert "skipme" not in result.hierarchy
    assert "keep" in result.hierarchy


def test_skips_ignored_folder_by_path(tmp_path):
    skip = tmp_path / "skipme"
    keep = tmp_path / "keep"
    (skip / "child").mkdir(parents=True)
    keep.mkdir()
    (skip / "child" / "a.txt").write_text("hello")
    (keep / "b.txt").write_text("hello")

    result = get_hierarchy(str(tmp_path), "", False, "", [str(skip)])
    assert result.success
    assert "skipme" not in result.hierarchy
    assert "keep" in result.hierarchy


def test_ignored_folder_changes_last_child(tmp_path):
    root = tmp_path / "root"
    (root / "a").mkdir(parents=True)
    (root / "z_ignored").mkdir()
    assert get_hierarchy(root, ignored_folders=["Z_IGNORED"]).hierarchy == "📁 root\n" "└── 📁 a\n"


def test_root_is_not_matched_against_ignored_folders(temp_directory):
    result = get_hierarchy(temp_directory, ".md", False, "", ["project"])
    assert result.hierarchy.startswith("📁 project\n")
    assert "a.md" in result.hierarchy


def test_sorting_is_case_sensitive_code_point_order(tmp_path):
    for name in ["b.txt", "B.txt", "a.txt", "_x.txt"]:
        (tmp_path / name).write_text("x")
    lines = get_hierarchy(tmp_path).hierarchy.splitlines()[1:]
    assert [line[len("├── 📄 ") :] for line in lines] == ["B.txt", "_x.txt", "a.txt", "b.txt"]


def test_output_is_deterministic(temp_directory):
    first = get_hierarchy(temp_directory, ".md .txt")
    second = get_hierarchy(temp_directory, ".md .txt")
    assert first.hierarchy == second.hierarchy


def test_missing_root_renders_root_line_only(tmp_path):
    result = get_hierarchy(tmp_path / "missing")
    assert result.success
    assert result.hierarchy == "📁 missing\n"


def test_root_without_base_name_uses_path():
    with patch("metatron.scanner.hierarchy.read_directory", return_value=[]):
        tree = build_hierarchy_tree(os.sep, ScanOptions())
    assert tree.name == os.sep
    assert tree.children == ()


def test_unreadable_subdirectory_renders_without_children(temp_directory):
    locked = str(temp_directory / "alpha")
    real_scandir = os.scandir

    def fake_scandir(path):
        if os.fspath(path) == locked:
            raise PermissionError(13, "Permission denied", path)
        return real_scandir(path)

    with patch("metatron.scanner.directory_reader.os.scandir", side_effect=fake_scandir):
        unfiltered = get_hierarchy(temp_directory)
        filtered = get_hierarchy(temp_directory, ".md")

    assert "├── 📁 alpha\n├── 📁 beta\n" in unfiltered.hierarchy
    assert "alpha" not in filtered.hierarchy


def test_build_hierarchy_tree_structure(temp_directory):
    tree = build_hierarchy_tree(temp_directory, ScanOptions.from_raw(".md"))
    assert tree.is_dir
    assert tree.full_path == str(temp_directory)
    assert [child.name for child in tree.children] == ["alpha", "zeta.md"]
    alpha = tree.children[0]
    assert alpha.is_dir
    assert alpha.full_path == os.path.join(str(temp_directory), "alpha")
    assert [child.name for child in alpha.children] == ["a.md"]


def test_stream_and_render_agree():
    root = FileSystemNode("root", is_dir=True)
    first = FileSystemNode("first", parent=root, is_dir=True)
    FileSystemNode("inner.py", parent=first)
    FileSystemNode("last.py", parent=root)

    lines = list(stream_hierarchy(root))
    assert lines == ["📁 root", "├── 📁 first", "│   └── 📄 inner.py", "└── 📄 last.py"]
    assert render_hierarchy(root) == "\n".join(lines) + "\n"


def test_continuation_column_under_non_last_folder():
    root = FileSystemNode("root", is_dir=True)
    outer = FileSystemNode("outer", parent=root, is_dir=True)
    inner = FileSystemNode("inner", parent=outer, is_dir=True)
    FileSystemNode("deep.txt", parent=inner)
    FileSystemNode("sibling.txt", parent=outer)
    FileSystemNode("tail.txt", parent=root)

    assert list(stream_hierarchy(root)) == [
        "📁 root",
        "├── 📁 outer",
        "│   ├── 📁 inner",
        "│   │   └── 📄 deep.txt",
        "│   └── 📄 sibling.txt",
        "└── 📄 tail.txt",
    ]


def test_result_serializes_to_wire_shape(tmp_path):
    data = get_hierarchy(tmp_path / "missing").to_dict()
    assert data == {"success": True, "hierarchy": "📁 missing\n", "error": None}


def test_undecodable_names_are_replaced(tmp_path):
    try:
        with open(os.path.join(os.fsencode(str(tmp_path)), b"bad\xff.txt"), "wb"):
            pass
    except OSError:
        pytest.skip("filesystem rejects non-UTF-8 file names")
    result = get_hierarchy(tmp_path, "txt")
    assert result.hierarchy.endswith("└── 📄 bad�.txt\n")
    result.hierarchy.encode("utf-8")
