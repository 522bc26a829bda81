import pytest

from vgit.browse import (
    Breadcrumb,
    DisplayKind,
    build_breadcrumbs,
    build_display_path,
    entry_display_path,
    split_path,
)
from vgit.repository import EntryKind, TreeEntry


class TestSplitPath:
    def test_drops_empty_segments(self) -> None:
        assert split_path("/src//lib/") == ["src", "lib"]

    def test_empty(self) -> None:
        assert split_path("") == []


class TestBuildDisplayPath:
    def test_prefix_up_to_index(self) -> None:
        assert (
            build_display_path("project", "tree", "master", ["src", "lib"], 0)
            == "/project/tree/master/src"
        )

    def test_all_segments(self) -> None:
        assert (
            build_display_path("project", DisplayKind.BLOB, "master", ["src", "main.go"])
            == "/project/blob/master/src/main.go"
        )

    def test_no_segments(self) -> None:
        assert build_display_path("project", "raw", "v1.0") == "/project/raw/v1.0"

    def test_shorthand_with_slash(self) -> None:
        assert (
            build_display_path("project", "tree", "feature/x", ["docs"])
            == "/project/tree/feature/x/docs"
        )

    def test_quotes_special_characters(self) -> None:
        assert (
            build_display_path("project", "blob", "master", ["my file#1.txt"])
            == "/project/blob/master/my%20file%231.txt"
        )

    def test_rejects_unknown_kind(self) -> None:
        with pytest.raises(ValueError, match="commit"):
            build_display_path("project", "commit", "master")


class TestEntryDisplayPath:
    def test_directory_links_to_tree(self) -> None:
        entry = TreeEntry("lib", "src/lib", EntryKind.DIRECTORY, 0o040000, "0" * 40)

        assert entry_display_path("p", "master", entry) == "/p/tree/master/src/lib"

    def test_file_links_to_blob(self) -> None:
        entry = TreeEntry("a.py", "src/a.py", EntryKind.FILE, 0o100644, "0" * 40)

        assert entry_display_path("p", "master", entry) == "/p/blob/master/src/a.py"


class TestBuildBreadcrumbs:
    def test_directory_crumbs(self) -> None:
        assert build_breadcrumbs("p", "master", ["src", "lib"]) == [
            Breadcrumb("src", "/p/tree/master/src"),
            Breadcrumb("lib", "/p/tree/master/src/lib"),
        ]

    def test_last_crumb_of_file_links_to_blob(self) -> None:
        crumbs = build_breadcrumbs("p", "master", ["src", "a.py"], last_is_file=True)

        assert crumbs[0].href == "/p/tree/master/src"
        assert crumbs[1].href == "/p/blob/master/src/a.py"

    def test_no_segments(self) -> None:
        assert build_breadcrumbs("p", "master", []) == []
