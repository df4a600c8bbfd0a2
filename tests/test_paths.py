"""Tests for nbpopulate.paths."""

from nbpopulate.paths import base_name, join_path, parent_path, split_path, strip_prefix


class TestSplitJoin:
    def test_split_drops_empty_segments(self):
        assert split_path("/notebooks//data/") == ["notebooks", "data"]

    def test_split_empty_is_root(self):
        assert split_path("") == []

    def test_join_skips_empty_parts(self):
        assert join_path("", "notebooks", "", "data/sample.csv") == "notebooks/data/sample.csv"

    def test_join_normalizes_slashes(self):
        assert join_path("notebooks/", "/intro.ipynb") == "notebooks/intro.ipynb"


class TestParentAndName:
    def test_parent_of_nested_path(self):
        assert parent_path("a/b/c.ipynb") == "a/b"

    def test_parent_of_top_level_is_root(self):
        assert parent_path("notebooks") == ""
        assert parent_path("") == ""

    def test_base_name(self):
        assert base_name("a/b/c.ipynb") == "c.ipynb"
        assert base_name("") == ""


class TestStripPrefix:
    def test_strips_leading_directory(self):
        assert strip_prefix("docs/01_intro.ipynb", "docs") == "01_intro.ipynb"

    def test_trailing_slash_on_prefix(self):
        assert strip_prefix("docs/01_intro.ipynb", "docs/") == "01_intro.ipynb"

    def test_only_whole_directory_matches(self):
        assert strip_prefix("docsx/a.ipynb", "docs") == "docsx/a.ipynb"

    def test_prefix_must_be_leading(self):
        assert strip_prefix("other/docs/a.ipynb", "docs") == "other/docs/a.ipynb"

    def test_empty_prefix_is_noop(self):
        assert strip_prefix("a.ipynb", "") == "a.ipynb"
