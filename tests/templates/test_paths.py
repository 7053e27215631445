"""Tests for template path helpers."""

import pytest

from vashstatic.templates.paths import (
    get_dir_type_from_path,
    get_file_name,
    get_module_name,
    slash,
    template_name,
)


class TestFileNames:
    """Test file name extraction."""

    def test_slash(self):
        assert slash("app\\pg\\home\\Index.vash") == "app/pg/home/Index.vash"

    @pytest.mark.parametrize("path,include_ext,expected", [
        ("app/pg/home/Index.vash", False, "Index"),
        ("app/pg/home/Index.vash", True, "Index.vash"),
        ("app\\wg\\nav\\item.min.vash", False, "item.min"),
        ("Makefile", False, "Makefile"),
    ])
    def test_get_file_name(self, path, include_ext, expected):
        assert get_file_name(path, include_ext) == expected


class TestModuleNames:
    """Test module name derivation."""

    def test_nested_module(self):
        """Test the directory below the type is the module."""
        assert get_module_name("app/pg/home/tmpl/Index.vash", "pg") == "home"

    def test_nested_module_with_file_name(self):
        assert get_module_name("app/pg/home/tmpl/Index.vash", "pg", True) == "home/Index"

    def test_windows_path(self):
        assert get_module_name("app\\wg\\appHeader\\navItem.vash", "wg", True) == "appHeader/navItem"

    def test_file_directly_in_type_dir(self):
        """Test a file sitting in the type directory has no module."""
        assert get_module_name("app/glb/_Layout.vash", "glb") == ""
        assert get_module_name("app/glb/_Layout.vash", "glb", True) == "_Layout"

    def test_type_not_in_path(self):
        assert get_module_name("app/other/Index.vash", "pg", True) == "Index"

    def test_redundant_segments_normalized(self):
        assert get_module_name("app/./pg/../pg/home/Index.vash", "pg", True) == "home/Index"


class TestDirTypes:
    """Test type directory lookup and cache names."""

    def test_first_matching_type(self):
        assert get_dir_type_from_path("app/wg/nav/item.vash", ["pg", "wg", "glb"]) == "wg"

    def test_default_type(self):
        assert get_dir_type_from_path("app/other/item.vash", ["pg", "wg"]) == "pg"
        assert get_dir_type_from_path("app/other/item.vash", ["wg"], default="glb") == "glb"

    def test_type_must_be_whole_segment(self):
        assert get_dir_type_from_path("app/wgx/item.vash", ["wg"], default="pg") == "pg"

    @pytest.mark.parametrize("dir_type,path,expected", [
        ("pg", "app/pg/home/Index.vash", "pg_home/Index"),
        ("wg", "app/wg/appHeader/navItem.vash", "wg_appHeader/navItem"),
        ("glb", "app/glb/_Layout.vash", "glb__Layout"),
    ])
    def test_template_name(self, dir_type, path, expected):
        assert template_name(dir_type, path) == expected
