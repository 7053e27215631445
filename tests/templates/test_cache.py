"""Tests for the JSON template cache."""

import json

import pytest

from vashstatic.core.errors import TemplateCacheError
from vashstatic.templates.cache import TemplateCache, load_cache


class TestLoadCache:
    """Test reading the cache file."""

    def test_loads_entries(self, sample_cache):
        cache = load_cache(sample_cache)
        assert cache["pg_about/Index"] == "<h1>About Us</h1><p>I am a list sample</p>"
        assert set(cache) == {"pg_about/Index", "glb__Layout"}

    def test_missing_file(self, tmp_path):
        """Test a missing cache is reported as None."""
        assert load_cache(tmp_path / "missing.json") is None

    def test_not_json_suffix(self, tmp_path):
        path = tmp_path / "cache.txt"
        path.write_text("{}", encoding="utf-8")
        assert load_cache(path) is None

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "cache.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(TemplateCacheError) as exc_info:
            load_cache(path)
        assert exc_info.value.details["cache_path"] == str(path)

    def test_top_level_not_object(self, tmp_path):
        path = tmp_path / "cache.json"
        path.write_text("[1, 2]", encoding="utf-8")
        with pytest.raises(TemplateCacheError):
            load_cache(path)


class TestTemplateCache:
    """Test cache lookups and updates."""

    def test_requires_json_suffix(self, tmp_path):
        with pytest.raises(TemplateCacheError):
            TemplateCache(tmp_path / "cache.txt")

    def test_get_and_names(self, sample_cache):
        cache = TemplateCache(sample_cache)
        assert cache.get("glb__Layout") == "<html>@Html.LayoutContent()</html>"
        assert cache.get("pg_missing/Index") is None
        assert cache.names() == ["glb__Layout", "pg_about/Index"]

    def test_missing_file_is_empty(self, tmp_path):
        assert TemplateCache(tmp_path / "cache.json").load() == {}

    def test_update_existing(self, sample_cache):
        """Test replacing an entry keeps the others."""
        cache = TemplateCache(sample_cache)

        assert cache.update("pg_about/Index", "<h1>New</h1>") is True

        data = json.loads(sample_cache.read_text(encoding="utf-8"))
        assert data["pg_about/Index"] == "<h1>New</h1>"
        assert data["glb__Layout"] == "<html>@Html.LayoutContent()</html>"

    def test_update_new_name(self, tmp_path, caplog):
        """Test a new name is added with a warning."""
        cache = TemplateCache(tmp_path / "nested" / "cache.json")

        with caplog.at_level("WARNING"):
            assert cache.update("pg_home/Index", "<p>Home</p>") is False

        assert "no pre-existing cached template" in caplog.text
        assert cache.get("pg_home/Index") == "<p>Home</p>"

    def test_update_is_visible_to_new_instances(self, sample_cache):
        """Test nothing is held between calls."""
        TemplateCache(sample_cache).update("wg_nav/item", "<nav></nav>")
        assert TemplateCache(sample_cache).get("wg_nav/item") == "<nav></nav>"
