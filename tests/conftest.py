"""
Shared pytest fixtures and utilities for the vashstatic test suite.

This module provides:
- Paths to template fixtures under tests/resources
- A stand-in template compiler for pipeline tests
- Settings isolated from the process environment
- Helpers for testing Pydantic validation
"""

import shutil
from pathlib import Path
from typing import Any, Type

import pytest
from pydantic import BaseModel, ValidationError

from vashstatic.core.config import Settings, get_settings


RESOURCES = Path(__file__).parent / "resources"


class FakeTemplate:
    """Compiled template whose output is its own source text."""

    def __init__(self, text: str):
        self.text = text

    def __call__(self, model: Any = None) -> str:
        return self.text

    def to_client_string(self) -> str:
        return self.text


class FakeCompiler:
    """Records everything the pipeline hands to the compilation engine."""

    def __init__(self):
        self.compiled: list[str] = []
        self.helpers: list[str] = []
        self.installed: dict[str, FakeTemplate] = {}
        self.options: list[Any] = []

    def compile(self, text, options):
        self.compiled.append(text)
        self.options.append(options)
        return FakeTemplate(text)

    def compile_helper(self, text, options):
        self.helpers.append(text)

    def load(self, client_string):
        return FakeTemplate(client_string)

    def install(self, name, template):
        self.installed[name] = template


@pytest.fixture
def resources() -> Path:
    """Directory holding template fixtures."""
    return RESOURCES


@pytest.fixture
def read_resource():
    """Read a template fixture, normalizing line endings to '\\n'."""
    def _read(name: str) -> str:
        text = (RESOURCES / name).read_text(encoding="utf-8")
        return text.replace("\r\n", "\n").replace("\r", "\n")
    return _read


@pytest.fixture
def fake_compiler() -> FakeCompiler:
    """Template compiler stand-in"""
    return FakeCompiler()


@pytest.fixture
def settings(monkeypatch) -> Settings:
    """Default settings, unaffected by VASHSTATIC_* variables or a .env file."""
    for name in list(Settings.model_fields):
        monkeypatch.delenv(f"VASHSTATIC_{name}", raising=False)
    get_settings.cache_clear()
    yield Settings(_env_file=None)
    get_settings.cache_clear()


@pytest.fixture
def sample_cache(tmp_path: Path) -> Path:
    """Writable copy of the sample template cache."""
    cache_path = tmp_path / "cache" / "sample-template-cache.json"
    cache_path.parent.mkdir()
    shutil.copy(RESOURCES / "sample-template-cache.json", cache_path)
    return cache_path


@pytest.fixture
def assert_validation_error():
    """Helper to assert that a ValidationError is raised with expected details."""
    def _assert_validation(
        model_class: Type[BaseModel],
        data: dict[str, Any],
        expected_field: str | None = None,
    ) -> ValidationError:
        """
        Assert that creating a model raises ValidationError.

        Args:
            model_class: The Pydantic model class
            data: Invalid data to pass to model
            expected_field: Expected field name in error (optional)

        Returns:
            The ValidationError that was raised
        """
        with pytest.raises(ValidationError) as exc_info:
            model_class(**data)

        error = exc_info.value
        if expected_field:
            field_errors = [e for e in error.errors() if e['loc'][0] == expected_field]
            assert len(field_errors) > 0, f"Expected error for field '{expected_field}' not found"

        return error

    return _assert_validation
