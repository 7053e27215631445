"""
Precompiled template cache.

The cache is a single JSON object mapping template names to the client
string of their compiled render function. It is read whole, looked up by
exact key and rewritten whole on every update.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Dict, List, Optional

from vashstatic.core.errors import TemplateCacheError
from vashstatic.core.logging import get_logger

logger = get_logger(__name__)


def _read(cache_path: Path) -> Dict[str, str]:
    try:
        data = json.loads(cache_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise TemplateCacheError(str(cache_path), str(exc)) from exc

    if not isinstance(data, dict):
        raise TemplateCacheError(str(cache_path), "top-level value is not an object")
    return data


def load_cache(cache_path: str | Path) -> Optional[Dict[str, str]]:
    """
    Load the template cache.

    Args:
        cache_path: Path to the JSON template cache

    Returns:
        Name to client-string mapping, or None if the file does not exist
        or is not a '.json' file

    Raises:
        TemplateCacheError: If the file exists but is not valid JSON
    """
    path = Path(cache_path)
    if not path.exists() or path.suffix != ".json":
        logger.warning(
            "Cache destination did not exist or was not a '.json' file",
            extra={"extra_data": {"cache_path": str(path)}},
        )
        return None
    return _read(path)


class TemplateCache:
    """
    File-backed template cache.

    Nothing is held between calls: every lookup re-reads the file, so the
    cache always reflects the latest write from any process.
    """

    def __init__(self, cache_path: str | Path):
        self.cache_path = Path(cache_path)
        if self.cache_path.suffix != ".json":
            raise TemplateCacheError(str(self.cache_path), "not a '.json' file")

    def load(self) -> Dict[str, str]:
        """Read the whole cache; a missing file is an empty cache."""
        if not self.cache_path.exists():
            return {}
        return _read(self.cache_path)

    def get(self, name: str) -> Optional[str]:
        return self.load().get(name)

    def names(self) -> List[str]:
        return sorted(self.load())

    def update(self, name: str, client_string: str) -> bool:
        """
        Store a compiled template, replacing any entry with the same name.

        Args:
            name: Template name, e.g. 'pg_home/Index'
            client_string: Serialized render function

        Returns:
            True if the name was already cached
        """
        entries = self.load()
        existed = name in entries
        if not existed:
            logger.warning(
                "There was no pre-existing cached template with that name",
                extra={"extra_data": {"name": name}},
            )

        entries[name] = client_string

        self.cache_path.parent.mkdir(parents=True, exist_ok=True)
        self.cache_path.write_text(json.dumps(entries), encoding="utf-8")
        logger.info(
            "Updated template cache",
            extra={"extra_data": {"name": name, "cache_path": str(self.cache_path)}},
        )
        return existed
