"""
Template path helpers.

Templates live in directories named after their module type (``pg`` for
pages, ``wg`` for widgets, ``glb`` for globals, ...). Cached template names
are derived from that layout, e.g. ``app/pg/home/tmpl/Index.vash`` becomes
``pg_home/Index``.
"""

from __future__ import annotations

import posixpath
from typing import Iterable


def slash(path: str) -> str:
    """Convert Windows separators to forward slashes."""
    return str(path).replace("\\", "/")


def get_file_name(path: str, include_ext: bool = False) -> str:
    """
    Get just the file name from a path.

    Args:
        path: Windows or POSIX file path
        include_ext: Keep the file extension

    Returns:
        File name, without its extension unless ``include_ext``
    """
    name = slash(path).rsplit("/", 1)[-1]
    if include_ext or "." not in name:
        return name
    return name[:name.rfind(".")]


def get_module_name(path: str, dir_type: str, include_file_name: bool = False) -> str:
    """
    Get the module name of a file nested inside a type directory.

    ``app/pg/home/tmpl/Index.vash`` with type ``pg`` gives ``home``. Files
    that sit directly inside the type directory (``app/glb/_Layout.vash``)
    have no module and give an empty string.

    Args:
        path: Path to any file within a module
        dir_type: Module type, such as 'pg', 'wg' or 'glb'
        include_file_name: Append the file name (without extension)

    Returns:
        Module name, optionally followed by ``/<file name>``
    """
    path = posixpath.normpath(slash(path))

    full_file_name = get_file_name(path, include_ext=True)
    file_name = get_file_name(path) if include_file_name else ""
    parts = path.split(dir_type + "/")

    if len(parts) < 2 or parts[0] + dir_type + "/" + full_file_name == path:
        return file_name

    module_name = parts[1].split("/")[0]
    return module_name + ("/" if module_name and file_name else "") + file_name


def get_dir_type_from_path(path: str, dir_types: Iterable[str], default: str = "pg") -> str:
    """
    Return the first type directory found in ``path``.

    Args:
        path: Path to a page, widget or global template
        dir_types: Candidate type directory names
        default: Type used when none is found (the page type)

    Returns:
        Matching type, or ``default``
    """
    path = slash(path)
    for dir_type in dir_types:
        if f"/{dir_type}/" in path:
            return dir_type
    return default


def template_name(dir_type: str, path: str) -> str:
    """Cache key for a template, e.g. ``wg_appHeader/navItem``."""
    return f"{dir_type}_{get_module_name(path, dir_type, include_file_name=True)}"
