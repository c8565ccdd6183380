from __future__ import annotations

import posixpath

CURRENT_DIR = "./"
DEFAULT_DB_NAME = "mydb"


def resolve_project_folder(raw: str | None) -> str:
    """Return the project folder, defaulting to the current directory."""
    v = (raw or "").strip()
    return v or CURRENT_DIR


def is_current_dir(folder: str) -> bool:
    return (folder or "").strip() in (CURRENT_DIR, ".")


def default_db_name(folder: str) -> str:
    """Derive the database name from the project folder.

    The current directory maps to ``mydb``; any other folder maps to its last
    path segment. Only ``/`` separates segments and trailing ones are
    ignored, like ``basename``.
    """
    if is_current_dir(folder):
        return DEFAULT_DB_NAME
    name = posixpath.basename((folder or "").strip().rstrip("/"))
    return name or DEFAULT_DB_NAME
