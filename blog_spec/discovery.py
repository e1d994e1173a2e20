"""Locating and reading site files.

Read failures are raised as DocumentReadError so they are never confused
with content failures; the suite decides how to isolate them.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml  # type: ignore[import-untyped]

from .exceptions import ConfigFileError
from .exceptions import DocumentReadError
from .models import Document

DEFAULT_POSTS_PATTERN = "**/*.md"


def discover_posts(posts_dir: Path, pattern: str = DEFAULT_POSTS_PATTERN) -> list[Path]:
    """Return the post files under ``posts_dir`` matching ``pattern``.

    The search is recursive for ``**`` patterns and sorted so runs are
    reproducible. A missing directory has no posts.
    """
    posts_dir = Path(posts_dir)
    if not posts_dir.is_dir():
        return []
    return sorted(path for path in posts_dir.glob(pattern) if path.is_file())


def read_text(path: Path) -> str:
    """Read a UTF-8 file (BOM tolerated), raising DocumentReadError on any I/O failure."""
    try:
        with open(path, encoding="utf-8-sig") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise DocumentReadError(str(path), str(e)) from e


def load_document(path: Path) -> Document:
    """Read ``path`` into a Document identified by its path."""
    return Document(identifier=str(path), raw_text=read_text(path))


def load_site_config(path: Path) -> dict[str, Any]:
    """Read and parse the site configuration file."""
    content = read_text(path)
    try:
        config = yaml.safe_load(content)
    except (yaml.YAMLError, ValueError) as e:
        raise ConfigFileError(str(path), f"invalid YAML: {e}") from e

    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ConfigFileError(str(path), f"expected a mapping, got {type(config).__name__}")
    return config
