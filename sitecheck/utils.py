"""Utility helpers for path normalization."""

from __future__ import annotations

import re

SEPARATOR_RUN = re.compile(r"/{2,}")
INDEX_FILE = "index.html"


def collapse_separators(path: str) -> str:
    """Collapse runs of ``/`` into a single separator."""
    return SEPARATOR_RUN.sub("/", path)


def normalize_asset_path(relative_path: str) -> str:
    """Root-relative form of a file path, e.g. ``img/a.png`` -> ``/img/a.png``."""
    return collapse_separators("/" + relative_path.replace("\\", "/"))


def normalize_page_path(relative_path: str) -> str:
    """Page path of an HTML file; ``docs/index.html`` becomes ``/docs/``."""
    path = normalize_asset_path(relative_path)
    if path.endswith("/" + INDEX_FILE):
        path = path[: -len(INDEX_FILE)]
    return path
