"""File listing and reading for a site root directory."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Protocol

logger = logging.getLogger("sitecheck")


def _is_hidden(relative: Path) -> bool:
    return any(part.startswith(".") for part in relative.parts)


class SiteReader(Protocol):
    """Source of site files, addressed by root-relative posix paths."""

    def glob(self, pattern: str) -> List[str]:
        ...

    def read_text(self, relative_path: str) -> str:
        ...


class FilesystemReader:
    """Reads a built site from a directory on disk."""

    def __init__(self, root: Path) -> None:
        root = Path(root).expanduser()
        if not root.is_dir():
            raise FileNotFoundError(f"Site directory does not exist: {root}")
        self.root = root

    def glob(self, pattern: str) -> List[str]:
        """Files matching ``pattern``, skipping hidden files and directories."""
        matches = sorted(
            path.relative_to(self.root).as_posix()
            for path in self.root.glob(pattern)
            if path.is_file() and not _is_hidden(path.relative_to(self.root))
        )
        logger.debug("Pattern %s matched %d files under %s", pattern, len(matches), self.root)
        return matches

    def read_text(self, relative_path: str) -> str:
        return (self.root / relative_path).read_text(encoding="utf-8")
