from __future__ import annotations

from pathlib import Path
from typing import Dict, List

import pytest

FIXTURES = Path(__file__).parent / "fixtures"


class MemoryReader:
    """In-memory site keyed by root-relative path."""

    def __init__(self, files: Dict[str, str]) -> None:
        self.files = files

    def glob(self, pattern: str) -> List[str]:
        suffix = pattern.rsplit("*", 1)[-1]
        return sorted(path for path in self.files if path.endswith(suffix))

    def read_text(self, relative_path: str) -> str:
        return self.files[relative_path]


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES


@pytest.fixture
def memory_site():
    return MemoryReader
