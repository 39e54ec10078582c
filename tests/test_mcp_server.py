from __future__ import annotations

import asyncio
from pathlib import Path

import pytest

from sitecheck.mcp_server import validate_site


def test_validate_site_lists_broken_references(fixtures_dir: Path) -> None:
    markdown = asyncio.run(validate_site(str(fixtures_dir / "broken-link")))

    assert markdown.startswith("# Site check: FAILED")
    assert "- Links checked: 2 (1 broken)" in markdown
    assert "- `/index.html` -> `/broken`" in markdown
    assert "Missing images" not in markdown


def test_validate_site_reports_ok(fixtures_dir: Path) -> None:
    markdown = asyncio.run(validate_site(str(fixtures_dir / "happy")))

    assert markdown.startswith("# Site check: OK")
    assert "Broken links" not in markdown


def test_validate_site_rejects_missing_path(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        asyncio.run(validate_site(str(tmp_path / "missing")))
