from __future__ import annotations

import asyncio
from pathlib import Path

import pytest

from sitecheck.config import ValidateConfig
from sitecheck.indexer import DuplicatePageError, build_index


def _config(**kwargs) -> ValidateConfig:
    return ValidateConfig(dir=Path("site"), **kwargs)


def test_build_index_normalizes_pages_and_images(memory_site) -> None:
    reader = memory_site(
        {
            "index.html": '<a href="/guide">Guide</a><img src="/img/logo.png">',
            "guide/index.html": '<h1 id="start">Start</h1>',
            "guide/faq.html": "<p>FAQ</p>",
            "img/logo.png": "",
            "img/photo.jpeg": "",
            "notes.txt": "",
        }
    )

    index = asyncio.run(build_index(reader, _config()))

    assert set(index.pages) == {"/", "/guide/", "/guide/faq.html"}
    assert index.images == {"/img/logo.png", "/img/photo.jpeg"}

    home = index.pages["/"]
    assert home.source_path == "/index.html"
    assert home.outgoing_links == {"/guide"}
    assert home.outgoing_images == {"/img/logo.png"}

    guide = index.pages["/guide/"]
    assert guide.source_path == "/guide/index.html"
    assert guide.anchors == {"start"}


def test_build_index_pages_are_read_only(memory_site) -> None:
    index = asyncio.run(build_index(memory_site({"index.html": "<p></p>"}), _config()))
    with pytest.raises(TypeError):
        index.pages["/other"] = index.pages["/"]  # type: ignore[index]


def test_duplicate_page_paths_keep_last_in_sorted_order(memory_site) -> None:
    reader = memory_site(
        {
            "a/index.html": '<p id="second"></p>',
            "a//index.html": '<p id="first"></p>',
        }
    )

    index = asyncio.run(build_index(reader, _config()))

    assert list(index.pages) == ["/a/"]
    assert index.pages["/a/"].anchors == {"second"}


def test_duplicate_page_paths_can_fail_the_run(memory_site) -> None:
    reader = memory_site(
        {
            "a/index.html": "<p></p>",
            "a//index.html": "<p></p>",
        }
    )

    with pytest.raises(DuplicatePageError) as excinfo:
        asyncio.run(build_index(reader, _config(fail_on_duplicate_pages=True)))
    assert excinfo.value.path == "/a/"


def test_read_error_fails_the_whole_index(memory_site) -> None:
    class BrokenReader(memory_site):
        def read_text(self, relative_path: str) -> str:
            if relative_path == "bad.html":
                raise PermissionError(relative_path)
            return super().read_text(relative_path)

    reader = BrokenReader({"good.html": "<p></p>", "bad.html": "<p></p>"})
    with pytest.raises(PermissionError):
        asyncio.run(build_index(reader, _config()))
