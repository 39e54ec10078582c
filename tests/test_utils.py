from __future__ import annotations

import pytest

from sitecheck.utils import collapse_separators, normalize_asset_path, normalize_page_path


@pytest.mark.parametrize(
    ("relative", "expected"),
    [
        ("index.html", "/"),
        ("about.html", "/about.html"),
        ("docs/index.html", "/docs/"),
        ("docs/guide/index.html", "/docs/guide/"),
        ("docs//guide/index.html", "/docs/guide/"),
        ("docs/myindex.html", "/docs/myindex.html"),
    ],
)
def test_normalize_page_path(relative: str, expected: str) -> None:
    assert normalize_page_path(relative) == expected


def test_normalize_asset_path_keeps_file_name() -> None:
    assert normalize_asset_path("img/logo.png") == "/img/logo.png"
    assert normalize_asset_path("docs/index.html") == "/docs/index.html"
    assert normalize_asset_path("img\\nested\\a.gif") == "/img/nested/a.gif"


def test_collapse_separators() -> None:
    assert collapse_separators("//a///b/") == "/a/b/"
