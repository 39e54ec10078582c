"""HTML parsing and reference extraction."""

from __future__ import annotations

from typing import FrozenSet, Iterable, Tuple

from bs4 import BeautifulSoup

from .config import DEFAULT_IMAGE_SELECTOR, DEFAULT_LINK_SELECTOR, IMAGE_TYPES

EXTERNAL_PREFIXES = ("http://", "https://")
LOCAL_IMAGE_PREFIXES = ("/", ".")
IMAGE_SUFFIXES = tuple(f".{ext}" for ext in IMAGE_TYPES)


def parse_document(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "html.parser")


def _attribute_values(soup: BeautifulSoup, selector: str, attribute: str) -> Iterable[str]:
    """Yield non-empty values of ``attribute`` on elements matching ``selector``."""
    for element in soup.select(selector):
        value = element.get(attribute)
        if value:
            yield value


def is_internal_link(href: str) -> bool:
    return not href.startswith(EXTERNAL_PREFIXES)


def is_local_image(src: str) -> bool:
    return src.startswith(LOCAL_IMAGE_PREFIXES) and src.endswith(IMAGE_SUFFIXES)


def extract_references(
    soup: BeautifulSoup,
    link_selector: str = DEFAULT_LINK_SELECTOR,
    image_selector: str = DEFAULT_IMAGE_SELECTOR,
) -> Tuple[FrozenSet[str], FrozenSet[str], FrozenSet[str]]:
    """Extract anchors, internal links and local image references from a page.

    Anchors are the ``id`` of every element, not only ``<a>`` tags. Links are
    raw ``href`` values other than absolute ``http(s)`` URLs, so mailto:,
    query-only and fragment-only values are kept. Images are raw ``src``
    values that are root- or dot-relative and end in a known image extension.
    """
    anchors = frozenset(_attribute_values(soup, "[id]", "id"))
    links = frozenset(
        href
        for href in _attribute_values(soup, link_selector, "href")
        if is_internal_link(href)
    )
    images = frozenset(
        src
        for src in _attribute_values(soup, image_selector, "src")
        if is_local_image(src)
    )
    return anchors, links, images
