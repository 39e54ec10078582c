"""Build the whole-site index from a directory of rendered HTML."""

from __future__ import annotations

import asyncio
import logging
import time
from typing import Dict, List

from .config import HTML_PATTERN, ValidateConfig, image_patterns
from .content import extract_references, parse_document
from .models import FileMetadata, SiteIndex
from .reader import SiteReader
from .utils import normalize_asset_path, normalize_page_path

logger = logging.getLogger("sitecheck")


class DuplicatePageError(ValueError):
    """Two HTML files normalize to the same page path."""

    def __init__(self, path: str, first: str, second: str) -> None:
        super().__init__(f"{first} and {second} both map to page {path}")
        self.path = path
        self.first = first
        self.second = second


def load_page(reader: SiteReader, relative_path: str, config: ValidateConfig) -> FileMetadata:
    """Read, parse and extract references from a single HTML file."""
    soup = parse_document(reader.read_text(relative_path))
    anchors, links, images = extract_references(
        soup,
        link_selector=config.link_selector,
        image_selector=config.image_selector,
    )
    return FileMetadata(
        path=normalize_page_path(relative_path),
        source_path=normalize_asset_path(relative_path),
        anchors=anchors,
        outgoing_links=links,
        outgoing_images=images,
    )


def list_images(reader: SiteReader) -> List[str]:
    images = set()
    for pattern in image_patterns():
        images.update(normalize_asset_path(path) for path in reader.glob(pattern))
    return sorted(images)


def merge_pages(pages: List[FileMetadata], config: ValidateConfig) -> Dict[str, FileMetadata]:
    """Key pages by page path.

    When two files share a page path the later one in ``pages`` wins, unless
    ``fail_on_duplicate_pages`` is set.
    """
    merged: Dict[str, FileMetadata] = {}
    for page in pages:
        existing = merged.get(page.path)
        if existing is not None:
            if config.fail_on_duplicate_pages:
                raise DuplicatePageError(page.path, existing.source_path, page.source_path)
            logger.warning(
                "%s and %s both map to page %s; keeping %s",
                existing.source_path,
                page.source_path,
                page.path,
                page.source_path,
            )
        merged[page.path] = page
    return merged


async def build_index(reader: SiteReader, config: ValidateConfig) -> SiteIndex:
    """Index every HTML page and image file visible through ``reader``.

    Pages are loaded concurrently in worker threads. The first read or parse
    error propagates and fails the whole index.
    """
    start = time.perf_counter()
    html_files = sorted(reader.glob(HTML_PATTERN))
    images = list_images(reader)

    pages = await asyncio.gather(
        *(asyncio.to_thread(load_page, reader, path, config) for path in html_files)
    )
    index = SiteIndex.build(merge_pages(list(pages), config), frozenset(images))
    logger.info(
        "Indexed %d pages and %d images in %.2fs",
        len(index.pages),
        len(index.images),
        time.perf_counter() - start,
    )
    return index
