"""Resolve every link and image reference against the site index."""

from __future__ import annotations

import asyncio
import logging
from typing import List, Optional, Tuple

from .config import InvalidImageCallback, InvalidLinkCallback
from .models import (
    FileMetadata,
    InvalidImage,
    InvalidLink,
    Link,
    ResolutionReport,
    SiteIndex,
)

logger = logging.getLogger("sitecheck")

PageFindings = Tuple[FileMetadata, List[InvalidLink], List[InvalidImage]]


def parse_link(href: str) -> Link:
    """Split an ``href`` on its first ``#``.

    Only the text up to a second ``#`` is kept as the fragment.
    """
    target, _, fragment = href.partition("#")
    fragment = fragment.split("#", 1)[0]
    return Link(target=target, fragment=fragment)


def find_page(index: SiteIndex, current: str, link: Link) -> Optional[FileMetadata]:
    if link.is_same_page:
        return index.pages.get(current)
    page = index.pages.get(link.target)
    if page is None:
        # Directory links may omit the trailing slash kept on page paths.
        page = index.pages.get(link.target + "/")
    return page


def is_valid_link(index: SiteIndex, current: str, href: str) -> bool:
    link = parse_link(href)
    page = find_page(index, current, link)
    if page is None:
        return False
    if link.fragment and link.fragment not in page.anchors:
        return False
    return True


async def check_page(index: SiteIndex, page: FileMetadata) -> PageFindings:
    """Collect the broken links and images of a single page."""
    broken_links = [
        InvalidLink(file=page.source_path, link=href, hash=parse_link(href).fragment)
        for href in sorted(page.outgoing_links)
        if not is_valid_link(index, page.path, href)
    ]
    broken_images = [
        InvalidImage(file=page.source_path, image=src)
        for src in sorted(page.outgoing_images)
        if src not in index.images
    ]
    return page, broken_links, broken_images


def _noop(_: object) -> None:
    return None


async def resolve(
    index: SiteIndex,
    on_invalid_link: Optional[InvalidLinkCallback] = None,
    on_invalid_image: Optional[InvalidImageCallback] = None,
) -> ResolutionReport:
    """Check every page's outgoing references, invoking callbacks for broken ones.

    Pages are checked concurrently against the read-only index; callbacks
    then run in page order. A callback exception propagates and no report
    is returned.
    """
    on_invalid_link = on_invalid_link or _noop
    on_invalid_image = on_invalid_image or _noop

    findings = await asyncio.gather(
        *(check_page(index, index.pages[path]) for path in sorted(index.pages))
    )

    report = ResolutionReport()
    for page, broken_links, broken_images in findings:
        report.checked_links += len(page.outgoing_links)
        report.checked_images += len(page.outgoing_images)
        for broken in broken_links:
            logger.debug("Broken link %s in %s", broken.link, broken.file)
            report.broken_link_refs.append(broken)
            on_invalid_link(broken)
        for broken_image in broken_images:
            logger.debug("Broken image %s in %s", broken_image.image, broken_image.file)
            report.broken_image_refs.append(broken_image)
            on_invalid_image(broken_image)
    return report
