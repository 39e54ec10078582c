"""High-level orchestration for validating a built site."""

from __future__ import annotations

import asyncio
import logging
import time
from typing import Optional

from .config import ValidateConfig
from .indexer import build_index
from .models import ValidationResult
from .reader import FilesystemReader, SiteReader
from .resolver import resolve

logger = logging.getLogger("sitecheck")


async def validate_folder(
    config: ValidateConfig,
    reader: Optional[SiteReader] = None,
) -> ValidationResult:
    """Index the site under ``config.dir`` and check every internal reference.

    ``reader`` replaces the filesystem as the source of files when given.
    Errors from reading, parsing or the callbacks propagate unchanged.
    """
    start = time.perf_counter()
    if reader is None:
        reader = FilesystemReader(config.dir)

    index = await build_index(reader, config)
    report = await resolve(
        index,
        on_invalid_link=config.on_invalid_link,
        on_invalid_image=config.on_invalid_image,
    )
    took_millis = (time.perf_counter() - start) * 1000

    total_broken = report.broken_links + report.broken_images
    result = ValidationResult(
        ok=total_broken == 0,
        checked_links=report.checked_links,
        checked_images=report.checked_images,
        total_checked=report.checked_links + report.checked_images,
        broken_links=report.broken_links,
        broken_images=report.broken_images,
        total_broken=total_broken,
        took_millis=took_millis,
    )
    logger.info(
        "Checked %d links and %d images in %.1fms (%d broken)",
        result.checked_links,
        result.checked_images,
        result.took_millis,
        result.total_broken,
    )
    return result


def validate_folder_sync(
    config: ValidateConfig,
    reader: Optional[SiteReader] = None,
) -> ValidationResult:
    """Run :func:`validate_folder` on a fresh event loop."""
    return asyncio.run(validate_folder(config, reader))
