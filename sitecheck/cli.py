"""Command-line entry point for the site validator."""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from dataclasses import asdict
from pathlib import Path
from typing import List, Sequence

from .config import DEFAULT_IMAGE_SELECTOR, DEFAULT_LINK_SELECTOR, ValidateConfig
from .models import InvalidImage, InvalidLink, ValidationResult
from .validator import validate_folder

logger = logging.getLogger("sitecheck.cli")


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Check that internal links and local images of a built static site resolve.",
    )
    parser.add_argument("dir", type=Path, help="Root directory of the rendered site")
    parser.add_argument(
        "--link-selector",
        default=DEFAULT_LINK_SELECTOR,
        help="CSS selector for elements whose href is checked (default: every element with an href)",
    )
    parser.add_argument(
        "--image-selector",
        default=DEFAULT_IMAGE_SELECTOR,
        help="CSS selector for elements whose src is checked (default: every element with a src)",
    )
    parser.add_argument(
        "--fail-on-duplicate-pages",
        action="store_true",
        help="Abort when two HTML files map to the same page path instead of keeping the last one",
    )
    parser.add_argument(
        "--json",
        type=Path,
        default=None,
        help="Write a JSON report with the counters and every broken reference to this file",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Only log errors",
    )
    return parser.parse_args(argv)


def write_report(
    path: Path,
    result: ValidationResult,
    broken_links: List[InvalidLink],
    broken_images: List[InvalidImage],
) -> None:
    report = {
        "result": result.as_dict(),
        "broken_links": [asdict(item) for item in broken_links],
        "broken_images": [asdict(item) for item in broken_images],
    }
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(report, indent=2, sort_keys=True) + "\n", encoding="utf-8")
    logger.info("Saved report to %s", path)


def main(argv: Sequence[str] | None = None) -> None:
    args = parse_args(argv)
    level = logging.DEBUG if args.verbose else logging.INFO
    if args.quiet and not args.verbose:
        level = logging.ERROR
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        force=True,
    )

    broken_links: List[InvalidLink] = []
    broken_images: List[InvalidImage] = []

    def on_invalid_link(item: InvalidLink) -> None:
        broken_links.append(item)
        logger.warning("%s: broken link %s", item.file, item.link)

    def on_invalid_image(item: InvalidImage) -> None:
        broken_images.append(item)
        logger.warning("%s: missing image %s", item.file, item.image)

    config = ValidateConfig(
        dir=Path(args.dir).resolve(),
        on_invalid_link=on_invalid_link,
        on_invalid_image=on_invalid_image,
        link_selector=args.link_selector,
        image_selector=args.image_selector,
        fail_on_duplicate_pages=args.fail_on_duplicate_pages,
    )
    result = asyncio.run(validate_folder(config))

    logger.info(
        "Finished in %.2fms (%d/%d references broken: %d links, %d images)",
        result.took_millis,
        result.total_broken,
        result.total_checked,
        result.broken_links,
        result.broken_images,
    )
    if args.json:
        write_report(args.json, result, broken_links, broken_images)

    if not result.ok:
        sys.exit(1)


if __name__ == "__main__":
    main()
