"""Configuration objects and constants for the site validator."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, List, Optional

from .models import InvalidImage, InvalidLink

IMAGE_TYPES = ("png", "jpg", "jpeg", "gif", "svg", "webp")
HTML_PATTERN = "**/*.html"
DEFAULT_LINK_SELECTOR = "[href]"
DEFAULT_IMAGE_SELECTOR = "[src]"

InvalidLinkCallback = Callable[[InvalidLink], object]
InvalidImageCallback = Callable[[InvalidImage], object]


def image_patterns() -> List[str]:
    """Glob patterns matching every recognized image file under the root."""
    return [f"**/*.{ext}" for ext in IMAGE_TYPES]


@dataclass
class ValidateConfig:
    """Top-level settings that control a validation run."""

    dir: Path
    on_invalid_link: Optional[InvalidLinkCallback] = None
    on_invalid_image: Optional[InvalidImageCallback] = None
    link_selector: str = DEFAULT_LINK_SELECTOR
    image_selector: str = DEFAULT_IMAGE_SELECTOR
    fail_on_duplicate_pages: bool = False
