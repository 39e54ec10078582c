"""Validate internal links, anchors and local images of a built static site."""

from .config import ValidateConfig
from .models import InvalidImage, InvalidLink, ValidationResult
from .validator import validate_folder, validate_folder_sync

__all__ = [
    "InvalidImage",
    "InvalidLink",
    "ValidateConfig",
    "ValidationResult",
    "validate_folder",
    "validate_folder_sync",
]
