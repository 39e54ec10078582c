"""Data models used throughout the validation pipeline."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from types import MappingProxyType
from typing import Dict, FrozenSet, List, Mapping


@dataclass(frozen=True)
class Link:
    """An ``href`` split into the page it targets and the anchor it asks for.

    An empty ``target`` means the current page. An empty ``fragment`` means
    no anchor check, whether the raw value ended in ``#`` or had none at all.
    """

    target: str
    fragment: str = ""

    @property
    def is_same_page(self) -> bool:
        return not self.target


@dataclass(frozen=True)
class FileMetadata:
    """References extracted from one HTML page."""

    path: str
    source_path: str
    anchors: FrozenSet[str]
    outgoing_links: FrozenSet[str]
    outgoing_images: FrozenSet[str]


@dataclass(frozen=True)
class SiteIndex:
    """Every page of the site keyed by page path, plus known image paths."""

    pages: Mapping[str, FileMetadata]
    images: FrozenSet[str]

    @classmethod
    def build(cls, pages: Dict[str, FileMetadata], images: FrozenSet[str]) -> "SiteIndex":
        return cls(pages=MappingProxyType(dict(pages)), images=frozenset(images))


@dataclass(frozen=True)
class InvalidLink:
    """A link whose page or anchor could not be found."""

    file: str
    link: str
    hash: str


@dataclass(frozen=True)
class InvalidImage:
    """An image reference with no matching file on disk."""

    file: str
    image: str


@dataclass
class ResolutionReport:
    """Broken references and counters accumulated while resolving a site."""

    checked_links: int = 0
    checked_images: int = 0
    broken_link_refs: List[InvalidLink] = field(default_factory=list)
    broken_image_refs: List[InvalidImage] = field(default_factory=list)

    @property
    def broken_links(self) -> int:
        return len(self.broken_link_refs)

    @property
    def broken_images(self) -> int:
        return len(self.broken_image_refs)


@dataclass(frozen=True)
class ValidationResult:
    """Aggregate outcome of one validation run."""

    ok: bool
    checked_links: int
    checked_images: int
    total_checked: int
    broken_links: int
    broken_images: int
    total_broken: int
    took_millis: float

    def as_dict(self) -> Dict[str, object]:
        return asdict(self)
