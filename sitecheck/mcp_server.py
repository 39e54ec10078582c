"""MCP server exposing site validation as a tool."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List

from mcp.server.fastmcp import FastMCP

from .config import ValidateConfig
from .models import InvalidImage, InvalidLink, ValidationResult
from .validator import validate_folder

logger = logging.getLogger("sitecheck.mcp")
logger.setLevel(logging.ERROR)

mcp = FastMCP(name="sitecheck")


def format_report(
    result: ValidationResult,
    broken_links: List[InvalidLink],
    broken_images: List[InvalidImage],
) -> str:
    """Render a validation run as Markdown."""
    status = "OK" if result.ok else "FAILED"
    lines = [
        f"# Site check: {status}",
        "",
        f"- Links checked: {result.checked_links} ({result.broken_links} broken)",
        f"- Images checked: {result.checked_images} ({result.broken_images} broken)",
        f"- Took: {result.took_millis:.1f} ms",
    ]
    if broken_links:
        lines += ["", "## Broken links", ""]
        lines += [f"- `{item.file}` -> `{item.link}`" for item in broken_links]
    if broken_images:
        lines += ["", "## Missing images", ""]
        lines += [f"- `{item.file}` -> `{item.image}`" for item in broken_images]
    return "\n".join(lines) + "\n"


@mcp.tool()
async def validate_site(
    path: str,
) -> str:
    """Check internal links and local images of a built static site directory."""

    source = Path(path).expanduser()
    if not source.exists():
        raise FileNotFoundError(f"Site path does not exist: {source}")

    broken_links: List[InvalidLink] = []
    broken_images: List[InvalidImage] = []
    config = ValidateConfig(
        dir=source,
        on_invalid_link=broken_links.append,
        on_invalid_image=broken_images.append,
    )
    result = await validate_folder(config)
    return format_report(result, broken_links, broken_images)

def main() -> None:
    """Entry point for running the MCP server."""
    logging.basicConfig(level=logging.ERROR)
    mcp.run()

if __name__ == "__main__":
    main()
