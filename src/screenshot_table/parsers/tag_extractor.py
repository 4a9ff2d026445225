"""Extract ``<img>`` tags from raw HTML.

This is pattern matching, not HTML parsing: attribute values must be
double-quoted, and no entity decoding is performed.
"""

import logging
import re
from collections.abc import Iterator

from schemas.raw_tag import RawTag

logger = logging.getLogger(__name__)

IMG_TAG = re.compile(r"<img\b[^>]*>", re.IGNORECASE)
ALT_ATTR = re.compile(r'(?<![\w-])alt\s*=\s*"([^"]*)"', re.IGNORECASE)
SRC_ATTR = re.compile(r'(?<![\w-])src\s*=\s*"([^"]*)"', re.IGNORECASE)


def _attribute(pattern: re.Pattern, tag: str) -> str:
    match = pattern.search(tag)
    return match.group(1) if match else ""


def extract_tags(html: str) -> Iterator[RawTag]:
    """Yield RawTags for each usable ``<img>`` tag in document order.

    Tags with a missing or empty ``alt`` or ``src`` are skipped silently.

    Args:
        html: Arbitrary HTML text

    Yields:
        RawTag for each image with both attributes
    """
    if not html:
        return

    for match in IMG_TAG.finditer(html):
        tag = match.group(0)
        alt_text = _attribute(ALT_ATTR, tag)
        src = _attribute(SRC_ATTR, tag)

        if not alt_text or not src:
            logger.debug(f"Skipping image tag without alt/src: {tag}")
            continue

        yield RawTag(alt_text=alt_text, src=src)
