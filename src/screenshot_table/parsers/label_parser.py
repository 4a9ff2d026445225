"""Label parser for screenshot alt text.

Screenshot labels are usually filenames typed by hand, so the parser is
permissive and never raises. It understands:

- a leading order prefix: ``"1. "``, ``"2."``, ``"3 "``, ``"4"``
- a trailing pairing role: ``"_before"`` / ``"_after"`` (any case)
- a feature number: ``"Feature 25"``, ``"feature_25"``, ``"Feature25"``
"""

import logging
import re

from schemas.label import PAIRED_ROLES, ParsedLabel

logger = logging.getLogger(__name__)

ORDER_PREFIX = re.compile(r"^([0-9]+)\.?\s*")
FEATURE_NUMBER = re.compile(r"feature[\s_]*([0-9]+)", re.IGNORECASE)
BARE_NUMBER = re.compile(r"[0-9]+")


def parse_label(label: str) -> ParsedLabel:
    """Parse an image label into order, role and display name.

    Args:
        label: Raw alt text of an image tag

    Returns:
        ParsedLabel for the label

    Examples:
        >>> parse_label("2.Feature 25_before").display_name
        'Feature 25'
        >>> parse_label("login_screen_after").role
        'after'
    """
    order = 0
    remainder = label
    prefix_match = ORDER_PREFIX.match(label)
    if prefix_match:
        order = int(prefix_match.group(1))
        remainder = label[prefix_match.end():]

    segments = remainder.split("_")
    role = "standalone"
    if len(segments) >= 2 and segments[-1].lower() in PAIRED_ROLES:
        role = segments[-1].lower()
        segments = segments[:-1]

    content = "_".join(segments)

    semantic_number = ""
    feature_match = FEATURE_NUMBER.search(content)
    if feature_match:
        semantic_number = feature_match.group(1)
    elif order > 0 and BARE_NUMBER.fullmatch(content):
        # Bare numbers only count as feature ids behind an explicit order prefix
        semantic_number = content

    if semantic_number:
        display_name = f"Feature {semantic_number}"
    else:
        display_name = content.replace("_", " ").strip()

    if not display_name:
        display_name = label.replace("_", " ").strip() or label

    parsed = ParsedLabel(
        order=order,
        semantic_number=semantic_number,
        role=role,
        display_name=display_name,
    )
    logger.debug(f"Parsed label {label!r} as {parsed!r}")
    return parsed


def format_title(category: str) -> str:
    """Format a category as a table title.

    Splits on underscores and capitalizes the first character of each
    segment. Spaces are left alone, so formatted titles pass through unchanged.

    Args:
        category: Category or display name

    Returns:
        Title string

    Examples:
        >>> format_title("my_long_category")
        'My Long Category'
        >>> format_title("Feature 25")
        'Feature 25'
    """
    if not category:
        return ""
    return " ".join(word[:1].upper() + word[1:] for word in category.split("_"))
