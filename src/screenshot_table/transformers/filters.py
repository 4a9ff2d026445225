"""Jinja2 filters for table rendering.

These filters are used in image_table.html.j2.
"""

from collections.abc import Sequence
from typing import Any

from ..parsers.label_parser import format_title


def pair_up(items: Sequence[Any]) -> list[tuple[Any, Any]]:
    """Split a sequence into consecutive pairs, padding the last with None.

    Args:
        items: Sequence to pair up

    Returns:
        List of ``(first, second)`` tuples

    Examples:
        >>> pair_up(["a", "b", "c"])
        [('a', 'b'), ('c', None)]
    """
    if not items:
        return []
    pairs = []
    for i in range(0, len(items), 2):
        second = items[i + 1] if i + 1 < len(items) else None
        pairs.append((items[i], second))
    return pairs


# Registry of all filters for easy registration with Jinja2
FILTERS = {
    "format_title": format_title,
    "pair_up": pair_up,
}
