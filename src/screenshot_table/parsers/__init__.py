"""Parsers for image labels and HTML image tags."""

from .label_parser import format_title, parse_label
from .tag_extractor import extract_tags

__all__ = [
    "extract_tags",
    "format_title",
    "parse_label",
]
