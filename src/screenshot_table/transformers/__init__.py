"""Transformers from extracted tags to a rendered screenshot table."""

from .grouper import group_records
from .image_classifier import classify
from .table_renderer import TableRenderer, render

__all__ = [
    "TableRenderer",
    "classify",
    "group_records",
    "render",
]
