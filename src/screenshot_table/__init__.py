"""Screenshot Table: turn labelled screenshots into a before/after HTML table."""

from .converter import Converter, convert
from .exceptions import ConversionError, EmptyInputError, NoImagesFoundError

__all__ = [
    "ConversionError",
    "Converter",
    "EmptyInputError",
    "NoImagesFoundError",
    "convert",
]
