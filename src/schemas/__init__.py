"""Schema definitions for Screenshot Table."""

from .conversion import ConversionResult
from .group import ImageGroups, PairedGroup
from .image_record import ImageRecord
from .label import PAIRED_ROLES, ParsedLabel, Role
from .raw_tag import RawTag

__all__ = [
    "ConversionResult",
    "ImageGroups",
    "ImageRecord",
    "PAIRED_ROLES",
    "PairedGroup",
    "ParsedLabel",
    "RawTag",
    "Role",
]
