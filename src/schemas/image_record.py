"""Classified image record schema."""

from pydantic import BaseModel, Field

from .label import PAIRED_ROLES, Role


class ImageRecord(BaseModel):
    """A screenshot ready for grouping.

    Attributes:
        display_name: Title derived from the label
        src: Image source, copied verbatim from the tag
        role: Pairing role (before, after or standalone)
        order: Sort key from the label's numeric prefix
        label: Original alt text the record was parsed from
    """

    display_name: str
    src: str
    role: Role = "standalone"
    order: int = Field(default=0, ge=0)
    label: str = ""

    @property
    def category(self) -> str:
        """Grouping key for paired images."""
        return self.display_name

    @property
    def is_paired(self) -> bool:
        return self.role in PAIRED_ROLES
