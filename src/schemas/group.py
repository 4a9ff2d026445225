"""Grouping schemas for before/after screenshot tables."""

from pydantic import BaseModel, Field

from .image_record import ImageRecord


class PairedGroup(BaseModel):
    """A category holding at most one "before" and one "after" image.

    Attributes:
        category: Display name shared by the members
        before: The "before" image, if any
        after: The "after" image, if any
        order: Smallest order among the members
    """

    category: str
    before: ImageRecord | None = None
    after: ImageRecord | None = None
    order: int = Field(default=0, ge=0)


class ImageGroups(BaseModel):
    """Records partitioned for rendering.

    Standalone records keep their sorted position; paired groups are sorted
    by their ``order`` and always render after the standalone entries.

    Attributes:
        standalone: Images with no before/after role
        paired: Before/after groups in render order
    """

    standalone: list[ImageRecord] = []
    paired: list[PairedGroup] = []

    @property
    def category_count(self) -> int:
        """Number of table sections: one per standalone image plus one per pair."""
        return len(self.standalone) + len(self.paired)