"""Conversion result schema."""

from pydantic import BaseModel


class ConversionResult(BaseModel):
    """Outcome of converting one HTML blob into a screenshot table.

    Attributes:
        html: Rendered ``<details>`` fragment
        image_count: Number of images extracted from the input
        category_count: Number of table sections (standalone images + pairs)
        standalone_count: Number of standalone images
        paired_count: Number of before/after groups
    """

    html: str
    image_count: int = 0
    category_count: int = 0
    standalone_count: int = 0
    paired_count: int = 0

    @property
    def summary(self) -> str:
        return (
            f"Processed {self.category_count} categories "
            f"with {self.image_count} images."
        )
