"""Parsed image label schema.

An image label is the ``alt`` text of a screenshot, usually the original
filename. Labels loosely encode three things:

    <order>[.][ ]<content>[_before|_after]

e.g. ``"1. Feature_1_before"``, ``"3 Feature 32"``, ``"login_screen_after"``.
"""

from typing import Literal

from pydantic import BaseModel, Field

Role = Literal["before", "after", "standalone"]

PAIRED_ROLES: tuple[str, ...] = ("before", "after")


class ParsedLabel(BaseModel):
    """Result of interpreting one label string.

    Attributes:
        order: Explicit sequence position from a leading number, else 0
        semantic_number: Feature number found in the label (may be empty)
        role: Pairing role of the image
        display_name: Human-facing title, also used as the grouping category
    """

    order: int = Field(default=0, ge=0)
    semantic_number: str = ""
    role: Role = "standalone"
    display_name: str
