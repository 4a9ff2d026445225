"""Group image records into standalone entries and before/after pairs."""

import logging
from collections.abc import Iterable

from schemas.group import ImageGroups, PairedGroup
from schemas.image_record import ImageRecord

logger = logging.getLogger(__name__)


def group_records(records: Iterable[ImageRecord]) -> ImageGroups:
    """Partition sorted records for rendering.

    Standalone records keep their position. Before/after records are
    collected into one PairedGroup per category, whose order is the lowest
    order of its members. If a category has two records with the same role,
    the later one replaces the earlier one.

    Args:
        records: ImageRecords, already sorted by order

    Returns:
        ImageGroups with paired groups sorted by order
    """
    standalone: list[ImageRecord] = []
    paired: dict[str, PairedGroup] = {}

    for record in records:
        if not record.is_paired:
            standalone.append(record)
            continue

        group = paired.get(record.category)
        if group is None:
            group = PairedGroup(category=record.category, order=record.order)
            paired[record.category] = group
        else:
            group.order = min(group.order, record.order)

        if getattr(group, record.role) is not None:
            logger.debug(
                f"Replacing {record.role} image for {record.category!r} "
                f"with {record.src}"
            )
        setattr(group, record.role, record)

    return ImageGroups(
        standalone=standalone,
        paired=sorted(paired.values(), key=lambda group: group.order),
    )
