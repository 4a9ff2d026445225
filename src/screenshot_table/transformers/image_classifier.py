"""Image classifier: turns extracted tags into sorted image records."""

import logging
from collections.abc import Iterable

from schemas.image_record import ImageRecord
from schemas.raw_tag import RawTag

from ..parsers.label_parser import parse_label

logger = logging.getLogger(__name__)


def classify(tags: Iterable[RawTag]) -> list[ImageRecord]:
    """Parse each tag's label and sort the resulting records by order.

    The sort is stable, so records sharing an order (including every
    unprefixed label at order 0) keep their document order.

    Args:
        tags: RawTags in document order

    Returns:
        ImageRecords sorted by ``order`` ascending
    """
    records = []
    for tag in tags:
        parsed = parse_label(tag.alt_text)
        records.append(
            ImageRecord(
                display_name=parsed.display_name,
                src=tag.src,
                role=parsed.role,
                order=parsed.order,
                label=tag.alt_text,
            )
        )

    logger.debug(f"Classified {len(records)} images")
    return sorted(records, key=lambda record: record.order)
