"""End-to-end conversion from raw HTML to a screenshot table.

Wires the tag extractor, image classifier, grouper and renderer together
and runs one HTML blob through them.
"""

import logging

from schemas.conversion import ConversionResult

from .exceptions import EmptyInputError, NoImagesFoundError
from .parsers.tag_extractor import extract_tags
from .transformers.grouper import group_records
from .transformers.image_classifier import classify
from .transformers.table_renderer import TableRenderer

logger = logging.getLogger(__name__)


class Converter:
    """Convert HTML containing ``<img>`` tags into a grouped table.

    Attributes:
        renderer: TableRenderer used to produce the fragment
    """

    def __init__(self, renderer: TableRenderer | None = None):
        self.renderer = renderer or TableRenderer()

    def convert(self, html: str) -> ConversionResult:
        """Convert an HTML blob into a table fragment.

        Args:
            html: Arbitrary HTML text

        Returns:
            ConversionResult with the fragment and counts

        Raises:
            NoImagesFoundError: If no tag has both an alt and a src
            EmptyInputError: If the input is empty or whitespace only (a
                NoImagesFoundError subclass)
        """
        if not html or not html.strip():
            raise EmptyInputError()

        logger.info("Parsing images...")
        tags = list(extract_tags(html))
        if not tags:
            raise NoImagesFoundError()

        records = classify(tags)
        logger.info(f"Found {len(records)} images, grouping by category...")
        groups = group_records(records)

        logger.info("Generating table...")
        table_html = self.renderer.render_groups(groups)

        result = ConversionResult(
            html=table_html,
            image_count=len(records),
            category_count=groups.category_count,
            standalone_count=len(groups.standalone),
            paired_count=len(groups.paired),
        )
        logger.info(result.summary)
        return result


def convert(html: str, *, renderer: TableRenderer | None = None) -> ConversionResult:
    """Convert an HTML blob with a default Converter.

    Args:
        html: Arbitrary HTML text
        renderer: Optional renderer with custom settings

    Returns:
        ConversionResult with the fragment and counts
    """
    return Converter(renderer=renderer).convert(html)
