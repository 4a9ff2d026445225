"""Table renderer for grouped screenshots.

Renders image records into a collapsible HTML table fragment suitable for
pasting into a pull request or issue description.
"""

import logging
from collections.abc import Iterable
from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from schemas.group import ImageGroups
from schemas.image_record import ImageRecord

from .filters import FILTERS
from .grouper import group_records

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).parent.parent / "templates"
DEFAULT_TEMPLATE_NAME = "image_table.html.j2"
DEFAULT_IMAGE_WIDTH = 400
DEFAULT_SUMMARY = "Screenshots"


class TableRenderer:
    """Render image records into a ``<details>`` wrapped HTML table.

    Standalone images are laid out two per row ahead of the before/after
    groups. Missing images become empty cells so every row keeps two columns.

    Attributes:
        template_name: Name of the Jinja2 template file
        templates_dir: Directory containing the template
        image_width: Display width for every ``<img>`` cell
        summary: Text of the ``<summary>`` element
    """

    def __init__(
        self,
        template_name: str = DEFAULT_TEMPLATE_NAME,
        templates_dir: Path | None = None,
        image_width: int = DEFAULT_IMAGE_WIDTH,
        summary: str = DEFAULT_SUMMARY,
    ):
        """Initialize the table renderer.

        Args:
            template_name: Name of the Jinja2 template file
            templates_dir: Directory containing templates (default: package templates/)
            image_width: Display width for images
            summary: Text shown on the collapsed ``<details>`` block
        """
        self.template_name = template_name
        self.templates_dir = templates_dir or TEMPLATES_DIR
        self.image_width = image_width
        self.summary = summary

        # Extracted values are already HTML text and are emitted verbatim
        self._env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        for name, func in FILTERS.items():
            self._env.filters[name] = func

    def render(self, records: Iterable[ImageRecord]) -> str:
        """Group sorted records and render them as a table.

        Args:
            records: ImageRecords sorted by order

        Returns:
            HTML fragment
        """
        return self.render_groups(group_records(records))

    def render_groups(self, groups: ImageGroups) -> str:
        """Render already grouped records as a table.

        Args:
            groups: Standalone entries and paired groups in render order

        Returns:
            HTML fragment
        """
        template = self._env.get_template(self.template_name)
        html = template.render(
            groups=groups,
            image_width=self.image_width,
            summary=self.summary,
        )
        logger.debug(
            f"Rendered {len(groups.standalone)} standalone images and "
            f"{len(groups.paired)} paired groups"
        )
        return html


def render(records: Iterable[ImageRecord]) -> str:
    """Render records with the default table settings."""
    return TableRenderer().render(records)
