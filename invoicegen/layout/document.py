"""Document description and the materialized PDF artifact."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from reportlab.lib.pagesizes import A3, A4, A5, LEGAL, LETTER, landscape, portrait

from invoicegen.layout.components import Column, Row
from invoicegen.layout.errors import DocumentError, RenderError

if TYPE_CHECKING:
    from invoicegen.layout.renderer import PdfRenderer

logger = logging.getLogger(__name__)

PAGE_SIZES = {
    "A3": A3,
    "A4": A4,
    "A5": A5,
    "LETTER": LETTER,
    "LEGAL": LEGAL,
}


@dataclass(frozen=True)
class PageConfig:
    """Page orientation, size and margins (mm)."""

    orientation: str = "vertical"
    page_size: str = "A4"
    left_margin: float = 10.0
    top_margin: float = 10.0
    right_margin: float = 10.0
    bottom_margin: float = 10.0

    def dimensions(self) -> tuple[float, float]:
        """Page width and height in points.

        Raises:
            ValueError: If page_size or orientation is unknown
        """
        try:
            size = PAGE_SIZES[self.page_size.upper()]
        except KeyError:
            raise ValueError(
                f"Unknown page size {self.page_size!r}. "
                f"Expected one of: {', '.join(PAGE_SIZES)}"
            ) from None

        if self.orientation == "vertical":
            return portrait(size)
        if self.orientation == "horizontal":
            return landscape(size)
        raise ValueError(
            f"Unknown orientation {self.orientation!r}. Expected 'vertical' or 'horizontal'"
        )


class PdfArtifact:
    """A rendered PDF held in memory until saved."""

    def __init__(self, content: bytes, page_count: int):
        self.content = content
        self.page_count = page_count

    def save(self, path: Path | str) -> Path:
        """Write the PDF to path, creating parent directories.

        Raises:
            RenderError: If the file cannot be written
        """
        target = Path(path)
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_bytes(self.content)
        except OSError as e:
            raise RenderError(f"Failed to save PDF to {target}: {e}") from e

        logger.info(f"Wrote {len(self.content)} bytes to {target}")
        return target


class Document:
    """Ordered rows on a configured page.

    Rows are appended with add_row/add_rows. Calling generate() finalizes the
    document; further additions raise DocumentError.
    """

    def __init__(self, config: PageConfig, renderer: PdfRenderer | None = None):
        if renderer is None:
            from invoicegen.layout.renderer import PdfRenderer

            renderer = PdfRenderer()
        self.config = config
        self._renderer = renderer
        self._rows: list[Row] = []
        self._finalized = False

    @property
    def rows(self) -> tuple[Row, ...]:
        return tuple(self._rows)

    @property
    def finalized(self) -> bool:
        return self._finalized

    def add_row(self, height: float, *columns: Column) -> Row:
        """Append a row built from columns and return it."""
        row = Row(height=height, columns=tuple(columns))
        self.add_rows(row)
        return row

    def add_rows(self, *rows: Row) -> None:
        if self._finalized:
            raise DocumentError("Cannot add rows to a finalized document")
        self._rows.extend(rows)

    def generate(self) -> PdfArtifact:
        """Render all rows to an in-memory PDF.

        Raises:
            RenderError: If rendering fails (missing asset, bad font, ...)
        """
        self._finalized = True
        logger.debug(f"Rendering {len(self._rows)} rows")
        return self._renderer.render(self.config, self._rows)
