"""ReportLab rendering of rows and typed columns.

Each row becomes a one-row platypus ``Table`` whose column widths are
``size / 12`` of the content width and whose height is the row height.
``SimpleDocTemplate`` flows the tables onto pages. Output is produced in
ReportLab's invariant mode, so the same rows always give the same bytes.
"""

from __future__ import annotations

import logging
from io import BytesIO
from pathlib import Path
from typing import Sequence
from xml.sax.saxutils import escape

import qrcode
from reportlab.lib.enums import TA_CENTER, TA_LEFT, TA_RIGHT
from reportlab.lib.styles import ParagraphStyle
from reportlab.lib.units import mm
from reportlab.lib.utils import ImageReader
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFont
from reportlab.platypus import (
    Flowable,
    HRFlowable,
    Image,
    Paragraph,
    SimpleDocTemplate,
    Spacer,
    Table,
    TableStyle,
)

from invoicegen.layout.components import (
    GRID_SIZE,
    Column,
    ImageColumn,
    LineColumn,
    QrCodeColumn,
    Row,
    SignatureColumn,
    TextColumn,
)
from invoicegen.layout.document import PageConfig, PdfArtifact
from invoicegen.layout.errors import RenderError
from invoicegen.layout.props import (
    BLACK,
    Align,
    FontFamily,
    FontStyle,
    RectProps,
)

logger = logging.getLogger(__name__)

CUSTOM_FONT_NAME = "InvoiceFont"
LINE_SPACING = 1.2

# SimpleDocTemplate's frame keeps this padding (points) on each side
FRAME_PADDING = 6

_ALIGNMENTS = {
    Align.LEFT: TA_LEFT,
    Align.CENTER: TA_CENTER,
    Align.RIGHT: TA_RIGHT,
}

_STANDARD_FACES = {
    "Helvetica": {
        FontStyle.NORMAL: "Helvetica",
        FontStyle.BOLD: "Helvetica-Bold",
        FontStyle.ITALIC: "Helvetica-Oblique",
        FontStyle.BOLD_ITALIC: "Helvetica-BoldOblique",
    },
    "Courier": {
        FontStyle.NORMAL: "Courier",
        FontStyle.BOLD: "Courier-Bold",
        FontStyle.ITALIC: "Courier-Oblique",
        FontStyle.BOLD_ITALIC: "Courier-BoldOblique",
    },
    "Times": {
        FontStyle.NORMAL: "Times-Roman",
        FontStyle.BOLD: "Times-Bold",
        FontStyle.ITALIC: "Times-Italic",
        FontStyle.BOLD_ITALIC: "Times-BoldItalic",
    },
}


def resolve_font(family: FontFamily | str, style: FontStyle) -> str:
    """Map a family and style to a ReportLab font name.

    Registered TrueType fonts have a single face, so the style is ignored
    for them.
    """
    key = family.value if isinstance(family, FontFamily) else family
    faces = _STANDARD_FACES.get(key)
    if faces is None:
        return key
    return faces[style]


class PdfRenderer:
    """Turns rows into a platypus story and builds the PDF."""

    def __init__(self, font_path: Path | str | None = None):
        self.font_path = Path(font_path) if font_path else None

    def render(self, page: PageConfig, rows: Sequence[Row]) -> PdfArtifact:
        """Render rows to PDF bytes.

        Raises:
            RenderError: If a cell cannot be built, the font cannot load or
                a row does not fit on a page
        """
        buffer = BytesIO()
        pages: list[int] = []

        def count_page(canvas, doc) -> None:
            pages.append(doc.page)

        try:
            width, height = page.dimensions()
            default_family = self._default_family()

            doc = SimpleDocTemplate(
                buffer,
                pagesize=(width, height),
                leftMargin=page.left_margin * mm,
                rightMargin=page.right_margin * mm,
                topMargin=page.top_margin * mm,
                bottomMargin=page.bottom_margin * mm,
                invariant=1,
            )
            content_width = doc.width - 2 * FRAME_PADDING

            story = [self._row_flowable(row, content_width, default_family) for row in rows]
            doc.build(story, onFirstPage=count_page, onLaterPages=count_page)
        except Exception as e:
            raise RenderError(f"Failed to render document: {e}") from e

        logger.info(f"Rendered {len(rows)} rows on {len(pages)} page(s)")
        return PdfArtifact(buffer.getvalue(), len(pages))

    def _default_family(self) -> str:
        if self.font_path is None:
            return FontFamily.HELVETICA.value
        pdfmetrics.registerFont(TTFont(CUSTOM_FONT_NAME, str(self.font_path)))
        return CUSTOM_FONT_NAME

    def _row_flowable(self, row: Row, content_width: float, default_family: str) -> Flowable:
        row_height = row.height * mm
        if not row.columns:
            return Spacer(1, row_height)

        unit = content_width / GRID_SIZE
        commands = [
            ("VALIGN", (0, 0), (-1, -1), "TOP"),
            ("LEFTPADDING", (0, 0), (-1, -1), 0),
            ("RIGHTPADDING", (0, 0), (-1, -1), 0),
            ("TOPPADDING", (0, 0), (-1, -1), 0),
            ("BOTTOMPADDING", (0, 0), (-1, -1), 0),
        ]
        if row.style is not None and row.style.background_color is not None:
            commands.append(
                ("BACKGROUND", (0, 0), (-1, -1), row.style.background_color.to_reportlab())
            )

        cells = []
        widths = []
        for index, column in enumerate(row.columns):
            cell_width = column.size * unit
            content, cell_commands = self._cell(column, cell_width, row_height, default_family)
            cells.append(content)
            widths.append(cell_width)
            commands.extend(
                (name, (index, 0), (index, 0), *args) for name, *args in cell_commands
            )

        table = Table([cells], colWidths=widths, rowHeights=[row_height], hAlign="LEFT")
        table.setStyle(TableStyle(commands))
        return table

    def _cell(self, column: Column, width: float, height: float, default_family: str):
        """Flowable(s) for one column plus its per-cell style commands."""
        if isinstance(column, TextColumn):
            return self._text_cell(column, default_family)
        if isinstance(column, ImageColumn):
            return self._image_cell(column, width, height)
        if isinstance(column, LineColumn):
            return self._line_cell(column)
        if isinstance(column, QrCodeColumn):
            return self._qr_code_cell(column, width, height)
        if isinstance(column, SignatureColumn):
            return self._signature_cell(column, height)
        raise TypeError(f"Unsupported column type: {type(column).__name__}")

    def _text_cell(self, column: TextColumn, default_family: str):
        props = column.props
        style = ParagraphStyle(
            "cell",
            fontName=resolve_font(props.family or default_family, props.style),
            fontSize=props.size,
            leading=props.size * LINE_SPACING,
            alignment=_ALIGNMENTS[props.align],
            textColor=(props.color or BLACK).to_reportlab(),
        )
        commands = [
            ("TOPPADDING", props.top * mm),
            ("LEFTPADDING", props.left * mm),
            ("RIGHTPADDING", props.right * mm),
        ]
        return Paragraph(escape(column.value), style), commands

    def _image_cell(self, column: ImageColumn, width: float, height: float):
        props = column.props
        image_width, image_height = ImageReader(str(column.path)).getSize()

        scale = min(width / image_width, height / image_height) * props.percent / 100
        image = Image(str(column.path), width=image_width * scale, height=image_height * scale)
        return image, self._rect_commands(props)

    def _qr_code_cell(self, column: QrCodeColumn, width: float, height: float):
        side = min(width, height) * column.props.percent / 100

        png = BytesIO()
        qrcode.make(column.code).get_image().save(png, format="PNG")
        png.seek(0)
        return Image(png, width=side, height=side), self._rect_commands(column.props)

    def _line_cell(self, column: LineColumn):
        props = column.props
        line = HRFlowable(
            width=f"{props.size_percent}%",
            thickness=props.thickness,
            color=(props.color or BLACK).to_reportlab(),
            hAlign="CENTER",
            spaceBefore=0,
            spaceAfter=0,
        )
        return line, [("VALIGN", "MIDDLE")]

    def _signature_cell(self, column: SignatureColumn, height: float):
        props = column.props
        label_style = ParagraphStyle(
            "signature",
            fontName=resolve_font(props.family, props.style),
            fontSize=props.size,
            leading=props.size * LINE_SPACING,
            alignment=TA_CENTER,
        )
        content = [
            Spacer(1, height * 0.6),
            HRFlowable(
                width="80%",
                thickness=props.line_thickness,
                color=(props.line_color or BLACK).to_reportlab(),
                hAlign="CENTER",
                spaceBefore=0,
                spaceAfter=1 * mm,
            ),
            Paragraph(escape(column.label), label_style),
        ]
        return content, []

    @staticmethod
    def _rect_commands(props: RectProps) -> list[tuple]:
        if props.center:
            return [("ALIGN", "CENTER"), ("VALIGN", "MIDDLE")]
        return [
            ("ALIGN", "LEFT"),
            ("LEFTPADDING", props.left * mm),
            ("TOPPADDING", props.top * mm),
        ]
