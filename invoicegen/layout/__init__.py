"""Document composition layer.

Describes a page as rows of typed columns on a 12-unit grid and renders it
to PDF with ReportLab.
"""

from invoicegen.layout.components import (
    Column,
    ImageColumn,
    LineColumn,
    QrCodeColumn,
    Row,
    SignatureColumn,
    TextColumn,
)
from invoicegen.layout.document import Document, PageConfig, PdfArtifact
from invoicegen.layout.errors import DocumentError, LayoutError, RenderError, RowBuildError
from invoicegen.layout.listing import ListRow, build_rows
from invoicegen.layout.props import (
    Align,
    CellStyle,
    Color,
    FontFamily,
    FontStyle,
    LineProps,
    RectProps,
    SignatureProps,
    TextProps,
)
from invoicegen.layout.renderer import PdfRenderer

__all__ = [
    "Align",
    "CellStyle",
    "Color",
    "Column",
    "Document",
    "DocumentError",
    "FontFamily",
    "FontStyle",
    "ImageColumn",
    "LayoutError",
    "LineColumn",
    "LineProps",
    "ListRow",
    "PageConfig",
    "PdfArtifact",
    "PdfRenderer",
    "QrCodeColumn",
    "RectProps",
    "RenderError",
    "Row",
    "RowBuildError",
    "SignatureColumn",
    "SignatureProps",
    "TextColumn",
    "TextProps",
    "build_rows",
]
