"""Unit tests for the ReportLab renderer and PDF artifact."""

from __future__ import annotations

from pathlib import Path

import pytest
import reportlab

from invoicegen.layout import (
    CellStyle,
    Color,
    Document,
    ImageColumn,
    LineColumn,
    PageConfig,
    PdfArtifact,
    PdfRenderer,
    QrCodeColumn,
    RectProps,
    RenderError,
    Row,
    SignatureColumn,
    TextColumn,
)

VERA_TTF = Path(reportlab.__file__).parent / "fonts" / "Vera.ttf"


def _page() -> PageConfig:
    return PageConfig(left_margin=15, top_margin=15, right_margin=15, bottom_margin=15)


class TestPdfRenderer:
    """Test rendering of every column type."""

    def test_renders_all_column_types(self, logo_path):
        rows = [
            Row(height=30).add(ImageColumn(12, logo_path, RectProps(center=True, percent=75))),
            Row(height=10).add(TextColumn(6, "left"), TextColumn(6, "right")),
            Row(height=10).add(LineColumn(12)),
            Row(height=5, style=CellStyle(background_color=Color(240, 240, 240))).add(
                TextColumn(12, "shaded")
            ),
            Row(height=40).add(
                SignatureColumn(6, "Authorized Signatory"),
                QrCodeColumn(6, "https://codeheim.io", RectProps(center=True, percent=75)),
            ),
        ]

        artifact = PdfRenderer().render(_page(), rows)

        assert artifact.content.startswith(b"%PDF")
        assert artifact.page_count == 1

    def test_rows_that_do_not_fit_start_a_new_page(self):
        rows = [Row(height=100).add(TextColumn(12, str(i))) for i in range(3)]

        artifact = PdfRenderer().render(_page(), rows)

        assert artifact.page_count == 2

    def test_missing_image_raises_render_error(self, tmp_path):
        rows = [Row(height=30).add(ImageColumn(12, tmp_path / "missing.png"))]

        with pytest.raises(RenderError):
            PdfRenderer().render(_page(), rows)

    def test_missing_font_raises_render_error(self, tmp_path):
        renderer = PdfRenderer(font_path=tmp_path / "missing.ttf")

        with pytest.raises(RenderError):
            renderer.render(_page(), [Row(height=10).add(TextColumn(12, "x"))])

    def test_custom_truetype_font(self):
        renderer = PdfRenderer(font_path=VERA_TTF)
        rows = [
            Row(height=10).add(TextColumn(12, "Custom font")),
            Row(height=40).add(SignatureColumn(12, "Authorized Signatory")),
        ]

        artifact = renderer.render(_page(), rows)

        assert artifact.content.startswith(b"%PDF")
        assert artifact.page_count == 1

    def test_row_taller_than_page_raises_render_error(self):
        rows = [Row(height=400).add(TextColumn(12, "too tall"))]

        with pytest.raises(RenderError):
            PdfRenderer().render(_page(), rows)

    def test_text_is_escaped(self):
        rows = [Row(height=10).add(TextColumn(12, "R&D <tools>"))]

        artifact = PdfRenderer().render(_page(), rows)

        assert artifact.page_count == 1

    def test_invalid_page_size_raises_render_error(self):
        with pytest.raises(RenderError):
            PdfRenderer().render(PageConfig(page_size="B7"), [])

    def test_same_rows_render_identical_bytes(self, logo_path):
        def render() -> bytes:
            document = Document(_page())
            document.add_row(30, ImageColumn(12, logo_path))
            document.add_row(40, QrCodeColumn(12, "https://codeheim.io"))
            return document.generate().content

        assert render() == render()


class TestPdfArtifact:
    """Test saving materialized PDFs."""

    def test_save_creates_parent_directories(self, tmp_path):
        target = tmp_path / "nested" / "dir" / "out.pdf"

        saved = PdfArtifact(b"%PDF-1.4 test", 1).save(target)

        assert saved == target
        assert target.read_bytes() == b"%PDF-1.4 test"

    def test_save_to_unwritable_path_raises(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")

        with pytest.raises(RenderError):
            PdfArtifact(b"%PDF", 1).save(Path(blocker, "out.pdf"))
