"""Invoice composition.

Builds the sample invoice as a fixed sequence of rows:

1. Header: logo, company name, "Invoice" label
2. Details: date and invoice number, divider
3. Item list: header row plus one shaded/unshaded row per item
4. Footer: total amount, signature placeholder and QR code

The finished document is rendered in memory and then written to the
configured output path.
"""

from __future__ import annotations

import logging
from datetime import date
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Sequence

from invoicegen.config import AppConfig, get_config
from invoicegen.layout import (
    Align,
    Document,
    FontFamily,
    FontStyle,
    ImageColumn,
    LayoutError,
    LineColumn,
    PageConfig,
    PdfRenderer,
    QrCodeColumn,
    RectProps,
    SignatureColumn,
    SignatureProps,
    TextColumn,
    TextProps,
    build_rows,
)
from invoicegen.models import InvoiceItem

logger = logging.getLogger(__name__)

# Month names are fixed so the date does not follow LC_TIME
MONTH_ABBREVIATIONS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

SAMPLE_CONTENTS = [
    ("Laptop", "14-inch, 16GB RAM", "1", "$1200", "$1000", "$1000"),
    ("Mouse", "Wireless optical mouse", "2", "$25", "$20", "$40"),
    ("Keyboard", "Mechanical, RGB", "1", "$75", "$60", "$60"),
]


class InvoiceGenerationError(Exception):
    """Raised when the invoice cannot be rendered or saved."""
    pass


def format_invoice_date(value: date) -> str:
    """Format a date as "05 Mar 2024" with English month names."""
    return f"{value.day:02d} {MONTH_ABBREVIATIONS[value.month - 1]} {value.year}"


def sample_items() -> list[InvoiceItem]:
    """The static item list printed on the sample invoice."""
    return [
        InvoiceItem(
            item=item,
            description=description,
            quantity=quantity,
            price=price,
            discounted_price=discounted_price,
            total=total,
        )
        for item, description, quantity, price, discounted_price, total in SAMPLE_CONTENTS
    ]


def compute_total(items: Sequence[InvoiceItem], currency_symbol: str = "$") -> str:
    """Sum the item totals and format the result like the item rows.

    Raises:
        ValueError: If an item total is not a number
    """
    amount = Decimal("0")
    for item in items:
        raw = item.total.replace(currency_symbol, "").replace(",", "").strip()
        try:
            value = Decimal(raw)
        except InvalidOperation:
            value = None
        if value is None or not value.is_finite():
            raise ValueError(f"Invalid total {item.total!r} for item {item.item!r}")
        amount += value

    if amount == amount.to_integral_value():
        return f"{currency_symbol}{amount.quantize(Decimal('1'))}"
    return f"{currency_symbol}{amount.quantize(Decimal('0.01'))}"


def page_config(config: AppConfig) -> PageConfig:
    """Page settings with the same margin on all four sides."""
    margin = config.page.margin_mm
    return PageConfig(
        orientation=config.page.orientation,
        page_size=config.page.page_size,
        left_margin=margin,
        top_margin=margin,
        right_margin=margin,
        bottom_margin=margin,
    )


def add_header(document: Document, config: AppConfig) -> None:
    """Logo, company name and the "Invoice" label."""
    document.add_row(
        50,
        ImageColumn(12, config.assets.logo_path, RectProps(center=True, percent=75)),
    )
    document.add_row(
        20,
        TextColumn(
            12,
            config.invoice.company_name,
            TextProps(top=5, style=FontStyle.BOLD, align=Align.CENTER, size=16),
        ),
    )
    document.add_row(
        20,
        TextColumn(
            12,
            "Invoice",
            TextProps(top=5, style=FontStyle.BOLD, align=Align.CENTER, size=12),
        ),
    )


def add_invoice_details(
    document: Document, config: AppConfig, today: date | None = None
) -> None:
    """Date and invoice number on one row, followed by a divider.

    Args:
        document: Document to append to
        config: Application configuration
        today: Date to print; the current date when omitted
    """
    today = today or date.today()
    document.add_row(
        10,
        TextColumn(
            6,
            f"Date: {format_invoice_date(today)}",
            TextProps(align=Align.LEFT, size=10),
        ),
        TextColumn(
            6,
            f"Invoice #{config.invoice.invoice_number}",
            TextProps(align=Align.RIGHT, size=10),
        ),
    )
    document.add_row(10, LineColumn(12))


def add_item_list(document: Document, items: Sequence[InvoiceItem]) -> None:
    """Item table: a header row plus one row per item.

    Raises:
        RowBuildError: If items is empty
    """
    rows = build_rows(items)
    document.add_rows(*rows)


def total_amount(config: AppConfig, items: Sequence[InvoiceItem]) -> str:
    """Amount printed in the footer.

    In "fixed" mode the configured amount is printed verbatim and is not
    checked against the items. In "computed" mode the item totals are summed.
    """
    if config.invoice.total_mode == "computed":
        return compute_total(items, config.invoice.currency_symbol)
    return config.invoice.total_amount


def add_footer(
    document: Document, config: AppConfig, items: Sequence[InvoiceItem] = ()
) -> None:
    """Total amount, signature placeholder and QR code."""
    document.add_row(
        15,
        TextColumn(
            8,
            "Total Amount",
            TextProps(top=5, style=FontStyle.BOLD, size=10, align=Align.RIGHT),
        ),
        TextColumn(
            4,
            total_amount(config, items),
            TextProps(top=5, style=FontStyle.BOLD, size=10, align=Align.CENTER),
        ),
    )
    document.add_row(
        40,
        SignatureColumn(
            6,
            config.invoice.signatory_label,
            SignatureProps(family=FontFamily.COURIER),
        ),
        QrCodeColumn(6, config.invoice.qr_url, RectProps(center=True, percent=75)),
    )


def build_document(
    config: AppConfig,
    items: Sequence[InvoiceItem] | None = None,
    today: date | None = None,
) -> Document:
    """Compose the full invoice without rendering it."""
    items = sample_items() if items is None else list(items)

    document = Document(page_config(config), PdfRenderer(config.assets.font_path))
    add_header(document, config)
    add_invoice_details(document, config, today)
    add_item_list(document, items)
    add_footer(document, config, items)
    return document


def generate_invoice(
    config: AppConfig | None = None,
    items: Sequence[InvoiceItem] | None = None,
    today: date | None = None,
    output_path: Path | None = None,
) -> Path:
    """Compose, render and save the invoice.

    Returns:
        Path of the written PDF

    Raises:
        InvoiceGenerationError: If composing, rendering or saving fails
    """
    config = config or get_config()
    output_path = output_path or config.invoice.output_path

    try:
        document = build_document(config, items, today)
        logger.info(f"Composed invoice with {len(document.rows)} rows")
        artifact = document.generate()
        saved = artifact.save(output_path)
    except (LayoutError, ValueError) as e:
        raise InvoiceGenerationError(str(e)) from e

    logger.info("PDF saved successfully.")
    return saved
