"""invoicegen Pydantic models.

Item values are kept as display strings ("$1200", "2"); they are printed
as-is in the item table.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from invoicegen.layout import CellStyle, Color, FontStyle, Row, TextColumn, TextProps

SHADED_ROW = CellStyle(background_color=Color(red=240, green=240, blue=240))

_HEADER_PROPS = TextProps(style=FontStyle.BOLD)


class InvoiceItem(BaseModel):
    """One line of the item table."""

    model_config = ConfigDict(frozen=True)

    item: str = Field(..., min_length=1)
    description: str = ""
    quantity: str = "1"
    price: str = ""
    discounted_price: str = ""
    total: str = ""

    def header(self) -> Row:
        """Column titles of the item table."""
        return Row(height=10).add(
            TextColumn(2, "Item", _HEADER_PROPS),
            TextColumn(3, "Description", _HEADER_PROPS),
            TextColumn(1, "Quantity", _HEADER_PROPS),
            TextColumn(2, "Price", _HEADER_PROPS),
            TextColumn(2, "DiscountedPrice", _HEADER_PROPS),
            TextColumn(2, "Total", _HEADER_PROPS),
        )

    def content(self, index: int) -> Row:
        """Table row for this item; even positions are shaded."""
        row = Row(height=5).add(
            TextColumn(2, self.item),
            TextColumn(3, self.description),
            TextColumn(1, self.quantity),
            TextColumn(2, self.price),
            TextColumn(2, self.discounted_price),
            TextColumn(2, self.total),
        )

        if index % 2 == 0:
            row = row.with_style(SHADED_ROW)

        return row
