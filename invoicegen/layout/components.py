"""Rows and typed columns.

A row carries a height (mm) and an ordered tuple of columns. Column sizes are
grid units on a 12-unit grid; they are not validated here.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from pathlib import Path

from invoicegen.layout.props import (
    CellStyle,
    LineProps,
    RectProps,
    SignatureProps,
    TextProps,
)

GRID_SIZE = 12


@dataclass(frozen=True)
class Column:
    """Base class for every typed cell."""

    size: int


@dataclass(frozen=True)
class TextColumn(Column):
    value: str
    props: TextProps = field(default_factory=TextProps)


@dataclass(frozen=True)
class ImageColumn(Column):
    path: Path | str
    props: RectProps = field(default_factory=RectProps)


@dataclass(frozen=True)
class LineColumn(Column):
    props: LineProps = field(default_factory=LineProps)


@dataclass(frozen=True)
class QrCodeColumn(Column):
    code: str
    props: RectProps = field(default_factory=RectProps)


@dataclass(frozen=True)
class SignatureColumn(Column):
    label: str
    props: SignatureProps = field(default_factory=SignatureProps)


@dataclass(frozen=True)
class Row:
    """One horizontal band of the page."""

    height: float
    columns: tuple[Column, ...] = ()
    style: CellStyle | None = None

    def add(self, *columns: Column) -> Row:
        """Return a copy of the row with columns appended."""
        return replace(self, columns=self.columns + tuple(columns))

    def with_style(self, style: CellStyle) -> Row:
        """Return a copy of the row with the given cell style."""
        return replace(self, style=style)

    @property
    def grid_units(self) -> int:
        return sum(column.size for column in self.columns)
