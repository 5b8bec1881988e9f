"""Map a sequence of records onto table rows."""

from __future__ import annotations

from typing import Protocol, Sequence, runtime_checkable

from invoicegen.layout.components import Row
from invoicegen.layout.errors import RowBuildError


@runtime_checkable
class ListRow(Protocol):
    """A record that can render itself as a table row."""

    def header(self) -> Row:
        """Row with the column titles."""
        ...

    def content(self, index: int) -> Row:
        """Row for this record at the given position in the list."""
        ...


def build_rows(items: Sequence[ListRow]) -> list[Row]:
    """Build a header row followed by one content row per item.

    The header is taken from the first item.

    Raises:
        RowBuildError: If items is empty
    """
    if not items:
        raise RowBuildError("cannot build rows from an empty list")

    rows = [items[0].header()]
    for index, item in enumerate(items):
        rows.append(item.content(index))
    return rows
