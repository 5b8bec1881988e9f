"""Exceptions raised by the layout layer."""

from __future__ import annotations


class LayoutError(Exception):
    """Base exception for document composition and rendering."""
    pass


class RowBuildError(LayoutError):
    """Raised when a sequence of list items cannot be turned into rows."""
    pass


class DocumentError(LayoutError):
    """Raised when a finalized document is modified."""
    pass


class RenderError(LayoutError):
    """Raised when a document cannot be materialized or saved."""
    pass
