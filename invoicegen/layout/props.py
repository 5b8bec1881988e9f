"""Styling records attached to rows and columns.

Distances are millimetres, font sizes are points. Colors use 0-255 RGB
channels.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from reportlab.lib import colors


class Align(str, Enum):
    """Horizontal alignment inside a column."""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class FontStyle(str, Enum):
    """Font weight/slant."""

    NORMAL = "normal"
    BOLD = "bold"
    ITALIC = "italic"
    BOLD_ITALIC = "bold-italic"


class FontFamily(str, Enum):
    """Fonts that ship with every PDF viewer."""

    HELVETICA = "Helvetica"
    COURIER = "Courier"
    TIMES = "Times"


@dataclass(frozen=True)
class Color:
    """RGB color with 0-255 channels."""

    red: int = 0
    green: int = 0
    blue: int = 0

    def to_reportlab(self) -> colors.Color:
        return colors.Color(self.red / 255, self.green / 255, self.blue / 255)


BLACK = Color(0, 0, 0)


@dataclass(frozen=True)
class TextProps:
    """Text placement and font settings."""

    top: float = 0.0
    left: float = 0.0
    right: float = 0.0
    size: float = 10.0
    family: FontFamily | str | None = None  # None uses the renderer default
    style: FontStyle = FontStyle.NORMAL
    align: Align = Align.LEFT
    color: Color | None = None


@dataclass(frozen=True)
class RectProps:
    """Placement of rectangular content (images, QR codes)."""

    center: bool = False
    percent: float = 100.0  # share of the cell the content may occupy
    left: float = 0.0
    top: float = 0.0


@dataclass(frozen=True)
class LineProps:
    """Divider line settings."""

    color: Color | None = None
    thickness: float = 0.5  # points
    size_percent: float = 90.0


@dataclass(frozen=True)
class SignatureProps:
    """Signature placeholder settings."""

    family: FontFamily | str = FontFamily.HELVETICA
    style: FontStyle = FontStyle.NORMAL
    size: float = 8.0
    line_color: Color | None = None
    line_thickness: float = 0.5  # points


@dataclass(frozen=True)
class CellStyle:
    """Row-level cell styling."""

    background_color: Color | None = None
