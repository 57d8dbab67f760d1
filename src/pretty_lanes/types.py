from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

# ============================================================================
# Statements -- logical structure handed over by the DSL parser
# ============================================================================

Keyword = Literal["lane", "full", "dash", "self", "stop", "title"]

LANE: Keyword = "lane"
FULL: Keyword = "full"
DASH: Keyword = "dash"
SELF: Keyword = "self"
STOP: Keyword = "stop"
TITLE: Keyword = "title"

KEYWORDS: tuple[Keyword, ...] = (LANE, FULL, DASH, SELF, STOP, TITLE)


@dataclass(slots=True)
class Statement:
    keyword: Keyword
    # Lane names this statement refers to: two for full/dash, one for self/stop
    referenced_lanes: tuple[str, ...] = ()
    # Rows of label text, top to bottom
    label_lines: list[str] = field(default_factory=list)
    # Only set for 'lane' statements
    lane_name: str = ""
    # 1-based line number in the source text (diagnostics only)
    source_line: int = 0


# ============================================================================
# Drawing primitives -- the output of diagram creation
# ============================================================================

Justification = Literal["left", "right", "top", "bottom", "centre"]


@dataclass(slots=True)
class Point:
    x: float
    y: float


@dataclass(slots=True)
class Line:
    p1: Point
    p2: Point
    dashed: bool = False


@dataclass(slots=True)
class FilledPoly:
    vertices: list[Point]


@dataclass(slots=True)
class Label:
    """A single row of text anchored at a point."""
    text: str
    font_height: float
    anchor: Point
    h_just: Justification
    v_just: Justification


@dataclass(slots=True)
class Primitives:
    lines: list[Line] = field(default_factory=list)
    filled_polys: list[FilledPoly] = field(default_factory=list)
    labels: list[Label] = field(default_factory=list)

    def add_line(
        self, x1: float, y1: float, x2: float, y2: float, dashed: bool = False
    ) -> None:
        self.lines.append(Line(Point(x1, y1), Point(x2, y2), dashed))

    def add_filled_poly(self, vertices: list[Point]) -> None:
        self.filled_polys.append(FilledPoly(list(vertices)))

    def add_label(
        self,
        text: str,
        font_height: float,
        x: float,
        y: float,
        h_just: Justification,
        v_just: Justification,
    ) -> None:
        self.labels.append(Label(text, font_height, Point(x, y), h_just, v_just))

    def row_of_strings(
        self,
        x: float,
        first_row_y: float,
        font_height: float,
        h_just: Justification,
        strings: list[str],
    ) -> None:
        """Stack strings one font height apart, each top-justified."""
        for i, s in enumerate(strings):
            y = first_row_y + i * font_height
            self.add_label(s, font_height, x, y, h_just, "top")

    def add_rect(self, left: float, top: float, right: float, bottom: float) -> None:
        """Add the four sides of a rectangle as solid lines."""
        self.add_line(left, top, right, top)
        self.add_line(right, top, right, bottom)
        self.add_line(right, bottom, left, bottom)
        self.add_line(left, bottom, left, top)


@dataclass(slots=True)
class DiagramModel:
    """Fully created diagram -- ready for export."""
    width: float
    height: float
    font_height: float
    # Dash pattern for dashed lines
    dash_len: float
    dash_gap: float
    primitives: Primitives = field(default_factory=Primitives)


# ============================================================================
# Render options -- user-facing configuration
# ============================================================================

@dataclass(slots=True)
class RenderOptions:
    bg: str | None = None
    fg: str | None = None
    line: str | None = None
    accent: str | None = None
    muted: str | None = None
    # Named palette from THEMES; explicit colors above override it
    theme: str | None = None
    font: str | None = None
    transparent: bool | None = None
    # Label text height as a proportion of diagram width (1/200 .. 1/50 works well)
    text_size_ratio: float | None = None
    # Working width of the model coordinate system
    width: float | None = None
