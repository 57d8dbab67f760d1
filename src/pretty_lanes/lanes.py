from __future__ import annotations

from dataclasses import dataclass, field

from .types import Statement, LANE
from .styles import SIZING_K, LANE_TITLE_BOX_PAD_R_K

# ============================================================================
# Lane layout
#
# Lanes are equi-spaced across the diagram width. All title boxes share the
# same width and height; the gap between neighbouring boxes (and the margin
# at either edge) is a fixed proportion of the box width.
# ============================================================================


@dataclass(slots=True)
class LaneInfo:
    title_box_left: float
    centre: float
    title_box_right: float


@dataclass(slots=True)
class LaneGeometry:
    diagram_width: float
    font_height: float
    lane_names: list[str]
    title_box_width: float
    title_box_pitch: float
    title_box_height: float
    # Offset of the bottom row of title text below the top of the title box
    title_box_bottom_row_of_text: float
    first_title_box_pad_l: float
    individual: dict[str, LaneInfo] = field(default_factory=dict)

    def centre(self, lane: str) -> float:
        try:
            return self.individual[lane].centre
        except KeyError:
            raise ValueError(f"Unknown lane: {lane}") from None

    def info(self, lane: str) -> LaneInfo:
        try:
            return self.individual[lane]
        except KeyError:
            raise ValueError(f"Unknown lane: {lane}") from None


def isolate_lanes(statements: list[Statement]) -> list[Statement]:
    """The lane declarations from a statement list, in declaration order."""
    return [s for s in statements if s.keyword == LANE]


def layout_lanes(
    diagram_width: float,
    font_height: float,
    statements: list[Statement],
) -> LaneGeometry:
    """Assign every declared lane its horizontal position."""
    lane_statements = isolate_lanes(statements)
    n = len(lane_statements)

    # Title box height has room for the lane with the most label rows
    max_rows = max((len(s.label_lines) for s in lane_statements), default=0)
    pad_t = SIZING_K["TitleBoxTextPadT"] * font_height
    pad_b = SIZING_K["TitleBoxTextPadB"] * font_height
    height = pad_t + pad_b + max_rows * font_height

    k = LANE_TITLE_BOX_PAD_R_K
    n_margins = 2
    n_gaps = max(n - 1, 0)
    width = diagram_width / (k * (n_margins + n_gaps) + max(n, 1))

    geometry = LaneGeometry(
        diagram_width=diagram_width,
        font_height=font_height,
        lane_names=[s.lane_name for s in lane_statements],
        title_box_width=width,
        title_box_pitch=width * (1 + k),
        title_box_height=height,
        title_box_bottom_row_of_text=height - pad_b,
        first_title_box_pad_l=k * width,
    )
    for i, s in enumerate(lane_statements):
        centre = geometry.first_title_box_pad_l + 0.5 * width + i * geometry.title_box_pitch
        geometry.individual[s.lane_name] = LaneInfo(
            title_box_left=centre - 0.5 * width,
            centre=centre,
            title_box_right=centre + 0.5 * width,
        )
    return geometry
