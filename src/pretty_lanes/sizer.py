from __future__ import annotations

from .types import Statement
from .lanes import LaneGeometry, layout_lanes
from .styles import (
    SIZING_K,
    ARROW_ASPECT_RATIO,
    SELF_LOOP_WIDTH_FACTOR,
    FRAME_TITLE_BOX_WIDTH_K,
)


class Sizer:
    """Named scalar measurements for one diagram.

    Everything is derived from the font height (and, for a few entries, the
    diagram width), so a diagram scales uniformly with its text size.
    """

    def __init__(
        self,
        width: float,
        font_height: float,
        statements: list[Statement],
    ) -> None:
        self.width = width
        self.font_height = font_height
        self.lanes: LaneGeometry = layout_lanes(width, font_height, statements)

        values = {name: k * font_height for name, k in SIZING_K.items()}
        values["ArrowWidth"] = values["ArrowLen"] * ARROW_ASPECT_RATIO
        values["SelfLoopWidthFactor"] = SELF_LOOP_WIDTH_FACTOR
        values["FrameTitleBoxWidth"] = FRAME_TITLE_BOX_WIDTH_K * width
        values["DiagramWidth"] = width
        self._values = values

    def get(self, name: str) -> float:
        try:
            return self._values[name]
        except KeyError:
            raise KeyError(f"Unknown sizing name: {name}") from None

    def names(self) -> list[str]:
        return sorted(self._values)
