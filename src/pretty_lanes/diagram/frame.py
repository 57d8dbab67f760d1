from __future__ import annotations

from ..types import Primitives
from ..sizer import Sizer


class FrameMaker:
    """Draws the diagram's outer frame and the title box at its top left."""

    def __init__(self, sizer: Sizer, primitives: Primitives) -> None:
        self.sizer = sizer
        self.primitives = primitives
        self.frame_top = 0.0

    def init_frame_and_title_box(self, title_lines: list[str], frame_top: float) -> float:
        """Remember where the frame starts and draw the title below it.

        Returns the tidemark beneath the title box. Without a title only the
        padding under the top of the frame is claimed.
        """
        get = self.sizer.get
        self.frame_top = frame_top
        tidemark = frame_top + get("FrameTitleTextPadT")
        if not title_lines:
            return tidemark

        left_of_text = get("FramePadLR") + get("FrameTitleTextPadL")
        self.primitives.row_of_strings(
            left_of_text, tidemark, get("FontHeight"), "left", title_lines
        )
        tidemark += len(title_lines) * get("FontHeight")
        tidemark += get("FrameTitleTextPadB")
        self.primitives.add_rect(
            get("FramePadLR"), self.frame_top, get("FrameTitleBoxWidth"), tidemark
        )
        return tidemark + get("FrameTitleRectPadB")

    def finalize_frame(self, tidemark: float, diagram_width: float) -> float:
        """Claim a little room below the contents and draw the frame around
        everything. Room below the frame is the caller's business.
        """
        tidemark += self.sizer.get("FrameInternalPadB")
        left = self.sizer.get("FramePadLR")
        right = diagram_width - left
        self.primitives.add_rect(left, self.frame_top, right, tidemark)
        return tidemark
