from __future__ import annotations

import logging

from ..types import Statement, DiagramModel, Primitives, RenderOptions, TITLE
from ..styles import DEFAULT_WIDTH, DEFAULT_TEXT_SIZE_RATIO
from ..lanes import isolate_lanes
from ..sizer import Sizer
from .boxes import BoxTracker
from .frame import FrameMaker
from .interactions import InteractionMaker
from .lifeline import LifelineFinalizer
from .nogozone import NoGoZoneRegistry

logger = logging.getLogger(__name__)

# ============================================================================
# Diagram creation
#
# Passes, top to bottom:
#   1. Frame + diagram title at the top
#   2. Forward pass over the statements (title boxes, interactions, boxes),
#      advancing the tidemark as each drawing event claims vertical room
#   3. Close any activity boxes still open, then draw boxes and lifelines
#      with gaps wherever something else occupies them
#   4. Close the frame and size the diagram to fit the final tidemark
#
# Every build owns its own trackers, registry and tidemark.
# ============================================================================


class Creator:
    """Builds the drawing primitives for one diagram."""

    def __init__(
        self,
        statements: list[Statement],
        options: RenderOptions | None = None,
    ) -> None:
        if options is None:
            options = RenderOptions()
        self.statements = statements
        # Arbitrary working width: renderers are expected to scale it
        self.width = options.width or DEFAULT_WIDTH
        self.font_height = self.width * (options.text_size_ratio or DEFAULT_TEXT_SIZE_RATIO)
        self.sizer = Sizer(self.width, self.font_height, statements)
        # Lane order is captured once; everything positional keys off it
        self.lanes_in_order = [s.lane_name for s in isolate_lanes(statements)]

    def create(self) -> DiagramModel:
        sizer = self.sizer
        primitives = Primitives()
        boxes = {lane: BoxTracker() for lane in self.lanes_in_order}
        no_go_zones = NoGoZoneRegistry()

        tidemark = sizer.get("DiagramPadT")
        frame = FrameMaker(sizer, primitives)
        tidemark = frame.init_frame_and_title_box(self._title_lines(), tidemark)

        maker = InteractionMaker(sizer, boxes, no_go_zones, primitives)
        tidemark = maker.scan(tidemark, self.statements)
        logger.debug(
            "Forward pass done: tidemark %s, %d no-go zones", tidemark, len(no_go_zones)
        )

        finalizer = LifelineFinalizer(
            self.lanes_in_order, maker.lifeline_tops, boxes, no_go_zones, sizer, primitives
        )
        tidemark = finalizer.finalize(tidemark)
        tidemark = frame.finalize_frame(tidemark, self.width)

        return DiagramModel(
            width=self.width,
            height=tidemark + sizer.get("DiagramPadB"),
            font_height=self.font_height,
            dash_len=sizer.get("DashLineDashLen"),
            dash_gap=sizer.get("DashLineDashGap"),
            primitives=primitives,
        )

    def _title_lines(self) -> list[str]:
        for s in self.statements:
            if s.keyword == TITLE:
                return s.label_lines
        return []


def create_diagram(
    statements: list[Statement],
    options: RenderOptions | None = None,
) -> DiagramModel:
    """Create the drawing primitives for a list of statements."""
    return Creator(statements, options).create()
