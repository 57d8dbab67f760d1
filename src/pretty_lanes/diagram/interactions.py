from __future__ import annotations

import logging
from typing import Callable

from ..types import Statement, Primitives, DASH
from ..lanes import isolate_lanes
from ..sizer import Sizer
from .boxes import BoxTracker, InvalidBoxStateError
from .events import EVENTS_REQUIRED, EventType
from .geom import Segment, make_arrow, shorten_line_by
from .nogozone import NoGoZoneRegistry

logger = logging.getLogger(__name__)

# An action draws something for one statement. It receives the current
# tidemark and returns it, advanced by however much room it claimed.
ActionFn = Callable[[float, Statement], float]


class InteractionMaker:
    """Runs the forward pass over the statements.

    Draws the lane title boxes, interaction labels and lines, and self
    interaction loops; opens and closes activity boxes; and registers the
    vertical bands that the lifelines must leave clear.
    """

    def __init__(
        self,
        sizer: Sizer,
        boxes: dict[str, BoxTracker],
        no_go_zones: NoGoZoneRegistry,
        primitives: Primitives,
    ) -> None:
        self.sizer = sizer
        self.boxes = boxes
        self.no_go_zones = no_go_zones
        self.primitives = primitives
        # Top of each lifeline (the bottom of its title box)
        self.lifeline_tops: dict[str, float] = {}
        self._actions: dict[EventType, ActionFn] = {
            "lifeline_line": self.lifeline_line,
            "interaction_label": self.interaction_label,
            "interaction_line": self.interaction_line,
            "self_interaction_lines": self.self_interaction_lines,
            "potentially_start_from_box": self.potentially_start_from_box,
            "potentially_start_to_box": self.potentially_start_to_box,
            "end_box": self.end_box,
        }

    def scan(self, tidemark: float, statements: list[Statement]) -> float:
        """Process every statement in order and return the final tidemark.

        The lane title boxes are drawn first, so they claim the top row no
        matter where the lanes are declared.
        """
        tidemark = self.lifeline_title_boxes(tidemark, statements)
        for s in statements:
            for event in EVENTS_REQUIRED[s.keyword]:
                logger.debug(
                    "line %d: %s %s at tidemark %s", s.source_line, s.keyword, event, tidemark
                )
                try:
                    new_tidemark = self._actions[event](tidemark, s)
                except InvalidBoxStateError as err:
                    raise InvalidBoxStateError(f"line {s.source_line}: {err}") from err
                if new_tidemark < tidemark:
                    raise RuntimeError(
                        f"line {s.source_line}: {event} moved the tidemark "
                        f"up from {tidemark} to {new_tidemark}"
                    )
                tidemark = new_tidemark
        return tidemark

    # ------------------------------------------------------------------
    # Lifelines
    # ------------------------------------------------------------------

    def lifeline_title_boxes(self, tidemark: float, statements: list[Statement]) -> float:
        """Draw the title boxes of every lane in one row starting at the
        tidemark, then advance past them.
        """
        lane_statements = isolate_lanes(statements)
        if not lane_statements:
            return tidemark

        lanes = self.sizer.lanes
        font_ht = self.sizer.get("FontHeight")
        top = tidemark
        bottom = top + lanes.title_box_height
        for s in lane_statements:
            info = lanes.info(s.lane_name)
            self.primitives.add_rect(info.title_box_left, top, info.title_box_right, bottom)

            # Text is bottom aligned inside the box
            n = len(s.label_lines)
            first_row_y = top + lanes.title_box_bottom_row_of_text - n * font_ht
            self.primitives.row_of_strings(
                info.centre, first_row_y, font_ht, "centre", s.label_lines
            )
            self.lifeline_tops[s.lane_name] = bottom
        return bottom + self.sizer.get("TitleBoxPadB")

    def lifeline_line(self, tidemark: float, s: Statement) -> float:
        """Register the lifeline. Its segments are drawn at finalization."""
        self.boxes.setdefault(s.lane_name, BoxTracker())
        self.lifeline_tops.setdefault(s.lane_name, tidemark)
        return tidemark

    # ------------------------------------------------------------------
    # Interactions between two lanes
    # ------------------------------------------------------------------

    def lifeline_centres(self, s: Statement) -> tuple[float, float]:
        """X coordinates of the lifelines an interaction travels between."""
        source, dest = s.referenced_lanes
        return self.sizer.lanes.centre(source), self.sizer.lanes.centre(dest)

    def interaction_label(self, tidemark: float, s: Statement) -> float:
        font_ht = self.sizer.get("FontHeight")
        from_x, to_x = self.lifeline_centres(s)
        label_x = 0.5 * (from_x + to_x)
        self.primitives.row_of_strings(label_x, tidemark, font_ht, "centre", s.label_lines)
        new_tidemark = (
            tidemark
            + len(s.label_lines) * font_ht
            + self.sizer.get("InteractionLineTextPadB")
        )
        source, dest = s.referenced_lanes
        self.no_go_zones.register(Segment(tidemark, new_tidemark), source, dest)
        return new_tidemark

    def interaction_line(self, tidemark: float, s: Statement) -> float:
        from_x, to_x = self.lifeline_centres(s)
        # Lines run from activity box edge to activity box edge
        from_x, to_x = shorten_line_by(
            0.5 * self.sizer.get("ActivityBoxWidth"), from_x, to_x
        )
        y = tidemark
        self.primitives.add_line(from_x, y, to_x, y, dashed=s.keyword == DASH)
        self.primitives.add_filled_poly(
            make_arrow(from_x, to_x, y, self.sizer.get("ArrowLen"), self.sizer.get("ArrowWidth"))
        )
        new_tidemark = tidemark + self.sizer.get("InteractionLinePadB")
        source, dest = s.referenced_lanes
        self.no_go_zones.register(Segment(tidemark, new_tidemark), source, dest)
        return new_tidemark

    # ------------------------------------------------------------------
    # Self interactions
    # ------------------------------------------------------------------

    def self_loop_x_coords(self, lane: str) -> tuple[float, float]:
        lanes = self.sizer.lanes
        left = lanes.centre(lane) + 0.5 * self.sizer.get("ActivityBoxWidth")
        right = left + self.sizer.get("SelfLoopWidthFactor") * lanes.title_box_pitch
        return left, right

    def self_interaction_lines(self, tidemark: float, s: Statement) -> float:
        """Three sides of a rectangle, an arrow head back into the lifeline,
        and the label rows inside the loop.
        """
        lane = s.referenced_lanes[0]
        font_ht = self.sizer.get("FontHeight")
        text_pad_b = self.sizer.get("InteractionLineTextPadB")
        left, right = self.self_loop_x_coords(lane)
        n = len(s.label_lines)

        top = tidemark
        height = max(self.sizer.get("SelfLoopHeight"), n * font_ht + 2 * text_pad_b)
        bottom = top + height
        self.primitives.add_line(left, top, right, top)
        self.primitives.add_line(right, top, right, bottom)
        self.primitives.add_line(right, bottom, left, bottom)
        self.primitives.add_filled_poly(
            make_arrow(right, left, bottom, self.sizer.get("ArrowLen"), self.sizer.get("ArrowWidth"))
        )

        label_x = left + self.sizer.get("InteractionLineLabelIndent")
        first_row_y = bottom - n * font_ht - text_pad_b
        self.primitives.row_of_strings(label_x, first_row_y, font_ht, "left", s.label_lines)

        new_tidemark = bottom + self.sizer.get("InteractionLinePadB")
        self.no_go_zones.register(Segment(tidemark, new_tidemark), lane, lane)
        return new_tidemark

    # ------------------------------------------------------------------
    # Activity boxes
    # ------------------------------------------------------------------

    def tracker(self, lane: str) -> BoxTracker:
        try:
            return self.boxes[lane]
        except KeyError:
            raise ValueError(f"Unknown lane: {lane}") from None

    def potentially_start_activity_box(
        self, lane: str, tidemark: float, behind_tidemark_delta: float
    ) -> None:
        """Start a box on the lane unless one is already in progress."""
        tracker = self.tracker(lane)
        if tracker.has_box_in_progress():
            return
        y = tidemark - behind_tidemark_delta
        logger.debug("Starting box on lane %s at %s", lane, y)
        tracker.add_starting_at(y)

    def potentially_start_from_box(self, tidemark: float, s: Statement) -> float:
        # Starts a little above the tidemark so the box encloses the start of
        # the interaction line; the label above has already claimed that room.
        self.potentially_start_activity_box(
            s.referenced_lanes[0], tidemark, self.sizer.get("ActivityBoxVerticalOverlap")
        )
        return tidemark

    def potentially_start_to_box(self, tidemark: float, s: Statement) -> float:
        self.potentially_start_activity_box(s.referenced_lanes[1], tidemark, 0.0)
        return tidemark

    def end_box(self, tidemark: float, s: Statement) -> float:
        """Terminate the box in progress in response to an explicit stop."""
        lane = s.referenced_lanes[0]
        logger.debug("Stopping box on lane %s at %s", lane, tidemark)
        self.tracker(lane).terminate_at(tidemark)
        return tidemark + self.sizer.get("IndividualStoppedBoxPadB")
