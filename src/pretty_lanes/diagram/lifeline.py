from __future__ import annotations

import logging

from ..types import Primitives
from ..sizer import Sizer
from .boxes import BoxTracker
from .geom import Segment
from .nogozone import NoGoZoneRegistry

logger = logging.getLogger(__name__)

# ============================================================================
# Lifeline segmentation
#
# A lifeline is drawn as a set of dashed vertical segments, with gaps left
# wherever an activity box sits on it, or an interaction label or line
# crosses it (a no-go zone).
#
# Strategy:
#   1. Collect the occupied intervals (applicable no-go zones + box extents)
#   2. Sort by (start, end) and merge touching or overlapping intervals
#   3. Walk the merged intervals from the top, emitting the gaps between them
#   4. Drop gaps too short to draw a visible dash
# ============================================================================


def merge_intervals(intervals: list[Segment]) -> list[Segment]:
    """Merge overlapping or touching intervals into a minimal disjoint set."""
    merged: list[Segment] = []
    for seg in sorted(intervals, key=lambda s: (s.start, s.end)):
        if merged and seg.start <= merged[-1].end:
            last = merged[-1]
            merged[-1] = Segment(last.start, max(last.end, seg.end))
        else:
            merged.append(seg)
    return merged


def assemble_segments(
    lane: str,
    top: float,
    bottom: float,
    min_seg_len: float,
    no_go_zones: NoGoZoneRegistry,
    box_extents: list[Segment],
    all_lanes: list[str],
) -> list[Segment]:
    """The visible segments of one lifeline spanning [top, bottom)."""
    occupied = no_go_zones.applicable_to(lane, all_lanes) + list(box_extents)

    gaps: list[Segment] = []
    cursor = top
    for interval in merge_intervals(occupied):
        if interval.start > cursor:
            gaps.append(Segment(cursor, min(interval.start, bottom)))
        cursor = max(cursor, interval.end)
        if cursor >= bottom:
            break
    if bottom > cursor:
        gaps.append(Segment(cursor, bottom))

    # A gap of exactly min_seg_len survives
    return [g for g in gaps if g.length() > 0 and g.length() >= min_seg_len]


class LifelineFinalizer:
    """Draws the activity boxes and the dashed lifelines once the forward
    pass has fixed where everything sits vertically.
    """

    def __init__(
        self,
        lanes_in_order: list[str],
        tops: dict[str, float],
        boxes: dict[str, BoxTracker],
        no_go_zones: NoGoZoneRegistry,
        sizer: Sizer,
        primitives: Primitives,
    ) -> None:
        self.lanes_in_order = lanes_in_order
        self.tops = tops
        self.boxes = boxes
        self.no_go_zones = no_go_zones
        self.sizer = sizer
        self.primitives = primitives

    def close_boxes_in_progress(self, tidemark: float) -> float:
        """Terminate every box still open and return the new tidemark."""
        bottom = tidemark + self.sizer.get("ActivityBoxVerticalOverlap")
        for lane in self.lanes_in_order:
            tracker = self.boxes[lane]
            if tracker.has_box_in_progress():
                logger.debug("Closing box on lane %s at %s", lane, bottom)
                tracker.terminate_at(bottom)
        return bottom + self.sizer.get("FinalizedActivityBoxesPadB")

    def draw_activity_boxes(self) -> None:
        half_width = 0.5 * self.sizer.get("ActivityBoxWidth")
        for lane in self.lanes_in_order:
            centre = self.sizer.lanes.centre(lane)
            for extent in self.boxes[lane].extents():
                self.primitives.add_rect(
                    centre - half_width, extent.start, centre + half_width, extent.end
                )

    def draw_lifelines(self, bottom: float) -> None:
        min_seg_len = self.sizer.get("MinLifelineSegLength")
        for lane in self.lanes_in_order:
            segments = assemble_segments(
                lane,
                self.tops[lane],
                bottom,
                min_seg_len,
                self.no_go_zones,
                self.boxes[lane].extents(),
                self.lanes_in_order,
            )
            logger.debug("Lifeline %s has %d segments", lane, len(segments))
            x = self.sizer.lanes.centre(lane)
            for seg in segments:
                self.primitives.add_line(x, seg.start, x, seg.end, dashed=True)

    def finalize(self, tidemark: float) -> float:
        """Close open boxes, then draw boxes and lifelines. Returns the
        tidemark at the bottom of the lifelines.
        """
        tidemark = self.close_boxes_in_progress(tidemark)
        self.draw_activity_boxes()
        self.draw_lifelines(tidemark)
        return tidemark
