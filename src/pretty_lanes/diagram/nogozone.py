from __future__ import annotations

from dataclasses import dataclass

from .geom import Segment


@dataclass(slots=True, frozen=True)
class NoGoZone:
    """A vertical band occupied by something drawn across lanes.

    The zone occupies every lifeline whose position lies between lane_a and
    lane_b inclusive. A zone where both lanes are the same occupies only that
    lane.
    """
    segment: Segment
    lane_a: str
    lane_b: str


class NoGoZoneRegistry:
    """Append-only collection of no-go zones for one diagram build."""

    def __init__(self) -> None:
        self._zones: list[NoGoZone] = []

    def __len__(self) -> int:
        return len(self._zones)

    @property
    def zones(self) -> tuple[NoGoZone, ...]:
        return tuple(self._zones)

    def register(self, segment: Segment, lane_a: str, lane_b: str) -> NoGoZone:
        zone = NoGoZone(segment, lane_a, lane_b)
        self._zones.append(zone)
        return zone

    def applicable_to(self, lane: str, all_lanes_in_order: list[str]) -> list[Segment]:
        """Segments of the zones that cross the given lane's lifeline."""
        index = {name: i for i, name in enumerate(all_lanes_in_order)}
        if lane not in index:
            return []
        i = index[lane]
        applicable: list[Segment] = []
        for zone in self._zones:
            a = index.get(zone.lane_a)
            b = index.get(zone.lane_b)
            if a is None or b is None:
                continue
            if min(a, b) <= i <= max(a, b):
                applicable.append(zone.segment)
        return applicable
