from __future__ import annotations

from dataclasses import dataclass

from .geom import Segment


class InvalidBoxStateError(RuntimeError):
    """An activity box was opened or closed out of turn."""


@dataclass(slots=True)
class ActivityBoxExtent:
    start: float
    # None while the box is in progress
    end: float | None = None

    @property
    def in_progress(self) -> bool:
        return self.end is None


class BoxTracker:
    """Keeps track of the activity boxes on one lifeline.

    Boxes are added top-down, never overlap, and at most the most recently
    added one can be in progress (started but not yet terminated).
    """

    def __init__(self) -> None:
        self._boxes: list[ActivityBoxExtent] = []

    def __len__(self) -> int:
        return len(self._boxes)

    def _most_recent(self) -> ActivityBoxExtent | None:
        return self._boxes[-1] if self._boxes else None

    def has_box_in_progress(self) -> bool:
        box = self._most_recent()
        return box is not None and box.in_progress

    def most_recent_start(self) -> float | None:
        box = self._most_recent()
        return box.start if box is not None else None

    def add_starting_at(self, y: float) -> None:
        previous = self._most_recent()
        if previous is not None:
            if previous.in_progress:
                raise InvalidBoxStateError(
                    f"Cannot start a box at {y}: the box started at "
                    f"{previous.start} is still in progress"
                )
            if y < previous.end:
                raise InvalidBoxStateError(
                    f"Cannot start a box at {y}: it would overlap the box "
                    f"ending at {previous.end}"
                )
        self._boxes.append(ActivityBoxExtent(start=y))

    def terminate_at(self, y: float) -> None:
        box = self._most_recent()
        if box is None or not box.in_progress:
            raise InvalidBoxStateError(
                f"Cannot terminate a box at {y}: no box is in progress"
            )
        if y < box.start:
            raise InvalidBoxStateError(
                f"Cannot terminate a box at {y}: it started later, at {box.start}"
            )
        box.end = y

    def extents(self) -> list[Segment]:
        """The boxes that have been terminated, top to bottom."""
        return [Segment(b.start, b.end) for b in self._boxes if b.end is not None]
