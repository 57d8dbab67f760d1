from __future__ import annotations

from .geom import Segment, InvalidIntervalError
from .boxes import BoxTracker, ActivityBoxExtent, InvalidBoxStateError
from .nogozone import NoGoZone, NoGoZoneRegistry
from .lifeline import assemble_segments, merge_intervals, LifelineFinalizer
from .events import EVENTS_REQUIRED
from .interactions import InteractionMaker
from .frame import FrameMaker
from .creator import Creator, create_diagram

__all__ = [
    "Segment",
    "InvalidIntervalError",
    "BoxTracker",
    "ActivityBoxExtent",
    "InvalidBoxStateError",
    "NoGoZone",
    "NoGoZoneRegistry",
    "assemble_segments",
    "merge_intervals",
    "LifelineFinalizer",
    "EVENTS_REQUIRED",
    "InteractionMaker",
    "FrameMaker",
    "Creator",
    "create_diagram",
]
