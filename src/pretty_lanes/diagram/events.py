from __future__ import annotations

from typing import Literal

from ..types import Keyword, LANE, FULL, DASH, SELF, STOP, TITLE

# ============================================================================
# Drawing events per statement keyword
#
# The order within each tuple matters: every event claims some vertical
# room for itself, which pushes whatever follows further down the diagram.
# Labels for interaction lines sit above their lines, so they come first.
# Lane title boxes are not events: they all go in one row ahead of the pass.
# ============================================================================

EventType = Literal[
    "lifeline_line",
    "interaction_label",
    "interaction_line",
    "self_interaction_lines",
    "potentially_start_from_box",
    "potentially_start_to_box",
    "end_box",
]

EVENTS_REQUIRED: dict[Keyword, tuple[EventType, ...]] = {
    LANE: (
        "lifeline_line",  # no advance, the title box row is drawn before the pass
    ),
    FULL: (
        "interaction_label",  # advances tidemark
        "potentially_start_from_box",  # no advance (backdated behind tidemark)
        "potentially_start_to_box",  # no advance
        "interaction_line",  # advances tidemark
    ),
    DASH: (
        "interaction_label",  # advances tidemark
        "potentially_start_to_box",  # no advance
        "interaction_line",  # advances tidemark
    ),
    SELF: (
        "potentially_start_from_box",  # no advance (backdated behind tidemark)
        "self_interaction_lines",  # advances tidemark, label sits inside the loop
    ),
    STOP: (
        "end_box",  # advances tidemark by a small pad
    ),
    # Drawn by the frame maker before the forward pass
    TITLE: (),
}
