from __future__ import annotations

# ============================================================================
# Sizing ratios
#
# Naming conventions:
#   - names begin with the graphics entity they apply to
#   - <PadT> reads as padding-top (T from L, R, T, B)
#
# Unless noted otherwise every value is a multiple of the font height.
# ============================================================================

DEFAULT_WIDTH = 2000.0
DEFAULT_TEXT_SIZE_RATIO = 0.01

SIZING_K = {
    "FontHeight": 1.0,
    "DiagramPadT": 1.0,
    "DiagramPadB": 1.0,
    # Outer frame and diagram title
    "FramePadLR": 0.5,
    "FrameTitleTextPadT": 0.5,
    "FrameTitleTextPadB": 0.5,
    "FrameTitleTextPadL": 0.5,
    "FrameTitleRectPadB": 1.5,
    "FrameInternalPadB": 0.5,
    # Lane title boxes
    "TitleBoxTextPadT": 0.25,
    "TitleBoxTextPadB": 0.75,
    "TitleBoxPadB": 0.5,
    # Full and dashed interaction lines
    "InteractionLinePadB": 0.5,
    "InteractionLineTextPadB": 0.5,
    "InteractionLineLabelIndent": 0.5,
    "ArrowLen": 1.5,
    "DashLineDashLen": 0.5,
    "DashLineDashGap": 0.25,
    # Activity boxes
    "ActivityBoxWidth": 1.5,
    "ActivityBoxVerticalOverlap": 0.5,
    "IndividualStoppedBoxPadB": 1.0,
    "FinalizedActivityBoxesPadB": 0.5,
    # Self interactions
    "SelfLoopHeight": 3.0,
    # Lifelines
    "MinLifelineSegLength": 0.5,
}

# Width of an arrow head w.r.t. its length
ARROW_ASPECT_RATIO = 0.4

# Self loop width w.r.t. the lane pitch (dimensionless)
SELF_LOOP_WIDTH_FACTOR = 0.25

# Frame title box width w.r.t. the diagram width
FRAME_TITLE_BOX_WIDTH_K = 0.25

# Horizontal gap between lane title boxes w.r.t. title box width
LANE_TITLE_BOX_PAD_R_K = 0.25

# ============================================================================
# Stroke styling (SVG export only)
# ============================================================================

STROKE_WIDTHS = {
    "solid": 1,
    "dashed": 0.75,
}
