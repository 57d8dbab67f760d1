from __future__ import annotations

from .types import DiagramModel, Line, FilledPoly, Label
from .theme import DiagramColors, svg_open_tag, build_style_block
from .styles import STROKE_WIDTHS

# ============================================================================
# SVG exporter
#
# Renders a created diagram model to an SVG string. Colors use CSS custom
# properties (var(--_xxx)) from the theme system.
#
# Render order (back to front):
#   1. Lines (solid: frame, boxes, interactions; dashed: lifelines, replies)
#   2. Arrow heads
#   3. Labels
# ============================================================================

_TEXT_ANCHOR = {"left": "start", "centre": "middle", "right": "end"}
_BASELINE = {"top": "hanging", "centre": "central", "bottom": "text-after-edge"}


def render_svg(
    model: DiagramModel,
    colors: DiagramColors,
    font: str = "Inter",
    transparent: bool = False,
) -> str:
    """Render a diagram model as an SVG string.

    Args:
        colors: DiagramColors with bg/fg and optional enrichment variables.
        transparent: If true, renders with transparent background.
    """
    parts: list[str] = []

    parts.append(svg_open_tag(model.width, model.height, colors, transparent))
    parts.append(build_style_block(font))

    dash_array = f"{model.dash_len} {model.dash_gap}"
    for line in model.primitives.lines:
        parts.append(_render_line(line, dash_array))

    for poly in model.primitives.filled_polys:
        parts.append(_render_poly(poly))

    for label in model.primitives.labels:
        parts.append(_render_label(label))

    parts.append("</svg>")
    return "\n".join(parts)


def _render_line(line: Line, dash_array: str) -> str:
    if line.dashed:
        # Vertical dashed lines are lifelines; horizontal ones are replies
        stroke = "var(--_lifeline)" if line.p1.x == line.p2.x else "var(--_line)"
        return (
            f'<line x1="{line.p1.x}" y1="{line.p1.y}" x2="{line.p2.x}" y2="{line.p2.y}" '
            f'stroke="{stroke}" stroke-width="{STROKE_WIDTHS["dashed"]}" '
            f'stroke-dasharray="{dash_array}" />'
        )
    return (
        f'<line x1="{line.p1.x}" y1="{line.p1.y}" x2="{line.p2.x}" y2="{line.p2.y}" '
        f'stroke="var(--_line)" stroke-width="{STROKE_WIDTHS["solid"]}" />'
    )


def _render_poly(poly: FilledPoly) -> str:
    points = " ".join(f"{p.x},{p.y}" for p in poly.vertices)
    return f'<polygon points="{points}" fill="var(--_arrow)" />'


def _render_label(label: Label) -> str:
    anchor = _TEXT_ANCHOR.get(label.h_just, "start")
    baseline = _BASELINE.get(label.v_just, "hanging")
    return (
        f'<text x="{label.anchor.x}" y="{label.anchor.y}" text-anchor="{anchor}" '
        f'dominant-baseline="{baseline}" font-size="{label.font_height}" '
        f'fill="var(--_text)">{_escape_xml(label.text)}</text>'
    )


# ============================================================================
# Utilities
# ============================================================================


def _escape_xml(text: str) -> str:
    """Escape special XML characters in text content."""
    return (
        text.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
        .replace("'", "&#39;")
    )
