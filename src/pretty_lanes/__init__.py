"""pretty-lanes: lay out lane-based sequence diagrams and render them to SVG."""

from __future__ import annotations

from .types import RenderOptions, Statement, DiagramModel, Primitives
from .theme import DiagramColors, THEMES, DEFAULTS, resolve_theme
from .parser import parse_statements, DslError
from .renderer import render_svg
from .diagram import (
    create_diagram,
    Creator,
    InvalidBoxStateError,
    InvalidIntervalError,
)

__all__ = [
    "render_lanes",
    "parse_statements",
    "create_diagram",
    "render_svg",
    "Creator",
    "THEMES",
    "DEFAULTS",
    "RenderOptions",
    "Statement",
    "DiagramModel",
    "Primitives",
    "DiagramColors",
    "DslError",
    "InvalidBoxStateError",
    "InvalidIntervalError",
]


def _build_colors(options: RenderOptions) -> DiagramColors:
    """Build DiagramColors from render options, on top of a named theme if given."""
    base = resolve_theme(options.theme) if options.theme else DiagramColors(**DEFAULTS)
    return DiagramColors(
        bg=options.bg or base.bg,
        fg=options.fg or base.fg,
        line=options.line or base.line,
        accent=options.accent or base.accent,
        muted=options.muted or base.muted,
    )


def render_lanes(
    text: str,
    options: RenderOptions | None = None,
) -> str:
    """Render lane diagram DSL text to an SVG string."""
    if options is None:
        options = RenderOptions()

    statements = parse_statements(text)
    model = create_diagram(statements, options)
    return render_svg(
        model,
        _build_colors(options),
        options.font or "Inter",
        options.transparent or False,
    )
