from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import quote

# ============================================================================
# Types
# ============================================================================


@dataclass(slots=True)
class DiagramColors:
    """Diagram color configuration.

    Required: bg + fg give you a clean mono diagram.
    Optional: line, accent and muted bring in richer color.
    """

    bg: str
    fg: str
    line: str | None = None
    accent: str | None = None
    muted: str | None = None


DEFAULTS = {"bg": "#FFFFFF", "fg": "#27272A"}

# color-mix() weights for derived CSS variables
MIX = {
    "lifeline": 35,
    "line": 70,
    "arrow": 80,
}

THEMES: dict[str, DiagramColors] = {
    "zinc-dark": DiagramColors(bg="#18181B", fg="#FAFAFA"),
    "github-light": DiagramColors(
        bg="#ffffff", fg="#1f2328",
        line="#59636e", accent="#0969da", muted="#59636e",
    ),
    "github-dark": DiagramColors(
        bg="#0d1117", fg="#e6edf3",
        line="#9198a1", accent="#4493f8", muted="#9198a1",
    ),
    "nord": DiagramColors(
        bg="#2e3440", fg="#d8dee9",
        line="#81a1c1", accent="#88c0d0", muted="#616e88",
    ),
    "solarized-light": DiagramColors(
        bg="#fdf6e3", fg="#657b83",
        line="#93a1a1", accent="#268bd2", muted="#93a1a1",
    ),
}


def resolve_theme(name: str) -> DiagramColors:
    try:
        return THEMES[name]
    except KeyError:
        raise ValueError(
            f"Unknown theme: {name}. Available: {', '.join(sorted(THEMES))}"
        ) from None


# ============================================================================
# SVG style block
# ============================================================================


def build_style_block(font: str) -> str:
    """Build the CSS variable derivation rules for the SVG <style> block."""
    derived_vars = f"""
    /* Derived from --bg and --fg (overridable via --line, --accent, etc.) */
    --_text:          var(--fg);
    --_lifeline:      var(--muted, color-mix(in srgb, var(--fg) {MIX["lifeline"]}%, var(--bg)));
    --_line:          var(--line, color-mix(in srgb, var(--fg) {MIX["line"]}%, var(--bg)));
    --_arrow:         var(--accent, color-mix(in srgb, var(--fg) {MIX["arrow"]}%, var(--bg)));"""

    return "\n".join([
        "<style>",
        f"  @import url('https://fonts.googleapis.com/css2?family={quote(font)}:wght@400;500&amp;display=swap');",
        f"  text {{ font-family: '{font}', system-ui, sans-serif; }}",
        f"  svg {{{derived_vars}",
        "  }",
        "</style>",
    ])


def svg_open_tag(
    width: float,
    height: float,
    colors: DiagramColors,
    transparent: bool = False,
) -> str:
    """Build the SVG opening tag with CSS variables set as inline styles."""
    vars_parts = [
        f"--bg:{colors.bg}",
        f"--fg:{colors.fg}",
    ]
    for name in ("line", "accent", "muted"):
        value = getattr(colors, name)
        if value:
            vars_parts.append(f"--{name}:{value}")

    vars_str = ";".join(vars_parts)
    bg_style = "" if transparent else ";background:var(--bg)"

    return (
        f'<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 {width} {height}" '
        f'width="{width}" height="{height}" style="{vars_str}{bg_style}">'
    )
