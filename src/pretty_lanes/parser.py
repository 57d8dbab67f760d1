from __future__ import annotations

import re

from .types import Statement, KEYWORDS, LANE, FULL, DASH, SELF, STOP, TITLE

# ============================================================================
# DSL parser
#
# One statement per line; blank lines are ignored:
#   title  Diagram title | second row
#   lane   A  Client app
#   full   AB request( | token)
#   dash   BA reply
#   self   B  validate
#   stop   B
#
# The '|' character splits a label into rows.
# ============================================================================

_STATEMENT_RE = re.compile(r"^(\S+)\s+(\S+)\s*(.*)$")
_TITLE_RE = re.compile(r"^(\S+)\s+(.*)$")
_ONE_LANE_RE = re.compile(r"^[A-Z]$")
_TWO_LANES_RE = re.compile(r"^[A-Z]{2}$")

_ONE_LANE_KEYWORDS = (LANE, SELF, STOP)
_TWO_LANE_KEYWORDS = (FULL, DASH)


class DslError(ValueError):
    """A statement could not be parsed."""

    def __init__(self, line: str, line_number: int, reason: str) -> None:
        super().__init__(f"Error on this line <{line}> (line: {line_number}): {reason}")
        self.line = line
        self.line_number = line_number
        self.reason = reason


def parse_statements(text: str) -> list[Statement]:
    """Parse DSL text into an ordered list of statements.

    Lane references are checked against every lane declared in the text, so
    the result is ready for diagram creation as-is.
    """
    statements: list[Statement] = []
    source_lines: dict[int, str] = {}

    for i, raw in enumerate(text.split("\n"), start=1):
        line = raw.strip()
        if not line:
            continue
        source_lines[i] = line
        statements.append(_parse_line(line, i))

    # Every referenced lane must be declared somewhere, and only once
    declared: set[str] = set()
    for s in statements:
        if s.keyword == LANE:
            if s.lane_name in declared:
                raise DslError(
                    source_lines[s.source_line], s.source_line, f"Duplicate lane: {s.lane_name}"
                )
            declared.add(s.lane_name)
    for s in statements:
        for lane in s.referenced_lanes:
            if lane not in declared:
                raise DslError(source_lines[s.source_line], s.source_line, f"Unknown lane: {lane}")

    return statements


def _parse_line(line: str, line_number: int) -> Statement:
    words = line.split()
    if len(words) < 2:
        raise DslError(line, line_number, "must have at least 2 words")

    keyword = words[0].lower()
    if keyword not in KEYWORDS:
        raise DslError(line, line_number, f"unrecognized keyword: {words[0]}")

    if keyword == TITLE:
        title_match = _TITLE_RE.match(line)
        label_text = title_match.group(2) if title_match else ""
        return Statement(
            keyword=TITLE,
            label_lines=_split_label(label_text),
            source_line=line_number,
        )

    match = _STATEMENT_RE.match(line)
    lanes_word = match.group(2) if match else words[1]
    label_text = match.group(3) if match else ""

    if keyword in _ONE_LANE_KEYWORDS and not _ONE_LANE_RE.match(lanes_word):
        raise DslError(line, line_number, "Lane name must be single, upper case letter")
    if keyword in _TWO_LANE_KEYWORDS and not _TWO_LANES_RE.match(lanes_word):
        raise DslError(line, line_number, "Lanes specified must be two, upper case letters")

    label_lines = _split_label(label_text)
    if keyword != STOP and not label_lines:
        raise DslError(line, line_number, "Label text missing")

    if keyword == LANE:
        return Statement(
            keyword=LANE,
            label_lines=label_lines,
            lane_name=lanes_word,
            source_line=line_number,
        )
    return Statement(
        keyword=keyword,  # type: ignore[arg-type]
        referenced_lanes=tuple(lanes_word),
        label_lines=label_lines,
        source_line=line_number,
    )


def _split_label(text: str) -> list[str]:
    """Split label text into trimmed rows, dropping empty rows."""
    return [row.strip() for row in text.split("|") if row.strip()]
