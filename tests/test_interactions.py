"""Tests for the forward pass -- how each statement's drawing events advance
the tidemark, open and close activity boxes, and register no-go zones.

Everything runs at the default working width (2000) with a font height of 20,
so the sizing values used below are:
    title box height 40 (5 + 15 padding, one row of text), TitleBoxPadB 10
    InteractionLineTextPadB 10, InteractionLinePadB 10
    ActivityBoxVerticalOverlap 10, IndividualStoppedBoxPadB 20
    SelfLoopHeight 60
"""
from __future__ import annotations

import pytest

from pretty_lanes.types import Statement, Primitives
from pretty_lanes.sizer import Sizer
from pretty_lanes.diagram.boxes import BoxTracker, InvalidBoxStateError
from pretty_lanes.diagram.events import EVENTS_REQUIRED
from pretty_lanes.diagram.geom import Segment
from pretty_lanes.diagram.interactions import InteractionMaker
from pretty_lanes.diagram.nogozone import NoGoZoneRegistry


def lane(name: str, label: str = "Lane") -> Statement:
    return Statement(keyword="lane", lane_name=name, label_lines=[label])


def full(lanes: str, *labels: str) -> Statement:
    return Statement(keyword="full", referenced_lanes=tuple(lanes), label_lines=list(labels))


def dash(lanes: str, *labels: str) -> Statement:
    return Statement(keyword="dash", referenced_lanes=tuple(lanes), label_lines=list(labels))


def self_(lane_name: str, *labels: str) -> Statement:
    return Statement(keyword="self", referenced_lanes=(lane_name,), label_lines=list(labels))


def stop(lane_name: str, line: int = 0) -> Statement:
    return Statement(keyword="stop", referenced_lanes=(lane_name,), source_line=line)


LANES = [lane("A"), lane("B"), lane("C")]


def make_maker(statements: list[Statement]) -> InteractionMaker:
    sizer = Sizer(2000, 20, statements)
    boxes = {s.lane_name: BoxTracker() for s in statements if s.keyword == "lane"}
    return InteractionMaker(sizer, boxes, NoGoZoneRegistry(), Primitives())


def scan(statements: list[Statement], tidemark: float = 100):
    maker = make_maker(statements)
    return maker, maker.scan(tidemark, statements)


class TestEventTable:
    def test_labels_precede_their_lines(self):
        for keyword in ("full", "dash"):
            events = EVENTS_REQUIRED[keyword]
            assert events.index("interaction_label") < events.index("interaction_line")

    def test_full_starts_both_boxes_dash_only_the_destination(self):
        assert "potentially_start_from_box" in EVENTS_REQUIRED["full"]
        assert "potentially_start_to_box" in EVENTS_REQUIRED["full"]
        assert "potentially_start_from_box" not in EVENTS_REQUIRED["dash"]
        assert "potentially_start_to_box" in EVENTS_REQUIRED["dash"]

    def test_title_has_no_forward_pass_events(self):
        assert EVENTS_REQUIRED["title"] == ()


class TestLanes:
    def test_title_boxes_share_one_row(self):
        maker, tidemark = scan(LANES)
        assert maker.lifeline_tops == {"A": 140, "B": 140, "C": 140}
        assert tidemark == 150

    def test_title_boxes_are_drawn_with_their_labels(self):
        maker, _ = scan(LANES)
        # Four sides per title box
        assert len(maker.primitives.lines) == 12
        labels = maker.primitives.labels
        assert [l.text for l in labels] == ["Lane", "Lane", "Lane"]
        # Bottom row of text sits 15 above the bottom of the box
        assert labels[0].anchor.y == 100 + 40 - 15 - 20
        assert labels[0].h_just == "centre"

    def test_interactions_before_lane_declarations_sit_below_the_title_row(self):
        statements = [full("AB", "msg")] + LANES
        maker, tidemark = scan(statements)
        assert maker.lifeline_tops == {"A": 140, "B": 140, "C": 140}
        msg = next(l for l in maker.primitives.labels if l.text == "msg")
        assert msg.anchor.y == 150
        assert maker.no_go_zones.zones[0].segment.start == 150
        assert tidemark == 190

    def test_lane_statements_only_register_the_lifeline(self):
        assert EVENTS_REQUIRED["lane"] == ("lifeline_line",)

    def test_no_lanes_leaves_the_tidemark_alone(self):
        maker = make_maker([])
        assert maker.lifeline_title_boxes(100, []) == 100
        assert maker.primitives.lines == []


class TestFullInteraction:
    def test_advances_by_label_then_line(self):
        _, tidemark = scan(LANES + [full("AB", "request")])
        # 150 + 20 (one row) + 10 text pad, then + 10 line pad
        assert tidemark == 190

    def test_multi_row_label_claims_a_row_each(self):
        _, tidemark = scan(LANES + [full("AB", "request(", "token)")])
        assert tidemark == 210

    def test_from_box_is_backdated_and_to_box_is_not(self):
        maker, _ = scan(LANES + [full("AB", "request")])
        assert maker.boxes["A"].most_recent_start() == 170
        assert maker.boxes["B"].most_recent_start() == 180
        assert maker.boxes["A"].has_box_in_progress()
        assert maker.boxes["B"].has_box_in_progress()
        assert not maker.boxes["C"].has_box_in_progress()

    def test_registers_a_zone_for_the_label_and_the_line(self):
        maker, _ = scan(LANES + [full("AC", "request")])
        zones = maker.no_go_zones.zones
        assert [z.segment for z in zones] == [Segment(150, 180), Segment(180, 190)]
        assert all((z.lane_a, z.lane_b) == ("A", "C") for z in zones)

    def test_line_is_solid_with_an_arrow_head(self):
        maker, _ = scan(LANES + [full("AB", "request")])
        line = maker.primitives.lines[-1]
        assert not line.dashed
        assert line.p1.y == line.p2.y == 180
        assert len(maker.primitives.filled_polys) == 1

    def test_line_runs_between_activity_box_edges(self):
        maker, _ = scan(LANES + [full("AB", "request")])
        lanes = maker.sizer.lanes
        line = maker.primitives.lines[-1]
        assert line.p1.x == pytest.approx(lanes.centre("A") + 15)
        assert line.p2.x == pytest.approx(lanes.centre("B") - 15)

    def test_second_interaction_does_not_reopen_boxes(self):
        maker, _ = scan(LANES + [full("AB", "one"), full("AB", "two")])
        assert len(maker.boxes["A"]) == 1
        assert len(maker.boxes["B"]) == 1
        assert maker.boxes["A"].most_recent_start() == 170


class TestDashInteraction:
    def test_only_the_destination_box_is_started(self):
        maker, tidemark = scan(LANES + [dash("BA", "reply")])
        assert tidemark == 190
        assert maker.boxes["A"].most_recent_start() == 180
        assert len(maker.boxes["B"]) == 0

    def test_line_is_dashed(self):
        maker, _ = scan(LANES + [dash("BA", "reply")])
        assert maker.primitives.lines[-1].dashed


class TestSelfInteraction:
    def test_loop_claims_its_height_plus_padding(self):
        maker, tidemark = scan(LANES + [self_("B", "validate")])
        assert tidemark == 150 + 60 + 10
        assert maker.boxes["B"].most_recent_start() == 140

    def test_tall_label_grows_the_loop(self):
        _, tidemark = scan(LANES + [self_("B", "one", "two", "three")])
        # 3 rows + 2 text pads = 80, taller than the minimum loop height
        assert tidemark == 150 + 80 + 10

    def test_registers_a_zone_for_its_own_lane_only(self):
        maker, _ = scan(LANES + [self_("B", "validate")])
        (zone,) = maker.no_go_zones.zones
        assert (zone.lane_a, zone.lane_b) == ("B", "B")
        assert zone.segment == Segment(150, 220)

    def test_three_sided_loop_and_arrow(self):
        maker, _ = scan(LANES + [self_("B", "validate")])
        loop = maker.primitives.lines[-3:]
        assert all(not l.dashed for l in loop)
        assert loop[0].p1.y == 150
        assert loop[2].p1.y == 210
        assert len(maker.primitives.filled_polys) == 1
        assert maker.primitives.labels[-1].h_just == "left"


class TestStop:
    def test_stop_closes_the_box_and_pads_below_it(self):
        maker, tidemark = scan(LANES + [full("AB", "request"), stop("B")])
        assert tidemark == 190 + 20
        assert maker.boxes["B"].extents() == [Segment(180, 190)]
        assert maker.boxes["A"].has_box_in_progress()

    def test_box_can_restart_after_a_stop(self):
        maker, _ = scan(LANES + [full("AB", "one"), stop("B"), full("AB", "two")])
        assert maker.boxes["B"].extents() == [Segment(180, 190)]
        assert maker.boxes["B"].most_recent_start() == 240

    def test_stop_without_a_box_is_fatal_and_names_the_line(self):
        with pytest.raises(InvalidBoxStateError, match="line 7"):
            scan(LANES + [stop("C", line=7)])

    def test_failure_aborts_the_rest_of_the_pass(self):
        statements = LANES + [stop("C"), full("AB", "never drawn")]
        maker = make_maker(statements)
        with pytest.raises(InvalidBoxStateError):
            maker.scan(100, statements)
        assert len(maker.no_go_zones) == 0


class TestTidemark:
    def test_tidemark_never_moves_up(self):
        statements = LANES + [
            full("AB", "a"),
            dash("BA", "b"),
            self_("A", "c"),
            stop("A"),
            full("CA", "d"),
        ]
        maker, tidemark = scan(statements)
        starts = [z.segment.start for z in maker.no_go_zones.zones]
        assert starts == sorted(starts)
        assert starts[0] == 150
        assert tidemark > starts[-1]

    def test_action_moving_the_tidemark_up_is_rejected(self):
        maker = make_maker(LANES)
        maker._actions["lifeline_line"] = lambda tidemark, s: tidemark - 1
        with pytest.raises(RuntimeError, match="moved the tidemark"):
            maker.scan(100, LANES)

    def test_unknown_lane_is_reported(self):
        with pytest.raises(ValueError, match="Unknown lane: Q"):
            scan(LANES + [full("AQ", "lost")])
