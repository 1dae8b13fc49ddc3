"""Tests for deckmorph.transitions.scoring and deckmorph.core.geometry."""

import pytest

from deckmorph.core.geometry import Rect, StageEdge, closest_stage_edge
from deckmorph.transitions.scoring import (
    rect_match_score,
    rect_position_score,
    rect_size_score,
)


# ── Rect ────────────────────────────────────────────────────────────────

class TestRect:
    def test_edges_and_area(self):
        r = Rect(x=10, y=20, width=100, height=50)
        assert r.left == 10
        assert r.right == 110
        assert r.top == 20
        assert r.bottom == 70
        assert r.area == 5000

    def test_intersection_overlapping(self):
        a = Rect(x=0, y=0, width=100, height=100)
        b = Rect(x=50, y=50, width=100, height=100)
        overlap = a.intersection(b)
        assert overlap == Rect(x=50, y=50, width=50, height=50)
        assert overlap.area == 2500

    def test_intersection_disjoint_is_empty(self):
        a = Rect(x=0, y=0, width=10, height=10)
        b = Rect(x=500, y=500, width=10, height=10)
        assert a.intersection(b).area == 0


# ── Closest stage edge ──────────────────────────────────────────────────

class TestClosestStageEdge:
    def test_left_wins_ties(self):
        # touches both the left and the top edge
        assert closest_stage_edge(Rect(0, 0, 100, 100), 1920, 1080) is StageEdge.LEFT

    def test_right(self):
        assert closest_stage_edge(Rect(1800, 500, 120, 100), 1920, 1080) is StageEdge.RIGHT

    def test_top(self):
        assert closest_stage_edge(Rect(500, 0, 100, 100), 1920, 1080) is StageEdge.TOP

    def test_bottom(self):
        assert closest_stage_edge(Rect(500, 1000, 100, 80), 1920, 1080) is StageEdge.BOTTOM

    def test_overflowing_shape_is_clamped(self):
        # sticks out on the right, so its right distance is 0 and not negative
        assert closest_stage_edge(Rect(1900, 10, 200, 100), 1920, 1080) is StageEdge.RIGHT


# ── Scores ──────────────────────────────────────────────────────────────

class TestRectMatchScore:
    def test_identical_rects_score_one(self):
        r = Rect(x=300, y=200, width=400, height=250)
        assert rect_match_score(r, r) == pytest.approx(1.0)

    def test_symmetric(self):
        a = Rect(x=0, y=0, width=100, height=300)
        b = Rect(x=700, y=90, width=350, height=40)
        assert rect_match_score(a, b) == pytest.approx(rect_match_score(b, a))

    def test_size_score(self):
        a = Rect(x=0, y=0, width=100, height=100)
        b = Rect(x=0, y=0, width=200, height=100)
        assert rect_size_score(a, b) == pytest.approx(0.75)

    def test_shared_edge_gives_full_position_score(self):
        # Same left and top edges, different sizes
        a = Rect(x=0, y=0, width=100, height=100)
        b = Rect(x=0, y=0, width=200, height=100)
        assert rect_position_score(a, b, 1920, 1080) == pytest.approx(1.0)
        assert rect_match_score(a, b) == pytest.approx(0.875)

    def test_right_edges_aligned(self):
        a = Rect(x=100, y=0, width=100, height=100)
        b = Rect(x=150, y=0, width=50, height=100)
        assert rect_position_score(a, b, 1920, 1080) == pytest.approx(1.0)

    def test_far_apart_position_score_is_negative(self):
        a = Rect(x=0, y=0, width=100, height=100)
        b = Rect(x=1820, y=980, width=100, height=100)
        assert rect_position_score(a, b, 1920, 1080) < 0

    def test_zero_sized_rects(self):
        a = Rect(x=0, y=0, width=0, height=0)
        assert rect_size_score(a, a) == 1.0

    def test_closer_rect_scores_higher(self):
        base = Rect(x=100, y=100, width=200, height=200)
        near = Rect(x=110, y=105, width=200, height=200)
        far = Rect(x=1200, y=700, width=200, height=200)
        assert rect_match_score(base, near) > rect_match_score(base, far)
