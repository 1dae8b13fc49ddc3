"""Tests for deckmorph.transitions.matching — morph and reuse links."""

import pytest

from deckmorph.core.config import TransitionConfig
from deckmorph.core.slides import ReuseKind, parse_slides
from deckmorph.transitions import (
    SynthesisContext,
    find_morph_pairs,
    frames_from_slides,
    match_rects_for_morph,
    match_reused_elements,
)


def _frames(*slides):
    return frames_from_slides(parse_slides([
        {"canvasElements": list(shapes), "duration": 1} for shapes in slides
    ]))


def _rect(id, x, y, width, height, **extra):
    return {"id": id, "type": "rect", "x": x, "y": y, "width": width, "height": height, **extra}


def _image(id, url="a.png", x=100, y=100, width=400, height=300):
    return {"id": id, "type": "image", "url": url, "x": x, "y": y, "width": width, "height": height}


def _text(id, text="Hello", x=100, y=100):
    return {"id": id, "type": "text", "text": text, "x": x, "y": y}


def _links(frame, side):
    return {
        instance.shape_id: getattr(instance.attributes, side)
        for instance in frame.instances
    }


@pytest.fixture
def context():
    return SynthesisContext()


# ── Morph pairs ─────────────────────────────────────────────────────────

class TestFindMorphPairs:
    def test_pairs_closest_rects(self, context):
        current, following = _frames(
            [_rect("a", 0, 0, 100, 100), _rect("b", 1000, 500, 200, 200)],
            [_rect("c", 1010, 510, 200, 200), _rect("d", 5, 5, 100, 100)],
        )
        pairs = find_morph_pairs(current, following, context)
        assert sorted(pairs) == [(0, 1), (1, 0)]

    def test_more_rects_than_partners(self, context):
        current, following = _frames(
            [_rect("far", 1500, 800, 50, 50), _rect("near", 10, 10, 100, 100)],
            [_rect("target", 0, 0, 100, 100)],
        )
        assert find_morph_pairs(current, following, context) == [(1, 0)]

    def test_ties_resolve_in_z_order(self, context):
        current, following = _frames(
            [_rect("first", 0, 0, 100, 100), _rect("second", 0, 0, 100, 100)],
            [_rect("target", 0, 0, 100, 100)],
        )
        assert find_morph_pairs(current, following, context) == [(0, 0)]

    def test_non_rects_are_ignored(self, context):
        current, following = _frames(
            [_image("i"), _rect("r", 0, 0, 100, 100)],
            [_text("t"), _image("j")],
        )
        assert find_morph_pairs(current, following, context) == []

    def test_empty_slides(self, context):
        current, following = _frames([], [])
        assert find_morph_pairs(current, following, context) == []


class TestMatchRectsForMorph:
    def test_links_both_sides(self, context):
        frames = match_rects_for_morph(
            _frames([_rect("a", 0, 0, 100, 100)], [_rect("b", 20, 0, 120, 100)]),
            context,
        )
        forward = frames[0].instances[0].attributes.shared_with_next_slide
        backward = frames[1].instances[0].attributes.shared_with_previous_slide
        assert forward.kind is ReuseKind.MORPH
        assert forward == backward

    def test_shared_ids_are_deterministic(self, context):
        slides = ([_rect("a", 0, 0, 100, 100)], [_rect("b", 20, 0, 120, 100)])
        first = match_rects_for_morph(_frames(*slides), context)
        second = match_rects_for_morph(_frames(*slides), context)
        assert first == second

    def test_at_most_one_link_per_side(self, context):
        frames = match_rects_for_morph(_frames(
            [_rect("a", 0, 0, 100, 100), _rect("b", 500, 500, 100, 100)],
            [_rect("c", 0, 0, 100, 100)],
            [_rect("d", 0, 0, 100, 100), _rect("e", 600, 600, 100, 100)],
        ), context)
        middle = frames[1].instances[0].attributes
        assert middle.shared_with_previous_slide is not None
        assert middle.shared_with_next_slide is not None
        assert middle.shared_with_previous_slide.shared_id != middle.shared_with_next_slide.shared_id
        assert _links(frames[0], "shared_with_next_slide")["b"] is None
        assert _links(frames[2], "shared_with_previous_slide")["e"] is None

    def test_input_frames_untouched(self, context):
        frames = _frames([_rect("a", 0, 0, 100, 100)], [_rect("b", 0, 0, 100, 100)])
        match_rects_for_morph(frames, context)
        assert frames[0].instances[0].attributes.shared_with_next_slide is None


# ── Reused elements ─────────────────────────────────────────────────────

class TestMatchReusedElements:
    def _match(self, context, *slides):
        frames = match_rects_for_morph(_frames(*slides), context)
        return match_reused_elements(frames, context)

    def test_identical_shape_stays(self, context):
        frames = self._match(context, [_image("i1")], [_image("i2")])
        link = frames[0].instances[0].attributes.shared_with_next_slide
        assert link.kind is ReuseKind.NONE
        assert frames[1].instances[0].attributes.shared_with_previous_slide == link

    def test_same_geometry_slides_in(self, context):
        frames = self._match(context, [_image("i1", url="a.png")], [_image("i2", url="b.png")])
        link = frames[0].instances[0].attributes.shared_with_next_slide
        assert link.kind is ReuseKind.SLIDE_IN

    def test_identical_text_stays(self, context):
        frames = self._match(context, [_text("t1")], [_text("t2")])
        assert frames[0].instances[0].attributes.shared_with_next_slide.kind is ReuseKind.NONE

    def test_text_never_slides_in(self, context):
        frames = self._match(context, [_text("t1", text="Old")], [_text("t2", text="New")])
        assert frames[0].instances[0].attributes.shared_with_next_slide is None

    def test_moved_image_is_not_reused(self, context):
        frames = self._match(context, [_image("i1")], [_image("i2", x=500)])
        assert frames[0].instances[0].attributes.shared_with_next_slide is None

    def test_duplicates_pair_in_order(self, context):
        frames = self._match(
            context,
            [_image("i1"), _image("i2")],
            [_image("j1"), _image("j2")],
        )
        first, second = frames[0].instances
        targets = {
            instance.attributes.shared_with_previous_slide.shared_id: instance.shape_id
            for instance in frames[1].instances
        }
        assert targets[first.attributes.shared_with_next_slide.shared_id] == "j1"
        assert targets[second.attributes.shared_with_next_slide.shared_id] == "j2"

    def test_morph_links_win_over_reuse(self, context):
        frames = self._match(
            context,
            [_rect("a", 0, 0, 100, 100, fill="red")],
            [_rect("b", 0, 0, 100, 100, fill="red")],
        )
        assert frames[0].instances[0].attributes.shared_with_next_slide.kind is ReuseKind.MORPH

    def test_disabled_by_config(self):
        context = SynthesisContext(config=TransitionConfig(reuse_identical_elements=False))
        frames = self._match(context, [_image("i1")], [_image("i2")])
        assert frames[0].instances[0].attributes.shared_with_next_slide is None
