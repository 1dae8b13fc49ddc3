"""Shared-identity assignment between adjacent slides.

Two passes run per slide boundary:

1. Morph matching pairs every rect with its best available rect in the next
   slide (greedy, best single score first).
2. Reuse matching links what is left: identical shapes stay on stage
   (`none`), shapes with the same geometry but new content slide in over the
   old ones (`slideIn`).

A shape gets at most one link to the previous slide and one to the next.
"""

import logging
import uuid
from dataclasses import dataclass, field
from typing import Callable

from ..core.slides import RectShape, ReuseKind, SharedLink, ShapeBase, TextShape
from .context import SynthesisContext
from .instances import SlideFrame
from .scoring import rect_match_score

logger = logging.getLogger("DeckMorph.transitions.matching")

SHARED_ID_NAMESPACE = uuid.UUID("6f1d4c2a-8e0b-4d57-9a43-2b1f0c9e7d35")

Pair = tuple[int, int]


def make_shared_id(slide_index: int, source_id: str, target_id: str, kind: ReuseKind) -> str:
    """Deterministic token so identical decks produce identical timelines."""
    name = f"{kind.value}/{slide_index}/{source_id}/{target_id}"
    return uuid.uuid5(SHARED_ID_NAMESPACE, name).hex


@dataclass
class _Candidate:
    position: int  # index in the next slide
    score: float


@dataclass
class _RectWithCandidates:
    position: int  # index in the current slide
    candidates: list[_Candidate] = field(default_factory=list)

    @property
    def best_score(self) -> float:
        if not self.candidates:
            return float("-inf")
        return self.candidates[0].score


def _drop_candidate(entries: list[_RectWithCandidates], position: int) -> None:
    for entry in entries:
        entry.candidates = [c for c in entry.candidates if c.position != position]


def find_morph_pairs(
    current: SlideFrame, following: SlideFrame, context: SynthesisContext
) -> list[Pair]:
    """Greedily pair rects of `current` with rects of `following`.

    Each round the rect whose best remaining candidate scores highest takes
    that candidate, which is then removed from everyone else's list. Sorts
    are stable, so ties resolve in z-order. This is not a globally optimal
    assignment.
    """
    config = context.config
    following_rects = [
        (position, context.rect(instance.shape))
        for position, instance in enumerate(following.instances)
        if isinstance(instance.shape, RectShape)
    ]

    entries: list[_RectWithCandidates] = []
    for position, instance in enumerate(current.instances):
        if not isinstance(instance.shape, RectShape):
            continue
        rect = context.rect(instance.shape)
        candidates = [
            _Candidate(
                position=other_position,
                score=rect_match_score(rect, other_rect, config.stage_width, config.stage_height),
            )
            for other_position, other_rect in following_rects
        ]
        # Sort from best to worst
        candidates.sort(key=lambda c: c.score, reverse=True)
        entries.append(_RectWithCandidates(position=position, candidates=candidates))

    linked_forward = {
        position
        for position, instance in enumerate(current.instances)
        if instance.attributes.shared_with_next_slide is not None
    }
    linked_backward = {
        position
        for position, instance in enumerate(following.instances)
        if instance.attributes.shared_with_previous_slide is not None
    }

    pairs: list[Pair] = []
    while entries:
        entries.sort(key=lambda e: e.best_score, reverse=True)
        entry = entries.pop(0)
        if not entry.candidates or entry.position in linked_forward:
            continue

        best = entry.candidates[0]
        if best.position in linked_backward:
            _drop_candidate(entries, best.position)
            continue

        pairs.append((entry.position, best.position))
        linked_forward.add(entry.position)
        linked_backward.add(best.position)
        _drop_candidate(entries, best.position)

    return pairs


def _same_content(first: ShapeBase, second: ShapeBase) -> bool:
    return first.content_signature() == second.content_signature()


def _same_shape_and_position(first: ShapeBase, second: ShapeBase) -> bool:
    if isinstance(first, TextShape) or isinstance(second, TextShape):
        return False
    return first.layout_signature() == second.layout_signature()


def find_reused_pairs(
    current: SlideFrame,
    following: SlideFrame,
    same: Callable[[ShapeBase, ShapeBase], bool],
) -> list[Pair]:
    """Pair shapes (in z-order) with the first unlinked equal shape in `following`."""
    linked_backward = {
        position
        for position, instance in enumerate(following.instances)
        if instance.attributes.shared_with_previous_slide is not None
    }
    pairs: list[Pair] = []
    for position, instance in enumerate(current.instances):
        if instance.attributes.shared_with_next_slide is not None:
            continue
        for other_position, other in enumerate(following.instances):
            if other_position in linked_backward:
                continue
            if same(instance.shape, other.shape):
                pairs.append((position, other_position))
                linked_backward.add(other_position)
                break
    return pairs


def link_pairs(
    current: SlideFrame, following: SlideFrame, pairs: list[Pair], kind: ReuseKind
) -> tuple[SlideFrame, SlideFrame]:
    """Return copies of both frames with a shared link on every pair."""
    current_instances = list(current.instances)
    following_instances = list(following.instances)
    for position, other_position in pairs:
        source = current_instances[position]
        target = following_instances[other_position]
        link = SharedLink(
            shared_id=make_shared_id(current.index, source.shape_id, target.shape_id, kind),
            kind=kind,
        )
        current_instances[position] = source.with_attributes(shared_with_next_slide=link)
        following_instances[other_position] = target.with_attributes(shared_with_previous_slide=link)
        logger.debug(
            f"Slide {current.index}->{following.index}: {kind.value} "
            f"'{source.shape_id}' -> '{target.shape_id}'"
        )
    return current.with_instances(current_instances), following.with_instances(following_instances)


def match_rects_for_morph(
    frames: list[SlideFrame], context: SynthesisContext
) -> list[SlideFrame]:
    """Assign morph links across every slide boundary."""
    result = list(frames)
    for position in range(len(result) - 1):
        current, following = result[position], result[position + 1]
        pairs = find_morph_pairs(current, following, context)
        result[position], result[position + 1] = link_pairs(
            current, following, pairs, ReuseKind.MORPH
        )
    return result


def match_reused_elements(
    frames: list[SlideFrame], context: SynthesisContext
) -> list[SlideFrame]:
    """Assign `none` and `slideIn` links to shapes left without a morph link."""
    if not context.config.reuse_identical_elements:
        return list(frames)

    result = list(frames)
    for position in range(len(result) - 1):
        current, following = result[position], result[position + 1]
        for same, kind in (
            (_same_content, ReuseKind.NONE),
            (_same_shape_and_position, ReuseKind.SLIDE_IN),
        ):
            pairs = find_reused_pairs(current, following, same)
            current, following = link_pairs(current, following, pairs, kind)
        result[position], result[position + 1] = current, following
    return result
