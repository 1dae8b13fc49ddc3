"""Decide which animations each shape plays, before any timing is known.

Every shape gets, in order:

- `appear`, or `morphAppear` when it is the target of a morph;
- `enter` when it is new on its slide, or `morph` when it is a morph target;
- `exit` when nothing on the next slide carries it over;
- `disappear`, always last.

Enter and exit reveal the shape through a clip rectangle growing from, or
shrinking toward, the stage edge closest to the shape.
"""

import logging
from typing import Optional

from ..core.config import TransitionConfig
from ..core.errors import MissingSharedElementError, SharedElementTypeError
from ..core.geometry import Rect, StageEdge, closest_stage_edge
from ..core.slides import (
    AnimationStates,
    AnimationStep,
    AnimationType,
    RectShape,
    ReuseKind,
    TextShape,
)
from .context import SynthesisContext
from .instances import ShapeInstance, SlideFrame

logger = logging.getLogger("DeckMorph.transitions.variants")

ClipState = dict[str, float]


def clip_states(rect: Rect, edge: StageEdge, config: TransitionConfig) -> tuple[ClipState, ClipState]:
    """Return the (hidden, visible) clip properties for a reveal from `edge`."""
    zero = config.almost_zero_clip_size
    if edge is StageEdge.LEFT:
        return {"clipWidth": zero}, {"clipWidth": rect.width}
    if edge is StageEdge.RIGHT:
        return (
            {"clipX": rect.width, "clipWidth": zero},
            {"clipX": 0, "clipWidth": rect.width},
        )
    if edge is StageEdge.TOP:
        return {"clipHeight": zero}, {"clipHeight": rect.height}
    return (
        {"clipY": rect.height, "clipHeight": zero},
        {"clipY": 0, "clipHeight": rect.height},
    )


def reveal_edge(instance: ShapeInstance, frame: SlideFrame, context: SynthesisContext) -> StageEdge:
    """Stage edge the shape enters from and exits toward.

    Text sitting in a container follows the container so both slide the same
    way.
    """
    target = instance
    if isinstance(instance.shape, TextShape) and instance.attributes.container_id is not None:
        container = frame.find(instance.attributes.container_id)
        if container is not None:
            target = container
    config = context.config
    return closest_stage_edge(context.rect(target.shape), config.stage_width, config.stage_height)


def _morph_step(source: ShapeInstance, context: SynthesisContext) -> AnimationStep:
    rect = context.rect(source.shape)
    return AnimationStep(
        type=AnimationType.MORPH,
        group_animation=AnimationStates(
            from_={
                "x": rect.x,
                "y": rect.y,
                "clipWidth": rect.width,
                "clipHeight": rect.height,
            }
        ),
        node_animation=AnimationStates(
            from_={
                "width": rect.width,
                "height": rect.height,
                "fill": source.shape.fill or context.config.default_rect_fill,
            }
        ),
    )


def _morph_source(
    instance: ShapeInstance, previous: Optional[SlideFrame], frame: SlideFrame
) -> ShapeInstance:
    link = instance.attributes.shared_with_previous_slide
    source = previous.find_successor_source(link.shared_id) if previous else None
    if source is None:
        raise MissingSharedElementError(
            f"Slide {frame.index}: morph target '{instance.shape_id}' has no source "
            f"on the previous slide"
        )
    if not isinstance(source.shape, RectShape) or not isinstance(instance.shape, RectShape):
        raise SharedElementTypeError(
            f"Slide {frame.index}: morph between '{source.shape_id}' ({source.shape.type}) "
            f"and '{instance.shape_id}' ({instance.shape.type}), only rects can morph"
        )
    return source


def _check_morph_successor(instance: ShapeInstance, frame: SlideFrame, following: Optional[SlideFrame]) -> None:
    link = instance.attributes.shared_with_next_slide
    if link is None or link.kind is not ReuseKind.MORPH:
        return
    if following is None or following.index_of_predecessor_target(link.shared_id) is None:
        raise MissingSharedElementError(
            f"Slide {frame.index}: '{instance.shape_id}' morphs into a shape "
            f"missing from the next slide"
        )


def steps_for(
    instance: ShapeInstance,
    frame: SlideFrame,
    previous: Optional[SlideFrame],
    following: Optional[SlideFrame],
    context: SynthesisContext,
) -> tuple[AnimationStep, ...]:
    """Build the untimed animation steps of one shape."""
    attributes = instance.attributes
    _check_morph_successor(instance, frame, following)

    hidden = visible = None
    if attributes.is_entering or attributes.is_exiting:
        edge = reveal_edge(instance, frame, context)
        hidden, visible = clip_states(context.rect(instance.shape), edge, context.config)

    steps = []
    if attributes.is_morph_target:
        source = _morph_source(instance, previous, frame)
        steps.append(AnimationStep(
            type=AnimationType.MORPH_APPEAR,
            group_animation=AnimationStates(from_={"opacity": 0}),
        ))
        steps.append(_morph_step(source, context))
    else:
        steps.append(AnimationStep(
            type=AnimationType.APPEAR,
            group_animation=AnimationStates(from_={"opacity": 0}),
        ))
        if attributes.is_entering:
            steps.append(AnimationStep(
                type=AnimationType.ENTER,
                group_animation=AnimationStates(from_=hidden, to=visible),
            ))

    if attributes.is_exiting:
        steps.append(AnimationStep(
            type=AnimationType.EXIT,
            group_animation=AnimationStates(from_=visible, to=hidden),
        ))
    steps.append(AnimationStep(
        type=AnimationType.DISAPPEAR,
        group_animation=AnimationStates(to={"opacity": 0}),
    ))
    return tuple(steps)


def synthesize_variants(
    frames: list[SlideFrame], context: SynthesisContext
) -> list[SlideFrame]:
    result = []
    for position, frame in enumerate(frames):
        previous = frames[position - 1] if position > 0 else None
        following = frames[position + 1] if position + 1 < len(frames) else None
        result.append(frame.with_instances(
            instance.model_copy(
                update={"steps": steps_for(instance, frame, previous, following, context)}
            )
            for instance in frame.instances
        ))
    logger.debug(f"Synthesized animation steps for {len(result)} slide(s)")
    return result
