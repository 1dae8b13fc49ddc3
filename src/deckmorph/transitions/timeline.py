"""Place every animation step on one absolute presentation clock.

With the default 3s transition, a deck plays as:

    1s enter -> slide 1 -> 1s exit, 1s morph, 1s enter -> slide 2 -> ... -> 1s exit

A transition phase (morph, enter, exit) only takes time when at least one
shape of the slide plays it.
"""

import logging

from ..core.config import TransitionConfig
from ..core.slides import Animation, AnimationType, ReuseKind
from .instances import ShapeInstance, SlideFrame

logger = logging.getLogger("DeckMorph.transitions.timeline")


def _slide_has(frame: SlideFrame, animation_type: AnimationType) -> bool:
    return any(
        step.type is animation_type
        for instance in frame.instances
        for step in instance.steps
    )


def _time_instance(
    instance: ShapeInstance,
    transition_start: float,
    enter_start: float,
    slide_end: float,
    has_morph: bool,
    has_exit: bool,
    config: TransitionConfig,
) -> ShapeInstance:
    attributes = instance.attributes
    delay = attributes.enter_delay or 0
    animations = []
    for step in instance.steps:
        if step.type is AnimationType.MORPH_APPEAR:
            animation = step.timed(transition_start, config.almost_zero_duration)
        elif step.type is AnimationType.MORPH:
            animation = step.timed(transition_start, config.morph_duration)
        elif step.type is AnimationType.APPEAR:
            start = enter_start
            if attributes.is_entering:
                start += delay
            elif has_morph:
                # Shown while the morph plays, replacing the previous copy
                start -= config.morph_duration
            animation = step.timed(start, config.almost_zero_duration)
        elif step.type is AnimationType.ENTER:
            animation = step.timed(enter_start + delay, config.enter_exit_duration)
        elif step.type is AnimationType.EXIT:
            animation = step.timed(slide_end, config.enter_exit_duration)
        elif attributes.is_slide_in_placeholder:
            # Fully covered once the shape above it has entered
            animation = step.timed(
                enter_start + delay + config.enter_exit_duration, config.almost_zero_duration
            )
        else:
            start = slide_end
            if has_exit:
                start += config.enter_exit_duration
            successor = attributes.shared_with_next_slide
            if successor is not None and successor.kind is ReuseKind.SLIDE_IN:
                # Stay below until the new content has slid in
                start += config.enter_exit_duration
            animation = step.timed(start, config.almost_zero_duration)
        animations.append(animation)
    return instance.model_copy(update={"animations": tuple(animations)})


def compile_timeline(
    frames: list[SlideFrame], config: TransitionConfig
) -> tuple[list[SlideFrame], float]:
    """Time every step and return the timed frames with the total duration."""
    current_time = 0.0
    result = []
    for frame in frames:
        has_morph = _slide_has(frame, AnimationType.MORPH)
        has_enter = _slide_has(frame, AnimationType.ENTER)
        has_exit = _slide_has(frame, AnimationType.EXIT)

        transition_start = current_time
        if has_morph:
            current_time += config.morph_duration
        enter_start = current_time
        if has_enter:
            current_time += config.enter_exit_duration

        start_time = current_time
        current_time += frame.duration
        slide_end = current_time
        if has_exit:
            current_time += config.enter_exit_duration

        instances = [
            _time_instance(
                instance, transition_start, enter_start, slide_end, has_morph, has_exit, config
            )
            for instance in frame.instances
        ]
        result.append(frame.model_copy(
            update={"instances": tuple(instances), "start_time": start_time}
        ))

    logger.debug(f"Compiled timeline of {len(result)} slide(s), {current_time:.3f}s total")
    return result, current_time
