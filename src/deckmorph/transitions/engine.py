"""Transition synthesis: from a list of slides to one playable timeline."""

import logging
from typing import Any, Optional

from ..core.config import TransitionConfig
from ..core.slides import Slide, TextMeasurer, estimate_text_size, parse_slides
from .combine import CombinedTimeline, combine_slides
from .containers import resolve_text_containers
from .context import SynthesisContext
from .delays import schedule_enter_delays
from .instances import SlideFrame, frames_from_slides
from .matching import match_rects_for_morph, match_reused_elements
from .placeholders import insert_slide_in_placeholders
from .timeline import compile_timeline
from .variants import synthesize_variants
from .videos import deduplicate_reused_videos

logger = logging.getLogger("DeckMorph.transitions.engine")

STAGES = (
    match_rects_for_morph,
    match_reused_elements,
    resolve_text_containers,
    insert_slide_in_placeholders,
    schedule_enter_delays,
    synthesize_variants,
)


def prepare_frames(slides: list[Slide], context: SynthesisContext) -> list[SlideFrame]:
    """Run every stage that does not depend on the clock."""
    frames = frames_from_slides(slides)
    for stage in STAGES:
        frames = stage(frames, context)
    return frames


def synthesize(
    slides: Any,
    config: Optional[TransitionConfig] = None,
    measure_text: Optional[TextMeasurer] = None,
) -> CombinedTimeline:
    """Synthesize the transition timeline of a deck.

    Args:
        slides: List of `Slide`, or raw slide data (JSON text or plain
            dicts) which is validated first.
        config: Timing constants, defaults to `TransitionConfig()`.
        measure_text: Returns (width, height) of a text shape. Defaults to a
            font-metrics estimate.

    Raises:
        InvalidDeckError: raw slide data failed validation.
        TransitionSynthesisError: an internal link could not be resolved.
    """
    if isinstance(slides, (str, bytes)):
        slides = parse_slides(slides)
    else:
        slides = list(slides)
        if not all(isinstance(s, Slide) for s in slides):
            slides = parse_slides(slides)
    context = SynthesisContext(
        config=config or TransitionConfig(),
        measure_text=measure_text or estimate_text_size,
    )

    frames = prepare_frames(list(slides), context)
    frames, total_duration = compile_timeline(frames, context.config)
    frames = deduplicate_reused_videos(frames)
    timeline = combine_slides(frames, total_duration)

    logger.info(
        f"Synthesized {len(timeline.items)} item(s) over {len(frames)} slide(s), "
        f"{total_duration:.2f}s"
    )
    return timeline
