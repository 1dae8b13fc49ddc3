"""Transitions package — slide-transition synthesis engine."""

from .scoring import rect_match_score, rect_position_score, rect_size_score
from .context import SynthesisContext
from .instances import ShapeInstance, SlideFrame, frames_from_slides
from .matching import (
    find_morph_pairs,
    find_reused_pairs,
    match_rects_for_morph,
    match_reused_elements,
)
from .containers import find_text_container, resolve_text_containers
from .placeholders import insert_slide_in_placeholders
from .delays import schedule_enter_delays
from .variants import clip_states, reveal_edge, synthesize_variants
from .timeline import compile_timeline
from .videos import deduplicate_reused_videos
from .combine import AudioCue, CombinedAnimationItem, CombinedTimeline, combine_slides
from .engine import prepare_frames, synthesize

__all__ = [
    "rect_match_score",
    "rect_position_score",
    "rect_size_score",
    "SynthesisContext",
    "ShapeInstance",
    "SlideFrame",
    "frames_from_slides",
    "find_morph_pairs",
    "find_reused_pairs",
    "match_rects_for_morph",
    "match_reused_elements",
    "find_text_container",
    "resolve_text_containers",
    "insert_slide_in_placeholders",
    "schedule_enter_delays",
    "clip_states",
    "reveal_edge",
    "synthesize_variants",
    "compile_timeline",
    "deduplicate_reused_videos",
    "AudioCue",
    "CombinedAnimationItem",
    "CombinedTimeline",
    "combine_slides",
    "prepare_frames",
    "synthesize",
]
