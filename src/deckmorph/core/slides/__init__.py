"""Slides package — public API re-exports."""

from .base import DeckModel
from .shapes import (
    Shape,
    ShapeBase,
    RectShape,
    TextShape,
    ImageShape,
    VideoShape,
    TextMeasurer,
    estimate_text_size,
)
from .animations import (
    AnimationType,
    AnimationStates,
    AnimationStep,
    Animation,
    ReuseKind,
    SharedLink,
    AnimationAttributes,
)
from .slide import Slide, SlideAudio, parse_slides

__all__ = [
    "DeckModel",
    "Shape",
    "ShapeBase",
    "RectShape",
    "TextShape",
    "ImageShape",
    "VideoShape",
    "TextMeasurer",
    "estimate_text_size",
    "AnimationType",
    "AnimationStates",
    "AnimationStep",
    "Animation",
    "ReuseKind",
    "SharedLink",
    "AnimationAttributes",
    "Slide",
    "SlideAudio",
    "parse_slides",
]
