"""Declarative animation models produced by transition synthesis.

Pure data: the playback layer turns each step into tweens on two handles of
a shape, the group handle (position and clip based visibility) and the
content handle (intrinsic size and fill, only touched by morphs).
"""

from enum import Enum
from typing import Optional, Union
from pydantic import Field

from .base import DeckModel

AnimatedValue = Union[float, str]


class AnimationType(str, Enum):
    APPEAR = "appear"
    MORPH_APPEAR = "morphAppear"
    ENTER = "enter"
    MORPH = "morph"
    EXIT = "exit"
    DISAPPEAR = "disappear"


class AnimationStates(DeckModel):
    """Property targets for one handle. At least one side is set."""
    from_: Optional[dict[str, AnimatedValue]] = Field(default=None, alias="from")
    to: Optional[dict[str, AnimatedValue]] = None


class AnimationStep(DeckModel):
    """An animation whose place on the timeline is not known yet."""
    type: AnimationType
    group_animation: Optional[AnimationStates] = None
    node_animation: Optional[AnimationStates] = None

    def timed(self, start_time: float, duration: float) -> "Animation":
        return Animation(
            type=self.type,
            group_animation=self.group_animation,
            node_animation=self.node_animation,
            start_time=start_time,
            duration=duration,
        )


class Animation(AnimationStep):
    """An animation placed on the absolute presentation timeline (seconds)."""
    duration: float
    start_time: float


class ReuseKind(str, Enum):
    """How a shape shared across a slide boundary is carried over.

    morph: a rect interpolates into its best-matching rect.
    slideIn: same geometry, new content slides in over the old one.
    none: identical shape, it simply stays on stage.
    """
    MORPH = "morph"
    SLIDE_IN = "slideIn"
    NONE = "none"


class SharedLink(DeckModel):
    """One side of a shared identity across a single slide boundary."""
    shared_id: str
    kind: ReuseKind


class AnimationAttributes(DeckModel):
    """Per-instance facts derived before animations are synthesized."""
    shared_with_previous_slide: Optional[SharedLink] = None
    shared_with_next_slide: Optional[SharedLink] = None
    container_id: Optional[str] = None
    enter_delay: Optional[float] = None
    is_slide_in_placeholder: bool = False
    # Only set on videos kept playing across several slides
    video_start_time: Optional[float] = None
    video_end_time: Optional[float] = None

    @property
    def is_entering(self) -> bool:
        """True when the shape gets its own directional reveal."""
        if self.is_slide_in_placeholder:
            return False
        previous = self.shared_with_previous_slide
        return previous is None or previous.kind is ReuseKind.SLIDE_IN

    @property
    def is_morph_target(self) -> bool:
        previous = self.shared_with_previous_slide
        return previous is not None and previous.kind is ReuseKind.MORPH

    @property
    def is_exiting(self) -> bool:
        return not self.is_slide_in_placeholder and self.shared_with_next_slide is None
