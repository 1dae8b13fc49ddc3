"""Transition timing configuration and built-in presets."""

from typing import Optional
from pydantic import BaseModel, Field


class TransitionConfig(BaseModel):
    """Tunable constants of transition synthesis.

    A complete slide-to-slide transition is split in three equal parts:
    exit, morph and enter.
    """
    complete_slide_transition_duration: float = Field(default=3.0, gt=0)
    stage_width: float = Field(default=1920.0, gt=0)
    stage_height: float = Field(default=1080.0, gt=0)
    base_enter_delay: float = Field(default=0.1, ge=0)
    container_overlap_threshold: float = Field(default=0.8, gt=0, le=1)

    # Tweens misbehave with an exact 0, so toggles use a tiny positive value
    almost_zero_duration: float = Field(default=0.001, gt=0)
    almost_zero_clip_size: float = Field(default=0.001, gt=0)

    reuse_identical_elements: bool = True
    default_rect_fill: str = "rgb(255,255,255)"

    model_config = {"frozen": True}

    @property
    def morph_duration(self) -> float:
        return self.complete_slide_transition_duration / 3

    @property
    def enter_exit_duration(self) -> float:
        return self.complete_slide_transition_duration / 3


class TransitionPreset(BaseModel):
    """A named transition configuration."""
    name: str
    description: str
    config: TransitionConfig


BUILTIN_PRESETS: dict[str, TransitionPreset] = {
    "default": TransitionPreset(
        name="default",
        description="Balanced 3s transitions (1s exit, 1s morph, 1s enter)",
        config=TransitionConfig(),
    ),
    "snappy": TransitionPreset(
        name="snappy",
        description="Fast 1.5s transitions with a tight enter cascade",
        config=TransitionConfig(
            complete_slide_transition_duration=1.5,
            base_enter_delay=0.05,
        ),
    ),
    "cinematic": TransitionPreset(
        name="cinematic",
        description="Slow 4.5s transitions with a wide enter cascade",
        config=TransitionConfig(
            complete_slide_transition_duration=4.5,
            base_enter_delay=0.2,
        ),
    ),
}


def get_preset(name: str) -> Optional[TransitionPreset]:
    return BUILTIN_PRESETS.get(name)


def list_presets() -> list[dict]:
    return [
        {
            "name": p.name,
            "description": p.description,
            "complete_slide_transition_duration": p.config.complete_slide_transition_duration,
        }
        for p in BUILTIN_PRESETS.values()
    ]
