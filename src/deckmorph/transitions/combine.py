"""Flatten timed slides into the single timeline consumed by the player."""

from typing import Optional
from pydantic import Field

from ..core.slides import Animation, AnimationAttributes, DeckModel, Shape
from .instances import SlideFrame


class CombinedAnimationItem(DeckModel):
    """One shape instance with its absolute animations."""
    shape: Shape
    slide_index: int
    animations: list[Animation]
    attributes: AnimationAttributes = Field(default_factory=AnimationAttributes)


class AudioCue(DeckModel):
    """Audio of one slide, scheduled on the presentation clock."""
    url: str
    should_be_played_at: float
    start: Optional[float] = None
    duration: float


class CombinedTimeline(DeckModel):
    """Everything needed to play a deck.

    `model_dump(by_alias=True)` gives the camelCase JSON contract, with the
    items under `timeline`.
    """
    items: list[CombinedAnimationItem] = Field(default_factory=list, alias="timeline")
    audio_cues: list[AudioCue] = Field(default_factory=list)
    slide_start_times: list[float] = Field(default_factory=list)
    total_duration: float = 0.0

    def items_for_slide(self, slide_index: int) -> list[CombinedAnimationItem]:
        return [item for item in self.items if item.slide_index == slide_index]


def combine_slides(frames: list[SlideFrame], total_duration: float) -> CombinedTimeline:
    items = []
    audio_cues = []
    for frame in frames:
        items.extend(
            CombinedAnimationItem(
                shape=instance.shape,
                slide_index=frame.index,
                animations=list(instance.animations),
                attributes=instance.attributes,
            )
            for instance in frame.instances
        )
        if frame.audio is not None:
            audio_cues.append(AudioCue(
                url=frame.audio.url,
                should_be_played_at=frame.start_time,
                start=frame.audio.start,
                duration=frame.duration,
            ))
    return CombinedTimeline(
        items=items,
        audio_cues=audio_cues,
        slide_start_times=[frame.start_time for frame in frames],
        total_duration=total_duration,
    )
