"""Records that flow between synthesis stages.

Stages never modify a record in place: each one returns new frames built
with `model_copy`, so every stage can be run and inspected on its own.
"""

from typing import Iterable, Optional
from pydantic import Field

from ..core.slides import (
    Animation,
    AnimationAttributes,
    AnimationStep,
    DeckModel,
    Shape,
    Slide,
    SlideAudio,
)


class ShapeInstance(DeckModel):
    """One shape on one slide with everything derived for it so far."""
    shape: Shape
    attributes: AnimationAttributes = Field(default_factory=AnimationAttributes)
    steps: tuple[AnimationStep, ...] = ()
    animations: tuple[Animation, ...] = ()

    @property
    def shape_id(self) -> str:
        return self.shape.id

    def with_attributes(self, **changes) -> "ShapeInstance":
        return self.model_copy(
            update={"attributes": self.attributes.model_copy(update=changes)}
        )


class SlideFrame(DeckModel):
    """A slide travelling through the synthesis pipeline."""
    index: int
    duration: float
    audio: Optional[SlideAudio] = None
    instances: tuple[ShapeInstance, ...] = ()
    start_time: Optional[float] = None

    def with_instances(self, instances: Iterable[ShapeInstance]) -> "SlideFrame":
        return self.model_copy(update={"instances": tuple(instances)})

    def find(self, shape_id: str) -> Optional[ShapeInstance]:
        for instance in self.instances:
            if instance.shape_id == shape_id:
                return instance
        return None

    def find_successor_source(self, shared_id: str) -> Optional[ShapeInstance]:
        """The instance whose link to the next slide carries `shared_id`."""
        for instance in self.instances:
            link = instance.attributes.shared_with_next_slide
            if link is not None and link.shared_id == shared_id:
                return instance
        return None

    def index_of_predecessor_target(self, shared_id: str) -> Optional[int]:
        """Position of the instance whose link to the previous slide carries `shared_id`."""
        for position, instance in enumerate(self.instances):
            link = instance.attributes.shared_with_previous_slide
            if link is not None and link.shared_id == shared_id:
                return position
        return None


def frames_from_slides(slides: list[Slide]) -> list[SlideFrame]:
    """Wrap caller slides in fresh frames with empty animation attributes."""
    return [
        SlideFrame(
            index=index,
            duration=slide.duration,
            audio=slide.audio,
            instances=tuple(ShapeInstance(shape=shape) for shape in slide.canvas_elements),
        )
        for index, slide in enumerate(slides)
    ]
