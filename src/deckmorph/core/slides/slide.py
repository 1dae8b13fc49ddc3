"""Slide data model and deck parsing."""

from typing import Any, Optional
from pydantic import Field, TypeAdapter, ValidationError, model_validator

from ..errors import InvalidDeckError
from .base import DeckModel
from .shapes import Shape


class SlideAudio(DeckModel):
    """Narration played while the slide content is on stage.

    `start` trims the beginning of the file (seconds).
    """
    url: str
    start: Optional[float] = None


class Slide(DeckModel):
    """A single authored slide.

    `canvas_elements` is in z-order (later is drawn on top). `duration` is the
    time the content stays fully visible, transitions excluded.
    """
    canvas_elements: list[Shape] = Field(default_factory=list)
    duration: float = Field(default=0.0, ge=0)
    audio: Optional[SlideAudio] = None

    @model_validator(mode="after")
    def _check_unique_shape_ids(self) -> "Slide":
        seen: set[str] = set()
        for shape in self.canvas_elements:
            if shape.id in seen:
                raise ValueError(f"Duplicate shape id '{shape.id}' in slide")
            seen.add(shape.id)
        return self


_SLIDE_LIST = TypeAdapter(list[Slide])


def parse_slides(data: Any) -> list[Slide]:
    """Validate a deck given as JSON text or as already-decoded objects."""
    try:
        if isinstance(data, (str, bytes)):
            return _SLIDE_LIST.validate_json(data)
        return _SLIDE_LIST.validate_python(data)
    except ValidationError as e:
        raise InvalidDeckError(
            f"Invalid slide deck ({e.error_count()} error(s)): {e}"
        ) from e
