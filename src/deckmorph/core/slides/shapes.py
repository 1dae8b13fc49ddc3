"""Canvas shape models: the tagged union of rect, text, image and video."""

import math
from typing import Annotated, Any, Callable, Literal, Optional, Union
from pydantic import Field

from ..geometry import Rect
from .base import DeckModel

# Ratio of an average glyph width to the font size, used when no real text
# measurer is available
AVERAGE_GLYPH_WIDTH_RATIO = 0.6


class ShapeBase(DeckModel):
    """Attributes common to every canvas shape.

    Attributes the engine does not know about (stroke, opacity, crop, ...)
    are kept as extras and handed back untouched.
    """
    id: str
    x: float = 0.0
    y: float = 0.0
    width: Optional[float] = None
    height: Optional[float] = None
    rotation: float = 0.0

    model_config = {"extra": "allow"}

    def effective_rect(self, measure_text: "TextMeasurer") -> Rect:
        return Rect(
            x=self.x,
            y=self.y,
            width=self.width or 0.0,
            height=self.height or 0.0,
        )

    def content_signature(self) -> dict[str, Any]:
        """Every attribute except the id, for exact-equality checks."""
        return self.model_dump(exclude={"id"})

    def layout_signature(self) -> dict[str, Any]:
        """Geometry-only attributes, for same-shape-and-position checks."""
        return {
            "x": self.x,
            "y": self.y,
            "width": self.width,
            "height": self.height,
            "corner_radius": getattr(self, "corner_radius", None),
            "rotation": self.rotation,
        }


class RectShape(ShapeBase):
    """A filled rectangle. The only shape type that can morph."""
    type: Literal["rect"] = "rect"
    width: Optional[float] = 100.0
    height: Optional[float] = 100.0
    fill: Optional[str] = None
    corner_radius: Optional[float] = None


class TextShape(ShapeBase):
    """A text block. Its height always comes from the text measurer."""
    type: Literal["text"] = "text"
    text: str = "Text"
    font_size: float = 32.0
    font_family: str = "Arial"
    font_style: str = "normal"
    line_height: float = 1.0
    letter_spacing: float = 0.0
    padding: float = 0.0
    align: str = "center"
    fill: str = "rgb(255,255,255)"

    def effective_rect(self, measure_text: "TextMeasurer") -> Rect:
        width, height = measure_text(self)
        return Rect(x=self.x, y=self.y, width=width, height=height)


class ImageShape(ShapeBase):
    type: Literal["image"] = "image"
    url: str = ""


class VideoShape(ShapeBase):
    type: Literal["video"] = "video"
    url: str = ""


Shape = Annotated[
    Union[RectShape, TextShape, ImageShape, VideoShape],
    Field(discriminator="type"),
]

TextMeasurer = Callable[[TextShape], tuple[float, float]]


def _wrapped_line_count(line: str, shape: TextShape, available_width: float) -> int:
    if available_width <= 0:
        return 1
    line_width = len(line) * shape.font_size * AVERAGE_GLYPH_WIDTH_RATIO
    return max(1, math.ceil(line_width / available_width))


def estimate_text_size(shape: TextShape) -> tuple[float, float]:
    """Estimate the rendered (width, height) of a text shape from font metrics.

    Mirrors how the canvas lays text out: each line is
    ``font_size * line_height`` tall, padding applies on both sides, and text
    with a fixed width wraps. Auto-width text is as wide as its longest line.
    Callers with access to real glyph metrics should pass their own measurer
    to the engine instead.
    """
    lines = shape.text.split("\n")
    line_height = shape.font_size * shape.line_height

    if shape.width is not None:
        available_width = shape.width - 2 * shape.padding
        line_count = sum(_wrapped_line_count(line, shape, available_width) for line in lines)
        return shape.width, line_count * line_height + 2 * shape.padding

    longest = max(len(line) for line in lines)
    width = (
        longest * shape.font_size * AVERAGE_GLYPH_WIDTH_RATIO
        + shape.letter_spacing * max(longest - 1, 0)
        + 2 * shape.padding
    )
    return width, len(lines) * line_height + 2 * shape.padding
