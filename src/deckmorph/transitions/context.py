"""Read-only inputs shared by every synthesis stage."""

from dataclasses import dataclass, field

from ..core.config import TransitionConfig
from ..core.geometry import Rect
from ..core.slides import ShapeBase, TextMeasurer, estimate_text_size


@dataclass(frozen=True)
class SynthesisContext:
    """Configuration plus the text-measurement collaborator."""
    config: TransitionConfig = field(default_factory=TransitionConfig)
    measure_text: TextMeasurer = estimate_text_size

    def rect(self, shape: ShapeBase) -> Rect:
        return shape.effective_rect(self.measure_text)
