"""Session state: the loaded deck, its transition config and the cached timeline."""

from typing import Any, Optional
from pydantic import BaseModel, Field, PrivateAttr

from .config import TransitionConfig, TransitionPreset, get_preset
from .errors import ConfigurationError
from .slides import Slide, TextMeasurer, parse_slides
from ..transitions import CombinedTimeline, synthesize


class SessionState(BaseModel):
    """Caller-owned state of one editing session.

    The timeline is synthesized lazily and recomputed only when the deck or
    the configuration changed since the last call.
    """
    slides: list[Slide] = Field(default_factory=list)
    config: TransitionConfig = Field(default_factory=TransitionConfig)
    preset_name: str = "default"
    version: int = 0

    _timeline: Any = PrivateAttr(default=None)
    _timeline_version: Optional[int] = PrivateAttr(default=None)
    _measure_text: Optional[TextMeasurer] = PrivateAttr(default=None)

    def set_slides(self, slides: list[Slide]):
        self.slides = list(slides)
        self.version += 1

    def load_slides_json(self, data: Any) -> int:
        """Validate and load a deck. Returns the number of slides loaded.

        Raises InvalidDeckError and leaves the current deck untouched when the
        data does not validate.
        """
        slides = parse_slides(data)
        self.set_slides(slides)
        return len(slides)

    def set_preset(self, name: str) -> TransitionPreset:
        preset = get_preset(name)
        if preset is None:
            raise ConfigurationError(f"Unknown transition preset '{name}'")
        self.preset_name = preset.name
        self.config = preset.config
        self.version += 1
        return preset

    def set_text_measurer(self, measure_text: Optional[TextMeasurer]):
        """Use real glyph metrics instead of the built-in estimate."""
        self._measure_text = measure_text
        self.version += 1

    def timeline(self) -> CombinedTimeline:
        """The synthesized timeline of the current deck."""
        if self._timeline is None or self._timeline_version != self.version:
            self._timeline = synthesize(
                self.slides, config=self.config, measure_text=self._measure_text
            )
            self._timeline_version = self.version
        return self._timeline

    def preview_slide(self, index: int) -> Optional[list]:
        """Timeline items of one slide, or None when the index is out of range."""
        if index < 0 or index >= len(self.slides):
            return None
        return self.timeline().items_for_slide(index)

    def summary(self) -> dict:
        return {
            "slide_count": len(self.slides),
            "shape_count": sum(len(slide.canvas_elements) for slide in self.slides),
            "preset": self.preset_name,
            "complete_slide_transition_duration": self.config.complete_slide_transition_duration,
            "version": self.version,
        }
