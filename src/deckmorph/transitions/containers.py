"""Find the shape each text block visually sits on."""

import logging
from typing import Optional, Sequence

from ..core.slides import TextShape
from .context import SynthesisContext
from .instances import ShapeInstance, SlideFrame

logger = logging.getLogger("DeckMorph.transitions.containers")


def find_text_container(
    text: ShapeInstance,
    instances_below: Sequence[ShapeInstance],
    context: SynthesisContext,
) -> Optional[ShapeInstance]:
    """Return the topmost non-text shape under `text` covering enough of it.

    Only shapes drawn before the text are considered. A shape qualifies when
    its intersection with the text covers at least
    `container_overlap_threshold` of the text area.
    """
    text_rect = context.rect(text.shape)
    if text_rect.area <= 0:
        return None

    threshold = context.config.container_overlap_threshold
    for candidate in reversed(instances_below):
        if isinstance(candidate.shape, TextShape):
            continue
        overlap = context.rect(candidate.shape).intersection(text_rect)
        if overlap.area / text_rect.area >= threshold:
            return candidate
    return None


def resolve_text_containers(
    frames: list[SlideFrame], context: SynthesisContext
) -> list[SlideFrame]:
    result = []
    for frame in frames:
        instances = []
        for position, instance in enumerate(frame.instances):
            if isinstance(instance.shape, TextShape):
                container = find_text_container(instance, frame.instances[:position], context)
                container_id = container.shape_id if container else None
                if container_id:
                    logger.debug(
                        f"Slide {frame.index}: text '{instance.shape_id}' is inside '{container_id}'"
                    )
                instance = instance.with_attributes(container_id=container_id)
            instances.append(instance)
        result.append(frame.with_instances(instances))
    return result
