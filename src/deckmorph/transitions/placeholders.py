"""Placeholders that keep old content visible during a slide-in.

When a shape slides in over one with the same geometry (a `slideIn` link), a
copy of the outgoing shape is inserted directly below the incoming one. The
copy never enters or exits, so the new content is revealed on top of the
old one instead of over an empty stage. It is hidden as soon as the new
content has fully entered.
"""

import logging
import uuid

from ..core.errors import MissingSharedElementError
from ..core.slides import AnimationAttributes, ReuseKind
from .context import SynthesisContext
from .instances import ShapeInstance, SlideFrame
from .matching import SHARED_ID_NAMESPACE

logger = logging.getLogger("DeckMorph.transitions.placeholders")


def _placeholder_for(source: ShapeInstance, slide_index: int) -> ShapeInstance:
    placeholder_id = uuid.uuid5(
        SHARED_ID_NAMESPACE, f"slide-in-placeholder/{slide_index}/{source.shape_id}"
    ).hex
    return ShapeInstance(
        shape=source.shape.model_copy(update={"id": placeholder_id}),
        attributes=AnimationAttributes(is_slide_in_placeholder=True),
    )


def insert_slide_in_placeholders(
    frames: list[SlideFrame], context: SynthesisContext
) -> list[SlideFrame]:
    result = []
    for position, frame in enumerate(frames):
        previous = frames[position - 1] if position > 0 else None
        instances: list[ShapeInstance] = []
        for instance in frame.instances:
            link = instance.attributes.shared_with_previous_slide
            if link is not None and link.kind is ReuseKind.SLIDE_IN:
                source = previous.find_successor_source(link.shared_id) if previous else None
                if source is None:
                    raise MissingSharedElementError(
                        f"Slide {frame.index}: cannot slide in '{instance.shape_id}', "
                        f"its shared element is missing from the previous slide"
                    )
                logger.debug(
                    f"Slide {frame.index}: placeholder for '{source.shape_id}' "
                    f"below '{instance.shape_id}'"
                )
                instances.append(_placeholder_for(source, frame.index))
            instances.append(instance)
        result.append(frame.with_instances(instances))
    return result
