"""Staggered enter delays: large shapes first, text after its container."""

from ..core.slides import TextShape
from .context import SynthesisContext
from .instances import SlideFrame


def schedule_enter_delays(
    frames: list[SlideFrame], context: SynthesisContext
) -> list[SlideFrame]:
    """Set `enter_delay` on every shape that will play an enter animation.

    Entering shapes are ranked by area, largest first, and delayed by
    `rank * base_enter_delay` (the smaller the shape, the longer the delay,
    scaling with the order, not with the area). Text inside an entering
    container instead waits until the container has fully entered.
    A slide-in placeholder takes the delay of the shape sliding in above it.
    """
    config = context.config
    result = []
    for frame in frames:
        entering = [
            (position, instance)
            for position, instance in enumerate(frame.instances)
            if instance.attributes.is_entering
        ]
        # Stable sort, equal areas keep z-order
        ranked = sorted(entering, key=lambda item: context.rect(item[1].shape).area, reverse=True)
        delays = {
            position: rank * config.base_enter_delay
            for rank, (position, _) in enumerate(ranked)
        }

        positions_by_id = {
            instance.shape_id: position for position, instance in enumerate(frame.instances)
        }
        for position, instance in entering:
            container_id = instance.attributes.container_id
            if not isinstance(instance.shape, TextShape) or container_id is None:
                continue
            container_position = positions_by_id.get(container_id)
            if container_position in delays:
                delays[position] = delays[container_position] + config.enter_exit_duration

        instances = frame.instances
        for position, instance in enumerate(instances[:-1]):
            if instance.attributes.is_slide_in_placeholder and position + 1 in delays:
                delays[position] = delays[position + 1]

        result.append(frame.with_instances(
            instance.with_attributes(enter_delay=delays[position]) if position in delays else instance
            for position, instance in enumerate(instances)
        ))
    return result
