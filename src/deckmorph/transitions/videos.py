"""Collapse a video kept unchanged across slides into a single playing item."""

import logging
from dataclasses import dataclass

from ..core.errors import MissingSharedElementError
from ..core.slides import AnimationType, ReuseKind, VideoShape
from .instances import ShapeInstance, SlideFrame

logger = logging.getLogger("DeckMorph.transitions.videos")

_LEAVING = (AnimationType.EXIT, AnimationType.DISAPPEAR)


@dataclass
class _Chain:
    slide_position: int
    shape_id: str
    shared_id: str


def _find(instances: list[ShapeInstance], shape_id: str) -> int:
    for position, instance in enumerate(instances):
        if instance.shape_id == shape_id:
            return position
    raise MissingSharedElementError(f"Video '{shape_id}' vanished while merging reused videos")


def deduplicate_reused_videos(frames: list[SlideFrame]) -> list[SlideFrame]:
    """Merge each chain of identical videos on consecutive slides.

    The first video of a chain keeps playing: it records when playback starts
    and ends, takes over the leaving animations of the last copy, and every
    later copy is dropped. Expects timed frames.
    """
    slides = [list(frame.instances) for frame in frames]
    chains: list[_Chain] = []

    for position in range(len(frames) - 1):
        frame, following = frames[position], frames[position + 1]
        for instance in slides[position]:
            link = instance.attributes.shared_with_next_slide
            if (
                isinstance(instance.shape, VideoShape)
                and link is not None
                and link.kind is ReuseKind.NONE
            ):
                chains.append(_Chain(position, instance.shape_id, link.shared_id))

        still_open = []
        for chain in chains:
            next_instances = slides[position + 1]
            target_position = following.with_instances(next_instances).index_of_predecessor_target(
                chain.shared_id
            )
            if target_position is None:
                raise MissingSharedElementError(
                    f"Slide {following.index}: reused video '{chain.shape_id}' "
                    f"has no copy on this slide"
                )
            target = next_instances.pop(target_position)

            head_instances = slides[chain.slide_position]
            head_position = _find(head_instances, chain.shape_id)
            head = head_instances[head_position]
            attributes = head.attributes
            changes = {
                "video_end_time": following.start_time + following.duration,
                "shared_with_next_slide": None,
            }
            if attributes.video_start_time is None:
                changes["video_start_time"] = frame.start_time
            animations = tuple(a for a in head.animations if a.type not in _LEAVING)

            target_link = target.attributes.shared_with_next_slide
            if target_link is not None and target_link.kind is ReuseKind.NONE:
                chain.shared_id = target_link.shared_id
                still_open.append(chain)
            else:
                animations += tuple(a for a in target.animations if a.type in _LEAVING)

            head = head.with_attributes(**changes)
            head_instances[head_position] = head.model_copy(update={"animations": animations})
            logger.debug(
                f"Slide {following.index}: merged reused video '{target.shape_id}' "
                f"into '{chain.shape_id}'"
            )
        chains = still_open

    return [frame.with_instances(instances) for frame, instances in zip(frames, slides)]
