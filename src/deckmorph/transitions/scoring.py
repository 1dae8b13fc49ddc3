"""Similarity score between two rectangles, used to pick morph partners."""

from ..core.geometry import Rect


def _ratio(first: float, second: float) -> float:
    larger = max(first, second)
    if larger == 0:
        return 1.0
    return min(first, second) / larger


def rect_size_score(first: Rect, second: Rect) -> float:
    """Mean of the per-axis size ratios, in (0, 1]."""
    return (_ratio(first.width, second.width) + _ratio(first.height, second.height)) / 2


def rect_position_score(
    first: Rect, second: Rect, stage_width: float, stage_height: float
) -> float:
    """Mean of the per-axis edge-alignment scores.

    Each axis uses the closer of the two edge pairs (lefts or rights, tops or
    bottoms), so rects sharing an edge score well even if their centers
    differ. Note that these scores can be negative.
    """
    horizontal_distance = min(
        abs(first.left - second.left),
        abs(first.right - second.right),
    )
    vertical_distance = min(
        abs(first.top - second.top),
        abs(first.bottom - second.bottom),
    )
    horizontal_score = 1 - horizontal_distance / (stage_width / 2)
    vertical_score = 1 - vertical_distance / (stage_height / 2)
    return (horizontal_score + vertical_score) / 2


def rect_match_score(
    first: Rect,
    second: Rect,
    stage_width: float = 1920.0,
    stage_height: float = 1080.0,
) -> float:
    """Score how likely `second` is the same rect as `first`, at most 1.

    Symmetric in its arguments; identical rects score exactly 1.
    """
    size_score = rect_size_score(first, second)
    position_score = rect_position_score(first, second, stage_width, stage_height)
    return (size_score + position_score) / 2
