from __future__ import annotations

import numpy as np
from numpy import ndarray as NDArray


def linear_steps(start: NDArray, end: NDArray, steps: int) -> NDArray:
    """
    Evenly spaced band values from ``start`` to ``end``, both included.

    Args:
        start: Source bands, shape (channels,)
        end: Target bands, shape (channels,)
        steps: Number of samples (>= 2)

    Returns:
        Array of shape (steps, channels); row 0 is ``start`` and the last
        row is ``end`` exactly.
    """
    start = np.asarray(start, dtype=float)
    end = np.asarray(end, dtype=float)
    return np.linspace(start, end, steps, dtype=float)


def cycle_samples(anchors: NDArray, amount: int) -> NDArray:
    """
    Sample ``amount`` points evenly along a closed polyline of anchors.

    The anchors list must repeat its first point at the end. Sample ``i``
    sits at ``mult = i * segments / amount``: it lies on segment
    ``floor(mult)`` at fraction ``mult % 1``. When ``amount`` divides the
    number of segments the anchors are hit exactly.

    Args:
        anchors: Array of shape (segments + 1, channels)
        amount: Number of samples (>= 1)

    Returns:
        Array of shape (amount, channels)
    """
    anchors = np.asarray(anchors, dtype=float)
    step = (len(anchors) - 1) / amount
    mult = step * np.arange(amount, dtype=float)
    start_index = np.floor(mult).astype(int)
    fraction = (mult % 1)[:, None]
    source = anchors[start_index]
    target = anchors[start_index + 1]
    return source + (target - source) * fraction
