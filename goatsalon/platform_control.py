"""Steering the salon's moving platform from the control panel."""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)

HORIZONTAL_SPEED = 100.0
VERTICAL_SPEED = 30.0
X_RANGE = (-456.0, 456.0)
Y_RANGE = (-360.0, -50.0)


def navigate_platform(
    position: tuple[float, float], value: tuple[float, float], delta: float
) -> tuple[float, float]:
    """Return the platform's next position, or the current one if the move leaves its track."""
    x, y = position
    new_x = x + value[0] * HORIZONTAL_SPEED * delta
    new_y = y + value[1] * VERTICAL_SPEED * delta
    logger.debug("navigating platform from %s", position)
    if X_RANGE[0] <= new_x <= X_RANGE[1] and Y_RANGE[0] <= new_y <= Y_RANGE[1]:
        return (new_x, new_y)
    return position