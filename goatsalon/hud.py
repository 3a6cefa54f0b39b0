"""In-round heads-up display: anger countdown, score and apple pop-ups."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from goatsalon.goat import Customer
from goatsalon.timer import Timer, TimerMode

POINTS_PER_HAIR = 10
POPUP_SECONDS = 5.0
POPUP_DRIFT = 1.0


@dataclass
class Score:
    total: int = 0


def _popup_timer() -> Timer:
    return Timer.from_seconds(POPUP_SECONDS, TimerMode.ONCE)


@dataclass
class UiPopup:
    """A golden apple that drifts down from a trimmed hair and then vanishes."""

    position: tuple[float, float, float]
    image: str = "golden_apple"
    size: tuple[float, float] = (32.0, 32.0)
    timer: Timer = field(default_factory=_popup_timer)

    @property
    def finished(self) -> bool:
        return self.timer.finished

    def update(self, delta: float) -> bool:
        """Age the pop-up and drift it down one unit; return whether it has expired."""
        self.timer.tick(delta)
        x, y, z = self.position
        self.position = (x, y - POPUP_DRIFT, z)
        return self.finished


def _format_duration(seconds: float) -> str:
    if seconds >= 1.0:
        return f"{seconds:.1f}s"
    if seconds >= 1e-3:
        return f"{seconds * 1e3:.1f}ms"
    if seconds >= 1e-6:
        return f"{seconds * 1e6:.1f}µs"
    return f"{seconds * 1e9:.1f}ns"


def timer_text(customer: Customer) -> str:
    """The countdown line shown in the top-right corner."""
    return f"Goat Angry in : {_format_duration(customer.anger_timer.remaining())}"


def update_timer(customer: Customer, delta: float) -> str:
    """Advance the customer's anger and return the refreshed countdown text."""
    customer.anger_timer.tick(delta)
    return timer_text(customer)


def score_text(score: Score) -> str:
    return str(score.total)


def is_game_over(customer: Customer) -> bool:
    return customer.anger_timer.finished


def update_popups(popups: Iterable[UiPopup], delta: float) -> list[UiPopup]:
    """Update every pop-up and return those still on screen."""
    return [popup for popup in popups if not popup.update(delta)]