"""A countdown timer that either fires once or repeats."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TimerMode(Enum):
    ONCE = "once"
    REPEATING = "repeating"


@dataclass
class Timer:
    """Tracks elapsed seconds against a fixed duration."""

    duration: float
    mode: TimerMode = TimerMode.ONCE
    elapsed: float = 0.0
    times_finished_this_tick: int = 0

    def __post_init__(self) -> None:
        if self.duration < 0:
            raise ValueError(f"timer duration must not be negative: {self.duration}")

    @classmethod
    def from_seconds(cls, seconds: float, mode: TimerMode) -> Timer:
        return cls(float(seconds), mode)

    @property
    def finished(self) -> bool:
        """A one-shot timer stays finished; a repeating one only on the tick it wraps."""
        if self.mode is TimerMode.ONCE:
            return self.elapsed >= self.duration
        return self.times_finished_this_tick > 0

    @property
    def just_finished(self) -> bool:
        return self.times_finished_this_tick > 0

    def tick(self, delta: float) -> None:
        """Advance the timer by ``delta`` seconds."""
        if delta < 0:
            raise ValueError(f"cannot tick a timer backwards: {delta}")
        if self.mode is TimerMode.ONCE:
            if self.elapsed >= self.duration:
                self.times_finished_this_tick = 0
                return
            self.elapsed = min(self.elapsed + delta, self.duration)
            self.times_finished_this_tick = int(self.elapsed >= self.duration)
            return
        if self.duration == 0:
            self.elapsed = 0.0
            self.times_finished_this_tick = 1
            return
        count, self.elapsed = divmod(self.elapsed + delta, self.duration)
        self.times_finished_this_tick = int(count)

    def remaining(self) -> float:
        return max(self.duration - self.elapsed, 0.0)

    def reset(self) -> None:
        self.elapsed = 0.0
        self.times_finished_this_tick = 0