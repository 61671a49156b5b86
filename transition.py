"""
Perspective <-> stereographic mode toggle.

The target mode flips instantly on request; the blended position follows it
over TRANSITION_DURATION_MS of simulated time. Reversing mid-flight keeps
the current position and only changes direction.
"""

from dataclasses import dataclass, replace
from enum import Enum

from config import TRANSITION_DURATION_MS


class Phase(Enum):
    AT_PERSPECTIVE = 0
    AT_STEREOGRAPHIC = 1
    TRANSITIONING = 2


def phase_of(position: float) -> Phase:
    if position == 1:
        return Phase.AT_STEREOGRAPHIC
    if position == 0:
        return Phase.AT_PERSPECTIVE
    return Phase.TRANSITIONING


def ease(p: float) -> float:
    """Cubic ease-in-out. ease(0) == 0 and ease(1) == 1 exactly."""
    if p < 0.5:
        return (2 * p) ** 3 / 2
    return 1 - (1 - 2 * (p - 0.5)) ** 3 / 2


@dataclass(frozen=True)
class TransitionState:
    stereographic: bool = False
    position: float = 0.0

    @property
    def target(self) -> float:
        return 1.0 if self.stereographic else 0.0

    @property
    def phase(self) -> Phase:
        return phase_of(self.position)

    def toggle(self) -> 'TransitionState':
        return replace(self, stereographic=not self.stereographic)

    def advance(self, dt: float, duration_ms: float = TRANSITION_DURATION_MS) -> 'TransitionState':
        if duration_ms <= 0:
            raise ValueError("Transition duration must be positive.")
        if self.position == self.target:
            return self

        step = dt / duration_ms
        position = self.position + step if self.stereographic else self.position - step
        position = max(0.0, min(1.0, position))
        return replace(self, position=position)
