"""
Pointer drag to rotation.

Hosts feed normalised drag events through the DragInput methods; the scene
update asks the controller for the next RotationState once per tick.
"""

from dataclasses import dataclass
from typing import Optional, Protocol, Tuple

from config import MAX_ROTATION_Y, MAX_ROTATION_Z, WINDOW_SIZE


class DragInput(Protocol):
    def on_drag_start(self, x: float, y: float) -> None: ...

    def on_drag_move(self, x: float, y: float) -> None: ...

    def on_drag_end(self, width: Optional[float] = None, height: Optional[float] = None) -> None: ...


@dataclass(frozen=True)
class RotationState:
    auto_y: float = 0.0
    auto_z: float = 0.0
    drag_y: float = 0.0
    drag_z: float = 0.0

    @property
    def angle_y(self) -> float:
        return self.auto_y + self.drag_y

    @property
    def angle_z(self) -> float:
        return self.auto_z + self.drag_z


class InteractionController:
    """Tracks one drag gesture and turns it into rotation deltas."""

    def __init__(self, max_y: float = MAX_ROTATION_Y, max_z: float = MAX_ROTATION_Z):
        self.max_y = max_y
        self.max_z = max_z
        self.start: Optional[Tuple[float, float]] = None
        self.current: Optional[Tuple[float, float]] = None
        self.active = False
        # Released drag rotation not yet folded into the autonomous angles
        self.pending = (0.0, 0.0)
        self.viewport = WINDOW_SIZE

    def on_drag_start(self, x, y):
        self.start = (x, y)
        self.current = (x, y)
        self.active = True

    def on_drag_move(self, x, y):
        if self.active:
            self.current = (x, y)

    def on_drag_end(self, width=None, height=None):
        """
        Finish the drag. Hosts pass the current viewport size; without it the
        size seen by the last apply() is used, or WINDOW_SIZE before any tick.
        """
        if not self.active:
            return
        if width and height:
            self.viewport = (width, height)
        dy, dz = self.delta(*self.viewport)
        self.pending = (self.pending[0] + dy, self.pending[1] + dz)
        self.start = self.current = None
        self.active = False

    def delta(self, width, height):
        """Rotation (dy, dz) for the current drag in a width x height viewport."""
        if self.start is None or self.current is None or not width or not height:
            return 0.0, 0.0
        dx = self.current[0] - self.start[0]
        dy = self.current[1] - self.start[1]
        return dx / width * self.max_y, dy / height * self.max_z

    def apply(self, rotation: RotationState, dt, width, height, speed_y, speed_z) -> RotationState:
        """
        Next rotation state after `dt` ms.

        Any released drag is first folded into the autonomous angles, so the
        mesh stays where it was let go even if a new drag has already started.
        While dragging the drag angles follow the pointer and the autonomous
        angles hold; otherwise the autonomous angles advance. A zero-sized
        viewport (minimised window) keeps the previous drag angles.
        """
        fold_y, fold_z = self.pending
        folded = self.pending != (0.0, 0.0)
        self.pending = (0.0, 0.0)
        auto_y = rotation.auto_y + fold_y
        auto_z = rotation.auto_z + fold_z

        if width and height:
            self.viewport = (width, height)

        if self.active:
            if width and height:
                drag_y, drag_z = self.delta(width, height)
            elif folded:
                drag_y, drag_z = 0.0, 0.0
            else:
                drag_y, drag_z = rotation.drag_y, rotation.drag_z
            return RotationState(auto_y, auto_z, drag_y, drag_z)

        return RotationState(auto_y=auto_y + speed_y * dt,
                             auto_z=auto_z + speed_z * dt)
