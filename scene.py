"""
Per-frame glue between a host scheduler and the sphere core.

A host calls Scene.on_tick() then Scene.on_draw() once per display refresh.
All animation state lives in an immutable SceneState that update() replaces
each tick; the projected-vertex buffer is the only thing mutated in place.
"""

import time
from dataclasses import dataclass, field

import config
from coord import convcoor, viewport_scale
from interact import InteractionController, RotationState
from proj import new_buffer, project
from render import RenderTimeReadout, draw
from sphere import generate
from transition import TransitionState


@dataclass
class Tick:
    sim_time: float
    sim_speed: float
    width: int
    height: int


@dataclass
class Frame:
    ctx: object
    width: int
    height: int


@dataclass(frozen=True)
class SceneState:
    rotation: RotationState = field(default_factory=RotationState)
    transition: TransitionState = field(default_factory=TransitionState)


def update(state, tick, interaction,
           speed_y=config.ROTATION_SPEED_Y, speed_z=config.ROTATION_SPEED_Z,
           duration_ms=config.TRANSITION_DURATION_MS):
    """Return the SceneState for the next frame."""
    transition = state.transition.advance(tick.sim_time, duration_ms)
    rotation = interaction.apply(state.rotation, tick.sim_time, tick.width, tick.height,
                                 speed_y, speed_z)
    return SceneState(rotation=rotation, transition=transition)


class Scene:
    def __init__(self, ring_count=config.RING_COUNT, ring_point_count=config.RING_POINT_COUNT,
                 line_spacing=config.LINE_SPACING, ring_spacing=config.RING_SPACING,
                 stereographic=False, readout=None):
        self.ring_count = ring_count
        self.ring_point_count = ring_point_count
        self.line_spacing = line_spacing
        self.ring_spacing = ring_spacing

        self.base = generate(ring_count, ring_point_count)
        self.points = new_buffer(self.base)

        position = 1.0 if stereographic else 0.0
        self.state = SceneState(transition=TransitionState(stereographic, position))
        self.interaction = InteractionController()
        self.readout = readout if readout is not None else RenderTimeReadout()

    def toggle(self):
        self.state = SceneState(self.state.rotation, self.state.transition.toggle())

    def on_tick(self, tick):
        self.state = update(self.state, tick, self.interaction)

    def on_draw(self, frame):
        if not frame.width or not frame.height:
            return
        started = time.perf_counter()
        ctx = frame.ctx

        ctx.globalCompositeOperation = 'source-over'
        ctx.fillStyle = config.BACKGROUND_COLOR
        ctx.fillRect(0, 0, frame.width, frame.height)

        rotation = self.state.rotation
        project(self.base, rotation.angle_y, rotation.angle_z,
                self.state.transition.position, self.points)

        s = viewport_scale(frame.width, frame.height)
        ctx.save()
        ctx.translate(*convcoor(0, 0, frame.width, frame.height))
        ctx.scale(s, s)
        ctx.globalCompositeOperation = config.COMPOSITE_OPERATION
        ctx.strokeStyle = config.LINE_COLOR
        # Line width is given in pixels; undo the unit-space scale
        ctx.lineWidth = config.LINE_WIDTH / s
        draw(ctx, self.points, self.ring_count, self.ring_point_count,
             self.line_spacing, self.ring_spacing)
        ctx.restore()

        self.readout.add((time.perf_counter() - started) * 1000.0)
