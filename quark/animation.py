"""Interpolation helpers and keyframe timing for animations."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Generic, NamedTuple, Sequence, TypeVar

T = TypeVar("T")

Vector = tuple[float, ...]


def _dot(a: Sequence[float], b: Sequence[float]) -> float:
    return sum(x * y for x, y in zip(a, b))


def lerp(start: Sequence[float], end: Sequence[float], t: float) -> Vector:
    """Linearly interpolate two vectors or quaternions component-wise."""
    return tuple(s + (e - s) * t for s, e in zip(start, end))


def nlerp(start: Sequence[float], end: Sequence[float], t: float) -> Vector:
    """Lerp two quaternions and normalise the result."""
    q = lerp(start, end, t)
    length = math.sqrt(_dot(q, q))
    return tuple(c / length for c in q)


def slerp(start: Sequence[float], end: Sequence[float], t: float) -> Vector:
    """Spherical interpolation of two (x, y, z, w) quaternions."""
    sx, sy, sz, sw = start
    ex, ey, ez, ew = end
    cos_half_theta = _dot(start, end)

    if abs(cos_half_theta) >= 1.0:
        return (sx, sy, sz, sw)

    if cos_half_theta < 0.0:
        # Only x, y and w are flipped here; z keeps its sign.
        ex, ey, ew = -ex, -ey, -ew
        cos_half_theta = -cos_half_theta

    half_theta = math.acos(cos_half_theta)
    sin_half_theta = math.sqrt(1.0 - cos_half_theta * cos_half_theta)

    if abs(sin_half_theta) < 0.001:
        return (
            sx * 0.5 + ex * 0.5,
            sy * 0.5 + ey * 0.5,
            sz * 0.5 + ez * 0.5,
            sw * 0.5 + ew * 0.5,
        )

    ratio_a = math.sin((1.0 - t) * half_theta) / sin_half_theta
    ratio_b = math.sin(t * half_theta) / sin_half_theta
    return (
        sx * ratio_a + ex * ratio_b,
        sy * ratio_a + ey * ratio_b,
        sz * ratio_a + ez * ratio_b,
        sw * ratio_a + ew * ratio_b,
    )


def smoothstep(x: float) -> float:
    """Cubic Hermite ease: 3x^2 - 2x^3."""
    return 3.0 * x * x - 2.0 * x * x * x


def berp(a: float, b: float, c: float, d: float, t: float) -> float:
    """Evaluate a one-dimensional cubic Bezier curve at t."""
    u = 1.0 - t
    return a * u * u * u + 3.0 * b * u * u * t + 3.0 * c * u * t * t + d * t * t * t


def lerp_transform(
    start: tuple[Sequence[float], Sequence[float]],
    end: tuple[Sequence[float], Sequence[float]],
    t: float,
) -> tuple[Vector, Vector]:
    """Interpolate (position, rotation) pairs: lerp the position, nlerp the rotation."""
    start_pos, start_rot = start
    end_pos, end_rot = end
    return lerp(start_pos, end_pos, t), nlerp(start_rot, end_rot, t)


class FrameStep(NamedTuple):
    """The current frame and the one after it."""

    current: int
    following: int


class StateFrameStep(NamedTuple):
    """Current and next state, with the current and next frame."""

    state_current: int
    state_next: int
    frame_current: int
    frame_next: int


@dataclass
class AnimationFrames(Generic[T]):
    """A list of keyframe values."""

    frames: list[T] = field(default_factory=list)

    def get(self, current: int) -> T:
        return self.frames[current]

    def pair(self, current: int, following: int) -> tuple[T, T]:
        return self.frames[current], self.frames[following]


@dataclass
class AnimationFrameTimes:
    """Looping frame durations with an accumulated time into the current frame."""

    times: list[float]
    time: float = 0.0
    current: int = 0

    def __post_init__(self) -> None:
        if not self.times:
            raise ValueError("frame times must not be empty")
        if sum(self.times) <= 0.0:
            raise ValueError("frame times must add up to a positive duration")

    def percent(self) -> float:
        return self.time / self.times[self.current]

    def get(self) -> FrameStep:
        return FrameStep(self.current, (self.current + 1) % len(self.times))

    def anim(self, dt: float) -> FrameStep:
        self.time += dt
        # A large dt may skip over several short frames.
        while self.time >= self.times[self.current]:
            self.time -= self.times[self.current]
            self.current = (self.current + 1) % len(self.times)
        return self.get()


@dataclass
class ComplexAnimationFrames(Generic[T]):
    """Several looping animation states, with a pending switch to next_state."""

    times: list[list[float]]
    states: list[list[T]] = field(default_factory=list)
    current_state: int = 0
    next_state: int = 0
    current_frame: int = 0
    time: float = 0.0

    def _frame_time(self) -> float:
        return self.times[self.current_state][self.current_frame]

    def _result(self) -> StateFrameStep:
        count = len(self.times[self.current_state])
        return StateFrameStep(
            self.current_state,
            self.current_state,
            self.current_frame,
            (self.current_frame + 1) % count,
        )

    def percent(self) -> float:
        return self.time / self._frame_time()

    def advance(self) -> StateFrameStep:
        """Consume accumulated time within the current state."""
        while self.time >= self._frame_time():
            self.time -= self._frame_time()
            self.current_frame = (self.current_frame + 1) % len(self.times[self.current_state])
        return self._result()

    def animate_full_frame(self, dt: float) -> StateFrameStep:
        """Advance, switching state as soon as the current frame ends."""
        self.time += dt
        if self.current_state != self.next_state and self.time >= self._frame_time():
            self.time -= self._frame_time()
            self.current_frame = 0
            self.current_state = self.next_state
        return self.advance()

    def animate_full_state(self, dt: float) -> StateFrameStep:
        """Advance, switching state only when the current state's cycle wraps."""
        self.time += dt
        if self.current_state == self.next_state:
            return self.advance()

        while self.time >= self._frame_time():
            self.time -= self._frame_time()
            self.current_frame = (self.current_frame + 1) % len(self.times[self.current_state])
            if self.current_frame == 0:
                self.current_state = self.next_state
        return self._result()