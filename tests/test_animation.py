import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from quark.animation import (
    AnimationFrames,
    AnimationFrameTimes,
    ComplexAnimationFrames,
    FrameStep,
    StateFrameStep,
    berp,
    lerp,
    lerp_transform,
    nlerp,
    slerp,
    smoothstep,
)

floats = st.floats(min_value=-100, max_value=100, allow_nan=False)


@given(st.tuples(floats, floats, floats), st.tuples(floats, floats, floats))
def test_lerp_endpoints(a, b):
    assert lerp(a, b, 0.0) == pytest.approx(a)
    assert lerp(a, b, 1.0) == pytest.approx(b)


def test_nlerp_is_unit_length():
    q = nlerp((0.0, 0.0, 0.0, 1.0), (1.0, 0.0, 0.0, 0.0), 0.3)
    assert math.sqrt(sum(c * c for c in q)) == pytest.approx(1.0)


def test_slerp_same_quaternion_returns_start():
    q = (0.0, 0.0, 0.0, 1.0)
    assert slerp(q, q, 0.7) == q


def test_slerp_endpoints():
    start = (0.0, 0.0, 0.0, 1.0)
    end = (0.0, 0.0, math.sin(0.5), math.cos(0.5))
    assert slerp(start, end, 0.0) == pytest.approx(start)
    assert slerp(start, end, 1.0) == pytest.approx(end)


def test_slerp_result_stays_unit_length():
    start = (0.0, 0.0, 0.0, 1.0)
    end = (0.0, math.sin(0.8), 0.0, math.cos(0.8))
    q = slerp(start, end, 0.4)
    assert math.sqrt(sum(c * c for c in q)) == pytest.approx(1.0)


def test_slerp_negative_dot_flips_end():
    start = (0.0, 0.0, 0.0, 1.0)
    end = (0.6, 0.0, 0.0, -0.8)
    assert slerp(start, end, 1.0) == pytest.approx((-0.6, 0.0, 0.0, 0.8))


def test_smoothstep_fixed_points():
    assert smoothstep(0.0) == 0.0
    assert smoothstep(1.0) == 1.0
    assert smoothstep(0.5) == pytest.approx(0.5)


@given(floats, floats, floats, floats)
def test_berp_endpoints(a, b, c, d):
    assert berp(a, b, c, d, 0.0) == pytest.approx(a)
    assert berp(a, b, c, d, 1.0) == pytest.approx(d)


def test_lerp_transform_endpoints():
    start = ((0.0, 0.0, 0.0), (0.0, 0.0, 0.0, 1.0))
    end = ((2.0, 4.0, 6.0), (0.0, 0.0, 0.0, 1.0))
    pos, rot = lerp_transform(start, end, 1.0)
    assert pos == pytest.approx(end[0])
    assert rot == pytest.approx(end[1])


def test_animation_frames_get_and_pair():
    frames = AnimationFrames(["a", "b", "c"])
    assert frames.get(1) == "b"
    assert frames.pair(2, 0) == ("c", "a")


def test_frame_times_get_wraps():
    times = AnimationFrameTimes([1.0, 1.0, 1.0], current=2)
    assert times.get() == FrameStep(2, 0)


def test_frame_times_anim_advances():
    times = AnimationFrameTimes([1.0, 1.0, 1.0])
    assert times.anim(0.5) == FrameStep(0, 1)
    assert times.anim(0.6) == FrameStep(1, 2)
    assert times.percent() == pytest.approx(0.1)


def test_frame_times_anim_skips_several_frames():
    times = AnimationFrameTimes([1.0, 1.0, 1.0])
    assert times.anim(3.5) == FrameStep(0, 1)


def test_frame_times_empty_raises():
    with pytest.raises(ValueError):
        AnimationFrameTimes([])


@given(st.lists(st.floats(min_value=0.1, max_value=5), min_size=1, max_size=6),
       st.floats(min_value=0, max_value=50))
def test_frame_times_time_below_current_duration(durations, dt):
    times = AnimationFrameTimes(durations)
    step = times.anim(dt)
    assert 0.0 <= times.time < durations[times.current]
    assert step.following == (step.current + 1) % len(durations)


def test_complex_same_state_behaves_like_simple():
    frames = ComplexAnimationFrames(times=[[1.0, 1.0]])
    assert frames.animate_full_frame(1.5) == StateFrameStep(0, 0, 1, 0)


def test_complex_full_frame_switches_after_frame():
    frames = ComplexAnimationFrames(times=[[1.0, 1.0], [2.0, 2.0, 2.0]], next_state=1)
    assert frames.animate_full_frame(0.5) == StateFrameStep(0, 0, 0, 1)
    assert frames.animate_full_frame(0.6) == StateFrameStep(1, 1, 0, 1)
    assert frames.time == pytest.approx(0.1)


def test_complex_full_state_waits_for_cycle():
    frames = ComplexAnimationFrames(times=[[1.0, 1.0], [1.0, 1.0, 1.0]], next_state=1)
    assert frames.animate_full_state(1.2) == StateFrameStep(0, 0, 1, 0)
    assert frames.animate_full_state(1.0) == StateFrameStep(1, 1, 0, 1)


def test_complex_advance_uses_accumulated_time():
    frames = ComplexAnimationFrames(times=[[1.0, 1.0, 1.0]], time=2.5)
    assert frames.advance() == StateFrameStep(0, 0, 2, 0)
    assert frames.percent() == pytest.approx(0.5)