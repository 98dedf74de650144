from tilearcade.frame import Frame
from tilearcade.transition import TransitionEffect, TransitionState


def _run_until_idle(effect, delta=1 / 60, limit=10_000):
    steps = 0
    while effect.state in (TransitionState.IN_START, TransitionState.OUT_START):
        effect.proc(Frame(delta=delta))
        steps += 1
        assert steps < limit
    return steps


def test_starts_fading_in_fully_opaque():
    effect = TransitionEffect()
    assert effect.state is TransitionState.IN_START
    assert effect.alpha == 255
    assert effect.in_end()
    assert not effect.out_end()


def test_fade_in_reaches_transparent():
    effect = TransitionEffect()
    _run_until_idle(effect)
    assert effect.state is TransitionState.IN_END
    assert effect.alpha == 0
    assert not effect.in_end()


def test_out_start_ignored_while_fading_in():
    effect = TransitionEffect()
    effect.out_start()
    assert effect.state is TransitionState.IN_START


def test_in_start_ignored_unless_fade_out_finished():
    effect = TransitionEffect()
    _run_until_idle(effect)
    effect.in_start()
    assert effect.state is TransitionState.IN_END


def test_full_cycle():
    effect = TransitionEffect()
    _run_until_idle(effect)
    effect.out_start()
    assert effect.state is TransitionState.OUT_START
    _run_until_idle(effect)
    assert effect.out_end()
    assert effect.alpha == 255
    effect.in_start()
    assert effect.state is TransitionState.IN_START


def test_set_time_half_duration_per_fade():
    effect = TransitionEffect()
    effect.set_time(3.0)
    effect.proc(Frame(delta=1.4))
    assert effect.state is TransitionState.IN_START
    assert 0 < effect.alpha < 255
    effect = TransitionEffect()
    effect.set_time(3.0)
    effect.proc(Frame(delta=1.5))
    assert effect.state is TransitionState.IN_END


def test_fade_draws_overlay_over_whole_frame():
    effect = TransitionEffect()
    frame = Frame(width=640, height=480)
    effect.proc(frame)
    kind, params, style = frame.canvas.commands[-1]
    assert kind == "rect"
    assert params == (0, 0, 640, 480)
    assert style["fill"][3] == 255
    assert style["stroke"] is None


def test_idle_effect_draws_nothing():
    effect = TransitionEffect()
    _run_until_idle(effect)
    frame = Frame()
    effect.proc(frame)
    assert frame.canvas.commands == []