import pytest

from parengine.animation import Animator
from parengine.inputs import Input, KeyCode
from parengine.player import Player, PlayerScript, PlayerState
from parengine.timer import Time
from parengine.transform import Transform
from parengine.vector import Vector2


def make_player():
    clock = Time()
    clock.initialize(0.0)
    player = Player()
    animator = player.add_component(Animator)
    animator.clock = clock
    animator.create_animation("Idle", None, Vector2(2000.0, 250.0), Vector2(250.0, 250.0), Vector2.ZERO, 1, 0.1)
    animator.create_animation(
        "FrontGiveWater", None, Vector2(0.0, 2000.0), Vector2(250.0, 250.0), Vector2.ZERO, 12, 0.1
    )
    animator.play_animation("Idle", False)
    script = player.add_component(PlayerScript)
    script.input = Input()
    script.clock = clock
    return player, script, animator, clock


def press(inp, *codes):
    held = set(codes)
    inp.update(lambda code: code in held, True, Vector2.ZERO)


def test_first_click_frame_keeps_idle():
    player, script, animator, clock = make_player()
    press(script.input, KeyCode.LBUTTON)
    script.update()
    assert script.state is PlayerState.IDLE
    assert animator.active_animation is animator.animations["Idle"]


def test_held_click_starts_giving_water():
    player, script, animator, clock = make_player()
    press(script.input, KeyCode.LBUTTON)
    press(script.input, KeyCode.LBUTTON)
    script.update()
    assert script.state is PlayerState.GIVE_WATER
    assert animator.active_animation is animator.animations["FrontGiveWater"]
    assert animator.loop is False


def test_giving_water_waits_for_animation():
    player, script, animator, clock = make_player()
    script.state = PlayerState.GIVE_WATER
    animator.play_animation("FrontGiveWater", False)
    script.update()
    assert script.state is PlayerState.GIVE_WATER


def test_giving_water_returns_to_idle_when_complete():
    player, script, animator, clock = make_player()
    script.state = PlayerState.GIVE_WATER
    animator.play_animation("FrontGiveWater", False)
    animator.active_animation.complete = True
    script.update()
    assert script.state is PlayerState.IDLE
    assert animator.active_animation is animator.animations["Idle"]


def test_walking_with_held_key_moves():
    player, script, animator, clock = make_player()
    script.state = PlayerState.WALK
    transform = player.get_component(Transform)
    transform.position = Vector2(50.0, 50.0)
    press(script.input, KeyCode.D, KeyCode.W)
    press(script.input, KeyCode.D, KeyCode.W)
    clock.update(0.5)
    script.update()
    assert transform.position.x > 50.0
    assert transform.position.y < 50.0
    assert script.state is PlayerState.WALK


def test_releasing_key_stops_walking():
    player, script, animator, clock = make_player()
    script.state = PlayerState.WALK
    transform = player.get_component(Transform)
    transform.position = Vector2(50.0, 50.0)
    press(script.input, KeyCode.A)
    press(script.input)
    clock.update(0.5)
    script.update()
    assert script.state is PlayerState.IDLE
    assert transform.position == Vector2(50.0, 50.0)


def test_unowned_script_raises():
    script = PlayerScript()
    with pytest.raises(RuntimeError):
        script.update()