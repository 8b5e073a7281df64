import pytest

from parengine.animation import Animator
from parengine.cat import Cat, CatScript, CatState, Direction
from parengine.timer import Time
from parengine.transform import Transform
from parengine.vector import Vector2

NAMES = ["DownWalk", "RightWalk", "UpWalk", "LeftWalk", "SitDown", "Grooming", "LayDown"]


class FixedRng:
    def __init__(self, values):
        self._values = iter(values)

    def randrange(self, n):
        value = next(self._values)
        assert 0 <= value < n
        return value


def make_cat(values=()):
    clock = Time()
    clock.initialize(0.0)
    cat = Cat()
    animator = cat.add_component(Animator)
    for name in NAMES:
        animator.create_animation(name, None, Vector2.ZERO, Vector2(32.0, 32.0), Vector2.ZERO, 4, 0.1)
    script = cat.add_component(CatScript)
    script.clock = clock
    script.rng = FixedRng(values)
    return cat, script, animator, clock


def test_stays_sitting_before_three_seconds():
    cat, script, animator, clock = make_cat()
    clock.update(1.0)
    script.update()
    assert script.state is CatState.SIT_DOWN
    assert script.animator is animator
    assert script.time == 1.0


def test_starts_walking_after_sitting():
    cat, script, animator, clock = make_cat([1])
    clock.update(3.5)
    script.update()
    assert script.state is CatState.WALK
    assert script.direction is Direction.RIGHT
    assert animator.active_animation is animator.animations["RightWalk"]
    assert animator.loop is True
    assert script.time == 0.0


def test_walking_moves_in_direction():
    cat, script, animator, clock = make_cat()
    script.state = CatState.WALK
    script.direction = Direction.UP
    transform = cat.get_component(Transform)
    transform.position = Vector2(10.0, 10.0)
    clock.update(0.5)
    script.update()
    assert transform.position.x == 10.0
    assert transform.position.y < 10.0
    assert script.state is CatState.WALK


def test_walking_left_decreases_x():
    cat, script, animator, clock = make_cat()
    script.state = CatState.WALK
    script.direction = Direction.LEFT
    transform = cat.get_component(Transform)
    transform.position = Vector2(10.0, 10.0)
    clock.update(0.5)
    script.update()
    assert transform.position.x < 10.0
    assert transform.position.y == 10.0


def test_lies_down_after_walking():
    cat, script, animator, clock = make_cat([1])
    script.state = CatState.WALK
    script.direction = Direction.DOWN
    clock.update(2.5)
    script.update()
    assert script.state is CatState.LAY_DOWN
    assert animator.active_animation is animator.animations["LayDown"]
    assert animator.loop is False


def test_sits_down_after_walking():
    cat, script, animator, clock = make_cat([0])
    script.state = CatState.WALK
    script.direction = Direction.DOWN
    clock.update(2.5)
    script.update()
    assert script.state is CatState.SIT_DOWN
    assert animator.active_animation is animator.animations["SitDown"]


def test_lying_down_does_not_move():
    cat, script, animator, clock = make_cat()
    script.state = CatState.LAY_DOWN
    transform = cat.get_component(Transform)
    transform.position = Vector2(3.0, 4.0)
    clock.update(5.0)
    script.update()
    assert transform.position == Vector2(3.0, 4.0)
    assert script.state is CatState.LAY_DOWN


@pytest.mark.parametrize(
    "direction, name",
    [
        (Direction.LEFT, "LeftWalk"),
        (Direction.RIGHT, "RightWalk"),
        (Direction.DOWN, "DownWalk"),
        (Direction.UP, "UpWalk"),
    ],
)
def test_walk_animation_by_direction(direction, name):
    cat, script, animator, clock = make_cat()
    script.animator = animator
    script.play_walk_animation(direction)
    assert animator.active_animation is animator.animations[name]
    assert animator.loop is True


def test_walk_animation_for_end_raises():
    cat, script, animator, clock = make_cat()
    script.animator = animator
    with pytest.raises(ValueError):
        script.play_walk_animation(Direction.END)


def test_unowned_script_raises():
    script = CatScript()
    with pytest.raises(RuntimeError):
        script.update()