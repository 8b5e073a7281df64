from parengine.enums import ComponentType
from parengine.transform import Transform
from parengine.vector import Vector2


def test_defaults():
    tr = Transform()
    assert tr.position == Vector2.ZERO
    assert tr.scale == Vector2.ONE
    assert tr.rotation == 0.0
    assert tr.component_type is ComponentType.TRANSFORM


def test_set_position_round_trip():
    tr = Transform()
    tr.position = Vector2(100.0, 100.0)
    assert tr.position == Vector2(100.0, 100.0)


def test_set_scale_and_rotation():
    tr = Transform()
    tr.scale = Vector2(2.0, 2.0)
    tr.rotation = 45.0
    assert tr.scale == Vector2(2.0, 2.0)
    assert tr.rotation == 45.0


def test_transforms_do_not_share_state():
    a = Transform()
    b = Transform()
    a.position = Vector2(5.0, 5.0)
    assert b.position == Vector2.ZERO