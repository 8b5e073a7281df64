from parengine.entity import Script
from parengine.enums import ComponentType
from parengine.gameobject import GameObject
from parengine.transform import Transform


class _Recorder(Script):
    def __init__(self):
        super().__init__()
        self.calls = []
        self.owner_at_init = "unset"

    def initialize(self):
        self.calls.append("initialize")
        self.owner_at_init = self.owner

    def update(self):
        self.calls.append("update")

    def late_update(self):
        self.calls.append("late_update")

    def render(self, surface):
        self.calls.append(("render", surface))


class _OtherScript(Script):
    pass


def test_new_object_has_transform():
    obj = GameObject()
    tr = obj.get_component(Transform)
    assert isinstance(tr, Transform)
    assert tr.owner is obj


def test_add_component_initializes_before_owner_is_set():
    obj = GameObject()
    rec = obj.add_component(_Recorder)
    assert rec.calls == ["initialize"]
    assert rec.owner_at_init is None
    assert rec.owner is obj


def test_get_missing_component_returns_none():
    obj = GameObject()
    assert obj.get_component(_Recorder) is None


def test_lifecycle_reaches_each_component_once():
    obj = GameObject()
    rec = obj.add_component(_Recorder)
    surface = object()
    obj.initialize()
    obj.update()
    obj.late_update()
    obj.render(surface)
    assert rec.calls == [
        "initialize",
        "initialize",
        "update",
        "late_update",
        ("render", surface),
    ]


def test_components_ordered_by_type():
    obj = GameObject()
    obj.add_component(_Recorder)
    types = [c.component_type for c in obj.components]
    assert types == [ComponentType.TRANSFORM, ComponentType.SCRIPT]


def test_same_type_replaces_previous():
    obj = GameObject()
    first = obj.add_component(_Recorder)
    second = obj.add_component(_OtherScript)
    assert obj.get_component(_Recorder) is None
    assert obj.get_component(Script) is second
    assert first not in obj.components
    assert len(obj.components) == 2