import pytest

from logicgraph.behaviour import (
    BehaviourConnectFailed,
    BehaviourError,
    BehaviourInitializationFailed,
    BehaviourValidationFailed,
    EntityBehaviour,
    EntityBehaviourFactory,
    behaviour_functions,
)
from logicgraph.reactive import BehaviourTypeId, EntityTypeId, ReactiveEntityInstanceBuilder

BEHAVIOUR_TY = BehaviourTypeId("testing", "recorder")
ENTITY_TY = EntityTypeId("testing", "recorder")


class _Recording(EntityBehaviour):
    properties = ("a",)

    def connect(self):
        self.seen = []
        self.property_observers.observe_with_handle("a", self.seen.append)


class _RecordingFactory(EntityBehaviourFactory):
    behaviour_class = _Recording


class _FailingInit(EntityBehaviour):
    def init(self):
        raise BehaviourInitializationFailed("no")


class _FailingConnect(EntityBehaviour):
    def connect(self):
        self.property_observers.observe_with_handle("a", lambda v: None)
        raise BehaviourConnectFailed("no")


def _instance(**props):
    builder = ReactiveEntityInstanceBuilder(ENTITY_TY)
    for name, value in props.items():
        builder.property(name, value)
    return builder.build()


def test_behaviour_functions_keys():
    table = behaviour_functions("logical", [("x", min), ("y", max)])
    assert list(table) == [BehaviourTypeId("logical", "x"), BehaviourTypeId("logical", "y")]
    assert table[BehaviourTypeId("logical", "y")] is max


def test_create_sets_type():
    behaviour = EntityBehaviourFactory(BEHAVIOUR_TY).create(_instance())
    assert behaviour.ty() == BEHAVIOUR_TY


def test_missing_property_fails_validation():
    with pytest.raises(BehaviourValidationFailed):
        _RecordingFactory(BEHAVIOUR_TY).create(_instance(b=1))


def test_validation_failure_is_behaviour_error():
    with pytest.raises(BehaviourError):
        _RecordingFactory(BEHAVIOUR_TY).create(_instance())


def test_observers_detached_on_exit():
    instance = _instance(a=0)
    with _RecordingFactory(BEHAVIOUR_TY).create(instance) as behaviour:
        instance.set("a", 1)
    instance.set("a", 2)
    assert behaviour.seen == [1]


def test_init_failure_propagates():
    class Factory(EntityBehaviourFactory):
        behaviour_class = _FailingInit

    with pytest.raises(BehaviourInitializationFailed):
        Factory(BEHAVIOUR_TY).create(_instance())


def test_connect_failure_removes_observers():
    class Factory(EntityBehaviourFactory):
        behaviour_class = _FailingConnect

    instance = _instance(a=0)
    with pytest.raises(BehaviourConnectFailed):
        Factory(BEHAVIOUR_TY).create(instance)
    assert instance._observers.get("a", {}) == {}