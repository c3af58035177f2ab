import pytest

from logicgraph.behaviour import BehaviourError
from logicgraph.components import COMPONENT_LOGICAL_GATE, LogicalGate, LogicalGateProperties
from logicgraph.gates import LOGICAL_GATES, LogicalGateFactory
from logicgraph.reactive import (
    NAMESPACE_LOGICAL,
    BehaviourTypeId,
    EntityTypeId,
    ReactiveEntityInstanceBuilder,
)

LHS = LogicalGateProperties.LHS
RHS = LogicalGateProperties.RHS
RESULT = LogicalGateProperties.RESULT
TYPE_NAME_AND = "and"


def logical_gate(entity_ty):
    return (
        ReactiveEntityInstanceBuilder(entity_ty)
        .property(LHS, False)
        .property(RHS, False)
        .property(RESULT, False)
        .component(COMPONENT_LOGICAL_GATE)
        .build()
    )


def _factory(name):
    behaviour_ty = BehaviourTypeId(NAMESPACE_LOGICAL, name)
    return LogicalGateFactory(behaviour_ty, LOGICAL_GATES[behaviour_ty])


def test_logical_gate_behaviour_function_should_exist():
    behaviour_ty = BehaviourTypeId(NAMESPACE_LOGICAL, TYPE_NAME_AND)
    assert behaviour_ty in LOGICAL_GATES
    assert LOGICAL_GATES.get(behaviour_ty) is not None
    assert LOGICAL_GATES[behaviour_ty](True, True) is True


def test_and_gate():
    instance = logical_gate(EntityTypeId(NAMESPACE_LOGICAL, TYPE_NAME_AND))
    behaviour = _factory(TYPE_NAME_AND).create(instance)
    assert behaviour.ty().namespace == NAMESPACE_LOGICAL
    assert behaviour.ty().type_name == TYPE_NAME_AND

    instance.set(LHS, True)
    instance.set(RHS, True)
    assert instance.as_bool(RESULT) is True
    instance.set(LHS, False)
    assert instance.as_bool(RESULT) is False
    instance.set(RHS, False)
    assert instance.as_bool(RESULT) is False
    instance.set(LHS, True)
    assert instance.as_bool(RESULT) is False
    instance.set(RHS, True)
    assert instance.as_bool(RESULT) is True


def test_incomplete_and_gate():
    instance = (
        ReactiveEntityInstanceBuilder(EntityTypeId(NAMESPACE_LOGICAL, TYPE_NAME_AND))
        .component(COMPONENT_LOGICAL_GATE)
        .build()
    )
    with pytest.raises(BehaviourError):
        _factory(TYPE_NAME_AND).create(instance)


def test_rx_and_gate():
    instance = logical_gate(EntityTypeId(NAMESPACE_LOGICAL, TYPE_NAME_AND))
    rx_and = LogicalGate(instance)
    assert rx_and.namespace() == NAMESPACE_LOGICAL
    assert rx_and.type_name() == TYPE_NAME_AND

    with _factory(TYPE_NAME_AND).create(instance):
        rx_and.lhs(True)
        rx_and.rhs(True)
        assert rx_and.result() is True
        rx_and.lhs(False)
        assert rx_and.result() is False
        rx_and.rhs(False)
        assert rx_and.result() is False
        rx_and.lhs(True)
        assert rx_and.result() is False
        rx_and.rhs(True)
        assert rx_and.result() is True
    rx_and.lhs(False)
    assert rx_and.result() is True


@pytest.mark.parametrize(
    "name, table",
    [
        ("and", [False, False, False, True]),
        ("nand", [True, True, True, False]),
        ("nor", [True, False, False, False]),
        ("or", [False, True, True, True]),
        ("xor", [False, True, True, False]),
        ("xnor", [True, False, False, True]),
    ],
)
def test_truth_tables(name, table):
    instance = logical_gate(EntityTypeId(NAMESPACE_LOGICAL, name))
    inputs = [(False, False), (False, True), (True, False), (True, True)]
    with _factory(name).create(instance):
        results = []
        for lhs, rhs in inputs:
            instance.set(LHS, lhs)
            instance.set(RHS, rhs)
            results.append(instance.as_bool(RESULT))
    assert results == table


def test_init_computes_result():
    instance = logical_gate(EntityTypeId(NAMESPACE_LOGICAL, "nand"))
    _factory("nand").create(instance)
    assert instance.as_bool(RESULT) is True


def test_non_boolean_input_is_ignored():
    instance = logical_gate(EntityTypeId(NAMESPACE_LOGICAL, "or"))
    with _factory("or").create(instance):
        instance.set(LHS, "yes")
        assert instance.as_bool(RESULT) is False