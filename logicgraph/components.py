"""Component types of the logical namespace and typed accessors for them."""

from __future__ import annotations

from typing import Any

from .reactive import NAMESPACE_LOGICAL, ComponentTypeId, ReactiveEntityInstance, _PropertyEnum


class ActionProperties(_PropertyEnum):
    TRIGGER = ("trigger", False)
    RESULT = ("result", False)


class ConditionProperties(_PropertyEnum):
    CONDITION = ("condition", False)
    RESULT = ("result", False)


class GeneratorProperties(_PropertyEnum):
    TRIGGER = ("trigger", False)


class LogicalGateProperties(_PropertyEnum):
    LHS = ("lhs", False)
    RHS = ("rhs", False)
    RESULT = ("result", False)


class LogicalOperationProperties(_PropertyEnum):
    LHS = ("lhs", False)
    RESULT = ("result", False)


COMPONENT_NAME_ACTION = "action"
COMPONENT_ACTION = ComponentTypeId(NAMESPACE_LOGICAL, COMPONENT_NAME_ACTION)

COMPONENT_NAME_CONDITION = "condition"
COMPONENT_CONDITION = ComponentTypeId(NAMESPACE_LOGICAL, COMPONENT_NAME_CONDITION)

COMPONENT_NAME_GENERATOR = "generator"
COMPONENT_GENERATOR = ComponentTypeId(NAMESPACE_LOGICAL, COMPONENT_NAME_GENERATOR)

COMPONENT_NAME_LOGICAL_GATE = "logical_gate"
COMPONENT_LOGICAL_GATE = ComponentTypeId(NAMESPACE_LOGICAL, COMPONENT_NAME_LOGICAL_GATE)

COMPONENT_NAME_LOGICAL_OPERATION = "logical_operation"
COMPONENT_LOGICAL_OPERATION = ComponentTypeId(NAMESPACE_LOGICAL, COMPONENT_NAME_LOGICAL_OPERATION)


class EntityModel:
    """A typed view onto a reactive entity instance."""

    def __init__(self, instance: ReactiveEntityInstance) -> None:
        self.instance = instance

    def namespace(self) -> str:
        return self.instance.ty.namespace

    def type_name(self) -> str:
        return self.instance.ty.type_name


class Action(EntityModel):
    """An entity that can be triggered and yields a result."""

    def trigger(self) -> None:
        self.instance.set(ActionProperties.TRIGGER, True)

    def result(self) -> Any:
        return self.instance.get(ActionProperties.RESULT)


class Condition(EntityModel):
    """An entity that takes a boolean condition and yields a result."""

    def condition(self, value: bool) -> None:
        self.instance.set(ConditionProperties.CONDITION, value)

    def result(self) -> Any:
        return self.instance.get(ConditionProperties.RESULT)


class LogicalGate(EntityModel):
    """A gate with two boolean inputs and a boolean result."""

    def result(self) -> bool | None:
        return self.instance.as_bool(LogicalGateProperties.RESULT)

    def lhs(self, value: bool) -> None:
        self.instance.set(LogicalGateProperties.LHS, value)

    def rhs(self, value: bool) -> None:
        self.instance.set(LogicalGateProperties.RHS, value)


class LogicalOperation(EntityModel):
    """An operation with one boolean input and a boolean result."""

    def result(self) -> bool | None:
        return self.instance.as_bool(LogicalOperationProperties.RESULT)

    def lhs(self, value: bool) -> None:
        self.instance.set(LogicalOperationProperties.LHS, value)