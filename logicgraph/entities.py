"""Entity types of the logical namespace and typed accessors for them."""

from __future__ import annotations

from typing import Any

from .components import Action, ActionProperties, ConditionProperties, EntityModel
from .reactive import (
    NAMESPACE_LOGICAL,
    BehaviourTypeId,
    EntityBehaviourTypeId,
    EntityTypeId,
    FlowTypeId,
    _PropertyEnum,
)


class And3Properties(_PropertyEnum):
    INPUT_1 = ("input1", False)
    INPUT_2 = ("input2", False)
    INPUT_3 = ("input3", False)


class IfThenElseProperties(_PropertyEnum):
    THEN_PAYLOAD = ("then_payload", 0)
    ELSE_PAYLOAD = ("else_payload", 0)


class TriggerProperties(_PropertyEnum):
    PAYLOAD = ("payload", 0)


_RESULT = "result"

ENTITY_TYPE_NAME_AND3 = "and3"
ENTITY_TYPE_AND3 = EntityTypeId(NAMESPACE_LOGICAL, ENTITY_TYPE_NAME_AND3)
FLOW_TYPE_NAME_AND3 = "and3"
FLOW_TYPE_AND3 = FlowTypeId(NAMESPACE_LOGICAL, FLOW_TYPE_NAME_AND3)

ENTITY_TYPE_NAME_IF_THEN_ELSE = "if_then_else"
ENTITY_TYPE_IF_THEN_ELSE = EntityTypeId(NAMESPACE_LOGICAL, ENTITY_TYPE_NAME_IF_THEN_ELSE)
BEHAVIOUR_NAME_IF_THEN_ELSE = "if_then_else"
BEHAVIOUR_IF_THEN_ELSE = BehaviourTypeId(NAMESPACE_LOGICAL, BEHAVIOUR_NAME_IF_THEN_ELSE)
ENTITY_BEHAVIOUR_IF_THEN_ELSE = EntityBehaviourTypeId(ENTITY_TYPE_IF_THEN_ELSE, BEHAVIOUR_IF_THEN_ELSE)

ENTITY_TYPE_NAME_TOGGLE = "toggle"
ENTITY_TYPE_TOGGLE = EntityTypeId(NAMESPACE_LOGICAL, ENTITY_TYPE_NAME_TOGGLE)
BEHAVIOUR_NAME_TOGGLE = "toggle"
BEHAVIOUR_TOGGLE = BehaviourTypeId(NAMESPACE_LOGICAL, BEHAVIOUR_NAME_TOGGLE)
ENTITY_BEHAVIOUR_TOGGLE = EntityBehaviourTypeId(ENTITY_TYPE_TOGGLE, BEHAVIOUR_TOGGLE)

ENTITY_TYPE_NAME_TRIGGER = "trigger"
ENTITY_TYPE_TRIGGER = EntityTypeId(NAMESPACE_LOGICAL, ENTITY_TYPE_NAME_TRIGGER)
BEHAVIOUR_NAME_TRIGGER = "trigger"
BEHAVIOUR_TRIGGER = BehaviourTypeId(NAMESPACE_LOGICAL, BEHAVIOUR_NAME_TRIGGER)
ENTITY_BEHAVIOUR_TRIGGER = EntityBehaviourTypeId(ENTITY_TYPE_TRIGGER, BEHAVIOUR_TRIGGER)


class And3(EntityModel):
    """A three-input AND entity."""

    def result(self) -> bool | None:
        return self.instance.as_bool(_RESULT)

    def input1(self, value: bool) -> None:
        self.instance.set(And3Properties.INPUT_1, value)

    def input2(self, value: bool) -> None:
        self.instance.set(And3Properties.INPUT_2, value)

    def input3(self, value: bool) -> None:
        self.instance.set(And3Properties.INPUT_3, value)


class IfThenElse(EntityModel):
    """Selects one of two payloads depending on a condition."""

    def result(self) -> Any:
        return self.instance.get(ConditionProperties.RESULT)

    def condition(self, value: bool) -> None:
        self.instance.set(ConditionProperties.CONDITION, value)

    def then_payload(self, value: Any) -> None:
        self.instance.set(IfThenElseProperties.THEN_PAYLOAD, value)

    def else_payload(self, value: Any) -> None:
        self.instance.set(IfThenElseProperties.ELSE_PAYLOAD, value)


class Toggle(EntityModel):
    """Flips a boolean result each time it is triggered."""

    def trigger(self) -> None:
        self.instance.set(ActionProperties.TRIGGER, True)

    def result(self) -> bool | None:
        return self.instance.as_bool(ActionProperties.RESULT)


class Trigger(Action):
    """Copies its payload to its result when triggered."""

    def payload(self, value: Any) -> None:
        self.instance.set(TriggerProperties.PAYLOAD, value)