"""Behaviours of the if-then-else, toggle and trigger entities."""

from __future__ import annotations

from typing import Any

from .behaviour import BehaviourInitializationFailed, EntityBehaviour, EntityBehaviourFactory
from .components import ActionProperties, ConditionProperties
from .entities import IfThenElseProperties, TriggerProperties


class IfThenElseBehaviour(EntityBehaviour):
    """Copies the then or else payload to ``result`` depending on ``condition``."""

    properties = (
        ConditionProperties.CONDITION,
        IfThenElseProperties.THEN_PAYLOAD,
        IfThenElseProperties.ELSE_PAYLOAD,
        ConditionProperties.RESULT,
    )

    def _select(self, condition: bool) -> None:
        source = IfThenElseProperties.THEN_PAYLOAD if condition else IfThenElseProperties.ELSE_PAYLOAD
        if self.instance.has_property(source):
            self.instance.set(ConditionProperties.RESULT, self.instance.get(source))

    def init(self) -> None:
        condition = self.instance.as_bool(ConditionProperties.CONDITION)
        if condition is None:
            raise BehaviourInitializationFailed("condition must be a boolean")
        self._select(condition)

    def connect(self) -> None:
        def on_condition(value: Any) -> None:
            if isinstance(value, bool):
                self._select(value)

        self.property_observers.observe_with_handle(ConditionProperties.CONDITION, on_condition)


class IfThenElseFactory(EntityBehaviourFactory):
    behaviour_class = IfThenElseBehaviour


class ToggleBehaviour(EntityBehaviour):
    """Flips ``result`` whenever ``trigger`` is set to true."""

    properties = (ActionProperties.TRIGGER, ActionProperties.RESULT)

    def connect(self) -> None:
        instance = self.instance

        def on_trigger(value: Any) -> None:
            if value is not True:
                return
            current = instance.as_bool(ActionProperties.RESULT)
            instance.set(ActionProperties.RESULT, False if current is None else not current)

        self.property_observers.observe_with_handle(ActionProperties.TRIGGER, on_trigger)


class ToggleFactory(EntityBehaviourFactory):
    behaviour_class = ToggleBehaviour


class TriggerBehaviour(EntityBehaviour):
    """Copies ``payload`` to ``result`` whenever ``trigger`` is set to true."""

    properties = (ActionProperties.TRIGGER, ActionProperties.RESULT, TriggerProperties.PAYLOAD)

    def connect(self) -> None:
        instance = self.instance

        def on_trigger(value: Any) -> None:
            if value is not True:
                return
            if instance.has_property(TriggerProperties.PAYLOAD):
                instance.set(ActionProperties.RESULT, instance.get(TriggerProperties.PAYLOAD))

        self.property_observers.observe_with_handle(ActionProperties.TRIGGER, on_trigger)


class TriggerFactory(EntityBehaviourFactory):
    behaviour_class = TriggerBehaviour