"""Single-input logical operations."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from .behaviour import BehaviourInitializationFailed, EntityBehaviour, EntityBehaviourFactory, behaviour_functions
from .components import LogicalOperationProperties
from .reactive import NAMESPACE_LOGICAL, BehaviourTypeId, ReactiveEntityInstance

LogicalOperationFunction = Callable[[bool], bool]

LHS = LogicalOperationProperties.LHS
RESULT = LogicalOperationProperties.RESULT


def FN_NOT(lhs: bool) -> bool:
    return not lhs


LOGICAL_OPERATIONS: dict[BehaviourTypeId, LogicalOperationFunction] = behaviour_functions(
    NAMESPACE_LOGICAL, [("not", FN_NOT)]
)


class LogicalOperationBehaviour(EntityBehaviour):
    """Keeps ``result`` equal to ``f(lhs)``."""

    properties = (LHS, RESULT)

    def __init__(self, ty: BehaviourTypeId, instance: ReactiveEntityInstance, f: LogicalOperationFunction) -> None:
        super().__init__(ty, instance)
        self.f = f

    def init(self) -> None:
        lhs = self.instance.as_bool(LHS)
        if lhs is None:
            raise BehaviourInitializationFailed("lhs must be a boolean")
        self.instance.set(RESULT, self.f(lhs))

    def connect(self) -> None:
        instance = self.instance
        f = self.f

        def on_lhs(value: Any) -> None:
            if isinstance(value, bool):
                instance.set(RESULT, f(value))

        self.property_observers.observe_with_handle(LHS, on_lhs)


class LogicalOperationFactory(EntityBehaviourFactory):
    """Creates operation behaviours that use one operation function."""

    behaviour_class = LogicalOperationBehaviour

    def __init__(self, behaviour_ty: BehaviourTypeId, f: LogicalOperationFunction) -> None:
        super().__init__(behaviour_ty)
        self.f = f

    def _build(self, instance: ReactiveEntityInstance) -> LogicalOperationBehaviour:
        return LogicalOperationBehaviour(self.behaviour_ty, instance, self.f)

    def create(self, instance: ReactiveEntityInstance) -> LogicalOperationBehaviour:
        return super().create(instance)