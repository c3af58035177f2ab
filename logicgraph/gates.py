"""Two-input logical gates."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from .behaviour import BehaviourInitializationFailed, EntityBehaviour, EntityBehaviourFactory, behaviour_functions
from .components import LogicalGateProperties
from .reactive import NAMESPACE_LOGICAL, BehaviourTypeId, ReactiveEntityInstance

LogicalGateFunction = Callable[[bool, bool], bool]

LHS = LogicalGateProperties.LHS
RHS = LogicalGateProperties.RHS
RESULT = LogicalGateProperties.RESULT


def FN_AND(lhs: bool, rhs: bool) -> bool:
    return lhs and rhs


def FN_NAND(lhs: bool, rhs: bool) -> bool:
    return not (lhs and rhs)


def FN_NOR(lhs: bool, rhs: bool) -> bool:
    return not (lhs or rhs)


def FN_OR(lhs: bool, rhs: bool) -> bool:
    return lhs or rhs


def FN_XOR(lhs: bool, rhs: bool) -> bool:
    return lhs ^ rhs


def FN_XNOR(lhs: bool, rhs: bool) -> bool:
    return not (lhs ^ rhs)


LOGICAL_GATES: dict[BehaviourTypeId, LogicalGateFunction] = behaviour_functions(
    NAMESPACE_LOGICAL,
    [
        ("and", FN_AND),
        ("nand", FN_NAND),
        ("nor", FN_NOR),
        ("or", FN_OR),
        ("xor", FN_XOR),
        ("xnor", FN_XNOR),
    ],
)


class LogicalGateBehaviour(EntityBehaviour):
    """Keeps ``result`` equal to ``f(lhs, rhs)``."""

    properties = (LHS, RHS, RESULT)

    def __init__(self, ty: BehaviourTypeId, instance: ReactiveEntityInstance, f: LogicalGateFunction) -> None:
        super().__init__(ty, instance)
        self.f = f

    def init(self) -> None:
        lhs = self.instance.as_bool(LHS)
        rhs = self.instance.as_bool(RHS)
        if lhs is None or rhs is None:
            raise BehaviourInitializationFailed("lhs and rhs must be booleans")
        self.instance.set(RESULT, self.f(lhs, rhs))

    def connect(self) -> None:
        instance = self.instance
        f = self.f

        def on_lhs(value: Any) -> None:
            rhs = instance.as_bool(RHS)
            if isinstance(value, bool) and rhs is not None:
                instance.set(RESULT, f(value, rhs))

        def on_rhs(value: Any) -> None:
            lhs = instance.as_bool(LHS)
            if isinstance(value, bool) and lhs is not None:
                instance.set(RESULT, f(lhs, value))

        self.property_observers.observe_with_handle(LHS, on_lhs)
        self.property_observers.observe_with_handle(RHS, on_rhs)


class LogicalGateFactory(EntityBehaviourFactory):
    """Creates gate behaviours that use one gate function."""

    behaviour_class = LogicalGateBehaviour

    def __init__(self, behaviour_ty: BehaviourTypeId, f: LogicalGateFunction) -> None:
        super().__init__(behaviour_ty)
        self.f = f

    def _build(self, instance: ReactiveEntityInstance) -> LogicalGateBehaviour:
        return LogicalGateBehaviour(self.behaviour_ty, instance, self.f)

    def create(self, instance: ReactiveEntityInstance) -> LogicalGateBehaviour:
        return super().create(instance)