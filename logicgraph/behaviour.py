"""Lifecycle of behaviours attached to reactive entity instances."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from enum import Enum
from typing import Any, ClassVar, TypeVar

from .reactive import BehaviourTypeId, PropertyObserverContainer, ReactiveEntityInstance

F = TypeVar("F", bound=Callable[..., Any])


class BehaviourError(Exception):
    """Base class of all errors raised while setting up a behaviour."""


class BehaviourValidationFailed(BehaviourError):
    """The entity instance lacks a property the behaviour needs."""


class BehaviourInitializationFailed(BehaviourError):
    """The behaviour could not compute its initial state."""


class BehaviourConnectFailed(BehaviourError):
    """The behaviour could not attach its observers."""


class EntityBehaviour:
    """A behaviour bound to one reactive entity instance.

    Subclasses name the properties they require in ``properties`` and
    override ``init`` and ``connect``. Used as a context manager, the
    behaviour disconnects from its instance on exit.
    """

    properties: ClassVar[tuple[str | Enum, ...]] = ()

    def __init__(self, ty: BehaviourTypeId, instance: ReactiveEntityInstance) -> None:
        self._ty = ty
        self.instance = instance
        self.property_observers = PropertyObserverContainer(instance)

    def ty(self) -> BehaviourTypeId:
        """The behaviour type."""
        return self._ty

    def validate(self) -> None:
        """Raise BehaviourValidationFailed if a required property is missing."""
        missing = [str(name) for name in self.properties if not self.instance.has_property(name)]
        if missing:
            raise BehaviourValidationFailed(
                f"{self._ty.namespace}__{self._ty.type_name}: missing properties {', '.join(missing)}"
            )

    def init(self) -> None:
        """Compute the initial state of the instance."""

    def connect(self) -> None:
        """Attach the observers that drive the behaviour."""

    def disconnect(self) -> None:
        """Detach every observer this behaviour registered."""
        self.property_observers.remove_all()

    def __enter__(self) -> EntityBehaviour:
        return self

    def __exit__(self, *args: Any) -> None:
        self.disconnect()


class EntityBehaviourFactory:
    """Creates validated, initialised and connected behaviours."""

    behaviour_class: ClassVar[type[EntityBehaviour]] = EntityBehaviour

    def __init__(self, behaviour_ty: BehaviourTypeId) -> None:
        self.behaviour_ty = behaviour_ty

    def _build(self, instance: ReactiveEntityInstance) -> EntityBehaviour:
        return self.behaviour_class(self.behaviour_ty, instance)

    def create(self, instance: ReactiveEntityInstance) -> EntityBehaviour:
        """Bind a new behaviour to the instance, raising BehaviourError on failure."""
        behaviour = self._build(instance)
        behaviour.validate()
        try:
            behaviour.init()
            behaviour.connect()
        except BaseException:
            behaviour.disconnect()
            raise
        return behaviour


def behaviour_functions(namespace: str, pairs: Iterable[tuple[str, F]]) -> dict[BehaviourTypeId, F]:
    """Map behaviour types of a namespace to the functions that implement them."""
    return {BehaviourTypeId(namespace, name): f for name, f in pairs}