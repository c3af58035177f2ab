"""Type identifiers and reactive entity instances with observable properties."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from enum import Enum
from itertools import count
from typing import Any

NAMESPACE_LOGICAL = "logical"

Observer = Callable[[Any], None]


class _PropertyEnum(str, Enum):
    """Property names of a type, each member carrying its default value."""

    def __new__(cls, name: str, default: Any):
        member = str.__new__(cls, name)
        member._value_ = name
        member.default_value = default
        return member

    def __str__(self) -> str:
        return self.value


def _key(name: str | Enum) -> str:
    return name.value if isinstance(name, Enum) else str(name)


@dataclass(frozen=True)
class NamespacedType:
    """A type identified by a namespace and a type name."""

    namespace: str
    type_name: str


class ComponentTypeId(NamespacedType):
    """Identifies a component type."""


class EntityTypeId(NamespacedType):
    """Identifies an entity type."""


class BehaviourTypeId(NamespacedType):
    """Identifies a behaviour type."""


class FlowTypeId(NamespacedType):
    """Identifies a flow type."""


@dataclass(frozen=True)
class EntityBehaviourTypeId:
    """Binds a behaviour type to the entity type it applies to."""

    entity_ty: EntityTypeId
    behaviour_ty: BehaviourTypeId

    @classmethod
    def from_behaviour(cls, behaviour_ty: BehaviourTypeId) -> EntityBehaviourTypeId:
        """Apply a behaviour to the entity type of the same namespace and name."""
        entity_ty = EntityTypeId(behaviour_ty.namespace, behaviour_ty.type_name)
        return cls(entity_ty, behaviour_ty)


class ReactiveEntityInstance:
    """An entity whose properties notify observers whenever they are set."""

    def __init__(
        self,
        ty: EntityTypeId,
        properties: Mapping[str, Any] | None = None,
        components: Iterable[ComponentTypeId] = (),
    ) -> None:
        self.ty = ty
        self._properties: dict[str, Any] = {
            _key(name): value for name, value in (properties or {}).items()
        }
        self.components: set[ComponentTypeId] = set(components)
        self._observers: dict[str, dict[int, Observer]] = {}
        self._handles = count(1)

    @property
    def properties(self) -> dict[str, Any]:
        """A snapshot of the current property values."""
        return dict(self._properties)

    def get(self, name: str | Enum) -> Any:
        """Return the value of a property, or None if there is no such property."""
        return self._properties.get(_key(name))

    def set(self, name: str | Enum, value: Any) -> None:
        """Set an existing property and notify its observers; unknown names are ignored."""
        key = _key(name)
        if key not in self._properties:
            return
        self._properties[key] = value
        for callback in list(self._observers.get(key, {}).values()):
            callback(value)

    def as_bool(self, name: str | Enum) -> bool | None:
        """Return the property value if it is a boolean, else None."""
        value = self.get(name)
        return value if isinstance(value, bool) else None

    def has_property(self, name: str | Enum) -> bool:
        return _key(name) in self._properties

    def is_a(self, component_ty: ComponentTypeId) -> bool:
        return component_ty in self.components

    def add_observer(self, name: str | Enum, callback: Observer) -> int:
        """Register a callback for a property and return its handle."""
        handle = next(self._handles)
        self._observers.setdefault(_key(name), {})[handle] = callback
        return handle

    def remove_observer(self, name: str | Enum, handle: int) -> None:
        """Remove an observer; unknown handles are ignored."""
        observers = self._observers.get(_key(name))
        if observers is not None:
            observers.pop(handle, None)

    def __repr__(self) -> str:
        return f"ReactiveEntityInstance(ty={self.ty!r}, properties={self._properties!r})"


class ReactiveEntityInstanceBuilder:
    """Fluent construction of a reactive entity instance."""

    def __init__(self, ty: EntityTypeId) -> None:
        self._ty = ty
        self._properties: dict[str, Any] = {}
        self._components: list[ComponentTypeId] = []

    def property(self, name: str | Enum, value: Any) -> ReactiveEntityInstanceBuilder:
        self._properties[_key(name)] = value
        return self

    def component(self, component_ty: ComponentTypeId) -> ReactiveEntityInstanceBuilder:
        if component_ty not in self._components:
            self._components.append(component_ty)
        return self

    def build(self) -> ReactiveEntityInstance:
        return ReactiveEntityInstance(self._ty, self._properties, self._components)


class PropertyObserverContainer:
    """Tracks the observers registered on one instance so they can be removed together."""

    def __init__(self, instance: ReactiveEntityInstance) -> None:
        self.instance = instance
        self._handles: list[tuple[str, int]] = []

    def observe_with_handle(self, name: str | Enum, callback: Observer) -> int:
        handle = self.instance.add_observer(name, callback)
        self._handles.append((_key(name), handle))
        return handle

    def remove_all(self) -> None:
        for name, handle in self._handles:
            self.instance.remove_observer(name, handle)
        self._handles.clear()

    def __len__(self) -> int:
        return len(self._handles)