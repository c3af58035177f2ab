"""The logical plugin: registers its entity behaviours with a host context."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field

from .actions import IfThenElseFactory, ToggleFactory, TriggerFactory
from .behaviour import EntityBehaviourFactory
from .entities import (
    BEHAVIOUR_IF_THEN_ELSE,
    BEHAVIOUR_TOGGLE,
    BEHAVIOUR_TRIGGER,
    ENTITY_BEHAVIOUR_IF_THEN_ELSE,
    ENTITY_BEHAVIOUR_TOGGLE,
    ENTITY_BEHAVIOUR_TRIGGER,
)
from .gates import LOGICAL_GATES, LogicalGateFactory
from .operations import LOGICAL_OPERATIONS, LogicalOperationFactory
from .reactive import EntityBehaviourTypeId

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class PluginDependency:
    """A plugin this plugin needs, with the accepted version range."""

    name: str
    version_range: str


class EntityBehaviourRegistry:
    """Maps entity behaviour types to the factories that create them."""

    def __init__(self) -> None:
        self._factories: dict[EntityBehaviourTypeId, EntityBehaviourFactory] = {}
        self._lock = threading.RLock()

    def register(self, ty: EntityBehaviourTypeId, factory: EntityBehaviourFactory) -> None:
        with self._lock:
            self._factories[ty] = factory

    def unregister(self, ty: EntityBehaviourTypeId) -> bool:
        """Remove a factory; return whether one was registered."""
        with self._lock:
            return self._factories.pop(ty, None) is not None

    def get(self, ty: EntityBehaviourTypeId) -> EntityBehaviourFactory | None:
        with self._lock:
            return self._factories.get(ty)

    def __contains__(self, ty: object) -> bool:
        with self._lock:
            return ty in self._factories

    def __len__(self) -> int:
        with self._lock:
            return len(self._factories)


@dataclass
class PluginContext:
    """What the host offers a plugin while it is loaded."""

    entity_behaviour_registry: EntityBehaviourRegistry = field(default_factory=EntityBehaviourRegistry)


class LogicalPlugin:
    """Registers the logical behaviours when activated and removes them when deactivated."""

    def __init__(self) -> None:
        self._context: PluginContext | None = None
        self._lock = threading.RLock()

    @property
    def context(self) -> PluginContext | None:
        with self._lock:
            return self._context

    def activate(self) -> None:
        context = self.context
        if context is None:
            return
        registry = context.entity_behaviour_registry
        registry.register(ENTITY_BEHAVIOUR_IF_THEN_ELSE, IfThenElseFactory(BEHAVIOUR_IF_THEN_ELSE))
        registry.register(ENTITY_BEHAVIOUR_TOGGLE, ToggleFactory(BEHAVIOUR_TOGGLE))
        registry.register(ENTITY_BEHAVIOUR_TRIGGER, TriggerFactory(BEHAVIOUR_TRIGGER))
        for behaviour_ty, op in LOGICAL_OPERATIONS.items():
            registry.register(
                EntityBehaviourTypeId.from_behaviour(behaviour_ty),
                LogicalOperationFactory(behaviour_ty, op),
            )
        for behaviour_ty, gate in LOGICAL_GATES.items():
            registry.register(
                EntityBehaviourTypeId.from_behaviour(behaviour_ty),
                LogicalGateFactory(behaviour_ty, gate),
            )

    def deactivate(self) -> None:
        context = self.context
        if context is None:
            return
        registry = context.entity_behaviour_registry
        registry.unregister(ENTITY_BEHAVIOUR_IF_THEN_ELSE)
        registry.unregister(ENTITY_BEHAVIOUR_TOGGLE)
        registry.unregister(ENTITY_BEHAVIOUR_TRIGGER)
        for behaviour_ty in [*LOGICAL_OPERATIONS, *LOGICAL_GATES]:
            registry.unregister(EntityBehaviourTypeId.from_behaviour(behaviour_ty))

    def set_context(self, context: PluginContext) -> None:
        with self._lock:
            self._context = context

    def remove_context(self) -> None:
        with self._lock:
            self._context = None


def get_dependencies() -> list[PluginDependency]:
    """The plugins that must be loaded alongside this one."""
    return [
        PluginDependency("inexor-rgf-plugin-base", ">=0.8.0, <0.9.0"),
        PluginDependency("inexor-rgf-plugin-connector", ">=0.8.0, <0.9.0"),
    ]


def construct_plugin() -> LogicalPlugin:
    """Create a fresh plugin without a context."""
    return LogicalPlugin()