"""
Entity registry: spawns game objects from a room's things.

Factories are registered under the type name used in ``f.<type>(...)``
object names and receive a ThingConfig giving typed access to the
positional arguments.
"""

from __future__ import annotations
import logging
from collections.abc import Mapping
from typing import Any, Callable, Dict, Iterator, List, Tuple

from ..conversion.room_types import Room, ThingDirective

logger = logging.getLogger(__name__)

EntityFactory = Callable[["ThingConfig"], Any]

_MISSING = object()


class UnknownEntityType(KeyError):
    """No factory is registered for a thing's type name."""


class ThingConfig(Mapping):
    """Read-only view of a directive's positional arguments.

    Keys are "0", "1", ... in argument order.  The directive itself is
    available as ``thing`` so factories can read its position.
    """

    def __init__(self, thing: ThingDirective):
        self.thing = thing
        self._values = dict(thing.config)

    def __getitem__(self, key: str) -> str:
        return self._values[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def get_string(self, key: str, default: Any = _MISSING) -> str:
        """
        Argument ``key`` as text.

        Raises:
            KeyError: The argument is absent and no default was given
        """
        if key in self._values:
            return self._values[key]
        if default is _MISSING:
            raise KeyError(f"'{self.thing.type_name}' has no argument {key}")
        return default

    def get_int(self, key: str, default: Any = _MISSING) -> int:
        """
        Argument ``key`` as an integer.

        Raises:
            KeyError: The argument is absent and no default was given
            ValueError: The argument is not an integer
        """
        if key not in self._values:
            if default is _MISSING:
                raise KeyError(f"'{self.thing.type_name}' has no argument {key}")
            return default
        value = self._values[key]
        try:
            return int(value)
        except ValueError:
            raise ValueError(
                f"'{self.thing.type_name}' argument {key} is not an integer: '{value}'"
            ) from None


class EntityRegistry:
    """Registry mapping type names to entity factories."""

    def __init__(self):
        self._factories: Dict[str, EntityFactory] = {}

    def register(self, type_name: str, factory: EntityFactory) -> None:
        """
        Register a factory for a type name.

        Registering a name twice replaces the earlier factory.
        """
        if type_name in self._factories:
            logger.warning("Entity type '%s' registered twice, replacing", type_name)
        self._factories[type_name] = factory

    def entity(self, type_name: str) -> Callable[[EntityFactory], EntityFactory]:
        """Decorator form of register()."""
        def decorator(factory: EntityFactory) -> EntityFactory:
            self.register(type_name, factory)
            return factory
        return decorator

    def __contains__(self, type_name: str) -> bool:
        return type_name in self._factories

    def list_types(self) -> List[str]:
        """Sorted list of registered type names."""
        return sorted(self._factories.keys())

    def create(self, thing: ThingDirective) -> Any:
        """
        Build the object a directive asks for.

        Raises:
            UnknownEntityType: No factory for thing.type_name
        """
        factory = self._factories.get(thing.type_name)
        if factory is None:
            raise UnknownEntityType(thing.type_name)
        return factory(ThingConfig(thing))


def spawn_things(
    room: Room,
    registry: EntityRegistry,
    skip_unknown: bool = False,
) -> List[Tuple[ThingDirective, Any]]:
    """
    Create every thing of a room, in room order.

    Args:
        room: Loaded room
        registry: Factories by type name
        skip_unknown: Log and skip unknown types instead of raising

    Returns:
        (directive, created object) pairs

    Raises:
        UnknownEntityType: An unknown type was met and skip_unknown is False
    """
    spawned: List[Tuple[ThingDirective, Any]] = []
    for thing in room.things:
        if skip_unknown and thing.type_name not in registry:
            logger.warning("No entity type '%s', skipping thing at %s", thing.type_name, thing.pos)
            continue
        spawned.append((thing, registry.create(thing)))

    logger.info("Spawned %d of %d things", len(spawned), len(room.things))
    return spawned
