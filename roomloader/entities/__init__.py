"""Spawning game objects from room things."""

from .registry import EntityRegistry, ThingConfig, UnknownEntityType, spawn_things

__all__ = [
    'EntityRegistry',
    'ThingConfig',
    'UnknownEntityType',
    'spawn_things',
]
