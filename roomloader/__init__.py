"""
roomloader - builds runtime rooms from authored triangle-mesh scenes.

A room is a player start, convex collision brushes and spawn directives,
all derived from mesh geometry and the object naming convention:
``f.start``, ``nocollide.<name>`` and ``f.<type>(<arg>, ...)``.
"""

from .conversion.room_assembler import build_room, load_room
from .conversion.room_types import Convex, Mesh, Room, ThingDirective
from .conversion.plane_math import Plane
from .profiles.loader_profile import DirectivePolicy, LoaderProfile
from .validation.core import (
    DirectiveParseError,
    MalformedCall,
    MeshSourceError,
    RoomLoadError,
    UnterminatedString,
    ValidationResult,
)

__version__ = "1.0.0"

__all__ = [
    'build_room',
    'load_room',
    'Convex',
    'Mesh',
    'Plane',
    'Room',
    'ThingDirective',
    'DirectivePolicy',
    'LoaderProfile',
    'DirectiveParseError',
    'MalformedCall',
    'MeshSourceError',
    'RoomLoadError',
    'UnterminatedString',
    'ValidationResult',
]
