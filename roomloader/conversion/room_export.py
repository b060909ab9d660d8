"""
Room export utilities.

Export a loaded Room for:
- JSON for external tools and inspection
- Per-type thing counts for statistics
"""

import json
from typing import Any, Dict

from .room_types import Room


def room_to_dict(room: Room) -> Dict[str, Any]:
    """
    Convert a Room to plain JSON-serializable data.

    Colliders are lists of planes, things carry their type name,
    position and positional config.
    """
    return {
        'start': list(room.start),
        'colliders': [
            [
                {'normal': list(plane.normal), 'dist': plane.dist}
                for plane in convex.planes
            ]
            for convex in room.colliders
        ],
        'things': [
            {
                'type': thing.type_name,
                'position': {
                    'x': thing.pos[0],
                    'y': thing.pos[1],
                    'z': thing.pos[2],
                },
                'config': dict(thing.config),
            }
            for thing in room.things
        ],
    }


def export_room_to_json(room: Room, indent: int = 2) -> str:
    """Export a Room as a JSON string."""
    return json.dumps(room_to_dict(room), indent=indent)


def count_things_by_type(room: Room) -> Dict[str, int]:
    """
    Count spawn directives by type name.

    Returns:
        Dict mapping type name to count, in first-seen order
    """
    counts: Dict[str, int] = {}
    for thing in room.things:
        counts[thing.type_name] = counts.get(thing.type_name, 0) + 1
    return counts
