"""
Mesh role classification from object names.

Prefixes are tested in a fixed order and the first match wins:
``f.start`` before ``nocollide.`` before ``f.``; anything else collides.
Matching is case-sensitive and anchored at the start of the name.
"""

from __future__ import annotations
from enum import Enum, auto
from typing import Optional

from ..profiles.loader_profile import LoaderProfile, get_default_profile


class MeshRole(Enum):
    """What a mesh contributes to the room."""
    START = auto()
    DECORATION = auto()
    DIRECTIVE = auto()
    COLLIDER = auto()

    def __str__(self) -> str:
        return self.name.lower()


def classify_mesh(name: str, profile: Optional[LoaderProfile] = None) -> MeshRole:
    """
    Decide the role of a mesh from its name.

    Args:
        name: Object name as exported by the modeling tool
        profile: Supplies the prefixes; the default profile if omitted

    Returns:
        The MeshRole of the first prefix rule that matches
    """
    profile = profile or get_default_profile()

    if name.startswith(profile.start_prefix):
        return MeshRole.START
    if name.startswith(profile.decoration_prefix):
        return MeshRole.DECORATION
    if name.startswith(profile.directive_prefix):
        return MeshRole.DIRECTIVE
    return MeshRole.COLLIDER


def directive_text(name: str, profile: Optional[LoaderProfile] = None) -> str:
    """The call expression following the directive prefix."""
    profile = profile or get_default_profile()
    return name[len(profile.directive_prefix):]
