"""
LoaderProfile dataclass: the tunable constants of a room load.

A profile names every value the loader would otherwise hard-code: the
fallback start point, the sharp-edge cutoff, the naming-convention
prefixes and the policy applied to malformed spawn directives.  The
defaults match the naming convention used by existing level content.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Tuple

# Player start used when a room has no f.start marker
DEFAULT_START: Tuple[int, int, int] = (0, 0, 2)

# Edges whose incident normals have dot(N1, N2) above this are left unbeveled
SHARP_EDGE_DOT = 0.0

START_PREFIX = "f.start"
DECORATION_PREFIX = "nocollide."
DIRECTIVE_PREFIX = "f."


class DirectivePolicy(Enum):
    """What to do with a spawn directive that fails to parse."""
    RAISE = "raise"
    SKIP = "skip"

    def __str__(self) -> str:
        return self.value


@dataclass
class LoaderProfile:
    """
    Configuration for building a Room from meshes.

    Attributes:
        name: Display name of the profile
        default_start: Start grid point used without a start marker
        sharp_edge_dot: Bevel cutoff, edges with dot(N1, N2) > cutoff are skipped
        start_prefix: Name prefix of the start marker
        decoration_prefix: Name prefix of non-colliding decoration
        directive_prefix: Name prefix of spawn directives
        directive_policy: RAISE aborts the load on a bad directive, SKIP drops it
        bevel_edges: Add bevel planes at sharp edges
        check_winding: Run the optional winding/degenerate-face checks
        y_up_source: Convert Y-up OBJ coordinates to the room's Z-up frame
    """

    name: str = "default"
    default_start: Tuple[int, int, int] = DEFAULT_START
    sharp_edge_dot: float = SHARP_EDGE_DOT

    # Naming convention. Classification tests start, decoration, directive in that order.
    start_prefix: str = START_PREFIX
    decoration_prefix: str = DECORATION_PREFIX
    directive_prefix: str = DIRECTIVE_PREFIX

    directive_policy: DirectivePolicy = DirectivePolicy.RAISE
    bevel_edges: bool = True
    check_winding: bool = False
    y_up_source: bool = True

    def __post_init__(self):
        self.default_start = tuple(int(c) for c in self.default_start)
        if len(self.default_start) != 3:
            raise ValueError(f"default_start needs 3 coordinates, got {self.default_start}")
        if not isinstance(self.directive_policy, DirectivePolicy):
            self.directive_policy = DirectivePolicy(self.directive_policy)


def get_default_profile() -> LoaderProfile:
    """A fresh profile with the stock settings."""
    return LoaderProfile()
