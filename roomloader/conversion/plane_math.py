"""
Plane geometry for collision brushes.

Primary representation: unit normal + distance from origin, where
``dot(normal, p) <= dist`` is the inside half-space.  Also provides the
small tuple-based vector helpers shared by the brush builder and the edge
beveler, and the strict total order on points used for edge keys.
"""

from __future__ import annotations
import math
from dataclasses import dataclass
from typing import Tuple

Vec3 = Tuple[float, float, float]

EPSILON = 1e-6


def _cross(a: Vec3, b: Vec3) -> Vec3:
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def _dot(a: Vec3, b: Vec3) -> float:
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2]


def _sub(a: Vec3, b: Vec3) -> Vec3:
    return (a[0] - b[0], a[1] - b[1], a[2] - b[2])


def _add(a: Vec3, b: Vec3) -> Vec3:
    return (a[0] + b[0], a[1] + b[1], a[2] + b[2])


def _length(v: Vec3) -> float:
    return math.sqrt(v[0] * v[0] + v[1] * v[1] + v[2] * v[2])


def _normalize(v: Vec3) -> Vec3:
    # Only an exact zero vector has no direction; tiny faces still do
    ln = _length(v)
    if ln == 0.0:
        return (0.0, 0.0, 1.0)
    return (v[0] / ln, v[1] / ln, v[2] / ln)


def is_degenerate(v: Vec3) -> bool:
    """True when ``v``, a sum of unit vectors, is too short to give a direction."""
    return _length(v) < EPSILON


def triangle_normal(a: Vec3, b: Vec3, c: Vec3) -> Vec3:
    """Unit normal of triangle ABC by the right-hand rule: normalize((B-A) x (C-A))."""
    return _normalize(_cross(_sub(b, a), _sub(c, a)))


def point_less(a: Vec3, b: Vec3) -> bool:
    """Strict lexicographic order on x, then y, then z.

    Exact float comparison, no tolerance.
    """
    if a[0] != b[0]:
        return a[0] < b[0]
    if a[1] != b[1]:
        return a[1] < b[1]
    return a[2] < b[2]


@dataclass(frozen=True)
class Plane:
    """A half-space bounding a convex collision volume.

    Attributes:
        normal: Unit normal pointing out of the volume
        dist: Offset so that points on the plane satisfy dot(normal, p) == dist
    """

    normal: Vec3 = (0.0, 0.0, 1.0)
    dist: float = 0.0

    # ---------------------------------------------------------------
    # Constructors
    # ---------------------------------------------------------------

    @classmethod
    def from_three_points(cls, p1: Vec3, p2: Vec3, p3: Vec3) -> "Plane":
        """Compute plane from three points (winding order matters).

        The normal is taken by the right-hand rule, so counter-clockwise
        points seen from outside give an outward normal.
        """
        normal = triangle_normal(p1, p2, p3)
        return cls(normal=normal, dist=_dot(normal, p1))

    @classmethod
    def from_normal_point(cls, normal: Vec3, point: Vec3) -> "Plane":
        """Plane through ``point`` with the normalized direction of ``normal``."""
        normal = _normalize(normal)
        return cls(normal=normal, dist=_dot(normal, point))

    # ---------------------------------------------------------------
    # Queries
    # ---------------------------------------------------------------

    def distance_to(self, point: Vec3) -> float:
        """Signed distance from the plane; negative is inside."""
        return _dot(self.normal, point) - self.dist

    def contains(self, point: Vec3, epsilon: float = EPSILON) -> bool:
        """True if ``point`` lies in the inside half-space (or on the plane)."""
        return self.distance_to(point) <= epsilon
