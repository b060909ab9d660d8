"""Collision brush geometry: face planes and edge bevels."""

from .brush_builder import build_convex, face_planes
from .edge_bevel import EdgeKey, bevel_sharp_edges, collect_edge_normals

__all__ = [
    'build_convex',
    'face_planes',
    'EdgeKey',
    'bevel_sharp_edges',
    'collect_edge_normals',
]
