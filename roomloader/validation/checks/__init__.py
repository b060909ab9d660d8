"""Optional geometry checks run on collision meshes."""

from .geometry_checks import check_degenerate_faces, check_mesh_winding, signed_volume

__all__ = [
    'check_degenerate_faces',
    'check_mesh_winding',
    'signed_volume',
]
