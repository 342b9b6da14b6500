"""
meshbuckets - Split a model's scene graph into render, collision and pick geometry

Classifies the nodes of an already-parsed 3D model by their names and merges
their triangles into semantically distinct buckets: visible geometry, coarse
collision geometry, fine pick geometry, and per-feature collision meshes for
doors and climbable surfaces.
"""

from meshbuckets.loader import load_geometry, load_geometry_file, geometry_from_buffers
from meshbuckets.schema import GeometryModel, NameTables, TriangleBuffer
from meshbuckets.schema.scene import SceneNode
from meshbuckets.geometry import merge_buffers

__version__ = "0.1.0"
__all__ = [
    "load_geometry",
    "load_geometry_file",
    "geometry_from_buffers",
    "GeometryModel",
    "NameTables",
    "TriangleBuffer",
    "SceneNode",
    "merge_buffers",
]
