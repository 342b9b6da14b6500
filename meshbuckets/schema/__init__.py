"""Geometry schema definitions."""
from .buffers import TriangleBuffer, TriangleIndex, Vec3
from .tables import NameTables, DEFAULT_NAME_TABLES, load_name_tables
from .geometry_model import GeometryModel

__all__ = [
    "TriangleBuffer",
    "TriangleIndex",
    "Vec3",
    "NameTables",
    "DEFAULT_NAME_TABLES",
    "load_name_tables",
    "GeometryModel",
]
