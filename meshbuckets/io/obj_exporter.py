"""
Wavefront OBJ export of triangle buffers.

OBJ indices are 1-based; buffers are 0-based, so every index is shifted by one
on the way out. Normals, when present, share the vertex numbering.
"""

import logging
from typing import Optional

from meshbuckets.schema.buffers import TriangleBuffer

logger = logging.getLogger(__name__)


def _fmt(value: float) -> str:
    return f"{value:.6f}"


def export_obj(buffer: TriangleBuffer, object_name: Optional[str] = None) -> str:
    """
    Serialize a buffer as OBJ text.

    Args:
        buffer: Geometry to write
        object_name: Optional "o" statement name

    Returns:
        OBJ file contents

    Example:
        >>> tri = TriangleBuffer(vertices=[(0, 0, 0), (1, 0, 0), (0, 1, 0)], indices=[(0, 1, 2)])
        >>> print(export_obj(tri).splitlines()[-1])
        f 1 2 3
    """
    lines = [
        "# meshbuckets OBJ export",
        f"# {buffer.vertex_count} vertices, {buffer.triangle_count} triangles",
    ]
    if object_name:
        lines.append(f"o {object_name}")

    for x, y, z in buffer.vertices:
        lines.append(f"v {_fmt(x)} {_fmt(y)} {_fmt(z)}")

    has_normals = buffer.normals is not None
    if has_normals:
        for x, y, z in buffer.normals:
            lines.append(f"vn {_fmt(x)} {_fmt(y)} {_fmt(z)}")

    for triangle in buffer.indices:
        refs = [i + 1 for i in triangle]
        if has_normals:
            lines.append("f " + " ".join(f"{r}//{r}" for r in refs))
        else:
            lines.append("f " + " ".join(str(r) for r in refs))

    logger.debug(f"Exported OBJ with {buffer.vertex_count} vertices, {buffer.triangle_count} triangles")
    return "\n".join(lines) + "\n"
