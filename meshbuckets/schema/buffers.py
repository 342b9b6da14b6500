"""
Triangle buffer value type.

A TriangleBuffer is the flat vertex + index representation of a triangle mesh
handed between the scene decoder, the classifier and downstream consumers
(renderer, navmesh builder). Buffers are immutable: every operation that
combines them returns a new buffer.

INVARIANTS:
- Every index of every triangle is a valid offset into `vertices`.
- When `normals` is present it holds exactly one normal per vertex.
- The empty buffer (no vertices, no indices) is the identity for merging.
"""

from __future__ import annotations
from typing import Iterator, Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt, model_validator

# Type aliases for better readability
Vec3 = Tuple[float, float, float]
TriangleIndex = Tuple[NonNegativeInt, NonNegativeInt, NonNegativeInt]


def check_triangle_indices(vertices, indices, normals=None) -> None:
    """
    Validate that triangle indices and normals fit the vertex list.

    Raises:
        ValueError: If an index is out of range or the normal count differs
    """
    count = len(vertices)
    for triangle in indices:
        if any(i >= count for i in triangle):
            raise ValueError(f"Triangle {tuple(triangle)} references a vertex outside 0..{count - 1}")
    if normals is not None and len(normals) != count:
        raise ValueError(f"Expected {count} normals, got {len(normals)}")


class TriangleBuffer(BaseModel):
    """
    Ordered vertex sequence plus ordered triangle-index sequence.

    Example:
        >>> quad = TriangleBuffer(
        ...     vertices=[(0, 0, 0), (1, 0, 0), (1, 1, 0), (0, 1, 0)],
        ...     indices=[(0, 1, 2), (0, 2, 3)],
        ... )
        >>> quad.triangle_count
        2
    """
    model_config = ConfigDict(extra='forbid', frozen=True)

    vertices: Tuple[Vec3, ...] = Field(default=(), description="Vertex positions in scene space.")
    indices: Tuple[TriangleIndex, ...] = Field(default=(), description="Triangles as (i0, i1, i2) offsets into vertices.")
    normals: Optional[Tuple[Vec3, ...]] = Field(None, description="Optional per-vertex normals, parallel to vertices.")

    @model_validator(mode='after')
    def validate_indices(self):
        check_triangle_indices(self.vertices, self.indices, self.normals)
        return self

    @classmethod
    def empty(cls) -> "TriangleBuffer":
        """Return the empty buffer (merge identity)."""
        return _EMPTY

    @property
    def is_empty(self) -> bool:
        return not self.vertices and not self.indices

    @property
    def vertex_count(self) -> int:
        return len(self.vertices)

    @property
    def triangle_count(self) -> int:
        return len(self.indices)

    def triangles(self) -> Iterator[Tuple[Vec3, Vec3, Vec3]]:
        """Yield each triangle as its three vertex positions, in index order."""
        for i0, i1, i2 in self.indices:
            yield self.vertices[i0], self.vertices[i1], self.vertices[i2]

    def bounds(self) -> Optional[Tuple[Vec3, Vec3]]:
        """
        Axis-aligned bounding box of all vertices.

        Returns:
            (min_corner, max_corner), or None when the buffer has no vertices
        """
        if not self.vertices:
            return None
        lo = tuple(min(v[i] for v in self.vertices) for i in range(3))
        hi = tuple(max(v[i] for v in self.vertices) for i in range(3))
        return lo, hi


_EMPTY = TriangleBuffer()
