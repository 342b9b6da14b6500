"""
Scene graph node model.

A SceneNode is the decoded form of one node of a parsed 3D model: a name, an
ordered list of children, an invisibility flag and the node's own triangle
geometry. Structural nodes (kind "node") group other nodes; leaf geometry nodes
(kind "geometry") only carry triangles and are never classified on their own.

Transforms (`matrix`, or `translation`/`rotation`/`scale`) are LOCAL to the
parent. The JSON decoder bakes them so that every node it returns has its
geometry in scene space and no transform fields left; extract_triangles() never
applies transforms itself.
"""

from __future__ import annotations
from typing import Iterator, Literal, Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field, model_validator

from meshbuckets.schema.buffers import TriangleBuffer, TriangleIndex, Vec3, check_triangle_indices

Vec4 = Tuple[float, float, float, float]
Quat4 = Tuple[float, float, float, float]  # [w, x, y, z]


class SceneNode(BaseModel):
    model_config = ConfigDict(extra='forbid', frozen=True)

    name: str = Field(..., description="Node name used for classification.")
    kind: Literal['node', 'geometry'] = Field('node', description="Structural node or leaf geometry.")
    invisible: bool = Field(False, description="Node is flagged hidden in the source file.")
    children: Tuple[SceneNode, ...] = Field(default=(), description="Ordered child nodes.")
    vertices: Tuple[Vec3, ...] = Field(default=(), description="Own vertex positions.")
    indices: Tuple[TriangleIndex, ...] = Field(default=(), description="Own triangles, indexing own vertices.")
    normals: Optional[Tuple[Vec3, ...]] = Field(None, description="Own per-vertex normals.")
    matrix: Optional[Tuple[Vec4, Vec4, Vec4, Vec4]] = Field(None, description="LOCAL 4x4 row-major transform.")
    translation: Optional[Vec3] = Field(None, description="LOCAL translation (when no matrix).")
    rotation: Optional[Quat4] = Field(None, description="LOCAL rotation quaternion [w, x, y, z] (when no matrix).")
    scale: Optional[Vec3] = Field(None, description="LOCAL scale (when no matrix).")

    @model_validator(mode='after')
    def validate_geometry(self):
        check_triangle_indices(self.vertices, self.indices, self.normals)
        if self.matrix is not None and any(v is not None for v in (self.translation, self.rotation, self.scale)):
            raise ValueError("Use either 'matrix' or 'translation'/'rotation'/'scale', not both")
        return self

    @property
    def is_invisible(self) -> bool:
        return self.invisible

    @property
    def is_structural(self) -> bool:
        return self.kind == 'node'

    @property
    def has_transform(self) -> bool:
        return any(v is not None for v in (self.matrix, self.translation, self.rotation, self.scale))

    def own_triangles(self) -> TriangleBuffer:
        """Geometry attached to this node only."""
        if not self.vertices and not self.indices:
            return TriangleBuffer.empty()
        # Already checked by validate_geometry
        return TriangleBuffer.model_construct(vertices=self.vertices, indices=self.indices, normals=self.normals)

    def walk(self) -> Iterator[SceneNode]:
        """Yield this node and all descendants, pre-order."""
        yield self
        for child in self.children:
            yield from child.walk()

    def extract_triangles(self) -> TriangleBuffer:
        """
        Merged geometry of this node and every descendant, in pre-order.

        Same result as folding each node's own triangles through merge_buffers,
        built in one pass. Normals are kept only if every node with geometry
        carries them.
        """
        vertices, indices, normals = [], [], []
        keep_normals = True
        for node in self.walk():
            if not node.vertices and not node.indices:
                continue
            offset = len(vertices)
            vertices.extend(node.vertices)
            indices.extend((i0 + offset, i1 + offset, i2 + offset) for i0, i1, i2 in node.indices)
            if node.normals is None:
                keep_normals = False
            elif keep_normals:
                normals.extend(node.normals)

        if not vertices:
            return TriangleBuffer.empty()
        return TriangleBuffer.model_construct(
            vertices=tuple(vertices),
            indices=tuple(indices),
            normals=tuple(normals) if keep_normals else None,
        )

    def find(self, name: str) -> Optional[SceneNode]:
        """First node in this subtree with the given name (case-sensitive)."""
        return next((node for node in self.walk() if node.name == name), None)


SceneNode.model_rebuild()
