"""
Triangle buffer merging.

Buckets accumulate geometry by repeated pairwise merge in traversal order, so
the merged vertex and index order always matches the order nodes were visited.
"""

from typing import Iterable

from meshbuckets.schema.buffers import TriangleBuffer


def merge_buffers(a: TriangleBuffer, b: TriangleBuffer) -> TriangleBuffer:
    """
    Concatenate two buffers into a new one.

    Vertices of `b` follow the vertices of `a`; every index of `b` is offset by
    the vertex count of `a` so it still points at the same position.

    Args:
        a: First buffer
        b: Second buffer

    Returns:
        Merged buffer. When either operand is empty the other one is
        returned unchanged.

    Example:
        >>> a = TriangleBuffer(vertices=[(0, 0, 0), (1, 0, 0)], indices=[(0, 1, 0)])
        >>> b = TriangleBuffer(vertices=[(0, 0, 1), (1, 0, 1), (0, 1, 1)], indices=[(0, 1, 2)])
        >>> merge_buffers(a, b).indices
        ((0, 1, 0), (2, 3, 4))
    """
    if b.is_empty:
        return a
    if a.is_empty:
        return b

    offset = len(a.vertices)
    indices = a.indices + tuple((i0 + offset, i1 + offset, i2 + offset) for i0, i1, i2 in b.indices)

    # Normals only stay meaningful when every merged vertex has one
    normals = None
    if a.normals is not None and b.normals is not None:
        normals = a.normals + b.normals

    # Both operands are already validated and rebasing keeps indices in range
    return TriangleBuffer.model_construct(
        vertices=a.vertices + b.vertices,
        indices=indices,
        normals=normals,
    )


def merge_all(buffers: Iterable[TriangleBuffer]) -> TriangleBuffer:
    """Fold buffers left-to-right starting from the empty buffer."""
    result = TriangleBuffer.empty()
    for buffer in buffers:
        result = merge_buffers(result, buffer)
    return result
