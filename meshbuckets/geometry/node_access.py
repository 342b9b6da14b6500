"""
Scene node accessors

Helper functions for reading scene nodes consistently whether they are
SceneNode models, other objects exposing the node attributes, or plain dicts.

A node exposes:
- name: str
- children: ordered sequence of nodes
- is_invisible: bool
- is_structural: bool (optional, defaults to True; False for leaf geometry)
- extract_triangles(): TriangleBuffer covering the node and its descendants
"""

from typing import Any, List

from meshbuckets.schema.buffers import TriangleBuffer


def get_field(node: Any, field_name: str, default: Any = None) -> Any:
    """
    Get field from either object or dict format

    Args:
        node: Object or dict to extract field from
        field_name: Name of field to extract
        default: Default value if field not found

    Returns:
        Field value or default
    """
    if node is None:
        return default

    # Try object attribute first
    if hasattr(node, field_name):
        value = getattr(node, field_name)
        return value if value is not None else default

    # Fall back to dict access
    if isinstance(node, dict):
        value = node.get(field_name, default)
        return value if value is not None else default

    return default


def node_name(node: Any) -> str:
    return get_field(node, 'name', '')


def node_is_invisible(node: Any) -> bool:
    return bool(get_field(node, 'is_invisible', False))


def node_is_structural(node: Any) -> bool:
    return bool(get_field(node, 'is_structural', True))


def structural_children(node: Any) -> List[Any]:
    """Direct children that are structural nodes, in order (leaf geometry is skipped)."""
    return [child for child in get_field(node, 'children', []) if node_is_structural(child)]


def extract_triangles(node: Any) -> TriangleBuffer:
    """
    Extract the node's triangle geometry, descendants included.

    Raises:
        TypeError: If the node has no extract_triangles operation
    """
    extractor = get_field(node, 'extract_triangles')
    if extractor is None or not callable(extractor):
        raise TypeError(f"Node {node_name(node)!r} does not provide extract_triangles()")
    return extractor()
