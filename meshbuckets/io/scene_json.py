"""
JSON scene graph decoder.

Turns a JSON scene document into SceneNode roots ready for classification.

Document shape:
    {
      "roots": [
        {
          "name": "root",
          "children": [
            {"name": "collisionswitch", "children": [
              {"name": "collidee", "children": [
                {"name": "hull", "kind": "geometry",
                 "vertices": [[0, 0, 0], [1, 0, 0], [0, 1, 0]],
                 "indices": [[0, 1, 2]]}
              ]}
            ]}
          ]
        }
      ]
    }

A bare list of root nodes is accepted as well. Local transforms ("matrix", or
"translation"/"rotation"/"scale") are baked into each node's vertices and
normals during decoding, so returned nodes carry scene-space geometry only.
"""

import json
import logging
from typing import Optional, Tuple, Union
from pydantic import ValidationError

from meshbuckets.exceptions import SceneDecodeError
from meshbuckets.io.transforms import Matrix4, compose_trs, multiply, transform_normal, transform_point
from meshbuckets.schema.scene import SceneNode

logger = logging.getLogger(__name__)


def decode_scene(content: Union[bytes, bytearray, str]) -> Tuple[SceneNode, ...]:
    """
    Decode a JSON scene document into root nodes.

    Args:
        content: UTF-8 JSON bytes or JSON string

    Returns:
        Root SceneNodes, in document order, with transforms baked

    Raises:
        SceneDecodeError: If the content is not JSON or not a valid scene
    """
    try:
        if isinstance(content, (bytes, bytearray)):
            content = bytes(content).decode('utf-8')
        data = json.loads(content)
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise SceneDecodeError(f"Scene content is not valid JSON: {e}") from e

    if isinstance(data, dict):
        if 'roots' not in data:
            raise SceneDecodeError("Scene document has no 'roots' list")
        raw_roots = data['roots']
    else:
        raw_roots = data

    if not isinstance(raw_roots, list):
        raise SceneDecodeError(f"Scene roots must be a list, got {type(raw_roots).__name__}")

    roots = []
    for idx, raw in enumerate(raw_roots):
        try:
            node = SceneNode.model_validate(raw)
        except ValidationError as e:
            raise SceneDecodeError(f"Invalid scene root {idx}: {e}") from e
        roots.append(bake_transforms(node))

    logger.debug(f"Decoded scene with {len(roots)} root(s)")
    return tuple(roots)


def _local_matrix(node: SceneNode) -> Optional[Matrix4]:
    if node.matrix is not None:
        return node.matrix
    if node.has_transform:
        return compose_trs(node.translation, node.rotation, node.scale)
    return None


def bake_transforms(node: SceneNode, parent: Optional[Matrix4] = None) -> SceneNode:
    """
    Apply accumulated transforms to a node subtree.

    Args:
        node: Node with LOCAL transforms
        parent: Scene-space matrix of the node's parent, None for identity

    Returns:
        Equivalent node tree with scene-space geometry and no transform fields
    """
    local = _local_matrix(node)
    if local is None:
        world = parent
    elif parent is None:
        world = local
    else:
        world = multiply(parent, local)

    vertices = node.vertices
    normals = node.normals
    if world is not None:
        vertices = tuple(transform_point(world, v) for v in vertices)
        if normals is not None:
            normals = tuple(transform_normal(world, n) for n in normals)

    return node.model_copy(update={
        "vertices": vertices,
        "normals": normals,
        "children": tuple(bake_transforms(child, world) for child in node.children),
        "matrix": None,
        "translation": None,
        "rotation": None,
        "scale": None,
    })
