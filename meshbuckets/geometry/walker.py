"""
Scene traversal.

Walks each root's direct structural children. A child whose name is a switch
name has each of its own structural children classified; any other child is
drawn directly into the visible bucket. Geometry below those two levels is not
walked node by node; it comes in bulk through each node's extract_triangles().
"""

import logging
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any, Iterable, Mapping, Tuple

from meshbuckets.geometry.buffers import merge_buffers
from meshbuckets.geometry.classifier import Bucket, Classification, classify_switch_child
from meshbuckets.geometry.names import matches_exact
from meshbuckets.geometry.node_access import extract_triangles, node_name, structural_children
from meshbuckets.schema.buffers import TriangleBuffer
from meshbuckets.schema.tables import DEFAULT_NAME_TABLES, NameTables

logger = logging.getLogger(__name__)

DUPLICATE_FEATURE_WARNING = "Duplicate Collidee for {node} in Model : {source}"


def _no_features() -> Mapping[str, TriangleBuffer]:
    return MappingProxyType({})


@dataclass(frozen=True)
class SceneAccumulator:
    """
    Bucket state threaded through a traversal.

    Each update returns a new accumulator; nothing is modified in place.
    """
    visible: TriangleBuffer = field(default_factory=TriangleBuffer.empty)
    collidee: TriangleBuffer = field(default_factory=TriangleBuffer.empty)
    pickee: TriangleBuffer = field(default_factory=TriangleBuffer.empty)
    door_collidee: Mapping[str, TriangleBuffer] = field(default_factory=_no_features)
    climb_collidee: Mapping[str, TriangleBuffer] = field(default_factory=_no_features)
    has_root_switch: bool = True
    root_count: int = 0
    warnings: Tuple[str, ...] = ()

    @property
    def has_multiple_root(self) -> bool:
        return self.root_count > 1

    def with_warning(self, message: str) -> "SceneAccumulator":
        logger.warning(message)
        return replace(self, warnings=self.warnings + (message,))

    def with_visible(self, buffer: TriangleBuffer) -> "SceneAccumulator":
        return replace(self, visible=merge_buffers(self.visible, buffer))


def _with_feature(acc: SceneAccumulator, attr: str, key: str, buffer: TriangleBuffer, source_name: str) -> SceneAccumulator:
    features = getattr(acc, attr)
    if key in features:
        return acc.with_warning(DUPLICATE_FEATURE_WARNING.format(node=key, source=source_name))
    updated = dict(features)
    updated[key] = buffer
    return replace(acc, **{attr: MappingProxyType(updated)})


def apply_classification(acc: SceneAccumulator, result: Classification, source_name: str = "") -> SceneAccumulator:
    """
    Fold one classification outcome into the accumulator.

    Args:
        acc: Current accumulator
        result: Outcome of classify_switch_child
        source_name: Identifying name of the load, used in warnings

    Returns:
        New accumulator
    """
    if result.bucket is Bucket.skipped:
        return acc.with_warning(result.warning)
    if result.bucket is Bucket.door:
        return _with_feature(acc, 'door_collidee', result.key, result.buffer, source_name)
    if result.bucket is Bucket.climb:
        return _with_feature(acc, 'climb_collidee', result.key, result.buffer, source_name)
    if result.bucket is Bucket.collidee:
        return replace(acc, collidee=merge_buffers(acc.collidee, result.buffer))
    if result.bucket is Bucket.pickee:
        return replace(acc, pickee=merge_buffers(acc.pickee, result.buffer))
    return acc.with_visible(result.buffer)


def walk_root(
    acc: SceneAccumulator,
    root: Any,
    tables: NameTables = DEFAULT_NAME_TABLES,
    source_name: str = "",
) -> SceneAccumulator:
    """Process one root node and count it."""
    for child in structural_children(root):
        if matches_exact(node_name(child), tables.switch):
            for switch_child in structural_children(child):
                result = classify_switch_child(switch_child, tables, source_name)
                acc = apply_classification(acc, result, source_name)
        else:
            # Direct drawn mesh, no switch hierarchy
            acc = replace(acc, has_root_switch=False).with_visible(extract_triangles(child))
    return replace(acc, root_count=acc.root_count + 1)


def walk_scene(
    roots: Iterable[Any],
    tables: NameTables = DEFAULT_NAME_TABLES,
    source_name: str = "",
) -> SceneAccumulator:
    """
    Classify the geometry of every root into buckets.

    Args:
        roots: Root nodes, in order
        tables: Reference name tables
        source_name: Identifying name of the load, used in warnings

    Returns:
        Final accumulator for the whole scene
    """
    acc = SceneAccumulator()
    for root in roots:
        logger.debug(f"Walking root {acc.root_count} ({node_name(root)!r}) of {source_name}")
        acc = walk_root(acc, root, tables, source_name)

    logger.info(
        f"Classified {source_name}: {acc.root_count} root(s), "
        f"{acc.visible.triangle_count} visible, {acc.collidee.triangle_count} collidee, "
        f"{acc.pickee.triangle_count} pickee triangles, "
        f"{len(acc.door_collidee)} door(s), {len(acc.climb_collidee)} climb(s), "
        f"{len(acc.warnings)} warning(s)"
    )
    return acc
