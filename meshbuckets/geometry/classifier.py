"""
Switch child classification.

Every direct child of a switch node ends in exactly one bucket. The rules are
evaluated in table order and the first rule whose name test passes decides:

1. door     - name starts with a door prefix; only its nested collidee is kept
2. climb    - name starts with a climb prefix; only its nested collidee is kept
3. collidee - name equals a collidee name; whole subtree goes to collision
4. pickee   - name equals a pickee name; whole subtree goes to picking
5. visible  - everything else, unless invisible or not drawable

A door named "Door_Main" holding a "Collidee" child is therefore a door
feature, never a top-level collidee.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional, Tuple

from meshbuckets.geometry.names import matches_exact, matches_prefix
from meshbuckets.geometry.node_access import (
    extract_triangles,
    node_is_invisible,
    node_name,
    structural_children,
)
from meshbuckets.schema.buffers import TriangleBuffer
from meshbuckets.schema.tables import DEFAULT_NAME_TABLES, NameTables

logger = logging.getLogger(__name__)

MISSING_COLLIDEE_WARNING = "Could not Load Collidee from {node} in Model : {source}"
INVISIBLE_NODE_WARNING = "Removed Invisible Node {node} in Model : {source}"


class Bucket(str, Enum):
    door = "door"
    climb = "climb"
    collidee = "collidee"
    pickee = "pickee"
    visible = "visible"
    skipped = "skipped"


@dataclass(frozen=True)
class Classification:
    """
    Outcome of classifying one switch child.

    Attributes:
        bucket: Destination bucket (skipped when nothing is registered)
        key: Feature name for door/climb entries, None otherwise
        buffer: Extracted geometry, None when skipped
        warning: Human-readable warning, None when the node was routed cleanly
    """
    bucket: Bucket
    key: Optional[str] = None
    buffer: Optional[TriangleBuffer] = None
    warning: Optional[str] = None


def _skip(node: Any, template: str, source_name: str) -> Classification:
    return Classification(
        bucket=Bucket.skipped,
        warning=template.format(node=node_name(node), source=source_name),
    )


def _feature(bucket: Bucket) -> Callable[[Any, NameTables, str], Classification]:
    def handle(node, tables, source_name):
        name = node_name(node)
        collidee_node = next(
            (child for child in structural_children(node) if matches_exact(node_name(child), tables.collidee)),
            None,
        )
        if collidee_node is None:
            return _skip(node, MISSING_COLLIDEE_WARNING, source_name)
        return Classification(bucket=bucket, key=name, buffer=extract_triangles(collidee_node))
    return handle


def _whole(bucket: Bucket) -> Callable[[Any, NameTables, str], Classification]:
    def handle(node, tables, source_name):
        return Classification(bucket=bucket, buffer=extract_triangles(node))
    return handle


def _visible(node, tables, source_name):
    if node_is_invisible(node) or matches_prefix(node_name(node), tables.not_drawable):
        return _skip(node, INVISIBLE_NODE_WARNING, source_name)
    return Classification(bucket=Bucket.visible, buffer=extract_triangles(node))


@dataclass(frozen=True)
class ClassificationRule:
    bucket: Bucket
    matches: Callable[[str, NameTables], bool]
    handle: Callable[[Any, NameTables, str], Classification]


# Order is precedence
CLASSIFICATION_RULES: Tuple[ClassificationRule, ...] = (
    ClassificationRule(Bucket.door, lambda name, t: matches_prefix(name, t.door), _feature(Bucket.door)),
    ClassificationRule(Bucket.climb, lambda name, t: matches_prefix(name, t.climb), _feature(Bucket.climb)),
    ClassificationRule(Bucket.collidee, lambda name, t: matches_exact(name, t.collidee), _whole(Bucket.collidee)),
    ClassificationRule(Bucket.pickee, lambda name, t: matches_exact(name, t.pickee), _whole(Bucket.pickee)),
    ClassificationRule(Bucket.visible, lambda name, t: True, _visible),
)


def classify_switch_child(
    node: Any,
    tables: NameTables = DEFAULT_NAME_TABLES,
    source_name: str = "",
    rules: Tuple[ClassificationRule, ...] = CLASSIFICATION_RULES,
) -> Classification:
    """
    Route one direct child of a switch node to its bucket.

    Pure: the node's geometry is extracted, but no bucket is modified. The
    caller folds the returned Classification into its accumulator.

    Args:
        node: Switch child node
        tables: Reference name tables
        source_name: Identifying name of the load, used in warnings
        rules: Ordered rule table, first match wins

    Returns:
        Classification for the node
    """
    name = node_name(node)
    for rule in rules:
        if rule.matches(name, tables):
            result = rule.handle(node, tables, source_name)
            logger.debug(f"Switch child {name!r} -> {result.bucket.value}")
            return result

    # The default visible rule always matches; only custom rule tables get here
    raise ValueError(f"No classification rule matched node {name!r}")
