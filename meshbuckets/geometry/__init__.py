"""Geometry classification: buffer merging, name matching and scene traversal"""

from meshbuckets.geometry.buffers import merge_buffers, merge_all
from meshbuckets.geometry.names import matches_exact, matches_prefix
from meshbuckets.geometry.classifier import (
    Bucket,
    Classification,
    ClassificationRule,
    CLASSIFICATION_RULES,
    classify_switch_child,
)
from meshbuckets.geometry.walker import SceneAccumulator, apply_classification, walk_scene

__all__ = [
    "merge_buffers",
    "merge_all",
    "matches_exact",
    "matches_prefix",
    "Bucket",
    "Classification",
    "ClassificationRule",
    "CLASSIFICATION_RULES",
    "classify_switch_child",
    "SceneAccumulator",
    "apply_classification",
    "walk_scene",
]
