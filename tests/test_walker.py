"""
Tests for scene traversal and bucket accumulation
"""
import pytest

from meshbuckets.geometry.classifier import Bucket, Classification
from meshbuckets.geometry.walker import SceneAccumulator, apply_classification, walk_scene
from meshbuckets.schema.buffers import TriangleBuffer
from meshbuckets.schema.scene import SceneNode
from meshbuckets.schema.tables import NameTables


def mesh(name, z=0.0):
    """Leaf geometry node holding one triangle at height z"""
    return SceneNode(name=name, kind="geometry", vertices=[(0, 0, z), (1, 0, z), (0, 1, z)], indices=[(0, 1, 2)])


def group(name, *children, invisible=False):
    return SceneNode(name=name, children=children, invisible=invisible)


def switched_root(*switch_children, switch_name="collisionswitch"):
    return group("root", group(switch_name, *switch_children))


class TestSwitchTraversal:
    """Test switch hierarchies"""

    def test_buckets_filled(self):
        root = switched_root(
            group("collidee", mesh("hull", 1)),
            group("pickee", mesh("sel", 2)),
            group("walls", mesh("w", 3)),
            group("Door_Main", group("Collidee", mesh("door", 4))),
            group("climb_wall", group("collidee", mesh("ladder", 5))),
        )
        acc = walk_scene([root])

        assert acc.collidee.triangle_count == 1
        assert acc.pickee.triangle_count == 1
        assert acc.visible.triangle_count == 1
        assert acc.visible.vertices[0][2] == 3
        assert set(acc.door_collidee) == {"Door_Main"}
        assert set(acc.climb_collidee) == {"climb_wall"}
        assert acc.has_root_switch is True
        assert acc.has_multiple_root is False
        assert acc.warnings == ()

    def test_door_collidee_not_in_top_level_collidee(self):
        """Test a door's nested collidee stays out of the collidee bucket"""
        acc = walk_scene([switched_root(group("Door_Main", group("Collidee", mesh("door"))))])
        assert acc.collidee.is_empty
        assert acc.door_collidee["Door_Main"].triangle_count == 1

    def test_missing_door_collidee(self):
        acc = walk_scene([switched_root(group("Door_Side", mesh("panel")))], source_name="keep")
        assert dict(acc.door_collidee) == {}
        assert len(acc.warnings) == 1
        assert "Door_Side" in acc.warnings[0]

    def test_invisible_child_warns(self):
        acc = walk_scene([switched_root(group("hidden", mesh("h"), invisible=True))])
        assert acc.visible.is_empty
        assert len(acc.warnings) == 1

    def test_visible_order_follows_traversal(self):
        """Test merged vertex order matches switch child order"""
        acc = walk_scene([switched_root(group("a", mesh("a", 1)), group("b", mesh("b", 2)), group("c", mesh("c", 3)))])
        assert [v[2] for v in acc.visible.vertices[::3]] == [1, 2, 3]
        assert acc.visible.indices == ((0, 1, 2), (3, 4, 5), (6, 7, 8))

    def test_dungswitch_any_case(self):
        acc = walk_scene([switched_root(group("collidee", mesh("hull")), switch_name="DungSwitch")])
        assert acc.collidee.triangle_count == 1
        assert acc.has_root_switch is True

    def test_leaf_switch_children_skipped(self):
        """Test that geometry leaves directly under a switch are not classified"""
        acc = walk_scene([switched_root(mesh("stray"), group("walls", mesh("w")))])
        assert acc.visible.triangle_count == 1
        assert acc.warnings == ()

    def test_duplicate_door_name_warns(self):
        root = switched_root(
            group("door1", group("collidee", mesh("first", 1))),
            group("door1", group("collidee", mesh("second", 2))),
        )
        acc = walk_scene([root], source_name="m")
        assert acc.door_collidee["door1"].vertices[0][2] == 1
        assert acc.warnings == ("Duplicate Collidee for door1 in Model : m",)

    def test_custom_tables(self):
        tables = NameTables(switch=("lodswitch",), collidee=("hull",))
        acc = walk_scene([switched_root(group("hull", mesh("h")), switch_name="LODSwitch")], tables)
        assert acc.collidee.triangle_count == 1


class TestDirectMesh:
    """Test scenes without a switch structure"""

    def test_no_switch_fallback(self):
        """Test non-switch root children go straight to visible"""
        root = group("root", group("house", mesh("walls", 1), group("roof", mesh("tiles", 2))), group("collidee", mesh("c", 3)))
        acc = walk_scene([root])

        assert acc.has_root_switch is False
        assert acc.visible.triangle_count == 3
        assert acc.collidee.is_empty

    def test_non_switch_child_clears_flag_for_whole_load(self):
        """Test the root switch flag stays cleared once a direct mesh is seen"""
        mixed = group("root", group("collisionswitch", group("collidee", mesh("c"))), group("props", mesh("p")))
        later = switched_root(group("collidee", mesh("c2")))
        acc = walk_scene([mixed, later])

        assert acc.has_root_switch is False
        assert acc.collidee.triangle_count == 2
        assert acc.visible.triangle_count == 1

    def test_empty_scene(self):
        acc = walk_scene([])
        assert acc.root_count == 0
        assert acc.has_multiple_root is False
        assert acc.has_root_switch is True
        assert acc.visible.is_empty


class TestRootCounting:
    """Test the multiple root flag"""

    def test_two_roots(self):
        roots = [switched_root(group("collidee", mesh("a"))), switched_root(group("pickee", mesh("b")))]
        acc = walk_scene(roots)
        assert acc.root_count == 2
        assert acc.has_multiple_root is True

    def test_single_root(self):
        acc = walk_scene([switched_root(group("collidee", mesh("a")))])
        assert acc.has_multiple_root is False


class TestAccumulator:
    """Test accumulator folding"""

    def test_apply_returns_new_value(self):
        buffer = TriangleBuffer(vertices=[(0, 0, 0), (1, 0, 0), (0, 1, 0)], indices=[(0, 1, 2)])
        start = SceneAccumulator()
        after = apply_classification(start, Classification(bucket=Bucket.pickee, buffer=buffer))

        assert start.pickee.is_empty
        assert after.pickee == buffer

    def test_apply_warning(self):
        after = apply_classification(SceneAccumulator(), Classification(bucket=Bucket.skipped, warning="w"))
        assert after.warnings == ("w",)

    def test_feature_map_is_read_only(self):
        buffer = TriangleBuffer(vertices=[(0, 0, 0)], indices=[(0, 0, 0)])
        acc = apply_classification(SceneAccumulator(), Classification(bucket=Bucket.door, key="door", buffer=buffer))
        with pytest.raises(TypeError):
            acc.door_collidee["other"] = buffer
