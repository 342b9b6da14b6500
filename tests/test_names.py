"""
Tests for node name matching and name tables
"""
import json
import pytest

from meshbuckets.exceptions import InvalidSourceError
from meshbuckets.geometry.names import matches_exact, matches_prefix
from meshbuckets.schema.tables import DEFAULT_NAME_TABLES, NameTables, TABLES_ENV_VAR, load_name_tables


class TestMatching:
    """Test exact and prefix matching"""

    @pytest.mark.parametrize("name", ["Collidee", "COLLIDEE", "collidee"])
    def test_exact_is_case_insensitive(self, name):
        assert matches_exact(name, DEFAULT_NAME_TABLES.collidee)

    def test_exact_rejects_longer_names(self):
        assert not matches_exact("collidee_01", DEFAULT_NAME_TABLES.collidee)
        assert not matches_exact("DoorSwitch", DEFAULT_NAME_TABLES.switch)

    def test_exact_matches_any_entry(self):
        assert matches_exact("DungSwitch", DEFAULT_NAME_TABLES.switch)
        assert matches_exact("CollisionSwitch", DEFAULT_NAME_TABLES.switch)

    def test_prefix_is_case_insensitive(self):
        assert matches_prefix("Door_Main", DEFAULT_NAME_TABLES.door)
        assert matches_prefix("CLIMB01", DEFAULT_NAME_TABLES.climb)

    def test_prefix_must_start_the_name(self):
        assert not matches_prefix("MainDoor", DEFAULT_NAME_TABLES.door)

    def test_not_drawable_prefixes(self):
        """Test the not-drawable table, including '!' entries"""
        for name in ["anim_flag", "Portal01", "BV", "bounding_box", "!LoD_cullme", "!visible_damaged2", "ShadowCaster"]:
            assert matches_prefix(name, DEFAULT_NAME_TABLES.not_drawable), name
        assert not matches_prefix("wall", DEFAULT_NAME_TABLES.not_drawable)

    def test_empty_table_matches_nothing(self):
        assert not matches_exact("collidee", ())
        assert not matches_prefix("door", ())


class TestNameTables:
    """Test name table configuration"""

    def test_defaults(self):
        tables = NameTables()
        assert tables.switch == ("collisionswitch", "dungswitch")
        assert tables.pickee == ("pickee",)
        assert tables.collidee == ("collidee",)
        assert tables.climb == ("climb",)
        assert tables.door == ("door",)
        assert "shadowcaster" in tables.not_drawable

    def test_load_from_file(self, tmp_path):
        path = tmp_path / "tables.json"
        path.write_text(json.dumps({"door": ["gate"]}))

        tables = load_name_tables(str(path))
        assert tables.door == ("gate",)
        assert tables.collidee == ("collidee",)

    def test_load_from_env(self, tmp_path, monkeypatch):
        path = tmp_path / "tables.json"
        path.write_text(json.dumps({"pickee": ["select"]}))
        monkeypatch.setenv(TABLES_ENV_VAR, str(path))

        assert load_name_tables().pickee == ("select",)

    def test_defaults_without_env(self, monkeypatch):
        monkeypatch.delenv(TABLES_ENV_VAR, raising=False)
        assert load_name_tables() == DEFAULT_NAME_TABLES

    def test_missing_file(self):
        with pytest.raises(FileNotFoundError):
            load_name_tables("/nonexistent/tables.json")

    def test_unknown_field_rejected(self, tmp_path):
        path = tmp_path / "tables.json"
        path.write_text(json.dumps({"windows": ["glass"]}))
        with pytest.raises(InvalidSourceError):
            load_name_tables(str(path))

    def test_invalid_json_rejected(self, tmp_path):
        path = tmp_path / "tables.json"
        path.write_text("{not json")
        with pytest.raises(InvalidSourceError):
            load_name_tables(str(path))
