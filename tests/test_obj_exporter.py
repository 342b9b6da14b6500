"""
Tests for OBJ export
"""
from meshbuckets.io.obj_exporter import export_obj
from meshbuckets.schema.buffers import TriangleBuffer


class TestExportObj:
    """Test OBJ serialization"""

    def test_indices_are_one_based(self):
        quad = TriangleBuffer(
            vertices=[(0, 0, 0), (1, 0, 0), (1, 1, 0), (0, 1, 0)],
            indices=[(0, 1, 2), (0, 2, 3)],
        )
        lines = export_obj(quad, object_name="quad").splitlines()

        assert "o quad" in lines
        assert [l for l in lines if l.startswith("v ")][2] == "v 1.000000 1.000000 0.000000"
        assert [l for l in lines if l.startswith("f ")] == ["f 1 2 3", "f 1 3 4"]

    def test_normals_written(self):
        tri = TriangleBuffer(
            vertices=[(0, 0, 0), (1, 0, 0), (0, 1, 0)],
            indices=[(0, 1, 2)],
            normals=[(0, 0, 1)] * 3,
        )
        text = export_obj(tri)
        assert text.count("\nvn ") == 3
        assert "f 1//1 2//2 3//3" in text

    def test_empty_buffer(self):
        text = export_obj(TriangleBuffer.empty())
        assert "0 vertices, 0 triangles" in text
        assert "\nv " not in text
        assert text.endswith("\n")
