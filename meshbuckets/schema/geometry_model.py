"""
Classified geometry of one loaded model.

A GeometryModel is built once from a scene and is read-only afterwards. It is
what downstream consumers receive: the renderer draws `visible`, the navmesh
builder rasterizes `visible` and `collidee`, picking uses `pickee`, and each
door/climb feature carries its own collision mesh keyed by the feature's node
name.
"""

from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field, field_validator

from meshbuckets.exceptions import UnknownBucketError
from meshbuckets.schema.buffers import TriangleBuffer

BUCKET_NAMES = ('visible', 'collidee', 'pickee', 'door', 'climb')


class GeometryModel(BaseModel):
    model_config = ConfigDict(extra='forbid', frozen=True)

    name: str = Field(..., min_length=1, description="Identifying name of the load (usually the source file name).")
    visible: TriangleBuffer = Field(default_factory=TriangleBuffer.empty, description="Render geometry.")
    collidee: TriangleBuffer = Field(default_factory=TriangleBuffer.empty, description="Coarse collision geometry.")
    pickee: TriangleBuffer = Field(default_factory=TriangleBuffer.empty, description="Fine-grained pick geometry.")
    door_collidee: Mapping[str, TriangleBuffer] = Field(default_factory=dict, validate_default=True, description="Door collision meshes by door node name.")
    climb_collidee: Mapping[str, TriangleBuffer] = Field(default_factory=dict, validate_default=True, description="Climb collision meshes by climb node name.")
    has_root_switch: bool = Field(False, description="Geometry came from a switch hierarchy rather than a direct mesh.")
    has_multiple_root: bool = Field(False, description="Scene had more than one root node.")
    warnings: Tuple[str, ...] = Field(default=(), description="Data-quality warnings collected during loading, in order.")

    @field_validator('door_collidee', 'climb_collidee', mode='after')
    @classmethod
    def freeze_features(cls, v):
        # frozen=True only blocks attribute assignment, not item assignment
        return MappingProxyType(dict(v))

    def bucket(self, kind: str, feature: Optional[str] = None) -> TriangleBuffer:
        """
        Look up one bucket by name.

        Args:
            kind: 'visible', 'collidee', 'pickee', 'door' or 'climb'
            feature: Feature node name, required for 'door' and 'climb'

        Returns:
            TriangleBuffer for the bucket

        Raises:
            UnknownBucketError: If the bucket or feature does not exist
        """
        kind = kind.lower()
        if kind in ('visible', 'collidee', 'pickee'):
            return getattr(self, kind)
        if kind in ('door', 'climb'):
            features = self.door_collidee if kind == 'door' else self.climb_collidee
            if feature is None:
                raise UnknownBucketError(f"A feature name is required for {kind} buckets (available: {sorted(features)})")
            if feature not in features:
                raise UnknownBucketError(f"No {kind} feature named {feature!r} in {self.name} (available: {sorted(features)})")
            return features[feature]
        raise UnknownBucketError(f"Unknown bucket {kind!r}. Supported: {', '.join(BUCKET_NAMES)}")

    def summary(self) -> Dict[str, Any]:
        """JSON-ready overview of flags, per-bucket counts and warnings."""
        def counts(buffer: TriangleBuffer) -> Dict[str, int]:
            return {"vertices": buffer.vertex_count, "triangles": buffer.triangle_count}

        return {
            "name": self.name,
            "has_root_switch": self.has_root_switch,
            "has_multiple_root": self.has_multiple_root,
            "visible": counts(self.visible),
            "collidee": counts(self.collidee),
            "pickee": counts(self.pickee),
            "door_collidee": {key: counts(buf) for key, buf in self.door_collidee.items()},
            "climb_collidee": {key: counts(buf) for key, buf in self.climb_collidee.items()},
            "warnings": list(self.warnings),
        }
