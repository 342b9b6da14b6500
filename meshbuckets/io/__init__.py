"""Scene decoding and geometry export"""

from meshbuckets.io.scene_json import decode_scene, bake_transforms
from meshbuckets.io.obj_exporter import export_obj

__all__ = [
    "decode_scene",
    "bake_transforms",
    "export_obj",
]
