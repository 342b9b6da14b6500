"""
meshbuckets Quick Start Example

This example builds a small switch-structured scene, classifies it, and writes
the collision bucket as an OBJ file.
"""

import json
import os

from meshbuckets import load_geometry
from meshbuckets.io import export_obj


def triangle(name, z):
    return {"name": name, "kind": "geometry",
            "vertices": [[0, 0, z], [1, 0, z], [0, 1, z]], "indices": [[0, 1, 2]]}


scene = {
    "roots": [
        {"name": "tower", "children": [
            {"name": "collisionswitch", "children": [
                {"name": "collidee", "children": [triangle("hull", 0)]},
                {"name": "pickee", "children": [triangle("select", 0)]},
                {"name": "masonry", "children": [triangle("stone", 0)]},
                {"name": "door_gate", "children": [
                    {"name": "collidee", "children": [triangle("gate", 1)]},
                ]},
                {"name": "portal_exit", "children": [triangle("portal", 2)]},
            ]},
        ]},
    ]
}

model = load_geometry("tower.scene.json", json.dumps(scene))

print(f"Visible triangles:  {model.visible.triangle_count}")
print(f"Collidee triangles: {model.collidee.triangle_count}")
print(f"Doors: {', '.join(model.door_collidee)}")
for warning in model.warnings:
    print(f"⚠️  {warning}")

os.makedirs("output", exist_ok=True)
with open("output/tower_collidee.obj", "w") as f:
    f.write(export_obj(model.collidee, object_name="tower_collidee"))
print("✅ Saved to output/tower_collidee.obj")
