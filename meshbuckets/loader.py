"""
Geometry loading API

Provides load_geometry() for classifying a model's scene graph into geometry
buckets, and geometry_from_buffers() for wrapping already-split meshes.
"""

import logging
import os
from typing import Any, Callable, Iterable, Optional, Union

from meshbuckets.exceptions import InvalidSourceError
from meshbuckets.geometry.walker import walk_scene
from meshbuckets.io.scene_json import decode_scene
from meshbuckets.schema.buffers import TriangleBuffer
from meshbuckets.schema.geometry_model import GeometryModel
from meshbuckets.schema.tables import NameTables, load_name_tables

logger = logging.getLogger(__name__)

Content = Union[bytes, bytearray, str]
Decoder = Callable[[Content], Iterable[Any]]


def _require_name(name: Optional[str]) -> None:
    if not name:
        raise InvalidSourceError("name is required: provide the identifying name of the model")


def load_geometry(
    name: str,
    content: Content,
    decoder: Decoder = decode_scene,
    tables: Optional[NameTables] = None,
) -> GeometryModel:
    """
    Decode a model and classify its geometry into buckets.

    Args:
        name: Identifying name of the model (used in warnings)
        content: Raw source content handed to the decoder
        decoder: Turns content into root scene nodes (default: JSON scenes)
        tables: Name tables; defaults to load_name_tables(), which honors
                the MESHBUCKETS_NAME_TABLES environment variable

    Returns:
        GeometryModel with every bucket filled

    Raises:
        InvalidSourceError: If name or content is missing or empty
        SceneDecodeError: If the default decoder cannot read the content

    Example:
        >>> with open("house.scene.json", "rb") as f:
        ...     model = load_geometry("house.scene.json", f.read())
        >>> model.collidee.triangle_count
        128
    """
    _require_name(name)
    if content is None or len(content) < 1:
        raise InvalidSourceError(f"content is required: no source content given for {name}")

    if tables is None:
        tables = load_name_tables()

    roots = decoder(content)
    acc = walk_scene(roots, tables, source_name=name)

    return GeometryModel(
        name=name,
        visible=acc.visible,
        collidee=acc.collidee,
        pickee=acc.pickee,
        door_collidee=dict(acc.door_collidee),
        climb_collidee=dict(acc.climb_collidee),
        has_root_switch=acc.has_root_switch,
        has_multiple_root=acc.has_multiple_root,
        warnings=acc.warnings,
    )


def load_geometry_file(
    path: str,
    name: Optional[str] = None,
    decoder: Decoder = decode_scene,
    tables: Optional[NameTables] = None,
) -> GeometryModel:
    """
    Read a model file and classify its geometry.

    Args:
        path: Path to the source file
        name: Identifying name; defaults to the file's base name

    Raises:
        FileNotFoundError: If the file does not exist
        InvalidSourceError: If the file is empty
    """
    if not os.path.exists(path):
        raise FileNotFoundError(f"Input file not found: {path}")

    with open(path, 'rb') as f:
        content = f.read()

    logger.info(f"Loading geometry from {path} ({len(content)} bytes)")
    return load_geometry(name or os.path.basename(path), content, decoder=decoder, tables=tables)


def geometry_from_buffers(
    name: str,
    pickee: TriangleBuffer,
    collidee: TriangleBuffer,
    visible: TriangleBuffer,
) -> GeometryModel:
    """
    Build a GeometryModel from meshes that are already split into buckets.

    The result has no door/climb features, no warnings and no switch flags.

    Raises:
        InvalidSourceError: If name is missing or empty
    """
    _require_name(name)
    return GeometryModel(name=name, pickee=pickee, collidee=collidee, visible=visible)
