"""
Reference name tables used to classify scene nodes.

Node names are compared case-insensitively against these tables, either for
exact equality or as a prefix (see meshbuckets.geometry.names). The tables are
configuration: the defaults match the switch conventions of the source assets,
and a JSON file with the same fields can replace them.
"""

import json
import logging
import os
from typing import Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from meshbuckets.exceptions import InvalidSourceError

logger = logging.getLogger(__name__)

TABLES_ENV_VAR = "MESHBUCKETS_NAME_TABLES"


class NameTables(BaseModel):
    model_config = ConfigDict(extra='forbid', frozen=True)

    switch: Tuple[str, ...] = Field(("collisionswitch", "dungswitch"), description="Exact names of switch nodes under a root.")
    pickee: Tuple[str, ...] = Field(("pickee",), description="Exact names of pickable geometry nodes.")
    collidee: Tuple[str, ...] = Field(("collidee",), description="Exact names of collision geometry nodes.")
    climb: Tuple[str, ...] = Field(("climb",), description="Name prefixes of climbable features.")
    door: Tuple[str, ...] = Field(("door",), description="Name prefixes of door features.")
    not_drawable: Tuple[str, ...] = Field(
        ("anim", "portal", "bv", "bounding", "!lod_cullme", "!visible_damaged", "shadowcaster"),
        description="Name prefixes of nodes never drawn as visible geometry.",
    )


DEFAULT_NAME_TABLES = NameTables()


def load_name_tables(path: Optional[str] = None) -> NameTables:
    """
    Load name tables from a JSON file.

    Fields missing from the file keep their default values.

    Args:
        path: JSON file path. If None, the MESHBUCKETS_NAME_TABLES environment
              variable is consulted; if that is unset too, defaults are returned.

    Returns:
        NameTables instance

    Raises:
        FileNotFoundError: If the file does not exist
        InvalidSourceError: If the file is not a valid tables document
    """
    if path is None:
        path = os.getenv(TABLES_ENV_VAR)
        if not path:
            return DEFAULT_NAME_TABLES

    if not os.path.exists(path):
        raise FileNotFoundError(f"Name tables file not found: {path}")

    with open(path, 'r') as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise InvalidSourceError(f"Name tables file {path} is not valid JSON: {e}") from e

    try:
        tables = NameTables.model_validate(data)
    except ValidationError as e:
        raise InvalidSourceError(f"Invalid name tables in {path}: {e}") from e

    logger.info(f"Loaded name tables from {path}")
    return tables
