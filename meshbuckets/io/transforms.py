"""
Node transform utilities for scene decoding.

Matrices are 4x4, row-major, applied to column vectors:
    p' = M · [x, y, z, 1]
so the translation lives in the last column. A child's scene-space matrix is
parent · local.

Quaternions are [w, x, y, z], the same ordering as the v3 scene transforms.
"""

import math
from typing import List, Optional, Sequence, Tuple

Matrix4 = Tuple[Tuple[float, float, float, float], ...]

IDENTITY: Matrix4 = (
    (1.0, 0.0, 0.0, 0.0),
    (0.0, 1.0, 0.0, 0.0),
    (0.0, 0.0, 1.0, 0.0),
    (0.0, 0.0, 0.0, 1.0),
)


def multiply(a: Matrix4, b: Matrix4) -> Matrix4:
    """Matrix product a · b."""
    return tuple(
        tuple(sum(a[r][k] * b[k][c] for k in range(4)) for c in range(4))
        for r in range(4)
    )


def quaternion_to_matrix(quat: Sequence[float]) -> Tuple[Tuple[float, float, float], ...]:
    """
    Convert a rotation quaternion to a 3x3 rotation matrix.

    Args:
        quat: Quaternion [w, x, y, z]; normalized before use

    Returns:
        3x3 rotation matrix (row-major)
    """
    w, x, y, z = quat
    magnitude = math.sqrt(w*w + x*x + y*y + z*z)
    if magnitude == 0:
        return ((1.0, 0.0, 0.0), (0.0, 1.0, 0.0), (0.0, 0.0, 1.0))
    w, x, y, z = w/magnitude, x/magnitude, y/magnitude, z/magnitude

    return (
        (1 - 2*(y*y + z*z), 2*(x*y - w*z), 2*(x*z + w*y)),
        (2*(x*y + w*z), 1 - 2*(x*x + z*z), 2*(y*z - w*x)),
        (2*(x*z - w*y), 2*(y*z + w*x), 1 - 2*(x*x + y*y)),
    )


def compose_trs(
    translation: Optional[Sequence[float]] = None,
    rotation: Optional[Sequence[float]] = None,
    scale: Optional[Sequence[float]] = None,
) -> Matrix4:
    """
    Build T · R · S as a single matrix.

    Args:
        translation: [x, y, z], default origin
        rotation: Quaternion [w, x, y, z], default identity
        scale: [sx, sy, sz], default [1, 1, 1]
    """
    tx, ty, tz = translation if translation is not None else (0.0, 0.0, 0.0)
    sx, sy, sz = scale if scale is not None else (1.0, 1.0, 1.0)
    rot = quaternion_to_matrix(rotation) if rotation is not None else IDENTITY

    return (
        (rot[0][0] * sx, rot[0][1] * sy, rot[0][2] * sz, float(tx)),
        (rot[1][0] * sx, rot[1][1] * sy, rot[1][2] * sz, float(ty)),
        (rot[2][0] * sx, rot[2][1] * sy, rot[2][2] * sz, float(tz)),
        (0.0, 0.0, 0.0, 1.0),
    )


def transform_point(m: Matrix4, point: Sequence[float]) -> Tuple[float, float, float]:
    x, y, z = point
    return (
        m[0][0]*x + m[0][1]*y + m[0][2]*z + m[0][3],
        m[1][0]*x + m[1][1]*y + m[1][2]*z + m[1][3],
        m[2][0]*x + m[2][1]*y + m[2][2]*z + m[2][3],
    )


def _normal_matrix(m: Matrix4) -> List[List[float]]:
    # Cofactor matrix of the upper 3x3 equals det · (M^-1)^T
    a = [[m[r][c] for c in range(3)] for r in range(3)]
    cof = [[0.0] * 3 for _ in range(3)]
    for r in range(3):
        for c in range(3):
            r1, r2 = [i for i in range(3) if i != r]
            c1, c2 = [i for i in range(3) if i != c]
            minor = a[r1][c1] * a[r2][c2] - a[r1][c2] * a[r2][c1]
            cof[r][c] = minor if (r + c) % 2 == 0 else -minor
    det = sum(a[0][c] * cof[0][c] for c in range(3))
    if det < 0:
        cof = [[-v for v in row] for row in cof]
    return cof


def transform_normal(m: Matrix4, normal: Sequence[float]) -> Tuple[float, float, float]:
    """
    Transform a normal by the inverse transpose of the matrix's linear part.

    The result is re-normalized; a degenerate result is returned unchanged.
    """
    n = _normal_matrix(m)
    x, y, z = normal
    out = [n[r][0]*x + n[r][1]*y + n[r][2]*z for r in range(3)]
    length = math.sqrt(sum(v*v for v in out))
    if length == 0:
        return tuple(out)
    return tuple(v / length for v in out)
