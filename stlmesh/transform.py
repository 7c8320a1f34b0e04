# stlmesh/transform.py

from typing import Optional

import numpy as np
from trimesh import transformations

from stlmesh.config import DecodeConfig

X_AXIS = [1.0, 0.0, 0.0]


def build_transform(config: Optional[DecodeConfig] = None) -> np.ndarray:
    """Build the 4x4 transform for a decoded mesh (column-vector convention).

    The print-orientation rotation (+90 degrees about X, so +Y goes to +Z)
    is applied to the geometry first, the unit scale second.
    """
    if config is None:
        config = DecodeConfig()

    matrix = np.eye(4)

    if config.correct_for_print_orientation:
        rotation = transformations.rotation_matrix(np.pi / 2, X_AXIS)
        matrix = rotation @ matrix

    factor = config.unit_scale.factor
    if factor != 1.0:
        scale = transformations.scale_matrix(factor)
        matrix = scale @ matrix

    matrix.flags.writeable = False
    return matrix


def apply_transform(points: np.ndarray, matrix: np.ndarray) -> np.ndarray:
    """Apply a 4x4 transform to an (N, 3) array of points."""
    points = np.asarray(points, dtype=float).reshape(-1, 3)
    return transformations.transform_points(points, matrix)
