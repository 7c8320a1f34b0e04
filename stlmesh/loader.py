"""Scene-layer adapters for decoded STL meshes."""

import logging
from typing import Optional, Tuple

import numpy as np
import pyvista as pv
import trimesh

from stlmesh.config import DecodeConfig
from stlmesh.decoder import DecodedMesh
from stlmesh.stl_loader import load_stl

logger = logging.getLogger(__name__)


def to_trimesh(mesh: DecodedMesh, apply_transform: bool = True) -> trimesh.Trimesh:
    """Wrap a decoded mesh as a trimesh.Trimesh.

    Faces index the vertex buffer sequentially and ``process=False`` keeps
    trimesh from merging the duplicated corners.
    """
    tri_mesh = trimesh.Trimesh(
        vertices=mesh.vertices.astype(float),
        faces=mesh.faces,
        vertex_normals=mesh.normals.astype(float),
        process=False,
    )
    if apply_transform:
        tri_mesh.apply_transform(mesh.transform)
    if mesh.name:
        tri_mesh.metadata["name"] = mesh.name
    return tri_mesh


def to_polydata(mesh: DecodedMesh, apply_transform: bool = True) -> pv.PolyData:
    """Build a PyVista PolyData with the facet normals as point data."""
    points = mesh.transformed_vertices() if apply_transform else mesh.vertices.astype(float)
    normals = mesh.normals.astype(float)
    if apply_transform:
        # normals only see the rotation; rescale to unit length afterwards
        normals = normals @ mesh.transform[:3, :3].T
        lengths = np.linalg.norm(normals, axis=1)
        safe_lengths = np.where(lengths == 0, 1.0, lengths)
        normals = normals / safe_lengths[:, np.newaxis]

    pv_mesh = pv.PolyData.from_regular_faces(points, mesh.faces)
    pv_mesh.point_data["Normals"] = normals
    return pv_mesh


def load_mesh(
    path: str,
    config: Optional[DecodeConfig] = None,
) -> Tuple[trimesh.Trimesh, pv.PolyData]:
    """Load a binary STL file into trimesh and PyVista representations.

    Parameters
    ----------
    path : str
        Path to the binary STL file.
    config : DecodeConfig, optional
        Orientation and unit corrections.

    Returns
    -------
    tri_mesh : trimesh.Trimesh
        The transformed triangle mesh.
    pv_mesh : pyvista.PolyData
        A PyVista version suitable for visualization.

    Raises
    ------
    FileNotFoundError
        If the file does not exist.
    ValueError
        If the file is not a valid binary STL, or holds no triangles.
    """
    decoded = load_stl(path, config)
    if decoded.triangle_count == 0:
        raise ValueError(f"Loaded mesh is empty: {path}")

    tri_mesh = to_trimesh(decoded)
    pv_mesh = to_polydata(decoded)
    logger.debug("Built scene meshes for %s (%d faces)", path, len(tri_mesh.faces))

    return tri_mesh, pv_mesh
