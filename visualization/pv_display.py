"""PyVista-based visualization helpers."""

import pyvista as pv


def show_mesh(
    pv_mesh: pv.PolyData,
    title: str = "stlmesh viewer",
    show_edges: bool = True,
) -> pv.Plotter:
    """Display a decoded STL mesh in an interactive PyVista window.

    Parameters
    ----------
    pv_mesh : pv.PolyData
        Mesh from ``stlmesh.loader.to_polydata``.
    title : str
        Window title.
    show_edges : bool
        Draw triangle edges, which makes the STL facets visible.

    Returns
    -------
    pv.Plotter
        The plotter after the window was closed.
    """
    plotter = pv.Plotter()
    # flat shading keeps one normal per facet
    plotter.add_mesh(pv_mesh, color="white", show_edges=show_edges, smooth_shading=False)
    plotter.add_axes()
    plotter.show(title=title)
    return plotter
