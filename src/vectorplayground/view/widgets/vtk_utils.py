"""
VTK and Geometry Utilities
Helper functions that turn arrow handles and scene helpers into PolyData.
"""
import logging

import numpy as np
import numpy.typing as npt
import pyvista as pv

from vectorplayground.config import HEAD_LENGTH_RATIO, HEAD_WIDTH_RATIO
from vectorplayground.model.arrows import ArrowHandle

logger = logging.getLogger(__name__)

# Shaft thickness relative to the arrow length
SHAFT_RADIUS_RATIO: float = 0.015

# VTK stores points as float32
MAX_RENDER_LENGTH: float = float(np.finfo(np.float32).max)


class VtkUtils:
    @staticmethod
    def arrow_to_polydata(handle: ArrowHandle) -> pv.PolyData:
        """
        Build an arrow from the origin along the handle direction.

        The mesh is generated at unit length and scaled by the handle length, so
        the head keeps the same proportions for every magnitude.
        Degenerate (zero-length) handles and arrows too long for float32
        points produce an empty PolyData.
        """
        if handle.is_degenerate or handle.length > MAX_RENDER_LENGTH:
            return pv.PolyData()

        return pv.Arrow(
            start=(0.0, 0.0, 0.0),
            direction=handle.direction.as_tuple(),
            tip_length=HEAD_LENGTH_RATIO,
            # head width is a diameter, VTK expects a radius
            tip_radius=HEAD_WIDTH_RATIO / 2.0,
            shaft_radius=SHAFT_RADIUS_RATIO,
            scale=handle.length,
        )

    @staticmethod
    def grid_xz_polydata(size: float = 10.0, divisions: int = 10) -> pv.PolyData:
        """
        Create a square grid in the XZ plane (Y up), centred at the origin.

        Args:
            size: Edge length of the grid.
            divisions: Number of cells along each edge.

        Returns:
            A PyVista PolyData with (divisions + 1) * 2 line cells.
        """
        half = size / 2.0
        ticks = np.linspace(-half, half, divisions + 1)

        n_lines = len(ticks) * 2
        points = np.empty((n_lines * 2, 3), dtype=float)
        cells = np.empty(n_lines * 3, dtype=int)  # [2, id0, id1] repeated

        pid, cid = 0, 0
        # lines parallel to Z
        for x in ticks:
            points[pid] = (x, 0.0, -half)
            points[pid + 1] = (x, 0.0, half)
            cells[cid:cid + 3] = (2, pid, pid + 1)
            pid += 2
            cid += 3
        # lines parallel to X
        for z in ticks:
            points[pid] = (-half, 0.0, z)
            points[pid + 1] = (half, 0.0, z)
            cells[cid:cid + 3] = (2, pid, pid + 1)
            pid += 2
            cid += 3

        return pv.PolyData(points, lines=cells)

    @staticmethod
    def axis_polydata(axis: int, length: float = 5.0) -> pv.PolyData:
        """Line from the origin along X (0), Y (1) or Z (2)."""
        end: npt.NDArray[np.float64] = np.zeros(3, dtype=np.float64)
        end[axis] = length
        return pv.Line((0.0, 0.0, 0.0), tuple(end))
