"""Walkmesh Bounded Context - Domain Services.

Pure domain logic over decoded walkmeshes.
NO I/O operations - byte decoding is implemented by infrastructure adapters
under `src/infrastructure/walkmesh/binary_adapter.py` via domain ports.

Containment and interpolation use only the x and y axes; z is elevation.
All functions are side-effect free and safe to call at any frequency.
"""

from __future__ import annotations

import math
from collections.abc import Iterable

import numpy as np

from domain.walkmesh.value_objects import (
    EDGES_PER_TRIANGLE,
    NOT_FOUND,
    BlockedEdge,
    Bounds,
    LocateResult,
    Triangle,
    Walkmesh,
)

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------
DEGENERATE_EPSILON = 1e-4  # Below this |denominator| a triangle has no 2D area
DEFAULT_CELL_SIZE = 256  # Spatial hash cell edge, walkmesh units


def round_half_up(value: float) -> int:
    """Round to nearest integer, halves toward +infinity.

    Python's round() uses banker's rounding; elevations and dragged
    positions are integral and must round 2.5 -> 3 and -2.5 -> -2.
    """
    return int(math.floor(value + 0.5))


# ---------------------------------------------------------------------------
# Bounds
# ---------------------------------------------------------------------------
def compute_bounds(walkmesh: Walkmesh) -> Bounds:
    """Compute the axis-aligned bounds of every vertex in the walkmesh.

    Args:
        walkmesh: Decoded walkmesh (may be empty)

    Returns:
        Bounds with min/max per axis and the midpoint of each axis range.
        All zeros for an empty walkmesh.
    """
    if not walkmesh.triangles:
        return Bounds()

    coords = np.array(
        [[v.x, v.y, v.z] for tri in walkmesh.triangles for v in tri.vertices],
        dtype=np.int32,
    )
    mins = coords.min(axis=0)
    maxs = coords.max(axis=0)
    centers = (mins + maxs) / 2.0

    return Bounds(
        min_x=int(mins[0]),
        max_x=int(maxs[0]),
        min_y=int(mins[1]),
        max_y=int(maxs[1]),
        min_z=int(mins[2]),
        max_z=int(maxs[2]),
        center_x=float(centers[0]),
        center_y=float(centers[1]),
        center_z=float(centers[2]),
    )


# ---------------------------------------------------------------------------
# Point-in-triangle
# ---------------------------------------------------------------------------
def point_in_triangle(px: float, py: float, triangle: Triangle) -> bool:
    """Half-plane sign test on the x/y plane.

    Works for both windings by branching on the sign of the signed area D.
    Comparisons are inclusive, so points on an edge or vertex are inside.
    """
    v0, v1, v2 = triangle.vertices
    dx = px - v2.x
    dy = py - v2.y
    dx21 = v2.x - v1.x
    dy12 = v1.y - v2.y
    d = dy12 * (v0.x - v2.x) + dx21 * (v0.y - v2.y)
    s = dy12 * dx + dx21 * dy
    t = (v2.y - v0.y) * dx + (v0.x - v2.x) * dy
    if d < 0:
        return s <= 0 and t <= 0 and s + t >= d
    return s >= 0 and t >= 0 and s + t <= d


# ---------------------------------------------------------------------------
# Barycentric Interpolation
# ---------------------------------------------------------------------------
def barycentric_weights(
    px: float, py: float, triangle: Triangle
) -> tuple[float, float, float] | None:
    """Barycentric weights of (px, py) against the triangle's x/y projection.

    Returns:
        (w0, w1, w2) summing to 1, or None if the triangle is degenerate
        (|denominator| < DEGENERATE_EPSILON).
    """
    v0, v1, v2 = triangle.vertices
    denom = (v1.y - v2.y) * (v0.x - v2.x) + (v2.x - v1.x) * (v0.y - v2.y)
    if abs(denom) < DEGENERATE_EPSILON:
        return None

    w0 = ((v1.y - v2.y) * (px - v2.x) + (v2.x - v1.x) * (py - v2.y)) / denom
    w1 = ((v2.y - v0.y) * (px - v2.x) + (v0.x - v2.x) * (py - v2.y)) / denom
    return (w0, w1, 1.0 - w0 - w1)


def interpolate_elevation(px: float, py: float, triangle: Triangle) -> float:
    """Interpolate z at (px, py) across the triangle.

    Degenerate triangles fall back to the mean of the three z values.
    """
    v0, v1, v2 = triangle.vertices
    weights = barycentric_weights(px, py, triangle)
    if weights is None:
        return (v0.z + v1.z + v2.z) / 3

    w0, w1, w2 = weights
    return w0 * v0.z + w1 * v1.z + w2 * v2.z


# ---------------------------------------------------------------------------
# Main Service: locate
# ---------------------------------------------------------------------------
def locate(walkmesh: Walkmesh, x: float, y: float) -> LocateResult:
    """Find the triangle containing (x, y) and the surface elevation there.

    Linear scan in index order; the first containing triangle wins, so
    overlapping triangles resolve to the lowest index.

    Args:
        walkmesh: Decoded walkmesh
        x: Horizontal coordinate
        y: Horizontal coordinate

    Returns:
        LocateResult with the triangle index and rounded elevation, or
        NOT_FOUND (index -1, elevation 0) when no triangle contains the point
        or a coordinate is NaN or infinite.

    Example:
        >>> result = locate(walkmesh, 120, -45)
        >>> if result.found:
        ...     print(result.triangle_index, result.elevation)
    """
    if not (math.isfinite(x) and math.isfinite(y)):
        return NOT_FOUND
    return _first_hit(walkmesh.triangles, range(walkmesh.triangle_count), x, y)


def _first_hit(
    triangles: tuple[Triangle, ...], candidates: Iterable[int], x: float, y: float
) -> LocateResult:
    for index in candidates:
        triangle = triangles[index]
        if point_in_triangle(x, y, triangle):
            elevation = interpolate_elevation(x, y, triangle)
            return LocateResult(triangle_index=index, elevation=round_half_up(elevation))
    return NOT_FOUND


class TriangleLocator:
    """Uniform-grid index over a walkmesh for repeated point queries.

    Each triangle is registered in every cell its x/y bounding box touches.
    Cell buckets hold indices in ascending order, so ``locate`` returns the
    same result as the linear ``locate`` service, including the
    lowest-index tie-break on overlap.

    Parameters
    ----------
    walkmesh: Walkmesh
        Decoded walkmesh to index. The locator holds a reference to it;
        walkmeshes are immutable.
    cell_size: float
        Edge length of a grid cell in walkmesh units.
    """

    def __init__(self, walkmesh: Walkmesh, cell_size: float = DEFAULT_CELL_SIZE) -> None:
        if cell_size <= 0:
            raise ValueError("cell_size must be positive")
        self.walkmesh = walkmesh
        self.cell_size = cell_size
        self._grid: dict[tuple[int, int], list[int]] = {}

        for index, tri in enumerate(walkmesh.triangles):
            xs = [v.x for v in tri.vertices]
            ys = [v.y for v in tri.vertices]
            cx0, cy0 = self._cell(min(xs), min(ys))
            cx1, cy1 = self._cell(max(xs), max(ys))
            for gx in range(cx0, cx1 + 1):
                for gy in range(cy0, cy1 + 1):
                    self._grid.setdefault((gx, gy), []).append(index)

    def _cell(self, x: float, y: float) -> tuple[int, int]:
        return (
            int(math.floor(x / self.cell_size)),
            int(math.floor(y / self.cell_size)),
        )

    @property
    def cell_count(self) -> int:
        return len(self._grid)

    def locate(self, x: float, y: float) -> LocateResult:
        if not (math.isfinite(x) and math.isfinite(y)):
            return NOT_FOUND
        bucket = self._grid.get(self._cell(x, y), ())
        return _first_hit(self.walkmesh.triangles, bucket, x, y)


# ---------------------------------------------------------------------------
# Topology Helpers
# ---------------------------------------------------------------------------
def blocked_edges(walkmesh: Walkmesh) -> list[BlockedEdge]:
    """List every edge whose access value is BLOCKED, in triangle/edge order."""
    result: list[BlockedEdge] = []
    for index, tri in enumerate(walkmesh.triangles):
        for edge in range(EDGES_PER_TRIANGLE):
            if tri.is_blocked(edge):
                start, end = tri.edge(edge)
                result.append(
                    BlockedEdge(triangle_index=index, edge=edge, start=start, end=end)
                )
    return result


def triangle_centroid(triangle: Triangle) -> tuple[float, float, float]:
    """Mean of the three vertices; anchor point for triangle labels."""
    v0, v1, v2 = triangle.vertices
    return (
        (v0.x + v1.x + v2.x) / 3,
        (v0.y + v1.y + v2.y) / 3,
        (v0.z + v1.z + v2.z) / 3,
    )
