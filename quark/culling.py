"""Frustum planes and sphere visibility tests."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

Plane = tuple[float, float, float, float]


@dataclass(frozen=True)
class FrustumPlanes:
    """Six clip planes (a, b, c, d), positive on the inside."""

    planes: tuple[Plane, ...]

    def __post_init__(self) -> None:
        if len(self.planes) != 6:
            raise ValueError("a frustum needs exactly six planes")
        object.__setattr__(self, "planes", tuple(tuple(p) for p in self.planes))


def plane_point_distance(plane: Sequence[float], point: Sequence[float]) -> float:
    """Signed distance of a point from a plane."""
    x, y, z = point
    a, b, c, d = plane
    return a * x + b * y + c * z + d


def is_sphere_visible(frustum: FrustumPlanes, position: Sequence[float], radius: float) -> bool:
    """True if the sphere is not fully outside any plane of the frustum."""
    dist = min(plane_point_distance(plane, position) for plane in frustum.planes)
    return dist + radius > 0.0