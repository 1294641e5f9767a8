"""Orthonormal bases."""

from __future__ import annotations

from dataclasses import dataclass

from .vec3 import Vec3, cross, unit_vector


@dataclass(frozen=True, slots=True)
class Onb:
    """An orthonormal basis given by its three axes."""

    u: Vec3
    v: Vec3
    w: Vec3

    def __getitem__(self, index: int) -> Vec3:
        return (self.u, self.v, self.w)[index]

    def local(self, a: float, b: float, c: float) -> Vec3:
        """The vector with coordinates (a, b, c) in this basis."""
        return a * self.u + b * self.v + c * self.w

    def local_vec(self, v: Vec3) -> Vec3:
        """The vector whose basis coordinates are the components of ``v``."""
        return self.local(v.x, v.y, v.z)


def build_from_w(w: Vec3) -> Onb:
    """An orthonormal basis whose w axis points along ``w``."""
    unit_w = unit_vector(w)
    a = Vec3(0, 1, 0) if abs(unit_w.x) > 0.9 else Vec3(1, 0, 0)
    v = unit_vector(cross(unit_w, a))
    u = cross(unit_w, v)
    return Onb(u, v, unit_w)