"""Perlin gradient noise."""

from __future__ import annotations

import itertools
import math

from .vec3 import Point3, Vec3, dot, random_int, random_vec3, unit_vector

_POINT_COUNT = 256


def _generate_perm() -> list[int]:
    p = list(range(_POINT_COUNT))
    for i in range(_POINT_COUNT - 1, 0, -1):
        target = random_int(0, i)
        p[i], p[target] = p[target], p[i]
    return p


def _interp(corners: dict[tuple[int, int, int], Vec3], u: float, v: float, w: float) -> float:
    uu = u * u * (3 - 2 * u)
    vv = v * v * (3 - 2 * v)
    ww = w * w * (3 - 2 * w)
    accum = 0.0
    for (i, j, k), gradient in corners.items():
        weight_v = Vec3(u - i, v - j, w - k)
        accum += (
            (i * uu + (1 - i) * (1 - uu))
            * (j * vv + (1 - j) * (1 - vv))
            * (k * ww + (1 - k) * (1 - ww))
            * dot(gradient, weight_v)
        )
    return accum


class Perlin:
    """Gradient noise over random unit vectors and permutation tables."""

    def __init__(self) -> None:
        self._randvec = tuple(unit_vector(random_vec3(-1, 1)) for _ in range(_POINT_COUNT))
        self._perm_x = _generate_perm()
        self._perm_y = _generate_perm()
        self._perm_z = _generate_perm()

    def noise(self, p: Point3) -> float:
        """Smooth noise value at ``p``."""
        fx, fy, fz = math.floor(p.x), math.floor(p.y), math.floor(p.z)
        u, v, w = p.x - fx, p.y - fy, p.z - fz
        i, j, k = int(fx), int(fy), int(fz)

        corners = {
            (di, dj, dk): self._randvec[
                self._perm_x[(i + di) & 255]
                ^ self._perm_y[(j + dj) & 255]
                ^ self._perm_z[(k + dk) & 255]
            ]
            for di, dj, dk in itertools.product((0, 1), repeat=3)
        }
        return _interp(corners, u, v, w)

    def turb(self, p: Point3, depth: int) -> float:
        """Turbulence: absolute sum of ``depth`` octaves of noise."""
        accum = 0.0
        temp_p = p
        weight = 1.0
        for _ in range(depth):
            accum += weight * self.noise(temp_p)
            weight *= 0.5
            temp_p = temp_p * 2
        return abs(accum)