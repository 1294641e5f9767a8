"""Three-component vectors and the random sampling helpers built on them."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from typing import Iterator

_NEAR_ZERO = 1e-8


@dataclass(frozen=True, slots=True)
class Vec3:
    """An immutable 3D vector, also used for points and RGB colours."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __getitem__(self, index: int) -> float:
        return (self.x, self.y, self.z)[index]

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def __add__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, other: Vec3 | float) -> Vec3:
        if isinstance(other, Vec3):
            return Vec3(self.x * other.x, self.y * other.y, self.z * other.z)
        if isinstance(other, (int, float)):
            return Vec3(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __rmul__(self, other: float) -> Vec3:
        if isinstance(other, (int, float)):
            return Vec3(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __truediv__(self, t: float) -> Vec3:
        if not isinstance(t, (int, float)):
            return NotImplemented
        return self * (1 / t)

    def __str__(self) -> str:
        return f"{self.x} {self.y} {self.z}"

    def length(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.length_squared())

    def length_squared(self) -> float:
        """Squared Euclidean length."""
        return self.x * self.x + self.y * self.y + self.z * self.z

    def near_zero(self) -> bool:
        """True if every component is close to zero."""
        return all(abs(c) < _NEAR_ZERO for c in self)


Point3 = Vec3
Color = Vec3


def random_double(low: float = 0.0, high: float = 1.0) -> float:
    """A random real in [low, high)."""
    return low + (high - low) * random.random()


def random_int(low: int, high: int) -> int:
    """A random integer in [low, high], both ends included."""
    return random.randint(low, high)


def random_vec3(low: float = 0.0, high: float = 1.0) -> Vec3:
    """A vector whose components are each random in [low, high)."""
    return Vec3(random_double(low, high), random_double(low, high), random_double(low, high))


def dot(u: Vec3, v: Vec3) -> float:
    return u.x * v.x + u.y * v.y + u.z * v.z


def cross(u: Vec3, v: Vec3) -> Vec3:
    return Vec3(
        u.y * v.z - u.z * v.y,
        u.z * v.x - u.x * v.z,
        u.x * v.y - u.y * v.x,
    )


def unit_vector(v: Vec3) -> Vec3:
    return v / v.length()


def random_in_unit_disk() -> Vec3:
    """A random point inside the unit disk in the z=0 plane."""
    while True:
        p = Vec3(random_double(-1, 1), random_double(-1, 1), 0.0)
        if p.length_squared() < 1:
            return p


def random_in_unit_sphere() -> Vec3:
    """A random point strictly inside the unit sphere."""
    while True:
        p = random_vec3(-1, 1)
        if p.length_squared() < 1:
            return p


def random_unit_vector() -> Vec3:
    """A random direction of unit length."""
    return unit_vector(random_in_unit_sphere())


def random_on_hemisphere(normal: Vec3) -> Vec3:
    """A random unit direction in the hemisphere around ``normal``."""
    on_unit_sphere = random_unit_vector()
    if dot(on_unit_sphere, normal) > 0.0:
        return on_unit_sphere
    return -on_unit_sphere


def reflect(v: Vec3, n: Vec3) -> Vec3:
    return v - 2 * dot(v, n) * n


def refract(uv: Vec3, n: Vec3, etai_over_etat: float) -> Vec3:
    cos_theta = min(dot(-uv, n), 1.0)
    r_out_perp = etai_over_etat * (uv + cos_theta * n)
    r_out_parallel = -math.sqrt(abs(1.0 - r_out_perp.length_squared())) * n
    return r_out_perp + r_out_parallel


def random_cosine_direction() -> Vec3:
    """A random unit direction about +z, cosine-weighted."""
    r1 = random_double()
    r2 = random_double()
    phi = 2 * math.pi * r1
    x = math.cos(phi) * math.sqrt(r2)
    y = math.sin(phi) * math.sqrt(r2)
    z = math.sqrt(1 - r2)
    return Vec3(x, y, z)