"""Rays, hit records and the objects a ray can hit."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Iterable

from .vec3 import Point3, Vec3, dot

if TYPE_CHECKING:
    from .material import Material


@dataclass(frozen=True, slots=True)
class Ray:
    """A ray with an origin, a direction and the moment it was cast."""

    origin: Point3
    direction: Vec3
    time: float = 0.0

    def at(self, t: float) -> Point3:
        """The point at parameter ``t`` along the ray."""
        return self.origin + t * self.direction


@dataclass(slots=True)
class HitRecord:
    """Where and how a ray struck a surface."""

    p: Point3 = field(default_factory=Vec3)
    normal: Vec3 = field(default_factory=Vec3)
    t: float = 0.0
    front_face: bool = False
    mat: Material | None = None
    u: float = 0.0
    v: float = 0.0

    def set_face_normal(self, r: Ray, outward_normal: Vec3) -> None:
        """Store a normal facing against the ray; ``outward_normal`` must be unit length."""
        self.front_face = dot(r.direction, outward_normal) < 0
        self.normal = outward_normal if self.front_face else -outward_normal


class Hittable(ABC):
    """Anything a ray can intersect."""

    @abstractmethod
    def hit(self, r: Ray, t_min: float, t_max: float) -> HitRecord | None:
        """The hit with ``t`` in [t_min, t_max], or None if there is none."""


class HittableList(Hittable):
    """A collection of hittables, hit at the closest of them."""

    def __init__(self, objects: Iterable[Hittable] = ()) -> None:
        self.objects: list[Hittable] = list(objects)

    def __len__(self) -> int:
        return len(self.objects)

    def __iter__(self):
        return iter(self.objects)

    def add(self, obj: Hittable) -> None:
        self.objects.append(obj)

    def clear(self) -> None:
        self.objects.clear()

    def hit(self, r: Ray, t_min: float, t_max: float) -> HitRecord | None:
        closest: HitRecord | None = None
        closest_so_far = t_max
        for obj in self.objects:
            rec = obj.hit(r, t_min, closest_so_far)
            if rec is not None:
                closest = rec
                closest_so_far = rec.t
        return closest


def _hit_sphere(
    r: Ray,
    t_min: float,
    t_max: float,
    center: Point3,
    radius: float,
    mat: Material | None,
) -> HitRecord | None:
    oc = r.origin - center
    a = r.direction.length_squared()
    half_b = dot(oc, r.direction)
    c = oc.length_squared() - radius * radius

    discriminant = half_b * half_b - a * c
    if discriminant < 0:
        return None
    sqrtd = math.sqrt(discriminant)

    root = (-half_b - sqrtd) / a
    if root < t_min or t_max < root:
        root = (-half_b + sqrtd) / a
        if root < t_min or t_max < root:
            return None

    rec = HitRecord(t=root, p=r.at(root), mat=mat)
    rec.set_face_normal(r, (rec.p - center) / radius)
    return rec


class Sphere(Hittable):
    """A stationary sphere."""

    def __init__(self, center: Point3, radius: float, mat: Material | None = None) -> None:
        self.center = center
        self.radius = radius
        self.mat = mat

    def hit(self, r: Ray, t_min: float, t_max: float) -> HitRecord | None:
        return _hit_sphere(r, t_min, t_max, self.center, self.radius, self.mat)


class MovingSphere(Hittable):
    """A sphere moving linearly from ``center0`` at ``time0`` to ``center1`` at ``time1``."""

    def __init__(
        self,
        center0: Point3,
        center1: Point3,
        time0: float,
        time1: float,
        radius: float,
        mat: Material | None = None,
    ) -> None:
        self.center0 = center0
        self.center1 = center1
        self.time0 = time0
        self.time1 = time1
        self.radius = radius
        self.mat = mat

    def center(self, time: float) -> Point3:
        """The centre at ``time``."""
        fraction = (time - self.time0) / (self.time1 - self.time0)
        return self.center0 + fraction * (self.center1 - self.center0)

    def hit(self, r: Ray, t_min: float, t_max: float) -> HitRecord | None:
        return _hit_sphere(r, t_min, t_max, self.center(r.time), self.radius, self.mat)