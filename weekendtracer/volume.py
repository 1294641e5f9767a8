"""Participating media of constant density, such as smoke or fog."""

from __future__ import annotations

import math

from .hittable import HitRecord, Hittable, Ray
from .material import Isotropic, Material, Texture
from .vec3 import Color, Vec3, random_double

_EXIT_EPSILON = 0.0001


class ConstantMedium(Hittable):
    """A volume of uniform density filling the inside of ``boundary``.

    A ray passing through the volume may scatter anywhere inside it, with a
    probability that grows with the distance travelled and the density.
    """

    def __init__(self, boundary: Hittable, density: float, albedo: Color | Texture) -> None:
        self.boundary = boundary
        self.neg_inv_density = -1 / density
        self.phase_function: Material = Isotropic(albedo)

    def hit(self, r: Ray, t_min: float, t_max: float) -> HitRecord | None:
        entry = self.boundary.hit(r, -math.inf, math.inf)
        if entry is None:
            return None
        exit_ = self.boundary.hit(r, entry.t + _EXIT_EPSILON, math.inf)
        if exit_ is None:
            return None

        t_enter = max(entry.t, t_min)
        t_exit = min(exit_.t, t_max)
        if t_enter >= t_exit:
            return None
        t_enter = max(t_enter, 0.0)

        ray_length = r.direction.length()
        distance_inside_boundary = (t_exit - t_enter) * ray_length
        sample = random_double()
        if sample <= 0.0:
            return None
        hit_distance = self.neg_inv_density * math.log(sample)
        if hit_distance > distance_inside_boundary:
            return None

        t = t_enter + hit_distance / ray_length
        return HitRecord(
            p=r.at(t),
            normal=Vec3(1, 0, 0),  # arbitrary
            t=t,
            front_face=True,  # also arbitrary
            mat=self.phase_function,
        )