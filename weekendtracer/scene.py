"""The random sphere scene and the colour a ray gathers from a world."""

from __future__ import annotations

import math

from .hittable import Hittable, HittableList, Ray, Sphere
from .material import Dielectric, Lambertian, Material, Metal
from .vec3 import Color, Point3, random_double, random_vec3, unit_vector

_T_MIN = 0.001
_BLACK = Color(0, 0, 0)
_WHITE = Color(1.0, 1.0, 1.0)
_SKY_BLUE = Color(0.5, 0.7, 1.0)


def _sky(r: Ray) -> Color:
    unit_direction = unit_vector(r.direction)
    t = 0.5 * (unit_direction.y + 1.0)
    return (1.0 - t) * _WHITE + t * _SKY_BLUE


def ray_color(r: Ray, world: Hittable, depth: int) -> Color:
    """The colour seen along ``r``, following at most ``depth`` bounces."""
    throughput = _WHITE
    for _ in range(depth):
        rec = world.hit(r, _T_MIN, math.inf)
        if rec is None:
            return throughput * _sky(r)
        if rec.mat is None:
            return _BLACK
        scatter = rec.mat.scatter(r, rec)
        if scatter is None:
            return _BLACK
        throughput = throughput * scatter.attenuation
        r = scatter.scattered
    return _BLACK


def random_scene() -> HittableList:
    """A ground sphere, a grid of small random spheres and three large ones."""
    world = HittableList()
    world.add(Sphere(Point3(0, -1000, 0), 1000, Lambertian(Color(0.5, 0.5, 0.5))))

    for a in range(-11, 11):
        for b in range(-11, 11):
            choose_mat = random_double()
            center = Point3(a + 0.9 * random_double(), 0.2, b + 0.9 * random_double())
            if (center - Point3(4, 0.2, 0)).length() <= 0.9:
                continue

            sphere_material: Material
            if choose_mat < 0.8:
                sphere_material = Lambertian(random_vec3() * random_vec3())
            elif choose_mat < 0.95:
                albedo = random_vec3(0.5, 1)
                fuzz = random_double(0, 0.5)
                sphere_material = Metal(albedo, fuzz)
            else:
                sphere_material = Dielectric(1.5)
            world.add(Sphere(center, 0.2, sphere_material))

    world.add(Sphere(Point3(0, 1, 0), 1.0, Dielectric(1.5)))
    world.add(Sphere(Point3(-4, 1, 0), 1.0, Lambertian(Color(0.4, 0.2, 0.1))))
    world.add(Sphere(Point3(4, 1, 0), 1.0, Metal(Color(0.7, 0.6, 0.5), 0.0)))
    return world