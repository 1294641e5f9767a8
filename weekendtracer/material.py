"""Surface materials and how they scatter light."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from .hittable import HitRecord, Ray
from .vec3 import (
    Color,
    Point3,
    Vec3,
    dot,
    random_double,
    random_unit_vector,
    reflect,
    refract,
    unit_vector,
)


@runtime_checkable
class Texture(Protocol):
    """Anything that yields a colour for surface coordinates and a point."""

    def value(self, u: float, v: float, p: Point3) -> Color: ...


@dataclass(frozen=True, slots=True)
class _SolidColor:
    albedo: Color

    def value(self, u: float, v: float, p: Point3) -> Color:
        return self.albedo


def _as_texture(source: Color | Texture) -> Texture:
    if isinstance(source, Vec3):
        return _SolidColor(source)
    if isinstance(source, Texture):
        return source
    raise TypeError(f"expected a colour or a texture, got {type(source).__name__}")


@dataclass(frozen=True, slots=True)
class Scatter:
    """A scattered ray and the colour it is attenuated by."""

    attenuation: Color
    scattered: Ray


def reflectance(cosine: float, ref_idx: float) -> float:
    """Schlick's approximation of reflectance."""
    r0 = (1 - ref_idx) / (1 + ref_idx)
    r0 = r0 * r0
    return r0 + (1 - r0) * (1 - cosine) ** 5


class Material:
    """A material that neither scatters nor emits."""

    def emitted(self, u: float, v: float, p: Point3) -> Color:
        return Color(0, 0, 0)

    def scatter(self, r_in: Ray, rec: HitRecord) -> Scatter | None:
        """The scattered ray, or None if the ray is absorbed."""
        return None


class Lambertian(Material):
    """An ideal diffuse surface."""

    def __init__(self, albedo: Color | Texture) -> None:
        self.tex = _as_texture(albedo)

    def scatter(self, r_in: Ray, rec: HitRecord) -> Scatter | None:
        direction = rec.normal + random_unit_vector()
        if direction.near_zero():
            direction = rec.normal
        return Scatter(
            self.tex.value(rec.u, rec.v, rec.p),
            Ray(rec.p, direction, r_in.time),
        )


class Metal(Material):
    """A reflective surface; ``fuzz`` above 1 is capped at 1."""

    def __init__(self, albedo: Color, fuzz: float) -> None:
        self.albedo = albedo
        self.fuzz = fuzz if fuzz < 1 else 1.0

    def scatter(self, r_in: Ray, rec: HitRecord) -> Scatter | None:
        reflected = reflect(r_in.direction, rec.normal)
        reflected = unit_vector(reflected) + self.fuzz * random_unit_vector()
        scattered = Ray(rec.p, reflected, r_in.time)
        if dot(scattered.direction, rec.normal) > 0:
            return Scatter(self.albedo, scattered)
        return None


class Dielectric(Material):
    """A clear refracting material such as glass or water."""

    def __init__(self, refraction_index: float) -> None:
        self.refraction_index = refraction_index

    def scatter(self, r_in: Ray, rec: HitRecord) -> Scatter | None:
        ri = 1.0 / self.refraction_index if rec.front_face else self.refraction_index

        unit_direction = unit_vector(r_in.direction)
        cos_theta = min(dot(-unit_direction, rec.normal), 1.0)
        sin_theta = math.sqrt(1.0 - cos_theta * cos_theta)

        cannot_refract = ri * sin_theta > 1.0
        if cannot_refract or reflectance(cos_theta, ri) > random_double():
            direction = reflect(unit_direction, rec.normal)
        else:
            direction = refract(unit_direction, rec.normal, ri)

        return Scatter(Color(1.0, 1.0, 1.0), Ray(rec.p, direction, r_in.time))


class DiffuseLight(Material):
    """A surface that emits light and scatters none."""

    def __init__(self, emit: Color | Texture) -> None:
        self.tex = _as_texture(emit)

    def emitted(self, u: float, v: float, p: Point3) -> Color:
        return self.tex.value(u, v, p)


class Isotropic(Material):
    """Scatters uniformly in all directions; the phase function of a medium."""

    def __init__(self, albedo: Color | Texture) -> None:
        self.tex = _as_texture(albedo)

    def scatter(self, r_in: Ray, rec: HitRecord) -> Scatter | None:
        return Scatter(
            self.tex.value(rec.u, rec.v, rec.p),
            Ray(rec.p, random_unit_vector(), r_in.time),
        )