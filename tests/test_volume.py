import math

import pytest

from weekendtracer.hittable import Ray, Sphere
from weekendtracer.material import Isotropic
from weekendtracer.vec3 import Color, Vec3
from weekendtracer.volume import ConstantMedium


def _medium(density):
    return ConstantMedium(Sphere(Vec3(0, 0, 0), 1.0), density, Color(0.5, 0.5, 0.5))


def test_ray_missing_boundary_gives_none():
    medium = _medium(1e9)
    r = Ray(Vec3(5, 5, -5), Vec3(0, 0, 1))
    assert medium.hit(r, 0.001, math.inf) is None


def test_dense_medium_hits_near_entry():
    medium = _medium(1e9)
    r = Ray(Vec3(0, 0, -5), Vec3(0, 0, 1))
    rec = medium.hit(r, 0.001, math.inf)
    assert rec is not None
    assert rec.t == pytest.approx(4.0, abs=1e-3)
    assert rec.p.z == pytest.approx(-1.0, abs=1e-3)


def test_record_fields_are_fixed():
    medium = _medium(1e9)
    rec = medium.hit(Ray(Vec3(0, 0, -5), Vec3(0, 0, 1)), 0.001, math.inf)
    assert rec.normal == Vec3(1, 0, 0)
    assert rec.front_face is True
    assert isinstance(rec.mat, Isotropic)
    assert rec.mat is medium.phase_function


def test_thin_medium_is_never_hit():
    medium = _medium(1e-12)
    r = Ray(Vec3(0, 0, -5), Vec3(0, 0, 1))
    assert all(medium.hit(r, 0.001, math.inf) is None for _ in range(200))


def test_hits_lie_inside_boundary_and_range():
    medium = _medium(0.5)
    r = Ray(Vec3(0, 0, -5), Vec3(0, 0, 2))
    hits = [medium.hit(r, 0.001, math.inf) for _ in range(500)]
    found = [h for h in hits if h is not None]
    assert found
    for rec in found:
        assert 2.0 - 1e-9 <= rec.t <= 3.0 + 1e-9
        assert rec.p.length() <= 1.0 + 1e-9


def test_interval_beyond_exit_gives_none():
    medium = _medium(1e9)
    r = Ray(Vec3(0, 0, -5), Vec3(0, 0, 1))
    assert medium.hit(r, 7.0, math.inf) is None


def test_interval_ending_before_entry_gives_none():
    medium = _medium(1e9)
    r = Ray(Vec3(0, 0, -5), Vec3(0, 0, 1))
    assert medium.hit(r, 0.001, 3.0) is None


def test_ray_starting_inside_scatters_from_start():
    medium = _medium(1e9)
    r = Ray(Vec3(0, 0, 0), Vec3(0, 0, 1))
    rec = medium.hit(r, 0.0, math.inf)
    assert rec is not None
    assert rec.t == pytest.approx(0.0, abs=1e-3)


def test_texture_phase_function_colour():
    class _Tex:
        def value(self, u, v, p):
            return Color(0.1, 0.2, 0.3)

    medium = ConstantMedium(Sphere(Vec3(0, 0, 0), 1.0), 1e9, _Tex())
    r = Ray(Vec3(0, 0, -5), Vec3(0, 0, 1))
    rec = medium.hit(r, 0.001, math.inf)
    scatter = rec.mat.scatter(r, rec)
    assert scatter.attenuation == Color(0.1, 0.2, 0.3)
    assert scatter.scattered.origin == rec.p