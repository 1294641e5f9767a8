import math
import random

import pytest

from weekendtracer.montecarlo import (
    estimate_cos_cubed,
    estimate_cos_density,
    estimate_halfway,
    estimate_pi,
    estimate_sphere_importance,
    integrate_x_sq,
    main,
    sphere_plot_points,
)


@pytest.fixture(autouse=True)
def _seed():
    random.seed(1234)


def test_estimate_pi_close_to_pi():
    result = estimate_pi(200)
    assert result.regular == pytest.approx(math.pi, abs=0.05)
    assert result.stratified == pytest.approx(math.pi, abs=0.01)


def test_stratified_is_no_worse_on_average():
    result = estimate_pi(300)
    assert abs(result.stratified - math.pi) <= abs(result.regular - math.pi) + 0.01


def test_cos_cubed_tends_to_half_pi():
    assert estimate_cos_cubed(100_000) == pytest.approx(math.pi / 2, rel=0.02)


def test_cos_density_tends_to_half_pi():
    assert estimate_cos_density(100_000) == pytest.approx(math.pi / 2, rel=0.01)


def test_cos_density_has_less_variance_than_uniform():
    uniform = [estimate_cos_cubed(2000) for _ in range(10)]
    weighted = [estimate_cos_density(2000) for _ in range(10)]

    def spread(values):
        return max(values) - min(values)

    assert spread(weighted) < spread(uniform)


def test_halfway_invariants():
    result = estimate_halfway(5000)
    assert 0.0 <= result.halfway < 2 * math.pi
    assert result.area == pytest.approx(2 * math.pi * result.average)
    assert result.average > 0


def test_integrate_x_sq_single_sample():
    assert integrate_x_sq(1) == pytest.approx(8 / 3)


def test_sphere_importance():
    assert estimate_sphere_importance(100_000) == pytest.approx(4 * math.pi / 3, rel=0.02)


def test_sphere_plot_points_on_unit_sphere():
    points = sphere_plot_points(500)
    assert len(points) == 500
    assert all(p.length() == pytest.approx(1.0) for p in points)


def test_main_pi_output(capsys):
    assert main(["pi", "-n", "10"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0].startswith("Regular    Estimate of Pi = ")
    assert lines[1].startswith("Stratified Estimate of Pi = ")
    assert len(lines[0].split(".")[-1]) == 12


def test_main_cos_cubed_prints_reference(capsys):
    main(["cos_cubed", "--samples", "100"])
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == f"PI/2 = {math.pi / 2:.12f}"
    assert lines[1].startswith("Estimate = ")


def test_main_sphere_plot_lines(capsys):
    main(["sphere_plot", "-n", "5"])
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 5
    for line in lines:
        x, y, z = map(float, line.split())
        assert x * x + y * y + z * z == pytest.approx(1.0, abs=1e-4)


def test_main_rejects_unknown_program():
    with pytest.raises(SystemExit):
        main(["nonsense"])


def test_main_rejects_non_positive_count():
    with pytest.raises(SystemExit):
        main(["pi", "-n", "0"])