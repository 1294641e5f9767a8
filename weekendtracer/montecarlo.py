"""Small Monte Carlo experiments: estimating pi and a few integrals."""

from __future__ import annotations

import argparse
import itertools
import math
from dataclasses import dataclass
from typing import Callable, Sequence

from .vec3 import Vec3, random_cosine_direction, random_double, random_unit_vector


@dataclass(frozen=True, slots=True)
class PiEstimate:
    """Plain and jittered (stratified) estimates of pi."""

    regular: float
    stratified: float


@dataclass(frozen=True, slots=True)
class HalfwayEstimate:
    """Average and area of the sampled curve, and where half its area is reached."""

    average: float
    area: float
    halfway: float


def estimate_pi(sqrt_n: int = 1000) -> PiEstimate:
    """Estimate pi from ``sqrt_n``**2 random and ``sqrt_n``**2 stratified points."""
    inside = 0
    inside_stratified = 0
    for i, j in itertools.product(range(sqrt_n), repeat=2):
        x = random_double(-1, 1)
        y = random_double(-1, 1)
        if x * x + y * y < 1:
            inside += 1

        x = 2 * ((i + random_double()) / sqrt_n) - 1
        y = 2 * ((j + random_double()) / sqrt_n) - 1
        if x * x + y * y < 1:
            inside_stratified += 1

    total = sqrt_n * sqrt_n
    return PiEstimate(4.0 * inside / total, 4.0 * inside_stratified / total)


def estimate_cos_cubed(n: int = 1_000_000) -> float:
    """Integrate cos^3 over the hemisphere with uniform sampling; tends to pi/2."""
    pdf = 1.0 / (2.0 * math.pi)
    total = 0.0
    for _ in range(n):
        cos_theta = 1 - random_double()
        total += cos_theta**3 / pdf
    return total / n


def estimate_cos_density(n: int = 1_000_000) -> float:
    """Integrate cos^3 over the hemisphere with cosine-weighted sampling; tends to pi/2."""
    total = 0.0
    for _ in range(n):
        d = random_cosine_direction()
        total += d.z**3 / (d.z / math.pi)
    return total / n


def estimate_halfway(n: int = 10_000) -> HalfwayEstimate:
    """Sample exp(-x/2pi) sin^2 x on [0, 2pi) and find where half its area lies."""
    samples = []
    for _ in range(n):
        x = random_double(0, 2 * math.pi)
        p_x = math.exp(-x / (2 * math.pi)) * math.sin(x) ** 2
        samples.append((x, p_x))

    total = sum(p for _, p in samples)
    samples.sort(key=lambda s: s[0])

    half_sum = total / 2.0
    running = itertools.accumulate(p for _, p in samples)
    halfway = next(
        (x for (x, _), acc in zip(samples, running) if acc >= half_sum),
        0.0,
    )
    return HalfwayEstimate(total / n, 2 * math.pi * total / n, halfway)


def integrate_x_sq(n: int = 1) -> float:
    """Integrate x^2 over [0, 2] by importance sampling with a perfect pdf."""
    total = 0.0
    for _ in range(n):
        x = 8.0 * random_double() ** (1.0 / 3.0)
        pdf = (3.0 / 8.0) * x * x
        total += x * x / pdf if pdf else math.nan
    return total / n


def estimate_sphere_importance(n: int = 1_000_000) -> float:
    """Integrate cos^2 over the unit sphere with uniform sampling; tends to 4pi/3."""
    pdf = 1 / (4 * math.pi)
    total = 0.0
    for _ in range(n):
        d = random_unit_vector()
        total += d.z * d.z / pdf
    return total / n


def sphere_plot_points(count: int = 2000) -> list[Vec3]:
    """Uniformly distributed points on the unit sphere."""
    points = []
    for _ in range(count):
        r1 = random_double()
        r2 = random_double()
        radial = 2 * math.sqrt(r2 * (1 - r2))
        x = math.cos(2 * math.pi * r1) * radial
        y = math.sin(2 * math.pi * r1) * radial
        z = 1 - 2 * r2
        points.append(Vec3(x, y, z))
    return points


def _fixed(value: float) -> str:
    return f"{value:.12f}"


def _run_pi(n: int) -> list[str]:
    result = estimate_pi(n)
    return [
        f"Regular    Estimate of Pi = {_fixed(result.regular)}",
        f"Stratified Estimate of Pi = {_fixed(result.stratified)}",
    ]


def _run_cos_cubed(n: int) -> list[str]:
    return [f"PI/2 = {_fixed(math.pi / 2.0)}", f"Estimate = {_fixed(estimate_cos_cubed(n))}"]


def _run_cos_density(n: int) -> list[str]:
    return [f"PI/2 = {_fixed(math.pi / 2.0)}", f"Estimate = {_fixed(estimate_cos_density(n))}"]


def _run_halfway(n: int) -> list[str]:
    result = estimate_halfway(n)
    return [
        f"Average = {_fixed(result.average)}",
        f"Area under curve = {_fixed(result.area)}",
        f"Halfway = {_fixed(result.halfway)}",
    ]


def _run_integrate(n: int) -> list[str]:
    return [f"I = {_fixed(integrate_x_sq(n))}"]


def _run_sphere_importance(n: int) -> list[str]:
    return [f"I = {_fixed(estimate_sphere_importance(n))}"]


def _run_sphere_plot(n: int) -> list[str]:
    return [f"{p.x:g} {p.y:g} {p.z:g}" for p in sphere_plot_points(n)]


_PROGRAMS: dict[str, tuple[int, Callable[[int], list[str]]]] = {
    "pi": (1000, _run_pi),
    "cos_cubed": (1_000_000, _run_cos_cubed),
    "cos_density": (1_000_000, _run_cos_density),
    "estimate_halfway": (10_000, _run_halfway),
    "integrate_x_sq": (1, _run_integrate),
    "sphere_importance": (1_000_000, _run_sphere_importance),
    "sphere_plot": (2000, _run_sphere_plot),
}


def main(argv: Sequence[str] | None = None) -> int:
    """Run one of the experiments and print its results."""
    parser = argparse.ArgumentParser(description="Monte Carlo experiments.")
    parser.add_argument("program", choices=sorted(_PROGRAMS))
    parser.add_argument(
        "-n",
        "--samples",
        type=int,
        default=None,
        help="sample count (for pi: samples per side of the grid)",
    )
    args = parser.parse_args(argv)

    default, runner = _PROGRAMS[args.program]
    n = default if args.samples is None else args.samples
    if n <= 0:
        parser.error("sample count must be positive")
    for line in runner(n):
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())