# weekendtracer

A compact Monte Carlo ray tracer written in plain Python. It provides:

- vectors, points and colours (`Vec3`) and random sampling helpers
  (`weekendtracer.vec3`)
- closed intervals (`weekendtracer.interval`) and orthonormal bases
  (`weekendtracer.onb`)
- Perlin noise and turbulence (`weekendtracer.perlin`)
- rays, hit records, spheres, moving spheres and lists of objects
  (`weekendtracer.hittable`)
- Lambertian, metal, dielectric, diffuse-light and isotropic materials
  (`weekendtracer.material`)
- constant-density participating media such as smoke and fog
  (`weekendtracer.volume`)
- image loading for textures, as linear 8-bit RGB (`weekendtracer.image`)
- a random sphere scene and a ray colour estimator (`weekendtracer.scene`)
- small Monte Carlo integration experiments (`weekendtracer.montecarlo`)

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Monte Carlo experiments

The package installs one command, which runs one experiment and prints its
results:

```
weekendtracer-montecarlo pi
weekendtracer-montecarlo cos_density --samples 100000
```

The experiment is one of `pi`, `cos_cubed`, `cos_density`,
`estimate_halfway`, `integrate_x_sq`, `sphere_importance` and `sphere_plot`.
`-n` / `--samples` sets the sample count (for `pi`, the number of samples per
side of the grid); it must be positive.

The same experiments are available as functions:

```python
from weekendtracer.montecarlo import estimate_pi, estimate_cos_density, estimate_halfway

result = estimate_pi(100)
print(result.regular, result.stratified)
print(estimate_cos_density(100_000))

halfway = estimate_halfway(10_000)
print(halfway.average, halfway.area, halfway.halfway)
```

`sphere_plot_points(count)` returns uniformly distributed points on the unit
sphere as a list of `Vec3`.

## Tracing rays

```python
from weekendtracer.scene import random_scene, ray_color
from weekendtracer.hittable import Ray
from weekendtracer.vec3 import Vec3

world = random_scene()
r = Ray(Vec3(13, 2, 3), Vec3(-13, -2, -3))
print(ray_color(r, world, 50))
```

`ray_color` follows a ray through the world, scattering it off materials for
at most the given number of bounces, and returns the sky gradient when nothing
is hit. A ray that is absorbed, or still bouncing when the depth runs out,
gathers black.

Objects answer `hit(r, t_min, t_max)` with a `HitRecord` or `None`. Materials
answer `scatter(r_in, rec)` with a `Scatter` (attenuation and scattered ray) or
`None` when the ray is absorbed. A `ConstantMedium` wraps any hittable
boundary and scatters rays inside it with the given density:

```python
from weekendtracer.hittable import Sphere
from weekendtracer.volume import ConstantMedium
from weekendtracer.vec3 import Vec3

fog = ConstantMedium(Sphere(Vec3(0, 0, 0), 2.0), 0.5, Vec3(1, 1, 1))
```

## Images

`RtwImage("earthmap.jpg")` looks for the file in the directory named by the
`RTW_IMAGES` environment variable, then as given, then in `images/` in the
current directory and up to six parent directories. If nothing loads, its
`width` and `height` are 0 and `pixel_data(x, y)` returns magenta.

## Vector helpers

```python
from weekendtracer.vec3 import Vec3, dot, cross, unit_vector, reflect

v = unit_vector(Vec3(1, 2, 2))
print(v.length())
print(reflect(Vec3(1, -1, 0), Vec3(0, 1, 0)))
```

## What it does not do

There is no camera and no image output: the package traces individual rays
and reports their colours, but has no command or function that renders a
whole scene to a picture file. Likewise there are no bounding boxes or
bounding volume hierarchies; lists of objects are tested one by one.