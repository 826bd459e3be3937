# raytracer

A small path tracer that renders a scene of spheres to an image file. Each
pixel is the average of many random samples. The average is gamma-corrected
(square root) before it is written as 8-bit RGB.

Three materials are available:

- `Lambertian(albedo)`: a diffuse surface
- `Metal(albedo, fuzz)`: a reflective surface. `fuzz` adds random blur to the reflection.
- `Dielectric(refraction_index)`: a glass-like surface that reflects or refracts, using Schlick's approximation

The camera takes a vertical field of view, a position (`look_from`), a target
(`look_at`), an up vector (`view_up`) and a defocus angle and focus distance
for depth of field.

## Installation

```
pip install .
```

## Rendering the demo scene

```
raytracer
```

This builds the demo scene and writes the rendering to `output.png` in the
current directory. The scene has a large ground sphere, a hollow glass
sphere, a diffuse sphere, a metal sphere and a field of small random
spheres.

Options:

- `--output PATH`: the image file to write. The default is `output.png`. Pillow picks the format from the file extension.
- `--width N`: the image width in pixels. The default is 1024. The height follows from the 16:9 aspect ratio.
- `--samples N`: the number of samples per pixel. The default is 200.
- `--max-depth N`: the maximum number of bounces per ray. The default is 30.
- `--seed N`: the random seed. With a seed, the scene and the image are reproducible.

Rendering at full size is slow. For a quick look, use a small size:

```
raytracer --width 160 --samples 10 --max-depth 8 --seed 1 --output preview.png
```

## Using it as a library

```python
import random

from raytracer.camera import Camera, CameraParams
from raytracer.hitable import HitableList, Sphere
from raytracer.material import Dielectric, Lambertian, Metal
from raytracer.vector import Vec3

world = HitableList()
world.push(Sphere(Vec3(0.0, -1000.0, 0.0), 1000.0, Lambertian(Vec3(0.5, 0.5, 0.5))))
world.push(Sphere(Vec3(0.0, 1.0, 0.0), 1.0, Dielectric(1.5)))
world.push(Sphere(Vec3(4.0, 1.0, 0.0), 1.0, Metal(Vec3(0.8, 0.6, 0.2), 0.1)))

params = CameraParams(
    aspect_ratio=16.0 / 9.0,
    image_width=320,
    samples_per_pixel=20,
    max_depth=10,
    vertical_fov=25.0,
    look_from=Vec3(13.0, 2.0, 3.0),
    look_at=Vec3(0.0, 0.0, 0.0),
    view_up=Vec3(0.0, 1.0, 0.0),
    defocus_angle=0.6,
    focus_distance=10.0,
)

camera = Camera(params, random.Random(42))
camera.render(world, "scene.png")
```

The modules are:

- `raytracer.vector`: `Vec3`, an immutable 3D vector. It supports `+`, `-`, scalar `*` and `/`, `dot`, `cross`, `length`, `normalize` and component-wise `mul`. `normalize` raises `ValueError` for a zero vector.
- `raytracer.ray`: `Ray`, and `FactorRange`, an open interval of ray parameters.
- `raytracer.material`: the three materials, each with `scatter(ray, record, rng)`. The module also has the helpers `reflect`, `refract` and `reflectance`.
- `raytracer.hitable`: `HitRecord`, the abstract base class `Hitable`, `Sphere`, and `HitableList`. `HitableList` returns the closest hit among its items and supports `len()` and iteration.
- `raytracer.camera`: `CameraParams` and `Camera`.
  - `Camera.get_ray(i, j)` returns a jittered ray through a pixel.
  - `Camera.ray_color(ray, depth, world)` traces one ray.
  - `Camera.render_pixels(world)` returns raw RGB bytes, row by row, without writing a file.
  - `Camera.render(world, path)` saves the image.
  - `Camera` raises `ValueError` if `samples_per_pixel` is less than 1.
- `raytracer.scene`: `random_scene(rng)` returns the demo world. `default_camera_params()` returns the demo camera settings. `main(argv)` is the `raytracer` command.

If you pass a seeded `random.Random` to `random_scene` and to `Camera`, the
rendering is reproducible. If you give `Camera` no generator, it makes its own
unseeded one.

## Limits

- Spheres are the only shape.
- Rendering runs in a single thread in pure Python, so large images with many samples take a long time.
- The command renders only the built-in demo scene. There is no scene file format.

## Running the tests

```
pip install ".[test]"
pytest
```