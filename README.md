# minirt

A small ray tracer. It reads a scene description from a `.rt` file and
renders it with one point light, an ambient term and hard shadows into a
binary PPM (P6) image. A scene may hold spheres, planes and cylinders
(with capped ends).

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
minirt scene.rt
```

This parses `scene.rt`, renders it and writes `scene.ppm` next to it.

| Option | Meaning | Default |
|--------|---------|---------|
| `scene` | scene file; its name must end in `.rt` | required |
| `-o`, `--output` | image file to write | scene name with `.ppm` |
| `--width` | image width in pixels (positive) | 1200 |
| `--height` | image height in pixels (positive) | 700 |

A wrong suffix, a malformed or incomplete scene, or a file that cannot be
read or written is reported on standard error and the command exits with
status 1. Bad command-line arguments are reported by the argument parser
with status 2.

## Scene files

A scene file holds one element per line. Fields are separated by spaces;
vectors and colours are three comma-separated numbers with no spaces.
Blank lines are allowed.

```
A  0.2                255,255,255
C  0,0,-20            0,0,1            70
L  -10,10,-10         0.7              255,255,255
sp 0,0,0              6                255,0,0
pl 0,-3,0             0,1,0            0,0,255
cy 5,0,2              0,1,0            2    4    0,255,0
```

| Identifier | Fields |
|------------|--------|
| `A` | ambient ratio in [0, 1], colour |
| `C` | position, orientation (each component in [-1, 1]), field of view in [0, 180] |
| `L` | position, brightness ratio in [0, 1], a fourth field (a colour) |
| `sp` | centre, diameter, colour |
| `pl` | a point on the plane, normal (each component in [-1, 1]), colour |
| `cy` | centre, axis (each component in [-1, 1]), diameter, height, colour |

Colour components lie in [0, 255]. Range checks look at the integer part
of a number, so for example a ratio of `1.5` is accepted. `A`, `C` and
`L` may each appear only once and must all be present, and the scene must
contain at least one sphere, one plane and one cylinder. `A`, `C` and `L`
may be preceded by spaces; `sp`, `pl` and `cy` must start the line. Any
other identifier is an error.

## Using it as a library

```python
from minirt.parser import load_scene
from minirt.render import render

scene = load_scene("scene.rt")
image = render(scene, 400, 300)
image.save_ppm("scene.ppm")
```

`load_scene` raises `minirt.parser.ParseError` (a `ValueError`) when the
file name lacks the `.rt` suffix or the scene is invalid, and lets
`OSError` through when the file cannot be opened. Scenes can also be
built from lines of text with `minirt.parser.parse_scene`, or one line at
a time with `minirt.parser.SceneParser` (`parse_line`, then `finish`).

The pieces underneath are usable on their own:

- `minirt.vector.Vector` — immutable 3D vector with `+`, `-`, scalar `*`,
  negation, `dot`, `length`, `normalized`, `projection` and
  `perpendicular`.
- `minirt.scene` — the dataclasses `Scene`, `Ambient`, `Camera`, `Light`,
  `Sphere`, `Plane`, `Cylinder` and `Color` (with `to_int` packing
  0xRRGGBB).
- `minirt.numbers` — `is_valid_double`, `is_valid_vector`, `parse_double`
  and `parse_vector` for the numeric fields of a scene file.
- `minirt.intersect` — `Ray`, `Hit`, `HitKind`, the tests
  `intersect_sphere`, `intersect_plane` and `intersect_cylinder`, and
  `find_nearest_hit` over a whole scene.
- `minirt.shading` — `compute_lighting`, `is_in_shadow`, `shade` and
  `compute_pixel`, which returns the colour seen at a point in normalised
  device coordinates or `None` when the ray misses.
- `minirt.render.Image` — a pixel buffer with `put_pixel`, `get_pixel`,
  `to_ppm` and `save_ppm`; `render` fills one, leaving pixels whose ray
  misses at the background colour 0xF0E68C.

## Limitations

- The image is written to a file; nothing is shown in a window.
- Rays always leave the camera position along +z through the image
  plane: the camera orientation and field of view are checked but not
  used.
- The light's fourth field is required but neither checked nor used;
  light is white.
- Every sphere is drawn in the colour of the first sphere, and every
  plane and cylinder in the colour of the first plane.