"""Reading scene descriptions (``.rt`` files) into a Scene."""

from __future__ import annotations

import math
import os
from collections.abc import Iterable
from typing import Callable

from minirt.numbers import is_valid_double, is_valid_vector, parse_double, parse_vector
from minirt.scene import Ambient, Camera, Color, Cylinder, Light, Plane, Scene, Sphere
from minirt.vector import Vector

SCENE_SUFFIX = ".rt"

_VALIDATORS: dict[str, Callable[[str], bool]] = {
    "vector": is_valid_vector,
    "number": is_valid_double,
}


class ParseError(ValueError):
    """Raised when a scene description is malformed or incomplete."""


def _fields(line: str) -> list[str]:
    """Split a line on spaces, dropping empty pieces."""
    return [piece for piece in line.split(" ") if piece]


def _in_range(value: float, low: int, high: int) -> bool:
    """Range check on the integer part of ``value``, as the format requires."""
    if not math.isfinite(value):
        return False
    return low <= math.trunc(value) <= high


def _check_layout(fields: list[str], count: int, id_length: int,
                  kinds: tuple[str, ...], name: str) -> None:
    if len(fields) != count:
        raise ParseError(f"invalid {name} element number")
    if len(fields[0]) != id_length:
        raise ParseError(f"invalid identifier {fields[0]!r}")
    for text, kind in zip(fields[1:], kinds):
        if not _VALIDATORS[kind](text):
            raise ParseError(f"invalid {name} element {text.rstrip()!r}")


def _color(vector: Vector, name: str) -> Color:
    if not all(_in_range(channel, 0, 255) for channel in vector):
        raise ParseError(f"out of range {name} element value")
    return Color(*(math.trunc(channel) for channel in vector))


def _check_direction(vector: Vector, name: str) -> None:
    if not all(_in_range(component, -1, 1) for component in vector):
        raise ParseError(f"out of range {name} element value")


class SceneParser:
    """Incremental parser: feed lines, then call :meth:`finish`."""

    def __init__(self) -> None:
        self._scene = Scene()

    def parse_line(self, line: str) -> None:
        """Parse one line of a scene description into the scene being built."""
        lead = line.lstrip(" ")[:1]
        if lead == "A":
            self._parse_ambient(line)
        elif lead == "C":
            self._parse_camera(line)
        elif lead == "L":
            self._parse_light(line)
        elif line.startswith("sp"):
            self._parse_sphere(line)
        elif line.startswith("pl"):
            self._parse_plane(line)
        elif line.startswith("cy"):
            self._parse_cylinder(line)
        elif lead in ("", "\n"):
            return
        else:
            raise ParseError("found unexpected identifier")

    def finish(self) -> Scene:
        """Return the scene, or raise if a required element is missing."""
        if not self._scene.is_complete():
            raise ParseError("Missing identifier")
        return self._scene

    def _parse_ambient(self, line: str) -> None:
        if self._scene.ambient is not None:
            raise ParseError("No more than one A")
        fields = _fields(line)
        _check_layout(fields, 3, 1, ("number", "vector"), "ambient")
        ratio = parse_double(fields[1])
        color_vector = parse_vector(fields[2])
        if not _in_range(ratio, 0, 1):
            raise ParseError("out of range ambient element value")
        self._scene.ambient = Ambient(ratio, _color(color_vector, "ambient"))

    def _parse_camera(self, line: str) -> None:
        if self._scene.camera is not None:
            raise ParseError("No more than one C")
        fields = _fields(line)
        _check_layout(fields, 4, 1, ("vector", "vector", "number"), "camera")
        origin = parse_vector(fields[1])
        direction = parse_vector(fields[2])
        fov = parse_double(fields[3])
        _check_direction(direction, "camera")
        if not _in_range(fov, 0, 180):
            raise ParseError("out of range camera element value")
        self._scene.camera = Camera(origin, direction, fov)

    def _parse_light(self, line: str) -> None:
        if self._scene.light is not None:
            raise ParseError("No more than one L")
        fields = _fields(line)
        _check_layout(fields, 4, 1, ("vector", "number"), "light")
        origin = parse_vector(fields[1])
        brightness = parse_double(fields[2])
        if not _in_range(brightness, 0, 1):
            raise ParseError("out of range light element value")
        self._scene.light = Light(origin, brightness)

    def _parse_sphere(self, line: str) -> None:
        fields = _fields(line)
        _check_layout(fields, 4, 2, ("vector", "number", "vector"), "sphere")
        center = parse_vector(fields[1])
        diameter = parse_double(fields[2])
        color = _color(parse_vector(fields[3]), "sphere")
        self._scene.spheres.append(Sphere(center, diameter, color))

    def _parse_plane(self, line: str) -> None:
        fields = _fields(line)
        _check_layout(fields, 4, 2, ("vector", "vector", "vector"), "plane")
        point = parse_vector(fields[1])
        normal = parse_vector(fields[2])
        color_vector = parse_vector(fields[3])
        color = _color(color_vector, "plane")
        _check_direction(normal, "plane")
        self._scene.planes.append(Plane(point, normal, color))

    def _parse_cylinder(self, line: str) -> None:
        fields = _fields(line)
        _check_layout(
            fields, 6, 2,
            ("vector", "vector", "number", "number", "vector"),
            "cylinder",
        )
        center = parse_vector(fields[1])
        axis = parse_vector(fields[2])
        diameter = parse_double(fields[3])
        height = parse_double(fields[4])
        color = _color(parse_vector(fields[5]), "cylinder")
        _check_direction(axis, "cylinder")
        self._scene.cylinders.append(Cylinder(center, axis, diameter, height, color))


def parse_scene(lines: Iterable[str]) -> Scene:
    """Parse every line and return the complete scene."""
    parser = SceneParser()
    for line in lines:
        parser.parse_line(line)
    return parser.finish()


def check_filename(filename: str | os.PathLike[str]) -> str:
    """Return the file name as a string if it carries the ``.rt`` suffix."""
    name = os.fspath(filename)
    if not name.endswith(SCENE_SUFFIX):
        raise ParseError(f"File has to be suffixed {SCENE_SUFFIX}")
    return name


def load_scene(path: str | os.PathLike[str]) -> Scene:
    """Read and parse a scene file; OSError propagates if it cannot be opened."""
    name = check_filename(path)
    with open(name, encoding="utf-8") as handle:
        return parse_scene(handle)