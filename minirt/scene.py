"""Scene description: lights, camera and the objects to render."""

from __future__ import annotations

from dataclasses import dataclass, field

from minirt.vector import Vector


@dataclass(frozen=True)
class Color:
    """An RGB colour with integer channels."""

    r: int
    g: int
    b: int

    def to_int(self) -> int:
        """Pack the channels as 0xRRGGBB."""
        return (self.r << 16) | (self.g << 8) | self.b


@dataclass
class Ambient:
    """Ambient lighting: a ratio in [0, 1] and a colour."""

    ratio: float
    color: Color


@dataclass
class Camera:
    """Viewpoint, viewing direction and horizontal field of view in degrees."""

    origin: Vector
    direction: Vector
    fov: float


@dataclass
class Light:
    """A point light with a brightness ratio in [0, 1]."""

    origin: Vector
    brightness: float


@dataclass
class Sphere:
    center: Vector
    diameter: float
    color: Color


@dataclass
class Plane:
    point: Vector
    normal: Vector
    color: Color


@dataclass
class Cylinder:
    center: Vector
    axis: Vector
    diameter: float
    height: float
    color: Color


@dataclass
class Scene:
    """Everything a scene file describes."""

    ambient: Ambient | None = None
    camera: Camera | None = None
    light: Light | None = None
    spheres: list[Sphere] = field(default_factory=list)
    planes: list[Plane] = field(default_factory=list)
    cylinders: list[Cylinder] = field(default_factory=list)

    def is_complete(self) -> bool:
        """True when every required element has been declared at least once."""
        return (
            self.ambient is not None
            and self.camera is not None
            and self.light is not None
            and bool(self.spheres)
            and bool(self.planes)
            and bool(self.cylinders)
        )