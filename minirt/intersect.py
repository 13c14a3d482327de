"""Ray intersection with spheres, planes and cylinders."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

from minirt.scene import Cylinder, Plane, Scene, Sphere
from minirt.vector import Vector

_PARALLEL_EPSILON = 1e-6


class HitKind(Enum):
    """Kind of object a ray struck."""

    SPHERE = "sphere"
    PLANE = "plane"
    CYLINDER = "cylinder"


@dataclass(frozen=True)
class Ray:
    """A half-line from ``origin`` along ``direction``."""

    origin: Vector
    direction: Vector

    def at(self, distance: float) -> Vector:
        """Point reached after travelling ``distance`` along the direction."""
        return self.origin + self.direction * distance


@dataclass(frozen=True)
class Hit:
    """Where a ray struck an object: the ray parameter and the surface normal."""

    distance: float
    normal: Vector
    kind: HitKind


def intersect_sphere(ray: Ray, sphere: Sphere) -> Hit | None:
    """Nearest positive intersection of ``ray`` with ``sphere``.

    The roots are halved rather than divided by ``2a``, so the direction is
    expected to be of unit length.
    """
    oc = ray.origin - sphere.center
    a = ray.direction.dot(ray.direction)
    b = 2.0 * oc.dot(ray.direction)
    c = oc.dot(oc) - (sphere.diameter / 2) ** 2
    discriminant = b * b - 4 * a * c
    if discriminant < 0:
        return None
    root = math.sqrt(discriminant)
    near = (-b - root) / 2.0
    far = (-b + root) / 2.0
    distance = near if near > 0 else far
    if distance <= 0:
        return None
    normal = (ray.at(distance) - sphere.center).normalized()
    return Hit(distance, normal, HitKind.SPHERE)


def intersect_plane(ray: Ray, plane: Plane) -> Hit | None:
    """Intersection of ``ray`` with ``plane`` in front of the ray origin."""
    denominator = ray.direction.dot(plane.normal)
    if abs(denominator) < _PARALLEL_EPSILON:
        return None
    distance = (plane.point - ray.origin).dot(plane.normal) / denominator
    if distance <= 0:
        return None
    return Hit(distance, plane.normal, HitKind.PLANE)


def _body_hit(ray: Ray, cylinder: Cylinder, axis: Vector) -> tuple[float, Vector] | None:
    side_dir = ray.direction.perpendicular(axis)
    side_origin = (ray.origin - cylinder.center).perpendicular(axis)
    a = side_dir.dot(side_dir)
    b = 2 * side_dir.dot(side_origin)
    c = side_origin.dot(side_origin) - (cylinder.diameter / 2) ** 2
    discriminant = b * b - 4 * a * c
    if discriminant < 0 or a == 0:
        return None
    root = math.sqrt(discriminant)
    for distance in ((-b - root) / (2 * a), (-b + root) / (2 * a)):
        if distance < 0:
            continue
        from_center = ray.at(distance) - cylinder.center
        if abs(from_center.dot(axis)) <= cylinder.height / 2:
            return distance, from_center.perpendicular(axis).normalized()
    return None


def intersect_cylinder(ray: Ray, cylinder: Cylinder) -> Hit | None:
    """Nearest intersection of ``ray`` with the body or a cap of ``cylinder``."""
    axis = cylinder.axis.normalized()
    best = _body_hit(ray, cylinder, axis)

    along = ray.direction.dot(axis)
    if along != 0:
        caps = (
            (cylinder.center + axis * (cylinder.height / 2), axis),
            (cylinder.center + axis * (-cylinder.height / 2), -axis),
        )
        for cap_center, cap_normal in caps:
            distance = (cap_center - ray.origin).dot(axis) / along
            if not distance > 0:
                continue
            if (ray.at(distance) - cap_center).length() > cylinder.diameter / 2:
                continue
            if best is None or distance < best[0]:
                best = (distance, cap_normal)

    if best is None:
        return None
    return Hit(best[0], best[1], HitKind.CYLINDER)


def find_nearest_hit(ray: Ray, scene: Scene) -> Hit | None:
    """Closest hit among all objects of ``scene``, or None if the ray misses."""
    candidates = [
        *(intersect_sphere(ray, sphere) for sphere in scene.spheres),
        *(intersect_plane(ray, plane) for plane in scene.planes),
        *(intersect_cylinder(ray, cylinder) for cylinder in scene.cylinders),
    ]
    nearest: Hit | None = None
    closest = math.inf
    for hit in candidates:
        if hit is not None and hit.distance < closest:
            closest = hit.distance
            nearest = hit
    return nearest