"""Colour of a visible point: diffuse and ambient light with hard shadows."""

from __future__ import annotations

from minirt.intersect import Hit, HitKind, Ray, find_nearest_hit
from minirt.scene import Color, Scene
from minirt.vector import Vector

SHADOW_FACTOR = 0.3
SHADOW_BIAS = 1e-4


def compute_lighting(intensity: float, color: Color, scene: Scene) -> int:
    """Combine diffuse light of strength ``intensity`` with the ambient light.

    Channels are truncated to integers and clamped at 255; the result is
    packed as 0xRRGGBB.
    """
    factor = intensity * scene.light.brightness
    ratio = scene.ambient.ratio
    ambient = scene.ambient.color
    channels = (
        int(int(own * factor) + int(amb * ratio))
        for own, amb in ((color.r, ambient.r), (color.g, ambient.g), (color.b, ambient.b))
    )
    return Color(*(min(255, value) for value in channels)).to_int()


def is_in_shadow(point: Vector, scene: Scene, direction: Vector, distance: float) -> bool:
    """True when an object lies between ``point`` and a light ``distance`` away."""
    ray = Ray(point + direction * SHADOW_BIAS, direction)
    hit = find_nearest_hit(ray, scene)
    return hit is not None and hit.distance < distance


def _surface_color(hit: Hit, scene: Scene) -> Color:
    # Spheres take the first sphere's colour; planes and cylinders the first plane's.
    if hit.kind is HitKind.SPHERE:
        return scene.spheres[0].color
    return scene.planes[0].color


def shade(hit: Hit, scene: Scene, ray: Ray) -> int:
    """Colour of the point where a camera ray struck an object."""
    point = scene.camera.origin + ray.direction * hit.distance
    to_light = scene.light.origin - point
    lighting = to_light.normalized()
    normal = hit.normal
    if hit.kind is HitKind.CYLINDER and normal.dot(lighting) < 0:
        normal = -normal
    intensity = max(0.0, normal.dot(lighting))
    if is_in_shadow(point, scene, lighting, to_light.length()):
        intensity *= SHADOW_FACTOR
    return compute_lighting(intensity, _surface_color(hit, scene), scene)


def compute_pixel(ndc_x: float, ndc_y: float, scene: Scene) -> int | None:
    """Colour seen through normalised screen coordinates, or None on a miss."""
    ray = Ray(scene.camera.origin, Vector(ndc_x, ndc_y, 1).normalized())
    hit = find_nearest_hit(ray, scene)
    if hit is None:
        return None
    return shade(hit, scene, ray)