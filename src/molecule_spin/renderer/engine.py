"""Core math utilities and ray casting engine for the spinning molecule."""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from enum import IntEnum
from typing import List, Optional, Sequence, Tuple, Union


@dataclass(frozen=True, slots=True)
class Vec3:
    """Lightweight immutable 3D vector."""

    x: float
    y: float
    z: float

    def __add__(self, other: "Vec3") -> "Vec3":
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vec3") -> "Vec3":
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> "Vec3":
        if not isinstance(scalar, (int, float)):
            raise TypeError("Vec3 can only be multiplied by a scalar")
        return Vec3(self.x * scalar, self.y * scalar, self.z * scalar)

    def __rmul__(self, scalar: float) -> "Vec3":
        return self.__mul__(scalar)

    def __truediv__(self, scalar: float) -> "Vec3":
        if scalar == 0:
            raise ZeroDivisionError("Division by zero in Vec3")
        return Vec3(self.x / scalar, self.y / scalar, self.z / scalar)

    def __neg__(self) -> "Vec3":
        return Vec3(-self.x, -self.y, -self.z)

    def dot(self, other: "Vec3") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def length(self) -> float:
        return math.sqrt(self.dot(self))

    def length_squared(self) -> float:
        return self.dot(self)

    def normalized(self) -> "Vec3":
        # Unguarded: a zero vector raises ZeroDivisionError.
        return self / self.length()


class Axis(IntEnum):
    X = 0
    Y = 1
    Z = 2


NO_HIT = -1.0


def intersect_sphere(origin: Vec3, direction: Vec3, center: Vec3, radius: float) -> float:
    """Return the near ray parameter where the ray meets the sphere.

    Solves ``|O + tD - C|^2 = r^2``. Returns ``NO_HIT`` (-1.0) when the
    discriminant is negative. The near root is returned even when it lies
    behind the origin, so callers only accept ``t > 0``.
    """

    oc = origin - center
    a = direction.dot(direction)
    b = 2.0 * oc.dot(direction)
    c = oc.dot(oc) - radius * radius
    discriminant = b * b - 4.0 * a * c
    if discriminant < 0.0:
        return NO_HIT
    return (-b - math.sqrt(discriminant)) / (2.0 * a)


def rotate_point(point: Vec3, theta: float, axis: Axis = Axis.X) -> Vec3:
    """Rotate ``point`` by ``theta`` radians about a principal axis through the origin."""

    cos_t, sin_t = math.cos(theta), math.sin(theta)
    if axis == Axis.X:
        return Vec3(
            point.x,
            point.y * cos_t - point.z * sin_t,
            point.y * sin_t + point.z * cos_t,
        )
    if axis == Axis.Y:
        return Vec3(
            point.z * sin_t + point.x * cos_t,
            point.y,
            point.z * cos_t - point.x * sin_t,
        )
    if axis == Axis.Z:
        return Vec3(
            point.x * cos_t - point.y * sin_t,
            point.x * sin_t + point.y * cos_t,
            point.z,
        )
    raise ValueError(f"Unsupported rotation axis '{axis}'")


def glyph_for_luminance(luminance: float, glyphs: Sequence[str]) -> str:
    """Bucket a luminance value into the ramp; negative values get the dimmest glyph."""

    if luminance < 0.0:
        return glyphs[0]
    index = int(len(glyphs) * luminance)
    # luminance of exactly 1.0 lands one past the end of the ramp
    return glyphs[min(index, len(glyphs) - 1)]


@dataclass(frozen=True, slots=True)
class Sphere:
    """An opaque sphere at its rest position."""

    name: str
    center: Vec3
    radius: float

    def __post_init__(self) -> None:
        if self.radius <= 0.0:
            raise ValueError(f"Sphere '{self.name}' requires a positive radius")

    def rotated(self, theta: float, axis: Axis) -> "Sphere":
        return Sphere(self.name, rotate_point(self.center, theta, axis), self.radius)


DEFAULT_GLYPHS = ".-:=+*#@"


@dataclass(frozen=True, slots=True)
class Scene:
    """Immutable scene description, built once at startup.

    ``spheres`` are listed in hit priority order. ``camera_distance`` places
    the plane of ray origins at ``z = -camera_distance``; all rays share
    ``ray_direction`` (orthographic projection). ``pixel_aspect`` stretches
    rows so spheres stay round in non-square character cells.
    """

    spheres: Tuple[Sphere, ...]
    light_direction: Vec3 = Vec3(-1.0, 1.0, 1.0)
    glyphs: str = DEFAULT_GLYPHS
    ray_direction: Vec3 = Vec3(0.0, 0.0, 1.0)
    camera_distance: float = 30.0
    width: int = 40
    height: int = 20
    pixel_aspect: float = 2.0
    rotation_axis: Axis = Axis.Y
    steps_per_radian: float = 100.0
    resolve_nearest: bool = False

    def __post_init__(self) -> None:
        if self.width < 1 or self.height < 1:
            raise ValueError("Scene requires width and height >= 1")
        if not self.glyphs:
            raise ValueError("Scene requires at least one glyph")
        if self.steps_per_radian <= 0.0:
            raise ValueError("Scene requires a positive steps_per_radian")

    def with_overrides(self, **changes) -> "Scene":
        return replace(self, **changes)


FrameMatrix = List[List[str]]


class RenderEngine:
    """Pure renderer mapping a rotation angle to a grid of ASCII glyphs."""

    def __init__(self, scene: Scene) -> None:
        self.scene = scene
        self.light_direction = scene.light_direction.normalized()
        self._inverse_light = -self.light_direction
        self._origin_cache: Optional[List[List[Vec3]]] = None

    @property
    def width(self) -> int:
        return self.scene.width

    @property
    def height(self) -> int:
        return self.scene.height

    def frame_angle(self, index: int) -> float:
        return index / self.scene.steps_per_radian

    def total_rotation(self, frame_count: int) -> float:
        return frame_count / self.scene.steps_per_radian

    def sphere_positions(self, theta: float) -> Tuple[Sphere, ...]:
        axis = self.scene.rotation_axis
        return tuple(sphere.rotated(theta, axis) for sphere in self.scene.spheres)

    def cell_origin(self, column: int, row: int) -> Vec3:
        scene = self.scene
        x_world = column - (scene.width // 2) + 0.5
        y_world = (row - (scene.height // 2) + 0.5) * scene.pixel_aspect
        return Vec3(x_world, y_world, -scene.camera_distance)

    def shade(self, origin: Vec3, spheres: Sequence[Sphere]) -> str:
        hit = self._resolve_hit(origin, spheres)
        if hit is None:
            return " "

        sphere, distance = hit
        point = origin + self.scene.ray_direction * distance
        normal = (point - sphere.center).normalized()
        luminance = normal.dot(self._inverse_light)
        return glyph_for_luminance(luminance, self.scene.glyphs)

    def render(self, theta: float, output_format: str = "text") -> Union[str, FrameMatrix]:
        spheres = self.sphere_positions(theta)
        shade = self.shade
        frame: FrameMatrix = [
            [shade(origin, spheres) for origin in row] for row in self._ensure_origin_cache()
        ]

        if output_format == "matrix":
            return frame
        if output_format == "text":
            return self._compose_frame(frame)
        raise ValueError(f"Unsupported output_format '{output_format}'")

    def render_frame(self, index: int, output_format: str = "text") -> Union[str, FrameMatrix]:
        return self.render(self.frame_angle(index), output_format=output_format)

    # Internal helpers -------------------------------------------------

    def _resolve_hit(
        self, origin: Vec3, spheres: Sequence[Sphere]
    ) -> Optional[Tuple[Sphere, float]]:
        direction = self.scene.ray_direction

        if not self.scene.resolve_nearest:
            # First positive hit in priority order, not the closest one.
            for sphere in spheres:
                distance = intersect_sphere(origin, direction, sphere.center, sphere.radius)
                if distance > 0.0:
                    return sphere, distance
            return None

        closest: Optional[Tuple[Sphere, float]] = None
        for sphere in spheres:
            distance = intersect_sphere(origin, direction, sphere.center, sphere.radius)
            if distance <= 0.0:
                continue
            if closest is None or distance < closest[1]:
                closest = (sphere, distance)
        return closest

    def _ensure_origin_cache(self) -> List[List[Vec3]]:
        if self._origin_cache is None:
            self._origin_cache = [
                [self.cell_origin(column, row) for column in range(self.width)]
                for row in range(self.height)
            ]
        return self._origin_cache

    @staticmethod
    def _compose_frame(frame: Sequence[Sequence[str]]) -> str:
        return "".join("".join(row) + "\n" for row in frame)
