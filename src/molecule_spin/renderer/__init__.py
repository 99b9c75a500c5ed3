"""ASCII ray casting toolkit for spinning molecules."""

from .engine import (
    Axis,
    RenderEngine,
    Scene,
    Sphere,
    Vec3,
    glyph_for_luminance,
    intersect_sphere,
    rotate_point,
)
from .objects import ATOM_RADII, HYDROXYMETHYLENE_XYZ, hydroxymethylene_scene, molecule_spheres
from .terminal import DisplaySink, TerminalController

__all__ = [
    "Axis",
    "RenderEngine",
    "Scene",
    "Sphere",
    "Vec3",
    "glyph_for_luminance",
    "intersect_sphere",
    "rotate_point",
    "ATOM_RADII",
    "HYDROXYMETHYLENE_XYZ",
    "hydroxymethylene_scene",
    "molecule_spheres",
    "DisplaySink",
    "TerminalController",
]
