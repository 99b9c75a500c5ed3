"""Predefined molecule scenes."""

from __future__ import annotations

from typing import Dict, List, Sequence, Tuple

from .engine import Scene, Sphere, Vec3

# Display radii in scene units, per element symbol.
ATOM_RADII: Dict[str, float] = {
    "C": 7.7,
    "O": 6.6,
    "H": 3.2,
}

AtomRecord = Tuple[str, str, float, float, float]

# Hydroxymethylene (H-C-O-H) geometry in angstrom, from
# https://www.nature.com/articles/s41557-018-0128-2
HYDROXYMETHYLENE_XYZ: Tuple[AtomRecord, ...] = (
    ("carbon", "C", -0.739089, -0.122224, 0.0),
    ("oxygen", "O", 0.563790, 0.083238, 0.0),
    ("hydrogen-1", "H", -1.136948, 0.918588, 0.0),
    ("hydrogen-2", "H", 0.989394, -0.784332, 0.0),
)


def molecule_spheres(atoms: Sequence[AtomRecord], scale: float = 10.0) -> Tuple[Sphere, ...]:
    """Return one sphere per atom, keeping the record order as hit priority."""

    spheres: List[Sphere] = []
    for name, element, x, y, z in atoms:
        try:
            radius = ATOM_RADII[element]
        except KeyError as exc:
            raise ValueError(f"Unknown element '{element}' for atom '{name}'") from exc
        spheres.append(Sphere(name, Vec3(x * scale, y * scale, z * scale), radius))
    return tuple(spheres)


def hydroxymethylene_scene(**overrides) -> Scene:
    """Return the default spinning hydroxymethylene scene.

    Keyword arguments replace individual ``Scene`` fields.
    """

    scene = Scene(spheres=molecule_spheres(HYDROXYMETHYLENE_XYZ))
    if overrides:
        scene = scene.with_overrides(**overrides)
    return scene
