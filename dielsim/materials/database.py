# dielsim/materials/database.py
"""
Sample registry (BaTiO3 / TiO2 / quartz, extensible).

- Geometry in millimetres, temperatures in °C.
- All built-in samples share the lab's 8 mm x 6 mm x 1.42 mm pellet geometry.
- curie_temp_C <= 0 (registry uses -1) marks a non-ferroelectric sample.
- The registry is immutable; extra samples (YAML config) produce a new one.

Public API (stable):
    get_material(name: str) -> MaterialSpec
    list_materials() -> list[str]
    default_registry() -> MaterialRegistry
"""

from __future__ import annotations
from dataclasses import dataclass
from collections.abc import Mapping
from typing import Dict, Iterable, Iterator
import math


__all__ = [
    "MaterialSpec",
    "MaterialRegistry",
    "NO_CURIE_POINT",
    "default_registry",
    "get_material",
    "list_materials",
]

NO_CURIE_POINT = -1.0


# ---------------------------------------------------------------------
# Data structures
# ---------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class MaterialSpec:
    """
    Fixed physical parameters of one dielectric sample.

    Attributes
    ----------
    name : str
        Display name, e.g. "Barium Titanate".
    area_mm2 : float
        Electrode area [mm^2].
    thickness_mm : float
        Pellet thickness (plate separation) [mm].
    curie_temp_C : float
        Nominal Curie temperature [°C]; NO_CURIE_POINT for non-ferroelectrics.
    """

    name: str
    area_mm2: float
    thickness_mm: float
    curie_temp_C: float = NO_CURIE_POINT

    @property
    def is_ferroelectric(self) -> bool:
        return self.curie_temp_C > 0

    @property
    def side_mm(self) -> float:
        """Edge length of the equivalent square electrode [mm]."""
        return math.sqrt(self.area_mm2)


class MaterialRegistry(Mapping[str, MaterialSpec]):
    """
    Read-only name -> MaterialSpec table.

    Enumeration order is alphabetical; the menu numbers samples in this order.
    """

    __slots__ = ("_specs",)

    def __init__(self, specs: Iterable[MaterialSpec] = ()) -> None:
        table: Dict[str, MaterialSpec] = {}
        for spec in specs:
            table[spec.name] = spec
        self._specs = {k: table[k] for k in sorted(table)}

    def __getitem__(self, name: str) -> MaterialSpec:
        try:
            return self._specs[name]
        except KeyError as exc:
            raise KeyError(f"material '{name}' not found") from exc

    def __iter__(self) -> Iterator[str]:
        return iter(self._specs)

    def __len__(self) -> int:
        return len(self._specs)

    def __repr__(self) -> str:
        return f"MaterialRegistry({list(self._specs)!r})"

    def get(self, name: str) -> MaterialSpec:  # type: ignore[override]
        """Strict lookup; unlike Mapping.get this raises KeyError."""
        return self[name]

    def names(self) -> list[str]:
        return list(self._specs)

    def by_index(self, index: int) -> MaterialSpec:
        """1-based lookup matching the numbered menu."""
        names = self.names()
        if not (1 <= index <= len(names)):
            raise IndexError(f"material index {index} outside 1..{len(names)}")
        return self._specs[names[index - 1]]

    def with_materials(self, specs: Iterable[MaterialSpec]) -> "MaterialRegistry":
        """New registry with `specs` added (same name overrides)."""
        return MaterialRegistry([*self._specs.values(), *specs])


# ---------------------------------------------------------------------
# Built-in samples
# ---------------------------------------------------------------------

_AREA_MM2 = 8.0 * 6.0
_THICKNESS_MM = 1.42

_BUILTIN: tuple[MaterialSpec, ...] = (
    MaterialSpec("Barium Titanate", _AREA_MM2, _THICKNESS_MM, 120.0),
    MaterialSpec("Titanium Dioxide", _AREA_MM2, _THICKNESS_MM, 50.0),
    MaterialSpec("Quartz", _AREA_MM2, _THICKNESS_MM, NO_CURIE_POINT),
)

_DEFAULT = MaterialRegistry(_BUILTIN)


# ---------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------


def default_registry() -> MaterialRegistry:
    """The built-in registry (shared; it is immutable)."""
    return _DEFAULT


def get_material(name: str) -> MaterialSpec:
    """Look up a built-in sample by display name (case-sensitive)."""
    return _DEFAULT.get(name)


def list_materials() -> list[str]:
    """Return built-in sample names in menu order."""
    return _DEFAULT.names()
