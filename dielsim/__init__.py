# dielsim/__init__.py
from __future__ import annotations
from .materials.database import MaterialSpec, MaterialRegistry, default_registry
from .models.sample import Reading, Sample
from .physics.dielectric import DomainError, vacuum_capacitance, dielectric_constant, compute_all
from .physics.curie import estimate_curie

__all__ = [
    "MaterialSpec", "MaterialRegistry", "default_registry",
    "Reading", "Sample",
    "DomainError", "vacuum_capacitance", "dielectric_constant", "compute_all",
    "estimate_curie",
]
__version__ = "0.1.0"
