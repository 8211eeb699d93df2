"""Field Walkmesh Domain Layer.

This package contains the core logic organized by bounded contexts:
- walkmesh: Decoded triangles, gateways, bounds, point location
- placement: Field models snapped onto the walkmesh surface
"""

# Imports alphabetized per project style (isort)
from domain import placement, walkmesh

__all__ = ["placement", "walkmesh"]
