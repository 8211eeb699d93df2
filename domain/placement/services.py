"""Placement Bounded Context - Domain Services.

Snapping dragged field models onto the walkmesh surface.
"""

from __future__ import annotations

import math
from collections.abc import Iterable

from domain.placement.value_objects import FieldModel, PositionUpdate
from domain.walkmesh.services import TriangleLocator, locate, round_half_up
from domain.walkmesh.value_objects import Walkmesh

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------
PLAYER_INDEX = 0  # Model 0 is the player character
PLAYER_COLLISION_RADIUS = 40
DEFAULT_COLLISION_RADIUS = 25
FIELD_COORD_LIMIT = 50_000  # Coordinates beyond this are uninitialized data


def collision_radius(model: FieldModel, index: int) -> int:
    """Collision radius for a model, defaulting by role when unset."""
    if model.collision_range > 0:
        return model.collision_range
    return PLAYER_COLLISION_RADIUS if index == PLAYER_INDEX else DEFAULT_COLLISION_RADIUS


def is_within_field(model: FieldModel) -> bool:
    return (
        abs(model.x) <= FIELD_COORD_LIMIT
        and abs(model.y) <= FIELD_COORD_LIMIT
        and abs(model.z) <= FIELD_COORD_LIMIT
    )


def placeable_models(models: Iterable[FieldModel]) -> list[tuple[int, FieldModel]]:
    """Pair each model with its index, dropping out-of-range coordinates.

    Indices are preserved so updates still address the model's slot in
    the field list.
    """
    return [(i, m) for i, m in enumerate(models) if is_within_field(m)]


def reposition_model(
    walkmesh: Walkmesh,
    model_index: int,
    x: float,
    y: float,
    locator: TriangleLocator | None = None,
) -> PositionUpdate | None:
    """Snap a dragged model to the walkmesh.

    x and y are rounded half-up to integers before locating, so the
    reported elevation matches the reported position.

    Args:
        walkmesh: Decoded walkmesh
        model_index: Index of the model in the field's model list
        x: Dragged horizontal position
        y: Dragged horizontal position
        locator: Optional prebuilt index over the same walkmesh

    Returns:
        PositionUpdate with elevation 0 and triangle_id -1 when off the mesh,
        or None when x or y is NaN or infinite.
    """
    if not (math.isfinite(x) and math.isfinite(y)):
        return None
    new_x = round_half_up(x)
    new_y = round_half_up(y)
    if locator is not None:
        result = locator.locate(new_x, new_y)
    else:
        result = locate(walkmesh, new_x, new_y)
    return PositionUpdate(
        model_index=model_index,
        x=new_x,
        y=new_y,
        z=result.elevation,
        triangle_id=result.triangle_index,
    )
