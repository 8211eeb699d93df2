"""Placement Bounded Context - Value Objects.

Placeable field objects and the position updates reported back when one
is moved across the walkmesh.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from domain.walkmesh.services import compute_bounds
from domain.walkmesh.value_objects import Bounds, Gateway, Walkmesh


class FieldModel(BaseModel):
    """Placeable object record as supplied by the transport (Value Object).

    Fields other than position and collision range are ignored.
    """

    x: int
    y: int
    z: int
    collision_range: int = Field(default=0, ge=0)

    model_config = ConfigDict(frozen=True, extra="ignore")


class PositionUpdate(BaseModel):
    """Result of repositioning a model (Value Object).

    Serialized with camelCase keys (``model_dump(by_alias=True)``) for the
    event transport. triangle_id is -1 when the position is off the mesh.
    """

    model_index: int = Field(ge=0, alias="modelIndex")
    x: int
    y: int
    z: int
    triangle_id: int = Field(ge=-1, alias="triangleId")

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class FieldScene(BaseModel):
    """Everything decoded for one field (Value Object).

    walkmesh is None until a non-empty walkmesh buffer has been received.
    """

    field_id: int = 0
    field_name: str = ""
    walkmesh: Walkmesh | None = None
    gateways: tuple[Gateway, ...] = ()
    models: tuple[FieldModel, ...] = ()

    model_config = ConfigDict(frozen=True)

    @property
    def is_loading(self) -> bool:
        return self.walkmesh is None

    @property
    def bounds(self) -> Bounds:
        """Walkmesh extent; all zeros while loading or for an empty walkmesh."""
        if self.walkmesh is None:
            return Bounds()
        return compute_bounds(self.walkmesh)
