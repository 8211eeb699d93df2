"""Transport payload for field walkmesh data.

The event transport delivers one JSON object per field with camelCase keys
and buffers as arrays of byte values. This module validates that payload
and turns it into a domain FieldScene via a WalkmeshRepository.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from domain.placement.value_objects import FieldModel, FieldScene
from domain.walkmesh.repositories import WalkmeshRepository

from .binary_adapter import WalkmeshBinaryAdapter

logger = logging.getLogger(__name__)


class FieldWalkmeshPayload(BaseModel):
    """Incoming ``field-walkmesh-data`` event body."""

    walkmesh_buffer: list[int] = Field(default_factory=list, alias="walkmeshBuffer")
    gateways_buffer: list[int] = Field(default_factory=list, alias="gatewaysBuffer")
    field_models: list[FieldModel] = Field(default_factory=list, alias="fieldModels")
    field_name: str = Field(default="", alias="fieldName")
    field_id: int = Field(default=0, ge=0, alias="fieldId")

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class FieldWalkmeshLoader:
    """Builds FieldScenes from transport payloads.

    Empty buffers are skipped rather than decoded: an empty walkmesh buffer
    leaves ``FieldScene.walkmesh`` as None, which callers treat as
    "still loading".
    """

    def __init__(self, repository: WalkmeshRepository | None = None) -> None:
        self.repository = repository or WalkmeshBinaryAdapter()

    def load(self, payload: FieldWalkmeshPayload | dict[str, Any]) -> FieldScene:
        """Decode a payload into a FieldScene.

        Raises:
            pydantic.ValidationError: If a dict payload is malformed
            TruncatedInputError: If the walkmesh buffer is truncated
        """
        if not isinstance(payload, FieldWalkmeshPayload):
            payload = FieldWalkmeshPayload.model_validate(payload)

        walkmesh = None
        if payload.walkmesh_buffer:
            walkmesh = self.repository.decode_walkmesh(payload.walkmesh_buffer)

        gateways = ()
        if payload.gateways_buffer:
            gateways = tuple(self.repository.decode_gateways(payload.gateways_buffer))

        logger.info(
            "Field %d (%s): %d triangles, %d gateways, %d models",
            payload.field_id,
            payload.field_name,
            walkmesh.triangle_count if walkmesh is not None else 0,
            len(gateways),
            len(payload.field_models),
        )

        return FieldScene(
            field_id=payload.field_id,
            field_name=payload.field_name,
            walkmesh=walkmesh,
            gateways=gateways,
            models=tuple(payload.field_models),
        )
