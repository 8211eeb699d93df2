"""Tests for the transport payload loader."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from domain.placement.value_objects import FieldModel
from domain.walkmesh.errors import TruncatedInputError
from domain.walkmesh.value_objects import Bounds, Gateway, Vertex, Walkmesh
from infrastructure.walkmesh import FieldWalkmeshLoader, FieldWalkmeshPayload
from shared.walkmesh_fixtures import encode_gateway_table, encode_walkmesh, grid_triangles


def make_payload(**overrides) -> dict:
    payload = {
        "walkmeshBuffer": list(encode_walkmesh(grid_triangles(2, 2))),
        "gatewaysBuffer": list(encode_gateway_table([((0, 10, 0), (10, 10, 0), 42)])),
        "fieldModels": [
            {"x": 50, "y": 20, "z": 70, "collision_range": 30, "name": "cloud"},
            {"x": 120, "y": 150, "z": 270},
        ],
        "fieldName": "md1stin",
        "fieldId": 116,
    }
    payload.update(overrides)
    return payload


def test_load_full_payload():
    scene = FieldWalkmeshLoader().load(make_payload())

    assert scene.field_id == 116
    assert scene.field_name == "md1stin"
    assert scene.walkmesh is not None
    assert scene.walkmesh.triangle_count == 8
    assert [g.field_id for g in scene.gateways] == [42]
    assert scene.models[0] == FieldModel(x=50, y=20, z=70, collision_range=30)
    assert scene.models[1].collision_range == 0
    assert not scene.is_loading


def test_empty_walkmesh_buffer_means_loading():
    scene = FieldWalkmeshLoader().load(make_payload(walkmeshBuffer=[], gatewaysBuffer=[]))

    assert scene.walkmesh is None
    assert scene.is_loading
    assert scene.gateways == ()


def test_loaded_scene_exposes_bounds():
    scene = FieldWalkmeshLoader().load(make_payload())

    assert scene.bounds == Bounds(
        min_x=0,
        max_x=200,
        min_y=0,
        max_y=200,
        min_z=0,
        max_z=400,
        center_x=100.0,
        center_y=100.0,
        center_z=200.0,
    )


def test_loading_scene_bounds_are_zero():
    scene = FieldWalkmeshLoader().load(make_payload(walkmeshBuffer=[]))

    assert scene.is_loading
    assert scene.bounds == Bounds()


def test_missing_keys_use_defaults():
    scene = FieldWalkmeshLoader().load({})
    assert scene.is_loading
    assert scene.field_id == 0
    assert scene.models == ()


def test_payload_accepts_snake_case_names():
    payload = FieldWalkmeshPayload(field_name="ancnt1", field_id=3)
    assert FieldWalkmeshLoader().load(payload).field_name == "ancnt1"


def test_invalid_payload_raises():
    with pytest.raises(ValidationError):
        FieldWalkmeshLoader().load({"walkmeshBuffer": "not bytes"})


def test_truncated_walkmesh_propagates():
    buffer = list(encode_walkmesh(grid_triangles(1, 1), count=3))
    with pytest.raises(TruncatedInputError):
        FieldWalkmeshLoader().load(make_payload(walkmeshBuffer=buffer))


class RecordingRepository:
    """In-memory WalkmeshRepository that records what it was asked to decode."""

    def __init__(self) -> None:
        self.calls: list[str] = []

    def decode_walkmesh(self, buffer) -> Walkmesh:
        self.calls.append("walkmesh")
        return Walkmesh.empty()

    def decode_gateways(self, buffer) -> list[Gateway]:
        self.calls.append("gateways")
        v = Vertex(x=1, y=1, z=0)
        return [Gateway(vertex1=v, vertex2=v, field_id=9)]


def test_loader_uses_injected_repository():
    repo = RecordingRepository()
    scene = FieldWalkmeshLoader(repository=repo).load(make_payload())

    assert repo.calls == ["walkmesh", "gateways"]
    assert scene.walkmesh == Walkmesh.empty()
    assert scene.gateways[0].field_id == 9


def test_loader_skips_empty_buffers():
    repo = RecordingRepository()
    FieldWalkmeshLoader(repository=repo).load(make_payload(walkmeshBuffer=[], gatewaysBuffer=[]))
    assert repo.calls == []
