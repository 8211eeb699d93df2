"""Single source of truth for expected sample binary fixtures.

This module defines the list of expected fixture filenames used by both:
- scripts/gen_fixtures.py (generation verification)
- tests/binary/test_fixtures_sanity.py (decoding checks when present)

Location: shared/ (not tests/) to avoid scripts->tests dependency.

When adding/removing fixtures, update ONLY this list.
"""

from __future__ import annotations

# Sorted alphabetically for deterministic comparison.
EXPECTED_FIXTURES: list[str] = sorted(
    [
        "gateways_mixed.bin",  # Used, unused and placeholder slots
        "walkmesh_empty_header.bin",  # Header declares zero triangles
        "walkmesh_grid_10x5.bin",  # 100 triangles, planar z = x + y
        "walkmesh_negative_coords.bin",  # Coordinates >= 0x8000 on disk
        "walkmesh_single.bin",  # One triangle, all edges blocked
        "walkmesh_truncated.bin",  # Header claims more than the pools hold
    ]
)

EXPECTED_FIXTURE_COUNT: int = len(EXPECTED_FIXTURES)
