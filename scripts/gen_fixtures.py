#!/usr/bin/env python3
"""Generate synthetic walkmesh and gateway fixtures.

Fixtures are small hand-built buffers - not real game data. The test suite
builds the same buffers in memory; the files exist for manual inspection
and for the optional fixture sanity tests.

Usage:
    python scripts/gen_fixtures.py

Requirements:
    pip install -e .  (makes shared/ importable)

Output:
    tests/fixtures/*.bin

Dependencies:
    This script imports from shared/ (not tests/) to avoid circular
    dependencies between scripts and tests packages.
"""

from __future__ import annotations

from pathlib import Path

from shared.fixtures_expected import EXPECTED_FIXTURE_COUNT, EXPECTED_FIXTURES
from shared.walkmesh_fixtures import (
    BLOCKED,
    encode_gateway_table,
    encode_walkmesh,
    grid_triangles,
)

# Output directory
FIXTURES_DIR = Path(__file__).parent.parent / "tests" / "fixtures"


def ensure_dir() -> None:
    """Ensure fixtures directory exists."""
    FIXTURES_DIR.mkdir(parents=True, exist_ok=True)
    print(f"Output directory: {FIXTURES_DIR}")


def write_fixture(name: str, data: bytes) -> None:
    path = FIXTURES_DIR / name
    path.write_bytes(data)
    print(f"  Created: {path.name} ({len(data)}B)")


# =============================================================================
# Walkmesh Fixtures
# =============================================================================
def gen_walkmesh_single() -> None:
    """One triangle (0,0,0) (10,0,0) (0,10,30), every edge blocked."""
    tri = (((0, 0, 0), (10, 0, 0), (0, 10, 30)), (BLOCKED, BLOCKED, BLOCKED))
    write_fixture("walkmesh_single.bin", encode_walkmesh([tri]))


def gen_walkmesh_grid() -> None:
    """10x5 cell grid -> 100 triangles with interior adjacency."""
    write_fixture("walkmesh_grid_10x5.bin", encode_walkmesh(grid_triangles(10, 5)))


def gen_walkmesh_negative_coords() -> None:
    """Triangle spanning x in [-50, 150] with negative elevation."""
    tri = (((-50, -20, -300), (150, -20, -100), (50, 80, 0)), (BLOCKED, 0, BLOCKED))
    write_fixture("walkmesh_negative_coords.bin", encode_walkmesh([tri]))


def gen_walkmesh_empty_header() -> None:
    write_fixture("walkmesh_empty_header.bin", encode_walkmesh([]))


def gen_walkmesh_truncated() -> None:
    """Header claims 3 triangles; the third sector record runs past the end."""
    tris = grid_triangles(1, 1)
    write_fixture("walkmesh_truncated.bin", encode_walkmesh(tris, count=3))


# =============================================================================
# Gateway Fixtures
# =============================================================================
def gen_gateways_mixed() -> None:
    slots = [
        ((-100, 200, 5), (100, 200, 5), 117),  # kept
        ((10, 10, 0), (20, 10, 0), 0),  # unused: field id 0
        ((0, 0, 99), (0, 0, 12), 55),  # placeholder: x/y all zero
        None,
        ((0, 0, 0), (0, 1, 0), 7),  # kept: one nonzero y
    ]
    write_fixture("gateways_mixed.bin", encode_gateway_table(slots))


# =============================================================================
# Main
# =============================================================================
def main() -> int:
    """Generate all fixtures.

    Returns:
        0 on success, 1 on failure
    """
    print("=" * 60)
    print("Generating Walkmesh Fixtures")
    print("=" * 60)

    try:
        ensure_dir()
    except OSError as e:
        print(f"ERROR: Cannot create fixtures directory: {e}")
        return 1
    print()

    gen_walkmesh_single()
    gen_walkmesh_grid()
    gen_walkmesh_negative_coords()
    gen_walkmesh_empty_header()
    gen_walkmesh_truncated()
    gen_gateways_mixed()

    fixture_files = sorted(
        f.name for f in FIXTURES_DIR.iterdir() if f.is_file() and f.suffix == ".bin"
    )
    found_set = set(fixture_files)
    expected_set = set(EXPECTED_FIXTURES)

    if found_set != expected_set:
        print("ERROR: Fixture filenames do not match expected list!")
        missing = expected_set - found_set
        extra = found_set - expected_set
        if missing:
            print(f"  Missing (expected but not generated): {sorted(missing)}")
        if extra:
            print(f"  Extra (generated but not expected): {sorted(extra)}")
        print("\nUpdate shared/fixtures_expected.py to match generated fixtures.")
        return 1

    print(f"\nAll {EXPECTED_FIXTURE_COUNT} fixtures verified successfully.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
