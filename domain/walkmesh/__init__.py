"""Walkmesh Bounded Context.

Responsible for decoded walkable-surface geometry:
- Value Objects: Vertex, Triangle, Walkmesh, Gateway, Bounds, LocateResult
- Services: compute_bounds, locate, TriangleLocator, blocked_edges
"""
