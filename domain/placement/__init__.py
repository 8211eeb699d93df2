"""Placement Bounded Context.

Responsible for field objects positioned on the walkmesh:
- Value Objects: FieldModel, PositionUpdate, FieldScene
- Services: reposition_model, placeable_models, collision_radius
"""
