"""
src/entities/__init__.py
------------------------
Entity module exports.

Exports:
    Entity        - Interface the engine drives (update/render)
    SpriteEntity  - Image-backed base for the bundled game
    EntitySet     - Enemies plus player, princess and gem references
"""

from src.entities.base_entity import Entity, SpriteEntity
from src.entities.entity_set import EntitySet

__all__ = [
    'Entity',
    'SpriteEntity',
    'EntitySet',
]
