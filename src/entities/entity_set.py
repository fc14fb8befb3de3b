"""
entity_set.py
-------------
Non-owning references to the entities the engine drives each frame.
"""

from typing import List, Optional

from src.entities.base_entity import Entity


class EntitySet:
    """
    Ordered enemies plus the player, princess and gem singletons.

    Enemy order is insertion order and only affects draw order.
    """

    def __init__(self, player: Entity, princess: Entity, gem: Entity,
                 enemies: Optional[List[Entity]] = None):
        self.player = player
        self.princess = princess
        self.gem = gem
        self.enemies: List[Entity] = list(enemies or [])

    def add_enemy(self, enemy: Entity):
        self.enemies.append(enemy)

    def remove_enemy(self, enemy: Entity):
        self.enemies.remove(enemy)

    def __iter__(self):
        """Entities in update/render order."""
        yield from self.enemies
        yield self.player
        yield self.princess
        yield self.gem

    def __len__(self):
        return len(self.enemies) + 3
