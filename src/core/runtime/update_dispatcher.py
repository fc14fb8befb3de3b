"""
update_dispatcher.py
--------------------
Advances every entity once per playing frame.

Order: enemies (insertion order), player, princess, gem, then the optional
collision hook. Entity exceptions are not caught here.
"""


class UpdateDispatcher:
    """Calls each entity's update with the frame delta."""

    def __init__(self, entities, collision_check=None):
        """
        Args:
            entities: EntitySet to update
            collision_check: Optional zero-argument callable run after the
                entity updates (collision detection lives with collaborators)
        """
        self.entities = entities
        self.collision_check = collision_check

    def update(self, dt: float):
        self.update_entities(dt)
        self.check_collisions()

    def update_entities(self, dt: float):
        for enemy in self.entities.enemies:
            enemy.update(dt)

        self.entities.player.update(dt)
        self.entities.princess.update(dt)

        # Gem animates on its own frame counter
        self.entities.gem.update()

    def check_collisions(self):
        if self.collision_check is not None:
            self.collision_check()
