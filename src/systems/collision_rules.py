"""
collision_rules.py
------------------
Collision detection and scoring for the bundled game.

Runs as the engine's collision hook after every entity update. Everything it
decides is written back through the SessionState flags.

Rules
-----
- Bug touches player      -> lose a life, player back to start
- Player reaches the gem  -> carry it, hide the gem, +GEM_POINTS
- Player reaches princess -> with a gem: +DELIVERY_POINTS, new gem
                             without one: lose a life
- Player steps into water -> lose a life
- No lives left           -> game over (lost)
- Score >= WIN_SCORE      -> game over (won)
"""

from src.core.debug.debug_logger import DebugLogger
from src.core.runtime.game_settings import Rules


class CollisionRules:
    """Collaborator-side game logic plugged into the UpdateDispatcher."""

    def __init__(self, session, entities, config=None):
        """
        Args:
            session: SessionState to write outcomes to
            entities: EntitySet holding the player, gem, princess and enemies
            config: Optional dict overriding the Rules defaults (rules.json)
        """
        config = config or {}
        self.session = session
        self.entities = entities
        self.gem_points = config.get("gem_points", Rules.GEM_POINTS)
        self.delivery_points = config.get("delivery_points", Rules.DELIVERY_POINTS)
        self.win_score = config.get("win_score", Rules.WIN_SCORE)
        self.hit_range = config.get("enemy_hit_range", Rules.ENEMY_HIT_RANGE)

    # ===========================================================
    # Frame Hook
    # ===========================================================

    def check(self):
        """Resolve this frame's collisions."""
        if not self.session.is_playing:
            return

        player = self.entities.player

        for enemy in self.entities.enemies:
            if enemy.row_index == player.row_index and abs(enemy.x - player.x) < self.hit_range:
                DebugLogger.state("Player hit by bug", category="collision")
                self._lose_life()
                return

        gem = self.entities.gem
        if (self.session.display_gem and not player.has_gem
                and (gem.col, gem.row_index) == (player.col, player.row_index)):
            player.has_gem = True
            self.session.display_gem = False
            self.session.add_score(self.gem_points)
            DebugLogger.state("Gem collected", category="collision")
            return

        if player.row_index == 0:
            self._reach_top(player)

    # ===========================================================
    # Outcomes
    # ===========================================================

    def _reach_top(self, player):
        princess = self.entities.princess
        if player.col != princess.col or not player.has_gem:
            DebugLogger.state("Player fell in the water", category="collision")
            self._lose_life()
            return

        self.session.add_score(self.delivery_points)
        DebugLogger.state(f"Gem delivered, score {self.session.score}", category="collision")
        player.reset()
        self._show_new_gem()

        if self.session.score >= self.win_score:
            self.session.end_game(won=True)

    def _lose_life(self):
        self.entities.player.reset()
        if self.session.lose_life() == 0:
            self.session.end_game(won=False)
        elif not self.session.display_gem:
            self._show_new_gem()

    def _show_new_gem(self):
        self.entities.gem.relocate()
        self.session.display_gem = True

    # ===========================================================
    # Lifecycle
    # ===========================================================

    def reset_round(self):
        """Engine reset hook: restore entity positions for a new session."""
        self.entities.player.reset()
        for enemy in self.entities.enemies:
            enemy.reset()
        self._show_new_gem()
