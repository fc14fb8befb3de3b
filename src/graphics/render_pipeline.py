"""
render_pipeline.py
------------------
Draws a playing frame back-to-front, and the full-screen scene overlays.

Playing frame order:
1. Tile grid
2. Pedestal tile for the princess
3. Entities (enemies, player, princess, gem if visible)
4. HUD text, so it is never occluded
"""

from src.core.debug.debug_logger import DebugLogger
from src.core.runtime.game_settings import Board, Colors, Fonts
from src.graphics.overlay_screens import OverlayScreens


class RenderPipeline:
    """Renders the board, entities, HUD and overlays onto a Canvas."""

    def __init__(self, canvas, resources, session, entities, screens=None):
        """
        Args:
            canvas: Canvas drawing context
            resources: ResourceCache (must be ready before the first render)
            session: SessionState supplying HUD stats and gem visibility
            entities: EntitySet to draw
            screens: OverlayScreens copy (loaded from YAML if omitted)
        """
        self.canvas = canvas
        self.resources = resources
        self.session = session
        self.entities = entities
        self.screens = screens or OverlayScreens()

        DebugLogger.init_entry("RenderPipeline")

    # ===========================================================
    # Playing Frame
    # ===========================================================

    def render(self):
        """Draw one playing frame."""
        self.render_board()
        self.render_entities()
        self.render_hud()

    def render_board(self):
        """Fill the 7x7 grid row by row, then place the pedestal tile."""
        for row in range(Board.ROWS):
            image = self.resources.get(Board.ROW_IMAGES[row])
            for col in range(Board.COLS):
                self.canvas.draw_image(image, col * Board.TILE_WIDTH, row * Board.TILE_HEIGHT)

        pedestal = self.resources.get(Board.ROW_IMAGES[Board.PEDESTAL_INDEX])
        self.canvas.draw_image(pedestal, *Board.PEDESTAL_POS)

    def render_entities(self):
        for enemy in self.entities.enemies:
            enemy.render()

        self.entities.player.render()
        self.entities.princess.render()

        if self.session.display_gem:
            self.entities.gem.render()

    def render_hud(self):
        self.canvas.set_font(Fonts.HUD_SIZE)
        self.canvas.set_fill_style(Colors.HUD_TEXT)
        self.canvas.set_text_align("center")
        self.canvas.fill_text(
            f"Lives: {self.session.lives} -- Score: {self.session.score}",
            self.canvas.width / 2,
            Board.HUD_Y,
        )

    # ===========================================================
    # Overlays
    # ===========================================================

    def overlay_screen(self):
        """Paint a solid full-bleed background and prepare centred text."""
        self.canvas.set_font(Fonts.OVERLAY_SIZE)
        self.canvas.set_fill_style(Colors.OVERLAY_BACKGROUND)
        self.canvas.fill_rect(0, 0, self.canvas.width, self.canvas.height)
        self.canvas.set_fill_style(Colors.OVERLAY_TEXT)
        self.canvas.set_text_align("center")

    def display_intro_screen(self):
        self._draw_overlay("intro")

    def display_game_over_screen(self, won: bool):
        self._draw_overlay("game_over_won" if won else "game_over_lost")

    def _draw_overlay(self, name: str):
        self.overlay_screen()
        center_x = self.canvas.width / 2
        for text, row in self.screens.lines(name):
            self.canvas.fill_text(text, center_x, row * Board.TILE_HEIGHT)
        DebugLogger.trace(f"Drew '{name}' overlay", category="render")
