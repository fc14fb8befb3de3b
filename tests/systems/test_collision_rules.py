"""
test_collision_rules.py
-----------------------
Tests for the bundled game's collision and scoring rules.
"""

import random

import pytest

from src.core.runtime.session_state import SessionState
from src.entities.enemy import Enemy
from src.entities.entity_set import EntitySet
from src.entities.gem import Gem
from src.entities.player import Player
from src.entities.princess import Princess
from src.systems.collision_rules import CollisionRules


@pytest.fixture
def world(mock_canvas, mock_resources):
    session = SessionState(intro=False)
    player = Player(mock_canvas, mock_resources, session)
    gem = Gem(mock_canvas, mock_resources, col=0, row=4, rng=random.Random(1))
    entities = EntitySet(player, Princess(mock_canvas, mock_resources), gem)
    rules = CollisionRules(session, entities, {"win_score": 200})
    return session, entities, rules


def put_player(player, col, row):
    player.col, player.row_index = col, row
    player.update(0)


class TestEnemyHits:

    def test_bug_costs_a_life_and_resets_player(self, world, mock_canvas, mock_resources):
        session, entities, rules = world
        put_player(entities.player, 2, 3)
        entities.add_enemy(Enemy(mock_canvas, mock_resources, row=3, x=entities.player.x + 20))

        rules.check()

        assert session.lives == 2
        assert entities.player.row_index == Player.START_ROW

    def test_last_life_ends_game_lost(self, world, mock_canvas, mock_resources):
        session, entities, rules = world
        session.lives = 1
        put_player(entities.player, 2, 3)
        entities.add_enemy(Enemy(mock_canvas, mock_resources, row=3, x=entities.player.x))

        rules.check()

        assert session.game_over is True
        assert session.won_game is False

    def test_bug_on_other_row_is_harmless(self, world, mock_canvas, mock_resources):
        session, entities, rules = world
        put_player(entities.player, 2, 3)
        entities.add_enemy(Enemy(mock_canvas, mock_resources, row=2, x=entities.player.x))

        rules.check()

        assert session.lives == 3


class TestGemDelivery:

    def test_collecting_gem_hides_it(self, world):
        session, entities, rules = world
        put_player(entities.player, 0, 4)

        rules.check()

        assert entities.player.has_gem
        assert session.display_gem is False
        assert session.score == rules.gem_points

    def test_delivery_scores_and_respawns_gem(self, world):
        session, entities, rules = world
        entities.player.has_gem = True
        session.display_gem = False
        put_player(entities.player, entities.princess.col, 0)

        rules.check()

        assert session.score == rules.delivery_points
        assert session.display_gem is True
        assert entities.player.has_gem is False

    def test_reaching_win_score_ends_game_won(self, world):
        session, entities, rules = world
        session.score = 150
        entities.player.has_gem = True
        put_player(entities.player, entities.princess.col, 0)

        rules.check()

        assert session.game_over and session.won_game

    def test_water_without_gem_costs_life(self, world):
        session, entities, rules = world
        put_player(entities.player, 1, 0)
        rules.check()
        assert session.lives == 2


class TestLifecycle:

    def test_no_checks_outside_play(self, world):
        session, entities, rules = world
        session.intro = True
        put_player(entities.player, 0, 4)
        rules.check()
        assert not entities.player.has_gem

    def test_reset_round_restores_positions(self, world, mock_canvas, mock_resources):
        session, entities, rules = world
        enemy = Enemy(mock_canvas, mock_resources, row=1, x=-50, speed=100)
        entities.add_enemy(enemy)
        enemy.update(1.0)
        put_player(entities.player, 0, 2)
        session.display_gem = False

        rules.reset_round()

        assert enemy.x == -50
        assert entities.player.row_index == Player.START_ROW
        assert session.display_gem is True
