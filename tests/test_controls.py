"""Tests for the key to direction mapping."""

import random

import pytest

from retro_snake.controls import DOWN, KEY_DIRECTIONS, LEFT, RIGHT, UP, apply_keys, can_turn
from retro_snake.game import Game


@pytest.fixture
def game():
    g = Game(rng=random.Random(2))
    g.food.position = (0, 0)
    return g


class TestNoReversal:
    @pytest.mark.parametrize("current,rejected", [
        ((1, 0), LEFT),
        ((-1, 0), RIGHT),
        ((0, 1), UP),
        ((0, -1), DOWN),
    ])
    def test_exact_opposite_is_ignored(self, game, current, rejected):
        game.snake.direction = current
        assert apply_keys(game, {rejected}) is None
        assert game.snake.direction == current

    @pytest.mark.parametrize("current", [(1, 0), (-1, 0), (0, 1), (0, -1)])
    def test_other_keys_are_accepted(self, current):
        for direction in KEY_DIRECTIONS.values():
            if direction == (-current[0], -current[1]):
                continue
            assert can_turn(current, direction)

    def test_same_direction_is_accepted(self, game):
        assert apply_keys(game, {RIGHT}) == RIGHT
        assert game.snake.direction == (1, 0)


class TestApplyKeys:
    def test_nothing_pressed(self, game):
        assert apply_keys(game, set()) is None
        assert game.snake.direction == (1, 0)

    def test_turn_applies_on_next_tick(self, game):
        apply_keys(game, {DOWN})
        assert game.snake.head == (6, 9)
        game.update()
        assert game.snake.head == (6, 10)

    def test_priority_order(self, game):
        """Up beats Right when both arrive in the same frame."""
        assert apply_keys(game, {RIGHT, UP}) == UP
        assert game.snake.direction == (0, -1)

    def test_rejected_key_falls_through(self, game):
        """A rejected higher-priority key lets the next pressed one through."""
        game.snake.direction = (0, -1)
        assert apply_keys(game, {DOWN, LEFT}) == LEFT
        assert game.snake.direction == (-1, 0)

    def test_last_frame_wins_between_ticks(self, game):
        """Two perpendicular taps before a tick can fold the snake back onto itself."""
        apply_keys(game, {UP})
        apply_keys(game, {LEFT})
        assert game.snake.direction == (-1, 0)
        game.update()
        assert game.running is False


class TestRearm:
    def test_accepted_key_restarts(self, game):
        game.game_over()
        assert apply_keys(game, {UP}) == UP
        assert game.running is True

    def test_rejected_key_keeps_waiting(self, game):
        """After a reset the snake heads right, so Left cannot restart it."""
        game.game_over()
        assert apply_keys(game, {LEFT}) is None
        assert game.running is False
