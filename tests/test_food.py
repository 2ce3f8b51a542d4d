"""Tests for food placement."""

import random
from unittest.mock import Mock

import pytest

from retro_snake.config import GameConfig
from retro_snake.errors import GridFullError
from retro_snake.food import Food


@pytest.fixture
def small_config():
    return GameConfig(cell_count=3, initial_body=((1, 1),), placement_attempts=50)


class TestPlaceRandomly:
    def test_initial_position_avoids_occupied(self, config, scripted_random):
        """Construction skips samples that land on the snake."""
        rng = scripted_random([6, 9, 5, 9, 2, 2])
        food = Food(config, rng, [(6, 9), (5, 9), (4, 9)])
        assert food.position == (2, 2)

    def test_returns_and_stores_position(self, config, scripted_random):
        food = Food(config, scripted_random([0, 0]))
        rng = food.rng
        rng.queue = [3, 4]
        assert food.place_randomly([]) == (3, 4)
        assert food.position == (3, 4)

    def test_samples_stay_inside_grid(self, small_config):
        """randint bounds are inclusive of 0 and cell_count - 1."""
        food = Food(small_config, random.Random(3))
        for _ in range(200):
            x, y = food.place_randomly([])
            assert 0 <= x < 3 and 0 <= y < 3

    @pytest.mark.parametrize("seed", range(20))
    def test_never_lands_on_occupied(self, small_config, seed):
        """Any placement is outside the occupied set."""
        rng = random.Random(seed)
        cells = list(small_config.all_cells())
        occupied = rng.sample(cells, rng.randint(0, len(cells) - 1))
        food = Food(small_config, rng)
        assert food.place_randomly(occupied) not in occupied

    def test_falls_back_to_free_cells(self):
        """Once sampling gives up, the last free cell is still found."""
        cfg = GameConfig(cell_count=3, initial_body=((1, 1),), placement_attempts=0)
        food = Food(cfg, random.Random(0))
        occupied = [c for c in cfg.all_cells() if c != (2, 0)]
        assert food.place_randomly(occupied) == (2, 0)

    def test_fallback_after_exhausting_attempts(self, scripted_random):
        """Rejected samples are bounded by placement_attempts."""
        cfg = GameConfig(cell_count=3, initial_body=((1, 1),), placement_attempts=2)
        rng = scripted_random([1, 1, 1, 1])
        food = Food(cfg, rng, [(1, 1)], texture=None)
        # both scripted samples hit (1, 1), the fallback picks any other cell
        assert food.position != (1, 1)
        assert rng.queue == []

    def test_full_grid_raises(self, small_config):
        food = Food(small_config, random.Random(0))
        with pytest.raises(GridFullError):
            food.place_randomly(list(small_config.all_cells()))


class TestFoodDraw:
    def test_draws_texture_when_present(self, config):
        media = Mock()
        food = Food(config, random.Random(0), texture="apple")
        food.draw(media)
        media.draw_textured_cell.assert_called_once_with(food.position, "apple")
        media.draw_cell.assert_not_called()

    def test_draws_plain_cell_without_texture(self, config):
        media = Mock()
        food = Food(config, random.Random(0))
        food.draw(media)
        media.draw_cell.assert_called_once_with(food.position, config.food_color)
