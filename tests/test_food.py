import numpy as np
import pytest

from food import BONUS, NORMAL, BoardFull, Food, FoodGenerator
from grid import Grid
from snake import Snake


def test_food_never_on_snake():
    grid = Grid(5)
    # Змейка занимает всё, кроме последней строки
    snake = Snake([(x, y) for y in range(4) for x in range(5)])
    generator = FoodGenerator(grid, np.random.default_rng(7))
    for _ in range(200):
        food = generator.generate(snake)
        assert food.cell not in snake
        assert grid.in_bounds(food.cell)


def test_points_match_kind():
    generator = FoodGenerator(Grid(), np.random.default_rng(1))
    snake = Snake.single((10, 10))
    for _ in range(200):
        food = generator.generate(snake)
        assert (food.kind, food.points) in ((NORMAL, 10), (BONUS, 25))


def test_bonus_is_rare():
    generator = FoodGenerator(Grid(), np.random.default_rng(3))
    snake = Snake.single((10, 10))
    kinds = [generator.generate(snake).kind for _ in range(2000)]
    share = kinds.count(BONUS) / len(kinds)
    assert 0.15 < share < 0.25


def test_falls_back_to_free_cell_scan():
    grid = Grid(2)
    snake = Snake([(0, 0), (1, 0), (1, 1)])
    generator = FoodGenerator(grid, np.random.default_rng(0), max_attempts=1)
    for _ in range(20):
        assert generator.generate(snake).cell == (0, 1)


def test_full_board_raises():
    grid = Grid(2)
    snake = Snake([(0, 0), (1, 0), (1, 1), (0, 1)])
    generator = FoodGenerator(grid, np.random.default_rng(0))
    with pytest.raises(BoardFull):
        generator.generate(snake)


def test_food_record():
    food = Food((3, 4), BONUS, 25)
    assert food.to_record() == {"x": 3, "y": 4, "type": "bonus", "points": 25}
    assert Food.from_record({"x": 3, "y": 4, "type": "bonus", "points": 25}) == food
    assert Food.default() == Food((15, 15), NORMAL, 10)
