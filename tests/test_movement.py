"""
Tests for the movement engine, eat check, collision detector and the
direction controller, used directly on a GameState.
"""

import pytest

from gridsnake.collision import detect
from gridsnake.direction import DOWN, LEFT, RIGHT, UP, DirectionController, is_reversal
from gridsnake.grid import Grid
from gridsnake.movement import advance, eat_check
from gridsnake.snake import Snake
from gridsnake.state import GameState


@pytest.fixture
def state():
    return GameState(snake=Snake((0, 0), RIGHT))


class TestAdvance:
    """Tests for advance()."""

    def test_moves_along_direction(self, state):
        """The head moves one cell and the heading records the move."""
        state.snake.direction = UP
        ate = advance(state, Grid())
        assert ate is False
        assert state.snake.head_position() == (0, 1)
        assert state.snake.heading == UP
        assert state.ticks == 1

    def test_eaten_flag_is_consumed(self, state):
        """The eaten flag skips one shrink and is cleared afterwards."""
        state.food = (1, 0)
        assert advance(state, Grid()) is True
        assert state.eaten is False
        assert state.food is None
        assert len(state.snake) == 3


class TestEatCheck:
    """Tests for eat_check()."""

    def test_no_food(self, state):
        assert eat_check(state) is False
        assert state.eaten is False

    def test_food_elsewhere(self, state):
        state.food = (4, 4)
        assert eat_check(state) is False
        assert state.food == (4, 4)

    def test_food_at_head(self, state):
        """Food on the head cell is consumed and the flag set."""
        state.food = (0, 0)
        assert eat_check(state) is True
        assert state.eaten is True
        assert state.food is None


class TestDetect:
    """Tests for the collision detector."""

    def test_no_collision(self, state):
        assert detect(state, Grid()) is None

    def test_wall(self):
        state = GameState(snake=Snake((11, 0), RIGHT))
        assert detect(state, Grid(20, 20)) == "wall"

    def test_self(self, state):
        state.snake.grow_at_head((-1, 0))
        assert detect(state, Grid()) == "self"


class TestDirectionController:
    """Tests for direction validation."""

    def test_is_reversal(self):
        assert is_reversal(RIGHT, LEFT)
        assert is_reversal(UP, DOWN)
        assert not is_reversal(RIGHT, UP)
        assert not is_reversal(RIGHT, RIGHT)

    def test_rejects_reversal(self, state):
        """Given (1, 0), a request for (-1, 0) leaves the direction unchanged."""
        controller = DirectionController(state.snake)
        assert controller.request((-1, 0)) is False
        assert state.snake.direction == (1, 0)

    @pytest.mark.parametrize("direction", [(0, 1), (0, -1), (1, 0)])
    def test_accepts_turns_and_same_direction(self, state, direction):
        controller = DirectionController(state.snake)
        assert controller.request(direction) is True
        assert state.snake.direction == direction

    def test_rejects_non_unit_vector(self, state):
        controller = DirectionController(state.snake)
        with pytest.raises(ValueError):
            controller.request((1, 1))
