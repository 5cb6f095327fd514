import logging
import random

from config import FOOD_MAX_ATTEMPTS, INITIAL_DIRECTION, INITIAL_HEAD, TIMESTEP
from .collision import detect
from .direction import VALID_DIRECTIONS, DirectionController
from .food import FoodSpawner
from .grid import Grid
from .movement import advance
from .snake import Snake
from .state import BODY, EATEN, GAME_OVER, HEAD, GameState, TickResult

logger = logging.getLogger(__name__)


class SnakeSimulation:
    """Fixed-timestep snake simulation with no rendering or audio.

    The host calls ``frame(dt)`` once per rendered frame and
    ``request_direction`` for each key press. ``frame`` spawns food, then
    runs as many movement ticks as ``dt`` has paid for.
    """

    def __init__(
        self,
        grid=None,
        timestep=TIMESTEP,
        seed=None,
        max_food_attempts=FOOD_MAX_ATTEMPTS,
        initial_head=INITIAL_HEAD,
        initial_direction=INITIAL_DIRECTION,
    ):
        if timestep <= 0:
            raise ValueError(f"timestep must be positive, got {timestep}")
        self.grid = grid if grid is not None else Grid()
        self.timestep = float(timestep)
        self.initial_head = tuple(initial_head)
        self.initial_direction = tuple(initial_direction)
        if self.initial_direction not in VALID_DIRECTIONS:
            raise ValueError(f"initial direction {self.initial_direction} is not a unit direction")
        if not self.grid.contains(self.initial_head):
            raise ValueError(f"initial head {self.initial_head} is outside {self.grid!r}")
        tail = (
            self.initial_head[0] - self.initial_direction[0],
            self.initial_head[1] - self.initial_direction[1],
        )
        if not self.grid.contains(tail):
            raise ValueError(f"initial tail {tail} is outside {self.grid!r}")

        self.rng = random.Random(seed)
        self.spawner = FoodSpawner(self.grid, self.rng, max_food_attempts)
        self.reset()

    def reset(self):
        """Start a new game with a two-segment snake and no food yet."""
        snake = Snake(self.initial_head, self.initial_direction)
        self.state = GameState(snake=snake)
        self.controller = DirectionController(snake)
        self._accumulator = 0.0
        logger.info("New game on %r, head at %s", self.grid, self.initial_head)

    @property
    def snake(self):
        return self.state.snake

    @property
    def food(self):
        return self.state.food

    @property
    def alive(self):
        return self.state.alive

    @property
    def length(self):
        return len(self.state.snake)

    def request_direction(self, direction):
        if not self.state.alive:
            return False
        return self.controller.request(direction)

    def spawn_food(self):
        if self.state.alive:
            self.state.food = self.spawner.spawn(self.state.snake, self.state.food)
        return self.state.food

    def step(self):
        """Run one movement tick: move, eat check, tail gate, collision."""
        state = self.state
        if not state.alive:
            return TickResult(tick=state.ticks, head=None, death_reason=state.death_reason)

        ate = advance(state, self.grid)
        head = state.snake.head_position()
        result = TickResult(tick=state.ticks, head=head, ate=ate)
        if ate:
            result.events.append(EATEN)

        reason = detect(state, self.grid)
        if reason is not None:
            state.alive = False
            state.death_reason = reason
            result.death_reason = reason
            result.events.append(GAME_OVER)
            logger.info(
                "Game over (%s) at %s after %d ticks, length %d",
                reason, head, state.ticks, len(state.snake),
            )
        else:
            logger.debug("Tick %d head=%s length=%d", state.ticks, head, len(state.snake))
        return result

    def frame(self, dt):
        """Advance by ``dt`` seconds of wall time and return the tick results."""
        results = []
        if not self.state.alive:
            return results

        self.spawn_food()
        self._accumulator += dt
        while self._accumulator >= self.timestep and self.state.alive:
            self._accumulator -= self.timestep
            result = self.step()
            results.append(result)
            self.spawn_food()
        return results

    def render_cells(self):
        """Occupied cells tagged HEAD or BODY, head first."""
        cells = []
        for i, cell in enumerate(self.state.snake.iter_occupied()):
            cells.append((cell, HEAD if i == 0 else BODY))
        return cells

    def __repr__(self):
        return (
            f"<SnakeSimulation tick={self.state.ticks} length={self.length} "
            f"food={self.state.food} alive={self.state.alive}>"
        )
