import logging
import random

from config import FOOD_MAX_ATTEMPTS

logger = logging.getLogger(__name__)


class FoodSpawner:
    """Places food on a random free cell of the grid."""

    def __init__(self, grid, rng=None, max_attempts=FOOD_MAX_ATTEMPTS):
        if max_attempts < 0:
            raise ValueError(f"max_attempts must be >= 0, got {max_attempts}")
        self.grid = grid
        self.rng = rng if rng is not None else random.Random()
        self.max_attempts = max_attempts

    def spawn(self, snake, food=None):
        """Return ``food`` if present, otherwise a new free cell.

        Samples random cells until one is off the snake. After
        ``max_attempts`` misses it scans the board for free cells and picks
        one of those instead. Returns None only when the board is full.
        """
        if food is not None:
            return food

        attempts = 0
        while attempts < self.max_attempts:
            cell = self.grid.random_cell(self.rng)
            if not snake.occupies(cell):
                return cell
            attempts += 1

        free = [cell for cell in self.grid.cells() if not snake.occupies(cell)]
        if not free:
            logger.warning("No free cell for food, board is full (snake length %d)", len(snake))
            return None

        logger.warning(
            "Food sampling missed %d times, picking from %d free cell(s)",
            attempts, len(free),
        )
        return self.rng.choice(free)
