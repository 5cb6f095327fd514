import logging

logger = logging.getLogger(__name__)

UP = (0, 1)
DOWN = (0, -1)
LEFT = (-1, 0)
RIGHT = (1, 0)

DIRECTIONS = {
    "UP": UP,
    "DOWN": DOWN,
    "LEFT": LEFT,
    "RIGHT": RIGHT,
}
VALID_DIRECTIONS = set(DIRECTIONS.values())


def opposite(direction):
    return (-direction[0], -direction[1])


def is_reversal(current, requested):
    """True when ``requested`` points exactly back along ``current``."""
    return requested == opposite(current)


class DirectionController:
    """Applies direction requests to a snake, dropping 180 degree turns.

    ``request(direction)`` returns True and sets ``snake.direction`` unless
    ``direction`` is the exact opposite of ``snake.heading``, the direction
    of the last completed move. Note that the comparison is NOT against the
    pending ``snake.direction``: after UP is accepted while moving RIGHT,
    a LEFT request before the next tick is still a reversal of RIGHT and is
    refused, so two quick presses cannot turn the snake onto its own neck.
    Right after a tick ``heading == direction``, so a single request behaves
    exactly like a check against the current facing.
    """

    def __init__(self, snake):
        self.snake = snake

    def request(self, direction):
        direction = tuple(direction)
        if direction not in VALID_DIRECTIONS:
            raise ValueError(f"Not a unit direction: {direction!r}")

        if is_reversal(self.snake.heading, direction):
            logger.debug("Ignoring reversal %s while heading %s", direction, self.snake.heading)
            return False

        self.snake.direction = direction
        return True
