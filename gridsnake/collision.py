from .state import SELF, WALL


def hits_wall(snake, grid):
    return not grid.contains(snake.head_position())


def hits_self(snake):
    return snake.overlaps_head()


def detect(state, grid):
    """Return the death reason for the current head position, or None."""
    if hits_wall(state.snake, grid):
        return WALL
    if hits_self(state.snake):
        return SELF
    return None
