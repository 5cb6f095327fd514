import logging

logger = logging.getLogger(__name__)


def eat_check(state):
    """Mark the food as eaten if the head has just moved onto it."""
    head = state.snake.head_position()
    if state.food is not None and state.food == head:
        state.eaten = True
        state.food = None
        logger.debug("Ate food at %s", head)
    return state.eaten


def advance(state, grid):
    """Move the snake one cell along its current direction.

    The new head is always inserted first. The tail is then dropped unless
    the eat check fired, in which case the flag is cleared and the snake
    keeps its old tail for this tick, growing by one.

    Returns True if food was eaten on this tick.
    """
    snake = state.snake
    direction = snake.direction
    new_head = grid.step(snake.head_position(), direction)

    snake.grow_at_head(new_head)
    snake.heading = direction

    ate = eat_check(state)
    if state.eaten:
        state.eaten = False
    else:
        snake.shrink_at_tail()

    state.ticks += 1
    return ate
