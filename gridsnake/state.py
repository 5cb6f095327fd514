"""
GameState and per-tick results for the snake simulation.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from .grid import Cell
from .snake import Snake

# Events reported to the host runtime
EATEN = "EATEN"
GAME_OVER = "GAME_OVER"

# Render roles
HEAD = "HEAD"
BODY = "BODY"

# Death reasons
WALL = "wall"
SELF = "self"


@dataclass
class GameState:
    """
    Everything the simulation mutates.

    Attributes:
        snake: the segment chain
        food: cell of the current food, None between being eaten and respawned
        eaten: set by the eat check, consumed by the tail-shrink gate
        alive: False once a collision has been detected
        ticks: number of completed movement ticks
        death_reason: 'wall' or 'self' after game over
    """

    snake: Snake
    food: Optional[Cell] = None
    eaten: bool = False
    alive: bool = True
    ticks: int = 0
    death_reason: Optional[str] = None


@dataclass
class TickResult:
    """Outcome of one movement tick."""

    tick: int
    head: Optional[Cell]
    ate: bool = False
    events: List[str] = field(default_factory=list)
    death_reason: Optional[str] = None

    @property
    def game_over(self) -> bool:
        return GAME_OVER in self.events
