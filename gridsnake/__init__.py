"""Package initializer for the gridsnake package.

The simulation core is importable without pygame. The window/audio host is
exported lazily so that::

	from gridsnake import SnakeApp

only pulls in pygame when it is actually used.
"""

from .direction import DOWN, LEFT, RIGHT, UP, DirectionController
from .engine import SnakeSimulation
from .errors import ChainInvariantError, EmptyChainError, MissingSegmentError
from .grid import Grid
from .snake import Snake
from .state import BODY, EATEN, GAME_OVER, HEAD, GameState, TickResult

__version__ = "0.1"

__all__ = [
	"UP", "DOWN", "LEFT", "RIGHT",
	"DirectionController",
	"SnakeSimulation",
	"ChainInvariantError", "EmptyChainError", "MissingSegmentError",
	"Grid",
	"Snake",
	"EATEN", "GAME_OVER", "HEAD", "BODY",
	"GameState", "TickResult",
	"SnakeApp",
]

def __getattr__(name: str):
	if name == "SnakeApp":
		from .app import SnakeApp

		return SnakeApp
	raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

def __dir__():
	return sorted(__all__)
