import random
from typing import Iterator, Tuple

from config import CELL_SIZE, GRID_HEIGHT, GRID_WIDTH

Cell = Tuple[int, int]


class Grid:
    """Discrete board of ``width`` x ``height`` cells centred on the origin.

    Columns run from ``min_x = -(width // 2)`` to ``max_x = min_x + width - 1``
    and rows likewise, so a 20x20 grid spans -10..9 on both axes. ``+y``
    points up; ``to_screen`` flips it for pygame, where ``+y`` points down.
    """

    def __init__(self, width=GRID_WIDTH, height=GRID_HEIGHT, cell_size=CELL_SIZE):
        if width <= 0 or height <= 0:
            raise ValueError(f"grid size must be positive, got {width}x{height}")
        if cell_size <= 0:
            raise ValueError(f"cell_size must be positive, got {cell_size}")
        self.width = int(width)
        self.height = int(height)
        self.cell_size = int(cell_size)

    @property
    def min_x(self) -> int:
        return -(self.width // 2)

    @property
    def max_x(self) -> int:
        return self.min_x + self.width - 1

    @property
    def min_y(self) -> int:
        return -(self.height // 2)

    @property
    def max_y(self) -> int:
        return self.min_y + self.height - 1

    @property
    def cell_count(self) -> int:
        return self.width * self.height

    def contains(self, cell: Cell) -> bool:
        x, y = cell
        return self.min_x <= x <= self.max_x and self.min_y <= y <= self.max_y

    def step(self, cell: Cell, direction: Cell) -> Cell:
        """Return the cell one unit away from ``cell`` along ``direction``."""
        return (cell[0] + direction[0], cell[1] + direction[1])

    def cells(self) -> Iterator[Cell]:
        for y in range(self.min_y, self.max_y + 1):
            for x in range(self.min_x, self.max_x + 1):
                yield (x, y)

    def random_cell(self, rng: random.Random) -> Cell:
        return (
            rng.randint(self.min_x, self.max_x),
            rng.randint(self.min_y, self.max_y),
        )

    @property
    def pixel_size(self) -> Tuple[int, int]:
        return (self.width * self.cell_size, self.height * self.cell_size)

    def to_screen(self, cell: Cell) -> Tuple[int, int]:
        """Top-left pixel of ``cell`` on a surface of ``pixel_size``."""
        x, y = cell
        px = (x - self.min_x) * self.cell_size
        py = (self.max_y - y) * self.cell_size
        return (px, py)

    def __repr__(self):
        return f"<Grid {self.width}x{self.height} cell={self.cell_size}>"
