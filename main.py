import argparse
import logging
import sys

from config import CELL_SIZE, GRID_HEIGHT, GRID_WIDTH, LOG_LEVEL, TIMESTEP

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Grid snake")
    parser.add_argument("--grid", type=int, nargs=2, metavar=("WIDTH", "HEIGHT"),
                        default=(GRID_WIDTH, GRID_HEIGHT), help="grid size in cells")
    parser.add_argument("--cell-size", type=int, default=CELL_SIZE, help="cell size in pixels")
    parser.add_argument("--timestep", type=float, default=TIMESTEP,
                        help="seconds per movement tick")
    parser.add_argument("--seed", type=int, default=None, help="seed for food placement")
    parser.add_argument("--mute", action="store_true", help="start with sound off")
    parser.add_argument("--log-level", default=LOG_LEVEL, type=str.upper,
                        choices=LOG_LEVELS, help="logging level")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )

    # Import after logging is configured; this pulls in pygame
    from gridsnake.app import SnakeApp
    from gridsnake.grid import Grid

    grid = Grid(args.grid[0], args.grid[1], args.cell_size)
    app = SnakeApp(grid=grid, timestep=args.timestep, seed=args.seed, muted=args.mute)
    app.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
