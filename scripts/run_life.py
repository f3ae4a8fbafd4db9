#!/usr/bin/env python3
"""
Game of Life Runner

Seeds a world and animates it, either in a pygame window or as text
frames on stdout.
"""

import sys
import os
import time
import logging
import argparse

# Add repository root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from gol.core.grid import empty_grid, Grid, DEFAULT_ROWS, DEFAULT_COLS
from gol.core.stepper import evolve
from gol.patterns.library import PATTERNS, default_world, get_pattern, pattern_size, seed
from gol.render.config import RenderConfig

logger = logging.getLogger(__name__)


def build_world(pattern: str, row: int, col: int,
                rows: int = DEFAULT_ROWS, cols: int = DEFAULT_COLS) -> Grid:
    """Create the initial generation for the chosen pattern."""
    if pattern == "default":
        return default_world(rows, cols)
    cells = get_pattern(pattern)
    height, width = pattern_size(cells)
    if row < 0 or col < 0 or row + height > rows or col + width > cols:
        logger.warning(f"Pattern '{pattern}' ({height}x{width}) at ({row}, {col}) overhangs "
                       f"the {rows}x{cols} grid; cells outside are dropped")
    return seed(empty_grid(rows, cols), cells, row, col)


def run_text(grid: Grid, frames: int, fps: int) -> int:
    """Print generations as text frames; returns number of frames shown."""
    shown = 0
    if frames == 0:
        return shown
    for generation, current in enumerate(evolve(grid, frames - 1)):
        print(f"Generation {generation} (alive={current.count_alive()})")
        print(current)
        print()
        shown += 1
        time.sleep(1.0 / fps)
    return shown


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Conway's Game of Life")
    parser.add_argument("--pattern", choices=["default"] + sorted(PATTERNS), default="default",
                        help="Seed pattern (default: the start-up world)")
    parser.add_argument("--row", type=int, default=DEFAULT_ROWS // 2, help="Pattern top row")
    parser.add_argument("--col", type=int, default=DEFAULT_COLS // 2, help="Pattern left column")
    parser.add_argument("--fps", type=int, default=10, help="Generations per second")
    parser.add_argument("--frames", type=int, default=None, help="Stop after this many frames")
    parser.add_argument("--text", action="store_true", help="Print text frames instead of opening a window")
    parser.add_argument("--log-level", default="INFO", help="Logging level")

    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level.upper(), format='%(asctime)s - %(levelname)s - %(message)s')

    try:
        if args.frames is not None and args.frames < 0:
            raise ValueError(f"Frame count cannot be negative, got {args.frames}")

        config = RenderConfig(fps=args.fps)
        grid = build_world(args.pattern, args.row, args.col, *config.grid_shape)
        logger.info(f"Seeded '{args.pattern}' world: {grid!r}")

        if args.text:
            shown = run_text(grid, 20 if args.frames is None else args.frames, config.fps)
        else:
            from gol.render.renderer import LifeRenderer
            shown = LifeRenderer(grid, config).run(max_frames=args.frames)

        logger.info(f"Showed {shown} generations")
        return 0

    except Exception as e:
        logger.error(f"Simulation failed: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
