"""Command-line entry point: generate and analyze maze snapshots."""

import argparse
import sys

from .app.generator import generate
from .config import MazeConfig
from .domain.astar import find_path
from .domain.connectivity import reachable_from
from .domain.errors import MazeError
from .domain.types import CellType
from .utils.logging_setup import configure_logging
from .utils.serialization import load_maze, save_maze, serialize


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="mazerace", description="Maze generator for the snail race")
    parser.add_argument("--log-level", default="WARNING", type=str.upper,
                        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
                        help="Logging level (default: WARNING)")
    subparsers = parser.add_subparsers(dest="command", required=True)

    gen = subparsers.add_parser("generate", help="Generate a maze snapshot")
    gen.add_argument("--rows", type=int, default=20, help="Maze height in cells")
    gen.add_argument("--cols", type=int, default=20, help="Maze width in cells")
    gen.add_argument("--difficulty", default=None, help="easy, medium, hard or extreme")
    gen.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility")
    gen.add_argument("--output", default=None, help="Write the snapshot here instead of stdout")

    analyze = subparsers.add_parser("analyze", help="Report on a saved maze snapshot")
    analyze.add_argument("path", help="Snapshot JSON file")
    return parser


def cmd_generate(args) -> int:
    config = MazeConfig.from_env()
    result = generate(args.rows, args.cols, args.difficulty, config=config, seed=args.seed)
    if args.output:
        save_maze(result, args.output)
        print(f"Maze saved to {args.output}")
    else:
        print(serialize(result))
    return 0


def cmd_analyze(args) -> int:
    result = load_maze(args.path)
    grid = result.grid
    path = find_path(grid, result.start, result.finish)
    reachable = reachable_from(grid, result.start)
    passable = grid.rows * grid.cols - grid.count(CellType.WALL)

    print(f"Dimensions: {grid.rows}x{grid.cols}")
    print(f"Difficulty: {result.difficulty}")
    print(f"Wall count: {grid.count(CellType.WALL)}")
    print(f"Start: {result.start}")
    print(f"Finish: {result.finish}")
    if path:
        print(f"Path exists! Length: {len(path) - 1} steps")
    else:
        print("No path exists from start to finish!")
    print(f"Reachable cells from start: {len(reachable)} of {passable}")
    return 0


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    commands = {"generate": cmd_generate, "analyze": cmd_analyze}
    try:
        return commands[args.command](args)
    except MazeError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
