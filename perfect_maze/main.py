import argparse
import sys
import os
import logging

# Ensure project root is in path so we can import 'perfect_maze' package
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from perfect_maze.core.errors import ValidationError
from perfect_maze.core.session import DEFAULT_WIDTH, DEFAULT_HEIGHT

def setup_logging(verbose: bool):
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Perfect Maze: generate and solve perfect mazes")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Generate Command
    gen_parser = subparsers.add_parser("generate", help="Generate a new maze")
    gen_parser.add_argument("--width", type=int, default=DEFAULT_WIDTH, help="Maze Width")
    gen_parser.add_argument("--height", type=int, default=DEFAULT_HEIGHT, help="Maze Height")
    gen_parser.add_argument("--seed", type=int, default=None, help="Random Seed")
    gen_parser.add_argument("--solve", action="store_true", help="Solve from entrance to exit after generating")
    return parser

def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)
    logger = logging.getLogger("perfect_maze")

    if args.command is None:
        parser.print_help()
        return 0

    logger.info(f"Running command: {args.command}")

    if args.command == "generate":
        from perfect_maze.core.session import MazeSession
        from perfect_maze.core.analysis import calculate_stats, count_passages

        logger.info(f"Generating {args.width}x{args.height} maze (seed={args.seed})...")
        try:
            session = MazeSession(args.width, args.height, seed=args.seed)
        except ValidationError as e:
            logger.error(f"Invalid dimensions: {e}")
            return 2

        grid = session.grid
        logger.info(f"Passages: {count_passages(grid)}")
        logger.info(f"Stats: {calculate_stats(grid)}")

        summary = f"{grid.width}x{grid.height} maze"
        if args.solve:
            path = session.solve()
            if path:
                logger.info(f"Solution length: {len(path)}")
            else:
                logger.info("No solution found.")
            summary += f", solution length {len(path)}"
        print(summary)

    return 0

if __name__ == "__main__":
    sys.exit(main())
