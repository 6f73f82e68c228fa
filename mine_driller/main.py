#!/usr/bin/env python3
"""
Mine Driller

Finds the descent through a mine grid that claims the most resources,
moving diagonally down-left or down-right from the surface to the bottom row.

Usage:
    mine-driller --config configs/mine1.yaml [options]
    mine-driller --map maps/mine1.txt [options]

Examples:
    mine-driller --config configs/mine1.yaml
    mine-driller --config configs/mine1.yaml --gif --out-dir results/
    mine-driller --map maps/mine1.txt --size 7 --no-csv --no-snapshot
    mine-driller --map maps/mine1.txt --quiet --verbose
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .config import DrillerConfig, MineConfig, load_config
from .errors import MineDrillerError
from .loader import load_grid
from .model.search import PathSearch
from .export.csv_writer import write_path_csv
from .export.visualizer import Visualizer
from .export.reporter import Reporter

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog='mine-driller',
        description='Maximum-resource descent search through a mine grid',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    mine-driller --config configs/mine1.yaml
    mine-driller --config configs/mine1.yaml --gif --out-dir results/
    mine-driller --map maps/mine1.txt --size 7 --no-csv --no-snapshot
    mine-driller --map maps/mine1.txt --quiet --verbose
        """
    )

    # Input source
    parser.add_argument('--config', type=Path, default=None,
                        help='Path to YAML configuration file')
    parser.add_argument('--map', type=Path, default=None,
                        help='Path to a map file (overrides the config)')

    # Optional overrides
    parser.add_argument('--size', type=int, default=None,
                        help='Expected grid size n (default: inferred)')
    parser.add_argument('--out-dir', type=Path, default=Path('./output'),
                        help='Output directory for exports (default: ./output)')

    # Export toggles
    parser.add_argument('--csv', dest='csv', action='store_true', default=None,
                        help='Enable CSV export (default)')
    parser.add_argument('--no-csv', dest='csv', action='store_false',
                        help='Disable CSV export')

    parser.add_argument('--snapshot', dest='snapshot', action='store_true', default=None,
                        help='Enable solution snapshot (default)')
    parser.add_argument('--no-snapshot', dest='snapshot', action='store_false',
                        help='Disable solution snapshot')

    parser.add_argument('--gif', action='store_true', default=False,
                        help='Enable GIF animation export')

    parser.add_argument('--quiet', action='store_true', default=False,
                        help='Suppress stdout output')
    parser.add_argument('--verbose', action='store_true', default=False,
                        help='Enable debug logging')

    args = parser.parse_args(argv)
    if args.config is None and args.map is None:
        parser.error('one of --config or --map is required')
    return args


def build_config(args: argparse.Namespace) -> DrillerConfig:
    """Load the YAML config, if any, and apply CLI overrides."""
    if args.config is not None:
        config = load_config(args.config)
    else:
        config = DrillerConfig(mine=MineConfig(map_path=args.map))

    if args.map is not None:
        config.mine.map_path = args.map
    if args.size is not None:
        config.mine.size = args.size
    if args.csv is not None:
        config.csv_enabled = args.csv
    if args.snapshot is not None:
        config.snapshot_enabled = args.snapshot
    if args.gif:
        config.gif_enabled = True
    config.quiet = args.quiet
    config.out_dir = args.out_dir
    return config


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s'
    )

    # Load configuration
    try:
        config = build_config(args)
    except FileNotFoundError:
        print(f"Error: Configuration file not found: {args.config}", file=sys.stderr)
        return 1
    except Exception as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        return 1

    # Load map and search
    try:
        grid = load_grid(config.mine.map_path, config.mine.size)
        search = PathSearch(grid)
        reporter = Reporter(grid, str(config.mine.map_path), config.placeholder)

        if not config.quiet:
            print(f"Map: {config.mine.map_path} ({grid.size}x{grid.size})")
            print()
            print(reporter.format_map())
            print()

        path = search.solve()
    except MineDrillerError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    logger.info("Best total %d starting at column %d", path.total, path.start.col)

    if not config.quiet and config.text_enabled:
        print(reporter.narrate(path))
        print()
        print(reporter.format_solution_map(path))

    # Exports
    try:
        if config.csv_enabled:
            csv_path = write_path_csv(path, config.out_dir / 'path_steps.csv')
            if not config.quiet:
                print(f"\nCSV saved: {csv_path}")

        visualizer = Visualizer(grid)
        if config.snapshot_enabled:
            snapshot_path = config.out_dir / 'solution.png'
            visualizer.save_snapshot(path, snapshot_path)
            if not config.quiet:
                print(f"Snapshot saved: {snapshot_path}")

        if config.gif_enabled:
            gif_path = config.out_dir / 'descent.gif'
            visualizer.buffer_descent(path)
            if not config.quiet:
                print(f"Generating GIF ({len(visualizer.frames)} frames)...")
            visualizer.generate_gif(gif_path)
            if not config.quiet:
                print(f"Animation saved: {gif_path}")
    except OSError as e:
        print(f"Error writing output: {e}", file=sys.stderr)
        return 1

    # Print summary report
    if not config.quiet:
        report = reporter.generate_summary(
            path,
            search.get_summary(),
            config.out_dir,
            config.csv_enabled,
            config.snapshot_enabled,
            config.gif_enabled
        )
        print(report)

    return 0


if __name__ == '__main__':
    sys.exit(main())
