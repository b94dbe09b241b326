"""
Skyline Contour Solver - Main CLI

Reads building CSV, writes contour CSV, and provides helper commands to
generate synthetic buildings and render either stream as text.

Usage:
    python -m skyline.main solve [-i buildings.csv] [-o points.csv]
    python -m skyline.main gen [-w WIDTH] [-H HEIGHT] [-n COUNT] [-s SEED]
    python -m skyline.main display [-i buildings.csv]
    python -m skyline.main plot [-i points.csv]

Example:
    python -m skyline.main gen -n 12 -s 7 | python -m skyline.main solve
"""

import argparse
import logging
import sys
import time
from contextlib import contextmanager
from dataclasses import asdict
from typing import Iterator, List, Optional, TextIO

from . import __version__
from .config import (
    ActiveSetKind,
    GeneratorConfig,
    SolverConfig,
    GEN_DEFAULT_WIDTH,
    GEN_DEFAULT_HEIGHT,
    GEN_DEFAULT_COUNT,
)
from .generators.random_buildings import generate_buildings
from .io.csv_parser import ParseResult, RecordParseError, scan_buildings, scan_points
from .io.csv_writer import write_buildings, write_points
from .models.building import InvalidBuildingError
from .processing.sweep import SkylineSolver, SweepInvariantError
from .render.building_plot import render_buildings
from .render.contour_plot import render_contour
from .utils.contour_utils import ContourError


def setup_logging(verbose: bool = False, log_file: Optional[str] = None) -> None:
    """
    Route log records to stderr, plus a full DEBUG log file when requested.

    stdout stays reserved for the CSV and text the commands emit.
    """
    level = logging.DEBUG if verbose else logging.INFO

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG if log_file else level)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(
        '%(asctime)s [%(levelname)s] %(name)s: %(message)s',
        datefmt='%H:%M:%S'
    ))
    root_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s [%(levelname)s] %(name)s: %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        ))
        root_logger.addHandler(file_handler)


def _report_read(parsed: ParseResult, what: str) -> None:
    logger = logging.getLogger(__name__)
    if parsed.skipped:
        logger.warning(f"Skipped {parsed.skipped} invalid records")
    logger.info(f"Read {len(parsed.records)} {what}")


@contextmanager
def _open_input(path: str) -> Iterator[TextIO]:
    if path == '-':
        yield sys.stdin
    else:
        with open(path, 'r', encoding='utf-8') as f:
            yield f


@contextmanager
def _open_output(path: str) -> Iterator[TextIO]:
    if path == '-':
        yield sys.stdout
    else:
        with open(path, 'w', encoding='utf-8', newline='\n') as f:
            yield f


def run_solve(args: argparse.Namespace) -> int:
    """Read buildings, solve, write contour points."""
    logger = logging.getLogger(__name__)

    with _open_input(args.input) as f:
        parsed = scan_buildings(f, skip_invalid=args.skip_invalid)
    _report_read(parsed, "buildings")
    buildings = parsed.records

    config = SolverConfig(
        active_set=ActiveSetKind(args.active_set),
        check_result=args.check,
    )
    solver = SkylineSolver(config)

    start_time = time.time()
    points = solver.solve(buildings)
    elapsed_ms = int((time.time() - start_time) * 1000)

    logger.info(f"Solved in {elapsed_ms}ms: {len(points)} points")
    logger.debug(f"Stats: {asdict(solver.last_stats)}")

    with _open_output(args.output) as out:
        write_points(out, points)
    return 0


def run_gen(args: argparse.Namespace) -> int:
    """Write synthetic buildings."""
    config = GeneratorConfig(
        width=args.width,
        height=args.height,
        count=args.count,
        seed=args.seed,
    )
    buildings = generate_buildings(config)

    with _open_output(args.output) as out:
        write_buildings(out, buildings)
    return 0


def run_display(args: argparse.Namespace) -> int:
    """Render buildings as text."""
    with _open_input(args.input) as f:
        parsed = scan_buildings(f, skip_invalid=args.skip_invalid)
    _report_read(parsed, "buildings")

    with _open_output(args.output) as out:
        out.write(render_buildings(parsed.records))
    return 0


def run_plot(args: argparse.Namespace) -> int:
    """Render a contour as text."""
    with _open_input(args.input) as f:
        parsed = scan_points(f, skip_invalid=args.skip_invalid)
    _report_read(parsed, "points")

    with _open_output(args.output) as out:
        out.write(render_contour(parsed.records))
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all subcommands."""
    common = argparse.ArgumentParser(add_help=False)

    common.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Enable verbose logging'
    )

    common.add_argument(
        '--log-file',
        default=None,
        help='Also write a DEBUG-level log to this file'
    )

    common.add_argument(
        '--output', '-o',
        default='-',
        help='Output file (default: stdout)'
    )

    reader = argparse.ArgumentParser(add_help=False)

    reader.add_argument(
        '--input', '-i',
        default='-',
        help='Input CSV file (default: stdin)'
    )

    reader.add_argument(
        '--skip-invalid',
        action='store_true',
        help='Skip malformed records with a warning instead of failing'
    )

    parser = argparse.ArgumentParser(
        prog='skyline',
        description='Skyline Contour Solver - trace the silhouette of rectangular buildings'
    )

    parser.add_argument(
        '--version',
        action='version',
        version=f'%(prog)s {__version__}'
    )

    subparsers = parser.add_subparsers(dest='command', required=True)

    # solve
    solve_parser = subparsers.add_parser(
        'solve',
        parents=[common, reader],
        help='Compute the contour of a building CSV stream'
    )
    solve_parser.add_argument(
        '--active-set',
        choices=[kind.value for kind in ActiveSetKind],
        default=ActiveSetKind.AUGMENTED_HEAP.value,
        help='Active set strategy (default: heap)'
    )
    solve_parser.add_argument(
        '--check',
        action='store_true',
        help='Verify the contour against a brute-force height sampling'
    )
    solve_parser.set_defaults(handler=run_solve)

    # gen
    gen_parser = subparsers.add_parser(
        'gen',
        parents=[common],
        help='Generate random buildings as CSV'
    )
    gen_parser.add_argument(
        '--width', '-w',
        type=int,
        default=GEN_DEFAULT_WIDTH,
        help=f'Width of field (default: {GEN_DEFAULT_WIDTH})'
    )
    gen_parser.add_argument(
        '--height', '-H',
        type=int,
        default=GEN_DEFAULT_HEIGHT,
        help=f'Height of field (default: {GEN_DEFAULT_HEIGHT})'
    )
    gen_parser.add_argument(
        '--count', '-n',
        type=int,
        default=GEN_DEFAULT_COUNT,
        help=f'Number of buildings (default: {GEN_DEFAULT_COUNT})'
    )
    gen_parser.add_argument(
        '--seed', '-s',
        type=int,
        default=None,
        help='Random seed (default: random)'
    )
    gen_parser.set_defaults(handler=run_gen)

    # display
    display_parser = subparsers.add_parser(
        'display',
        parents=[common, reader],
        help='Render a building CSV stream as text'
    )
    display_parser.set_defaults(handler=run_display)

    # plot
    plot_parser = subparsers.add_parser(
        'plot',
        parents=[common, reader],
        help='Render a point CSV stream as text'
    )
    plot_parser.set_defaults(handler=run_plot)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose, args.log_file)

    try:
        return args.handler(args)

    except (RecordParseError, InvalidBuildingError, ContourError,
            SweepInvariantError, FileNotFoundError, ValueError) as e:
        logging.error(f"{args.command} failed: {e}")
        return 1

    except Exception as e:
        logging.exception(f"{args.command} failed: {e}")
        return 1


if __name__ == '__main__':
    sys.exit(main())
