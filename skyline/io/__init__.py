"""
Input/Output modules for the Skyline Contour Solver.
"""

from .csv_parser import (
    ParseErrorKind,
    ParseResult,
    RecordParseError,
    scan_buildings,
    scan_points,
    load_buildings,
    load_points,
)
from .csv_writer import (
    write_buildings,
    write_points,
    save_buildings,
    save_points,
)

__all__ = [
    # Parsing
    'ParseErrorKind',
    'ParseResult',
    'RecordParseError',
    'scan_buildings',
    'scan_points',
    'load_buildings',
    'load_points',
    # Writing
    'write_buildings',
    'write_points',
    'save_buildings',
    'save_points',
]
