"""
CSV writer for building and point streams.

Emits the same header-plus-records format that csv_parser reads.
"""

from typing import Iterable, TextIO
import logging

from ..config import BUILDINGS_HEADER, POINTS_HEADER
from ..models.building import Building
from ..models.geometry import Point

logger = logging.getLogger(__name__)


def write_buildings(stream: TextIO, buildings: Iterable[Building]) -> int:
    """
    Write buildings as "x1,x2,h" records.

    Returns:
        Number of records written
    """
    stream.write(f"{BUILDINGS_HEADER}\n")
    count = 0
    for b in buildings:
        stream.write(f"{b.x1},{b.x2},{b.height}\n")
        count += 1
    return count


def write_points(stream: TextIO, points: Iterable[Point]) -> int:
    """
    Write contour points as "x,y" records.

    Returns:
        Number of records written
    """
    stream.write(f"{POINTS_HEADER}\n")
    count = 0
    for p in points:
        stream.write(f"{p.x},{p.y}\n")
        count += 1
    return count


def save_buildings(filepath: str, buildings: Iterable[Building]) -> int:
    """Write buildings to a CSV file, replacing it."""
    with open(filepath, 'w', encoding='utf-8', newline='\n') as f:
        count = write_buildings(f, buildings)
    logger.info(f"Wrote {count} buildings to {filepath}")
    return count


def save_points(filepath: str, points: Iterable[Point]) -> int:
    """Write contour points to a CSV file, replacing it."""
    with open(filepath, 'w', encoding='utf-8', newline='\n') as f:
        count = write_points(f, points)
    logger.info(f"Wrote {count} points to {filepath}")
    return count
