"""
CSV parser for building and point streams.

Building streams start with an "x1,x2,h" header line followed by one
integer triple per line; point streams start with "x,y" followed by one
integer pair per line. This is the format written by csv_writer and by
the `skyline gen` and `skyline solve` commands.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Callable, Iterable, List, Optional, Sequence, Tuple, TypeVar
import logging
import re

from ..config import BUILDINGS_HEADER, POINTS_HEADER, BUILDING_FIELDS, POINT_FIELDS
from ..models.building import Building, InvalidBuildingError
from ..models.geometry import Point

logger = logging.getLogger(__name__)

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")

T = TypeVar('T')


class ParseErrorKind(Enum):
    """Kind of record failure."""
    HEADER_MISMATCH = "header_mismatch"
    SHORT_RECORD = "short_record"
    INVALID_INTEGER = "invalid_integer"
    INVALID_BUILDING = "invalid_building"


class RecordParseError(ValueError):
    """
    Raised when a CSV stream cannot be parsed.

    Attributes:
        kind: What went wrong
        line_num: 1-based line number of the offending record
        line: Text of the offending record
        field: Name of the offending field, if a single field is at fault
        partial: Records parsed successfully before the failure
    """

    def __init__(
        self,
        kind: ParseErrorKind,
        message: str,
        line_num: int,
        line: str,
        field: Optional[str] = None,
        partial: Optional[list] = None
    ):
        super().__init__(f"line {line_num}: {message}")
        self.kind = kind
        self.line_num = line_num
        self.line = line
        self.field = field
        self.partial = partial if partial is not None else []


@dataclass
class ParseResult:
    """Result of parsing a CSV stream."""
    records: list
    skipped: int = 0


def _parse_fields(
    line: str,
    line_num: int,
    names: Sequence[str]
) -> Tuple[int, ...]:
    parts = line.split(',', len(names) - 1)
    if len(parts) < len(names):
        raise RecordParseError(
            ParseErrorKind.SHORT_RECORD,
            f"short line {line!r}",
            line_num,
            line,
        )

    values = []
    for name, part in zip(names, parts):
        text = part.strip()
        if not _INTEGER_RE.fullmatch(text):
            raise RecordParseError(
                ParseErrorKind.INVALID_INTEGER,
                f"invalid {name}={part!r} in {line!r}",
                line_num,
                line,
                field=name,
            )
        values.append(int(text))
    return tuple(values)


def _scan(
    lines: Iterable[str],
    header: str,
    names: Sequence[str],
    build: Callable[[Tuple[int, ...]], T],
    skip_invalid: bool
) -> ParseResult:
    records: List[T] = []
    skipped = 0
    it = iter(lines)

    first = next(it, None)
    if first is None:
        return ParseResult(records)

    first = first.rstrip('\r\n')
    if first.strip() != header:
        raise RecordParseError(
            ParseErrorKind.HEADER_MISMATCH,
            f"expected header line {header!r}, got {first!r}",
            1,
            first,
            partial=records,
        )

    for line_num, line in enumerate(it, 2):
        line = line.rstrip('\r\n')
        if not line.strip():
            continue

        try:
            values = _parse_fields(line, line_num, names)
            try:
                record = build(values)
            except InvalidBuildingError as e:
                raise RecordParseError(
                    ParseErrorKind.INVALID_BUILDING,
                    f"{e} in {line!r}",
                    line_num,
                    line,
                ) from e
        except RecordParseError as e:
            if not skip_invalid:
                e.partial = records
                raise
            logger.warning(f"Skipping record: {e}")
            skipped += 1
            continue

        records.append(record)

    return ParseResult(records, skipped)


def scan_buildings(lines: Iterable[str], skip_invalid: bool = False) -> ParseResult:
    """
    Parse a building stream.

    Args:
        lines: Lines of text (a file object works), header first
        skip_invalid: Log and skip malformed records instead of raising

    Returns:
        ParseResult whose records are Building instances

    Raises:
        RecordParseError: On a header mismatch, or on the first malformed
            record when skip_invalid is False; error.partial holds the
            buildings parsed before it
    """
    result = _scan(
        lines,
        BUILDINGS_HEADER,
        BUILDING_FIELDS,
        lambda v: Building(v[0], v[1], v[2]),
        skip_invalid,
    )
    logger.debug(f"Parsed {len(result.records)} buildings ({result.skipped} skipped)")
    return result


def scan_points(lines: Iterable[str], skip_invalid: bool = False) -> ParseResult:
    """
    Parse a point stream.

    Args:
        lines: Lines of text, header first
        skip_invalid: Log and skip malformed records instead of raising

    Returns:
        ParseResult whose records are Point instances

    Raises:
        RecordParseError: As for scan_buildings
    """
    result = _scan(
        lines,
        POINTS_HEADER,
        POINT_FIELDS,
        lambda v: Point(v[0], v[1]),
        skip_invalid,
    )
    logger.debug(f"Parsed {len(result.records)} points ({result.skipped} skipped)")
    return result


def load_buildings(filepath: str, skip_invalid: bool = False) -> List[Building]:
    """
    Load buildings from a CSV file.

    Raises:
        FileNotFoundError: If file doesn't exist
        RecordParseError: If the file is malformed
    """
    path = Path(filepath)
    if not path.exists():
        raise FileNotFoundError(f"Building file not found: {filepath}")

    logger.info(f"Loading buildings from {filepath}")
    with open(path, 'r', encoding='utf-8') as f:
        return scan_buildings(f, skip_invalid).records


def load_points(filepath: str, skip_invalid: bool = False) -> List[Point]:
    """
    Load contour points from a CSV file.

    Raises:
        FileNotFoundError: If file doesn't exist
        RecordParseError: If the file is malformed
    """
    path = Path(filepath)
    if not path.exists():
        raise FileNotFoundError(f"Point file not found: {filepath}")

    logger.info(f"Loading points from {filepath}")
    with open(path, 'r', encoding='utf-8') as f:
        return scan_points(f, skip_invalid).records
