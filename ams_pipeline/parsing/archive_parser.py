import re
from typing import List, Tuple
from .errors import EmptyArchiveError
from .header_parser import parse_archive_header, parse_station_header
from .schema import RainfallObservation, StationRecord
from .series_builder import build_series
from ..ingestion.archive_client import read_archive
from ..utils.logging import get_logger

logger = get_logger(__name__)

BLOCK_SEPARATOR = re.compile(r"\n\s*\n")

def split_blocks(text: str) -> List[List[str]]:
    """Drop the archive header line and split the rest into station blocks (lists of lines)."""
    lines = text.replace("\r\n", "\n").split("\n")
    remaining = "\n".join(lines[1:])
    blocks = []
    for chunk in BLOCK_SEPARATOR.split(remaining):
        chunk = chunk.strip()
        if chunk:
            blocks.append(chunk.split("\n"))
    return blocks

def parse_archive(text: str, unit: str = "in") -> Tuple[List[StationRecord], List[RainfallObservation]]:
    """
    Parse an annual-maximum archive into (stations, rainfall).

    Stations are numbered 1..N in block order. Rainfall rows for all stations
    go into one flat list, ordered by station then year. Any format error
    aborts the whole parse.
    """
    blocks = split_blocks(text)
    if not blocks:
        raise EmptyArchiveError()

    stations: List[StationRecord] = []
    rainfall: List[RainfallObservation] = []

    for station_id, block_lines in enumerate(blocks, start=1):
        header_line, data_lines = block_lines[0], block_lines[1:]

        rows = build_series(data_lines, station_id, unit=unit, block_index=station_id)
        station = parse_station_header(
            header_line, station_id, years_of_data=len(rows), block_index=station_id
        )

        stations.append(station)
        rainfall.extend(rows)

    gap_count = sum(1 for r in rainfall if r.is_gap_filled)
    logger.info(f"Parsed {len(stations)} stations, {len(rainfall)} rainfall rows ({gap_count} gap-filled)")
    return stations, rainfall

def read_noaa_archive(path: str, unit: str = "in") -> Tuple[List[StationRecord], List[RainfallObservation]]:
    text = read_archive(path)
    header = parse_archive_header(text.lstrip("\ufeff").split("\n", 1)[0])
    logger.info(f"Archive header: {header.fields}")
    return parse_archive(text, unit=unit)
