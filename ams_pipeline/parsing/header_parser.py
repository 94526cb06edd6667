from typing import List, Optional
from pydantic import ValidationError
from .errors import ArchiveFormatError, HeaderArityError
from .schema import ArchiveHeader, StationRecord
from .tokens import parse_decimal

def _split_fields(line: str) -> List[str]:
    return [p.strip() for p in line.split(",")]

def parse_station_header(
    line: str,
    station_id: int,
    years_of_data: int = 0,
    block_index: Optional[int] = None,
) -> StationRecord:
    """
    Parse one station metadata line.

    Two layouts are accepted, told apart only by field count:
      6 fields: ID, NAME, REGION, LAT, LON, ELEVATION
      7 fields: ID, NAME, LOCALITY, REGION, LAT, LON, ELEVATION
    In the 7-field layout the name becomes "<NAME>, <LOCALITY>".
    Elevation is read but not kept.
    """
    parts = _split_fields(line)

    if len(parts) == 6:
        source_id, name, region, lat_str, lon_str, _elevation = parts
    elif len(parts) == 7:
        source_id, base_name, locality, region, lat_str, lon_str, _elevation = parts
        name = f"{base_name}, {locality}"
    else:
        raise HeaderArityError(len(parts), block_index=block_index, line=line)

    latitude = parse_decimal("latitude", lat_str, line, block_index)
    longitude = parse_decimal("longitude", lon_str, line, block_index)

    try:
        return StationRecord(
            station_id=station_id,
            source_id=source_id,
            name=name,
            region=region,
            latitude=latitude,
            longitude=longitude,
            years_of_data=years_of_data,
        )
    except ValidationError as e:
        first = e.errors()[0]
        loc = ".".join(str(x) for x in first["loc"])
        raise ArchiveFormatError(
            f"Invalid station header ({loc}: {first['msg']})", block_index=block_index, line=line
        ) from e

def parse_archive_header(line: str) -> ArchiveHeader:
    raw = line.strip()
    return ArchiveHeader(raw=raw, fields=[p for p in _split_fields(raw) if p])
