import re
from datetime import date
from typing import Dict, Iterable, List, Optional, Tuple
from dateutil import parser as dt_parser
from .errors import NumericFieldError
from .schema import Rainfall, RainfallObservation
from .tokens import parse_decimal
from ..utils.logging import get_logger

logger = get_logger(__name__)

DATE_TOKEN = re.compile(r"^\d{1,2}/\d{1,2}/\d{4}$")

Triple = Tuple[date, int, float]

def _parse_date(token: str, line: str, block_index: Optional[int]) -> date:
    if not DATE_TOKEN.match(token):
        raise NumericFieldError("date", token, block_index=block_index, line=line)
    month, day, _ = (int(p) for p in token.split("/"))
    try:
        parsed = dt_parser.parse(token, dayfirst=False, yearfirst=False).date()
    except (ValueError, OverflowError):
        raise NumericFieldError("date", token, block_index=block_index, line=line) from None
    # dateutil swaps day and month when the month is out of range
    if (parsed.month, parsed.day) != (month, day):
        raise NumericFieldError("date", token, block_index=block_index, line=line)
    return parsed

def parse_observations(lines: Iterable[str], block_index: Optional[int] = None) -> List[Triple]:
    """Parse `mm/dd/yyyy value` lines into (date, year, value) triples in scan order.

    Blank lines and lines with fewer than two tokens are skipped; tokens past
    the second are ignored.
    """
    out: List[Triple] = []
    for raw in lines:
        line = raw.strip()
        if not line:
            continue
        parts = line.split()
        if len(parts) < 2:
            continue
        obs_date = _parse_date(parts[0], line, block_index)
        value = parse_decimal("rainfall", parts[1], line, block_index)
        out.append((obs_date, obs_date.year, value))
    return out

def build_series(
    lines: Iterable[str],
    station_id: int,
    unit: str = "in",
    block_index: Optional[int] = None,
) -> List[RainfallObservation]:
    """
    Build the gap-filled annual series for one station.

    One row is emitted for every year between the first and last observed
    year. Missing years get a January 1st date and no rainfall value. When a
    year appears more than once, the first entry in scan order is kept.
    """
    triples = parse_observations(lines, block_index=block_index)
    if not triples:
        return []

    by_year: Dict[int, Triple] = {}
    for t in triples:
        obs_date, yr, value = t
        if yr in by_year:
            kept = by_year[yr]
            logger.warning(
                f"Station {station_id}: duplicate year {yr}, keeping {kept[0].isoformat()} ({kept[2]}) "
                f"and discarding {obs_date.isoformat()} ({value})"
            )
            continue
        by_year[yr] = t

    min_year = min(by_year)
    max_year = max(by_year)

    rows: List[RainfallObservation] = []
    for yr in range(min_year, max_year + 1):
        hit = by_year.get(yr)
        if hit is not None:
            obs_date, _, value = hit
            rows.append(RainfallObservation(
                station_id=station_id,
                date=obs_date,
                year=yr,
                rainfall=Rainfall(value=value, unit=unit),
            ))
        else:
            rows.append(RainfallObservation(
                station_id=station_id,
                date=date(yr, 1, 1),
                year=yr,
                rainfall=None,
            ))
    return rows
