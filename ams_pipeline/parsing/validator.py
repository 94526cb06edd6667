from collections import defaultdict
from typing import Dict, List, Sequence, Tuple
from pydantic import ValidationError
from .schema import RainfallObservation, StationRecord

def _check_tables(stations: Sequence[StationRecord], rainfall: Sequence[RainfallObservation]) -> None:
    ids = [s.station_id for s in stations]
    if ids != list(range(1, len(ids) + 1)):
        raise ValueError(f"station ids are not 1..{len(ids)}: {ids}")

    years: Dict[int, List[int]] = defaultdict(list)
    for r in rainfall:
        # re-run model checks on rows built with model_construct or copied with changes
        RainfallObservation.model_validate(r.model_dump())
        years[r.station_id].append(r.year)

    unknown = sorted(set(years) - set(ids))
    if unknown:
        raise ValueError(f"rainfall rows reference unknown station ids: {unknown}")

    for s in stations:
        ys = years.get(s.station_id, [])
        if len(ys) != s.years_of_data:
            raise ValueError(
                f"station {s.station_id}: years_of_data={s.years_of_data} but {len(ys)} rainfall rows"
            )
        if ys and ys != list(range(ys[0], ys[0] + len(ys))):
            raise ValueError(f"station {s.station_id}: years are not a contiguous ascending range")

def validate_tables(
    stations: Sequence[StationRecord], rainfall: Sequence[RainfallObservation]
) -> Tuple[bool, str]:
    try:
        _check_tables(stations, rainfall)
        return True, ""
    except (ValidationError, ValueError) as e:
        return False, str(e)
