from typing import List, Optional, Sequence
from ..db.trino_client import TrinoClient
from ..parsing.errors import ArchiveFormatError
from ..parsing.schema import RainfallObservation, StationRecord
from ..parsing.validator import validate_tables
from ..utils.logging import get_logger

logger = get_logger(__name__)

class LoadJob:
    """Replace the contents of the stations and rainfall tables with one parse result.

    Tables are validated and every VALUES row is rendered before the first
    DELETE. Trino has no multi-statement transaction here, so an INSERT that
    fails after the DELETEs leaves the tables empty or partly loaded; rerun
    the job to restore them.
    """

    def __init__(
        self,
        trino: TrinoClient,
        schema: str,
        stations_table: str,
        rainfall_table: str,
        batch_size: int = 500,
    ):
        self.trino = trino
        self.schema = schema
        self.stations_table = stations_table
        self.rainfall_table = rainfall_table
        self.batch_size = batch_size

    def run(self, stations: Sequence[StationRecord], rainfall: Sequence[RainfallObservation]) -> None:
        ok, err = validate_tables(stations, rainfall)
        if not ok:
            raise ArchiveFormatError(f"Parsed tables failed validation: {err}")

        station_values = [self._station_values(s) for s in stations]
        rainfall_values = [self._rainfall_values(r) for r in rainfall]

        # station ids are assigned per parse, so old rows cannot be merged
        self.trino.execute(f"""DELETE FROM {self.schema}.{self.stations_table}""")
        self.trino.execute(f"""DELETE FROM {self.schema}.{self.rainfall_table}""")

        self._insert_all(
            self.stations_table,
            "(station_id, source_id, name, region, latitude, longitude, years_of_data)",
            station_values,
        )
        self._insert_all(
            self.rainfall_table,
            "(station_id, obs_date, year, rainfall, rainfall_unit)",
            rainfall_values,
        )

        gaps = sum(1 for r in rainfall if r.rainfall is None)
        logger.info(f"Loaded {len(stations)} stations and {len(rainfall)} rainfall rows ({gaps} missing values)")

    def _insert_all(self, table: str, columns: str, values: List[str]) -> None:
        if not values:
            logger.warning(f"No rows to insert into {table}")
            return

        total_batches = (len(values) + self.batch_size - 1) // self.batch_size
        logger.info(f"Inserting {len(values)} rows into {table} in {total_batches} batch(es)...")

        for i in range(0, len(values), self.batch_size):
            batch = values[i:i+self.batch_size]
            batch_num = (i // self.batch_size) + 1
            self.trino.execute(f"""
            INSERT INTO {self.schema}.{table}
            {columns}
            VALUES {",".join(batch)}
            """)
            logger.info(f"  Batch {batch_num}/{total_batches} inserted ({len(batch)} rows)")

    def _station_values(self, s: StationRecord) -> str:
        return (
            f"({s.station_id},{self._sql_str(s.source_id)},{self._sql_str(s.name)},"
            f"{self._sql_str(s.region)},{s.latitude!r},{s.longitude!r},{s.years_of_data})"
        )

    def _rainfall_values(self, r: RainfallObservation) -> str:
        if r.rainfall is None:
            value, unit = "NULL", "NULL"
        else:
            value, unit = repr(r.rainfall.value), self._sql_str(r.rainfall.unit)
        return f"({r.station_id},DATE '{r.date.isoformat()}',{r.year},{value},{unit})"

    def _sql_str(self, s: Optional[str]) -> str:
        if s is None:
            return "NULL"
        escaped = str(s).replace("'", "''")
        return f"'{escaped}'"
