from ams_pipeline.config import Settings
from ams_pipeline.db.trino_client import TrinoClient
from ams_pipeline.db import ddl

from ams_pipeline.ingestion.archive_client import ArchiveClient, read_archive
from ams_pipeline.parsing.archive_parser import parse_archive
from ams_pipeline.loading.load_job import LoadJob

from ams_pipeline.utils.logging import setup_logging

def _trino(s: Settings) -> TrinoClient:
    return TrinoClient(s.trino_host, s.trino_port, s.trino_user, s.trino_catalog, s.trino_schema)

def init(s: Settings) -> None:
    trino = _trino(s)
    trino.execute(ddl.create_schema(s.trino_schema))
    trino.execute(ddl.create_stations_table(s.trino_schema, s.stations_table))
    trino.execute(ddl.create_rainfall_table(s.trino_schema, s.rainfall_table))

def load_text(s: Settings) -> str:
    if s.archive_path:
        return read_archive(s.archive_path)
    if s.archive_url:
        return ArchiveClient(timeout_s=s.request_timeout_s).fetch(s.archive_url)
    raise ValueError("Set ARCHIVE_PATH or ARCHIVE_URL")

def ingest(s: Settings) -> None:
    stations, rainfall = parse_archive(load_text(s), unit=s.rainfall_unit)

    job = LoadJob(_trino(s), s.trino_schema, s.stations_table, s.rainfall_table, batch_size=s.load_batch_size)
    job.run(stations, rainfall)

def main():
    s = Settings()
    setup_logging(s.log_level)
    init(s)
    ingest(s)

if __name__ == "__main__":
    main()
