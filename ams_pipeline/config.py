from dataclasses import dataclass
import os

@dataclass(frozen=True)
class Settings:
    # Archive source: a local path wins over a URL
    archive_path: str = os.environ.get("ARCHIVE_PATH", "")
    archive_url: str = os.environ.get("ARCHIVE_URL", "")
    rainfall_unit: str = os.environ.get("RAINFALL_UNIT", "in")
    request_timeout_s: int = int(os.environ.get("REQUEST_TIMEOUT_S", "30"))

    # Trino
    trino_host: str = os.environ.get("TRINO_HOST", "localhost")
    trino_port: int = int(os.environ.get("TRINO_PORT", "8080"))
    trino_user: str = os.environ.get("TRINO_USER", "pipeline")
    trino_catalog: str = os.environ.get("TRINO_CATALOG", "iceberg")
    trino_schema: str = os.environ.get("TRINO_SCHEMA", "precipitation")

    # Tables
    stations_table: str = os.environ.get("STATIONS_TABLE", "ams_stations")
    rainfall_table: str = os.environ.get("RAINFALL_TABLE", "ams_rainfall")

    load_batch_size: int = int(os.environ.get("LOAD_BATCH_SIZE", "500"))
    log_level: str = os.environ.get("LOG_LEVEL", "INFO")
