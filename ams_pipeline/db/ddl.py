def create_schema(schema: str) -> str:
    return f"""CREATE SCHEMA IF NOT EXISTS {schema}"""

def create_stations_table(schema: str, table: str) -> str:
    return f"""
    CREATE TABLE IF NOT EXISTS {schema}.{table} (
        station_id BIGINT,
        source_id VARCHAR,
        name VARCHAR,
        region VARCHAR,
        latitude DOUBLE,
        longitude DOUBLE,
        years_of_data INTEGER
    )
    WITH (
        format = 'PARQUET',
        location = 's3://iceberg/{schema}/{table}'
    )
    """

def create_rainfall_table(schema: str, table: str) -> str:
    return f"""
    CREATE TABLE IF NOT EXISTS {schema}.{table} (
        station_id BIGINT,
        obs_date DATE,
        year INTEGER,
        rainfall DOUBLE,
        rainfall_unit VARCHAR
    )
    WITH (
        format = 'PARQUET',
        location = 's3://iceberg/{schema}/{table}'
    )
    """
