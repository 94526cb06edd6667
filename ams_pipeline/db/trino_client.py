from trino.dbapi import connect

class TrinoClient:
    def __init__(self, host: str, port: int, user: str, catalog: str, schema: str):
        self.host = host
        self.port = port
        self.user = user
        self.catalog = catalog
        self.schema = schema

    def execute(self, sql: str) -> list[tuple]:
        conn = connect(
            host=self.host,
            port=self.port,
            user=self.user,
            catalog=self.catalog,
            schema=self.schema,
        )
        cur = conn.cursor()
        try:
            cur.execute(sql)
            # DDL and DELETE/INSERT statements return a single row count or nothing
            rows = cur.fetchall() if cur.description else []
        finally:
            cur.close()
            conn.close()
        return rows
