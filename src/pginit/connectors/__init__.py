from .postgres import PostgresConnector, connect_default

__all__ = ["PostgresConnector", "connect_default"]
