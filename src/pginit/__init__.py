"""Build and verify PostgreSQL connections from a small, validated configuration.

    from pginit import create

    config = create("orders")
    config.set_host("10.0.0.5")
    config.set_port(6432)
    engine = config.connect()
"""

from .config import (
    DEFAULT_CREDENTIALS_PATH,
    DEFAULT_HOST,
    DEFAULT_PORT,
    ConnectionConfig,
    ConnectorSettings,
    create,
)
from .connectors import PostgresConnector, connect_default
from .descriptor import build_descriptor
from .exceptions import (
    ConfigurationError,
    ConnectionError,
    CredentialsError,
    CredentialsMalformed,
    CredentialsUnreadable,
    InvalidAddress,
    OpenFailed,
    PgInitException,
    PortOutOfRange,
    Unreachable,
)

__all__ = [
    "DEFAULT_CREDENTIALS_PATH",
    "DEFAULT_HOST",
    "DEFAULT_PORT",
    "ConnectionConfig",
    "ConnectorSettings",
    "create",
    "PostgresConnector",
    "connect_default",
    "build_descriptor",
    "ConfigurationError",
    "ConnectionError",
    "CredentialsError",
    "CredentialsMalformed",
    "CredentialsUnreadable",
    "InvalidAddress",
    "OpenFailed",
    "PgInitException",
    "PortOutOfRange",
    "Unreachable",
]
