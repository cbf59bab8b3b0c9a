import ipaddress
from typing import Optional
from pathlib import Path
import yaml
from pydantic import BaseModel, ConfigDict, Field, StrictInt, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from .exceptions import ConfigurationError, InvalidAddress, PortOutOfRange

DEFAULT_CREDENTIALS_PATH = "configuration/DBCredentials.json"
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 5432
MAX_PORT = 65535


def _ip_literal(value: str) -> str:
    # Raises ValueError for hostnames and malformed literals
    ipaddress.ip_address(value)
    return value


class ConnectorSettings(BaseSettings):
    """
    Defaults handed to `create`. Values come from keyword arguments,
    a YAML file (`from_yaml`) or PGINIT_* environment variables.
    """
    model_config = SettingsConfigDict(env_prefix="PGINIT_")

    credentials_path: str = DEFAULT_CREDENTIALS_PATH
    host: str = DEFAULT_HOST
    port: int = Field(DEFAULT_PORT, ge=0, le=MAX_PORT)

    @field_validator("host")
    @classmethod
    def _check_host(cls, value: str) -> str:
        return _ip_literal(value)

    @classmethod
    def from_yaml(cls, config_path: Path) -> "ConnectorSettings":
        if not config_path.exists():
            raise ConfigurationError(f"Config file not found: {config_path}")

        try:
            with open(config_path, "r") as f:
                raw_config = yaml.safe_load(f) or {}
        except OSError as e:
            raise ConfigurationError(f"Cannot read config file {config_path}: {e}") from e
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid configuration format: {e}") from e

        if not isinstance(raw_config, dict):
            raise ConfigurationError(f"Config file must contain a mapping: {config_path}")
        try:
            return cls(**raw_config)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid configuration format: {e}") from e


class ConnectionConfig(BaseModel):
    """
    Mutable parameters needed to locate and authenticate a PostgreSQL
    connection. Each instance belongs to a single caller.

    Host and port are validated on every assignment; a rejected value
    leaves the previous one in place.
    """
    model_config = ConfigDict(validate_assignment=True)

    credentials_path: str = DEFAULT_CREDENTIALS_PATH
    host: str = DEFAULT_HOST
    port: StrictInt = Field(DEFAULT_PORT, ge=0, le=MAX_PORT)
    database_name: str

    @field_validator("host")
    @classmethod
    def _check_host(cls, value: str) -> str:
        return _ip_literal(value)

    def set_credentials_path(self, path: str) -> None:
        # Existence is checked at connect time
        self.credentials_path = str(path)

    def set_host(self, address: str) -> None:
        try:
            self.host = address
        except ValidationError as e:
            raise InvalidAddress(f"Malformed IP address: {address!r}") from e

    def set_port(self, port: int) -> None:
        try:
            self.port = port
        except ValidationError as e:
            raise PortOutOfRange(f"Port must be between 0 and {MAX_PORT}, got {port!r}") from e

    def set_database_name(self, name: str) -> None:
        self.database_name = name

    def connect(self):
        """Open and verify a connection; see `PostgresConnector.connect`."""
        from .connectors.postgres import PostgresConnector
        return PostgresConnector().connect(self)


def create(database_name: str, defaults: Optional[ConnectorSettings] = None) -> ConnectionConfig:
    """
    New configuration for `database_name`. Without `defaults` the module
    constants are used; the environment is not consulted.
    """
    if defaults is None:
        return ConnectionConfig(database_name=database_name)
    return ConnectionConfig(
        credentials_path=defaults.credentials_path,
        host=defaults.host,
        port=defaults.port,
        database_name=database_name,
    )
