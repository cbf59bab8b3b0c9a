import logging
import typer
from typing import Optional
from pathlib import Path
from .config import ConnectionConfig, ConnectorSettings, create
from .connectors.postgres import PostgresConnector
from .domain.models import HealthStatus
from .exceptions import PgInitException

app = typer.Typer(help="PostgreSQL connection bootstrap and connectivity check")


def _build_config(
    database: str,
    host: Optional[str],
    port: Optional[int],
    credentials: Optional[Path],
    config: Optional[Path],
) -> ConnectionConfig:
    defaults = ConnectorSettings.from_yaml(config) if config else ConnectorSettings()
    conn_config = create(database, defaults)
    if credentials is not None:
        conn_config.set_credentials_path(str(credentials))
    if host is not None:
        conn_config.set_host(host)
    if port is not None:
        conn_config.set_port(port)
    return conn_config


def _load_or_exit(database, host, port, credentials, config) -> ConnectionConfig:
    try:
        return _build_config(database, host, port, credentials, config)
    except (PgInitException, ValueError) as e:
        typer.echo(f"Error loading config: {e}", err=True)
        raise typer.Exit(code=1)


@app.command()
def check_conn(
    database: str = typer.Argument(..., help="Target database name"),
    host: Optional[str] = typer.Option(None, "--host", "-H", help="Server IP address"),
    port: Optional[int] = typer.Option(None, "--port", "-p", help="Server port"),
    credentials: Optional[Path] = typer.Option(None, "--credentials", help="Path to credentials JSON file"),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="Path to YAML defaults file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose output"),
):
    """
    Connect, run the liveness check and report the latency.
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG)

    conn_config = _load_or_exit(database, host, port, credentials, config)
    typer.echo(f"Checking {conn_config.database_name} at {conn_config.host}:{conn_config.port}...")

    health = PostgresConnector().check_health(conn_config)
    if health.status == HealthStatus.SUCCESS:
        typer.secho(f"✅ {health.db_alias}: Connection Successful ({health.latency_ms}ms)", fg=typer.colors.GREEN)
    else:
        typer.secho(f"❌ {health.db_alias}: Connection Failed. Error: {health.error_message}", fg=typer.colors.RED)
        raise typer.Exit(code=1)


@app.command()
def show_dsn(
    database: str = typer.Argument(..., help="Target database name"),
    host: Optional[str] = typer.Option(None, "--host", "-H", help="Server IP address"),
    port: Optional[int] = typer.Option(None, "--port", "-p", help="Server port"),
    credentials: Optional[Path] = typer.Option(None, "--credentials", help="Path to credentials JSON file"),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="Path to YAML defaults file"),
):
    """
    Print the connection descriptor with the password masked.
    """
    conn_config = _load_or_exit(database, host, port, credentials, config)
    try:
        descriptor = PostgresConnector().describe(conn_config, mask_password=True)
    except PgInitException as e:
        typer.secho(f"❌ {e}", fg=typer.colors.RED)
        raise typer.Exit(code=1)

    typer.echo(descriptor)


if __name__ == "__main__":
    app()
