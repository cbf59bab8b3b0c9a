import logging
import time
from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.exc import SQLAlchemyError
from ..config import ConnectionConfig, create
from ..credentials import load_credentials
from ..descriptor import build_descriptor
from ..domain.models import ConnectionHealth, Credentials, HealthStatus
from ..exceptions import OpenFailed, PgInitException, Unreachable
from ..logging import PASSWORD_MASK, log_connection, sanitize_dsn

logger = logging.getLogger(__name__)

# SQLAlchemy 2.1 switched the bare postgresql:// default to psycopg (v3)
DRIVERNAME = "postgresql+psycopg2"


class PostgresConnector:
    """
    Turns a ConnectionConfig into a live, verified SQLAlchemy Engine.

    Steps run strictly in order (credentials, descriptor, open, ping) so
    a failure is attributable to exactly one of them. No engine is
    returned on any failure path; on success the caller owns the engine
    and is responsible for disposing it.
    """

    def describe(self, config: ConnectionConfig, mask_password: bool = False) -> str:
        """Load credentials and assemble the connection descriptor."""
        credentials = load_credentials(config.credentials_path)
        return self._assemble(config, credentials, mask_password)

    @staticmethod
    def _assemble(config: ConnectionConfig, credentials: Credentials, mask_password: bool = False) -> str:
        return build_descriptor(
            credentials.Username,
            PASSWORD_MASK if mask_password else credentials.Password,
            config.host,
            config.port,
            config.database_name,
        )

    def open(self, descriptor: str, password: str = "") -> Engine:
        """Create the engine; `password` is masked out of error messages."""
        try:
            # The descriptor keeps the bare scheme; the DBAPI is pinned here
            url = make_url(descriptor).set(drivername=DRIVERNAME)
            return create_engine(url)
        except (SQLAlchemyError, ValueError, ImportError) as e:
            raise OpenFailed(f"Failed to create engine: {sanitize_dsn(str(e), password)}") from e

    def ping(self, engine: Engine, password: str = "") -> None:
        try:
            with engine.connect() as conn:
                conn.execute(text("SELECT 1"))
        except SQLAlchemyError as e:
            engine.dispose()
            raise Unreachable(f"Liveness check failed: {sanitize_dsn(str(e), password)}") from e

    def connect(self, config: ConnectionConfig) -> Engine:
        credentials = load_credentials(config.credentials_path)
        descriptor = self._assemble(config, credentials)
        masked = self._assemble(config, credentials, mask_password=True)
        start_time = time.time()
        try:
            engine = self.open(descriptor, credentials.Password)
            self.ping(engine, credentials.Password)
        except PgInitException as e:
            log_connection(masked, success=False, error=str(e), duration=time.time() - start_time)
            raise

        log_connection(masked, success=True, duration=time.time() - start_time)
        return engine

    def check_health(self, config: ConnectionConfig) -> ConnectionHealth:
        """Connect, report status and latency, then dispose the engine."""
        start_time = time.time()
        status = HealthStatus.FAILED
        error_msg = None

        try:
            engine = self.connect(config)
            engine.dispose()
            status = HealthStatus.SUCCESS
        except PgInitException as e:
            logger.debug("Health check for %s failed: %s", config.database_name, e)
            error_msg = str(e)

        latency = (time.time() - start_time) * 1000  # ms

        return ConnectionHealth(
            db_alias=config.database_name,
            status=status,
            latency_ms=round(latency, 2),
            error_message=error_msg
        )


def connect_default(database_name: str) -> Engine:
    """Connect using the default credentials path, host and port."""
    return PostgresConnector().connect(create(database_name))
