"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - All secrets come from environment variables (never hardcoded)
    - get_settings() is cached (lru_cache) — single instance per process
    - Driver options (StorageOptions, RelayRouting) are derived once and frozen

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - database_url wins when set; otherwise the oracledb driver receives
      ORACLE_USER / ORACLE_PASSWORD / ORACLE_CONNECT_STRING as connect() kwargs
"""

from dataclasses import dataclass
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

MIN_MESSAGE_CAPACITY = 1000


@dataclass(frozen=True)
class StorageOptions:
    """Per-operation driver configuration for the personas repository."""
    autocommit: bool = True


@dataclass(frozen=True)
class RelayRouting:
    """Fixed IN parameters and target of the relay procedure."""
    procedure: str
    sender: str
    receiver: str
    operation: str
    token: str
    message_capacity: int = MIN_MESSAGE_CAPACITY


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    oracle_user: str = ""
    oracle_password: str = ""
    oracle_connect_string: str = "localhost:1521/XEPDB1"
    database_url: str | None = None
    db_autocommit: bool = True

    # Listener
    host: str = "0.0.0.0"
    port: int = 3000

    # Basic auth gate
    auth_user: str = ""
    auth_pass: str = ""

    # Relay
    relay_procedure: str = "PKG_INTEGRACION.SP_RECIBIR_TRANSACCION"
    relay_sender: str = "GATEWAY"
    relay_receiver: str = "ERP"
    relay_operation: str = "RECIBIR_TRANSACCION"
    relay_token: str = ""
    relay_message_capacity: int = Field(MIN_MESSAGE_CAPACITY, ge=MIN_MESSAGE_CAPACITY)

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @property
    def sqlalchemy_url(self) -> str:
        """SQLAlchemy URL for the personas repository."""
        return self.database_url or "oracle+oracledb_async://"

    def sqlalchemy_connect_args(self) -> dict:
        """Driver connect() kwargs; empty when DATABASE_URL carries everything."""
        if self.database_url:
            return {}
        return self.oracle_connect_args()

    def oracle_connect_args(self) -> dict:
        return {
            "user": self.oracle_user,
            "password": self.oracle_password,
            "dsn": self.oracle_connect_string,
        }

    def storage_options(self) -> StorageOptions:
        return StorageOptions(autocommit=self.db_autocommit)

    def relay_routing(self) -> RelayRouting:
        return RelayRouting(
            procedure=self.relay_procedure,
            sender=self.relay_sender,
            receiver=self.relay_receiver,
            operation=self.relay_operation,
            token=self.relay_token,
            message_capacity=self.relay_message_capacity,
        )


@lru_cache
def get_settings() -> Settings:
    return Settings()
