# hexgallery/common/settings.py
from __future__ import annotations

from functools import lru_cache
from typing import List, Optional
from pydantic import BaseModel, Field, field_validator, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import make_url

from hexgallery.common.strings.splitters import csv_to_list


def _to_bool(v: str | bool | int | None, default: bool = False) -> bool:
    if isinstance(v, bool):
        return v
    if v is None:
        return default
    s = str(v).strip().lower()
    return s in {"1", "true", "yes", "y", "on"}


class APIConfig(BaseModel):
    host: str = "0.0.0.0"
    port: int = 8000
    prefix: str = "/api"

    cors_allow_origins: List[str] = Field(default_factory=lambda: ["http://localhost:5173"])
    cors_allow_methods: List[str] = Field(default_factory=lambda: ["GET", "POST", "PUT", "DELETE", "OPTIONS"])
    cors_allow_headers: List[str] = Field(default_factory=lambda: ["*"])
    cors_allow_credentials: bool = False

    @field_validator("cors_allow_origins", "cors_allow_methods", "cors_allow_headers", mode="before")
    @classmethod
    def _split_csv(cls, v):
        return csv_to_list(v)


class DBConfig(BaseModel):
    driver: str = "postgresql+psycopg"
    host: str = "localhost"
    port: int = 5432
    name: str = "hexgallery"
    user: str = "hexuser"
    password: str = "hexpass"
    schema_name: str = "hexgallery"
    echo: bool = False
    pool_size: int = 10
    max_overflow: int = 20
    pool_pre_ping: bool = True
    pool_recycle: int = 1800

    @computed_field  # type: ignore[misc]
    @property
    def composed_url(self) -> str:
        return f"{self.driver}://{self.user}:{self.password}@{self.host}:{self.port}/{self.name}"


class PaginationConfig(BaseModel):
    default_page: int = Field(1, ge=1)
    default_page_size: int = Field(10, ge=1)
    max_page_size: int = Field(100, ge=1)


class SerializationConfig(BaseModel):
    read_group: str = "api_read"
    # None disables depth checks (traversal is bounded by the graph itself)
    max_depth: Optional[int] = Field(default=None, ge=0)


class Settings(BaseSettings):
    # -------- App / Env --------
    app_name: str = "hexgallery"
    app_env: str = "development"  # development|test|staging|production
    log_level: str = "INFO"
    tz: str = "UTC"

    # -------- Sub-configs --------
    api: APIConfig = APIConfig()
    db: DBConfig = DBConfig()
    pagination: PaginationConfig = PaginationConfig()
    serialization: SerializationConfig = SerializationConfig()

    # Single URL (if set, it takes precedence over the db.* parts)
    database_url_override: Optional[str] = Field(default=None, alias="DATABASE_URL")

    # -------- Alembic / migrations --------
    alembic_script_location: str = "hexgallery/database/alembic"
    alembic_version_table_schema: str = "public"

    # -------- Testcontainers / CI toggles --------
    use_testcontainers: bool = False
    test_db_image: str = "postgres:15-alpine"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("use_testcontainers", mode="before")
    @classmethod
    def _boolify(cls, v):
        return _to_bool(v)

    # ===== Convenience: DB URL & schema =====
    @computed_field  # type: ignore[misc]
    @property
    def database_url(self) -> str:
        return self.database_url_override or self.db.composed_url

    @computed_field  # type: ignore[misc]
    @property
    def db_backend(self) -> str:
        return make_url(self.database_url).get_backend_name()

    @computed_field  # type: ignore[misc]
    @property
    def db_schema(self) -> Optional[str]:
        """Only PostgreSQL gets a dedicated schema; 'public' means none."""
        if self.db_backend != "postgresql":
            return None
        name = (self.db.schema_name or "").strip()
        if not name or name.lower() == "public":
            return None
        return name


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Global settings accessor (cached). Use this everywhere you need config:
        from hexgallery.common.settings import get_settings
        cfg = get_settings()
    """
    return Settings()  # pydantic_settings will read from .env automatically
