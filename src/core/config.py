from os import environ

from pydantic import BaseModel, ConfigDict, Field, model_validator


def _env_flag(name: str, default: str = "false") -> bool:
    return environ.get(name, default).strip().lower() in ("1", "true", "yes", "on")


class Config(BaseModel):
    model_config = ConfigDict(frozen=True)

    aws_region: str
    dynamodb_endpoint: str | None = None
    trips_table: str
    storage_backend: str = Field(default="dynamodb", pattern="^(dynamodb|memory)$")
    default_page_size: int = Field(default=50, ge=1)
    max_page_size: int = Field(default=500, ge=1)
    cors_allow_origin: str = "*"
    distinct_error_status: bool = False
    log_level: str = "INFO"

    @model_validator(mode="after")
    def default_page_within_max(self) -> "Config":
        if self.default_page_size > self.max_page_size:
            raise ValueError("default_page_size must not exceed max_page_size")
        return self


_cached_config: Config | None = None


def _reset_config() -> None:
    """Reset cached config — for testing only."""
    global _cached_config
    _cached_config = None


def get_config() -> Config:
    global _cached_config
    if _cached_config is not None:
        return _cached_config

    _cached_config = Config(
        aws_region=environ.get("AWS_REGION", "us-east-1"),
        dynamodb_endpoint=environ.get("DYNAMODB_ENDPOINT"),
        trips_table=environ.get("TABLE_NAME", "kilometer-trips"),
        storage_backend=environ.get("STORAGE_BACKEND", "dynamodb"),
        default_page_size=int(environ.get("DEFAULT_PAGE_SIZE", "50")),
        max_page_size=int(environ.get("MAX_PAGE_SIZE", "500")),
        cors_allow_origin=environ.get("CORS_ALLOW_ORIGIN", "*"),
        distinct_error_status=_env_flag("DISTINCT_ERROR_STATUS"),
        log_level=environ.get("LOG_LEVEL", "INFO").upper(),
    )
    return _cached_config
