"""Configuration management for wodparse."""

from typing import Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings


class ParserConfig(BaseModel):
    """Input limits and parse behaviour."""

    max_input_length: int = Field(
        default=10_000, description="Maximum workout text length in characters"
    )
    min_input_length: int = Field(
        default=5, description="Minimum workout text length in characters"
    )
    max_error_count: int = Field(
        default=20, description="Errors collected per parse before further errors are dropped"
    )
    similar_name_suggestion_count: int = Field(
        default=3, description="How many 'did you mean' names to attach to unknown movements"
    )
    similar_name_max_distance: int | None = Field(
        default=None,
        description="Fixed edit-distance threshold for suggestions (None = scale with name length)",
    )
    parse_timeout_seconds: float | None = Field(
        default=None, description="Upper bound for a single parse call (None = unbounded)"
    )


class ScoringConfig(BaseModel):
    """Confidence scoring policy. Weights sum to 1.0."""

    type_weight: float = Field(default=0.20, description="Weight of workout-type confidence")
    time_domain_weight: float = Field(default=0.15, description="Weight of time-domain completeness")
    movement_weight: float = Field(default=0.50, description="Weight of mean movement confidence")
    coverage_weight: float = Field(default=0.15, description="Weight of identification rate")

    warning_penalty: int = Field(default=5, description="Points removed per warning")
    max_warning_penalty: int = Field(default=20, description="Cap on total warning penalty")
    error_base: int = Field(default=40, description="Score ceiling once errors are present")
    error_penalty: int = Field(default=10, description="Points removed per error")

    amrap_without_cap: int = Field(default=50, description="Time-domain score for AMRAP with no cap")
    emom_without_interval: int = Field(default=70, description="Time-domain score for EMOM with no interval")
    rounds_without_count: int = Field(default=60, description="Time-domain score for Rounds with no count")

    usable_threshold: int = Field(default=60, description="Minimum confidence for a usable result")


class DatabaseConfig(BaseModel):
    """Database connection configuration for the SQL movement dictionary."""

    url: str = Field(
        default="sqlite+aiosqlite:///./wodparse.db",
        description="SQLAlchemy database URL",
    )
    pool_size: int = Field(default=5, description="Connection pool size")
    max_overflow: int = Field(default=10, description="Max overflow connections")
    pool_timeout: int = Field(default=30, description="Pool timeout in seconds")


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO", description="Log level"
    )
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log format string",
    )


class Config(BaseSettings):
    """Main application configuration."""

    parser: ParserConfig = Field(default_factory=ParserConfig)
    scoring: ScoringConfig = Field(default_factory=ScoringConfig)
    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    # Application settings
    debug: bool = Field(default=False, description="Enable debug mode")
    environment: Literal["development", "production"] = Field(
        default="development", description="Application environment"
    )

    class Config:
        env_prefix = "WODPARSE_"
        env_nested_delimiter = "__"
        env_file = ".env"
        env_file_encoding = "utf-8"


# Global configuration instance
config = Config()
