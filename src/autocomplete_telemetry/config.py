"""Runtime configuration for autocomplete telemetry."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment-driven runtime settings."""

    model_config = SettingsConfigDict(env_prefix="AUTOCOMPLETE_TELEMETRY_", env_file=".env", extra="ignore")

    app_name: str = "autocomplete-telemetry"
    log_level: str = "INFO"
    feature_label: str = Field(
        default="Chat Autocomplete",
        description="Prefix used in diagnostic log lines for forwarded events.",
    )
    telemetry_enabled: bool = True
    events_path: str | None = Field(
        default=None,
        description="JSONL file the CLI writes captured events to.",
    )


settings = Settings()
