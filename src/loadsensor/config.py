"""Runtime configuration for the load sensor."""

from typing import Literal

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment-driven runtime settings."""

    model_config = SettingsConfigDict(env_prefix="LOADSENSOR_", env_file=".env", extra="ignore", populate_by_name=True)

    app_name: str = "loadsensor"
    log_level: str = "WARNING"
    sge_root: str | None = Field(
        default=None,
        validation_alias=AliasChoices("LOADSENSOR_SGE_ROOT", "SGE_ROOT"),
        description="Grid Engine installation root used for arch/gethostname lookups.",
    )
    hostname_backend: Literal["auto", "grid_engine", "os"] = Field(
        default="auto",
        description="Where reported host names come from; auto uses Grid Engine when sge_root is set.",
    )
    sensors: list[str] = Field(default_factory=lambda: ["hostname"])
    hostname_resource: str = "name"
    load_average_resource: str = "load_avg"

    def effective_hostname_backend(self) -> str:
        if self.hostname_backend == "auto":
            return "grid_engine" if self.sge_root else "os"
        return self.hostname_backend


settings = Settings()
