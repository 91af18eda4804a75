"""Settings models for the plugin service.

Contract:
- Inputs: Environment variables, YAML files
- Outputs: Validated settings objects
- Side Effects: None (read-only)
"""

from pathlib import Path

from pydantic import Field
from pydantic import field_validator
from pydantic_settings import BaseSettings
from pydantic_settings import SettingsConfigDict

from ..models.registries import PluginRegistry


class PluginServiceSettings(BaseSettings):
    """Configuration for the plugin service and its daemon.

    Attributes:
        host: Listen address (default: 127.0.0.1)
        port: Listen port (default: 8430)
        log_level: Logging level (default: info)
        public_registry_url: Externally reachable URL of the default plugin registry
        internal_registry_url: Internally reachable URL of the default plugin registry
        extra_registries: Registries cached in addition to the default one
        devfile_path: Devfile location (default: $PLUGIND_HOME/state/devfile.yaml)
        request_timeout: Timeout in seconds for registry requests

    Example:
        >>> settings = PluginServiceSettings()
        >>> assert settings.port == 8430
    """

    model_config = SettingsConfigDict(
        env_prefix="PLUGIND_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    host: str = "127.0.0.1"
    port: int = 8430
    log_level: str = "info"
    cors_origins: list[str] = Field(default_factory=lambda: ["http://localhost:5173"])

    public_registry_url: str | None = None
    internal_registry_url: str | None = None
    extra_registries: list[PluginRegistry] = Field(default_factory=list)

    devfile_path: str | None = None
    request_timeout: float = Field(default=30.0, gt=0)

    @field_validator("devfile_path")
    @classmethod
    def expand_devfile_path(cls, v: str | None) -> str | None:
        """Expand ~ and resolve to an absolute path."""
        if v is None:
            return None
        return str(Path(v).expanduser().resolve())
