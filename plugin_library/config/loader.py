"""Configuration loading for the plugin service.

Contract:
- Inputs: Config file paths, environment variables
- Outputs: PluginServiceSettings objects
- Side Effects: Creates default config file if missing
"""

import logging
import os
from pathlib import Path

import yaml

from ..storage.paths import get_config_dir
from .settings import PluginServiceSettings

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = """# plugind configuration

# Server settings
host: "127.0.0.1"
port: 8430
log_level: "info"

# Default plugin registry
# public_registry_url is used to build icon links, internal_registry_url
# (when set) is used to fetch the registry index and plugin metadata.
# public_registry_url: "https://registry.example.com/v3"
# internal_registry_url: "http://plugin-registry:8080/v3"

# Additional registries
# extra_registries:
#   - name: "my registry"
#     uri: "https://my-registry.example.com/v3"

# Devfile location (default: $PLUGIND_HOME/state/devfile.yaml)
# devfile_path: "~/devfile.yaml"
"""


def get_config_path() -> Path:
    """Get path to config file.

    Returns:
        Path to plugind.yaml in config directory
    """
    return get_config_dir() / "plugind.yaml"


def create_default_config() -> None:
    """Create default config file if it doesn't exist."""
    config_path = get_config_path()

    if config_path.exists():
        logger.debug(f"Config file already exists: {config_path}")
        return

    config_path.write_text(DEFAULT_CONFIG, encoding="utf-8")
    logger.info(f"Created default config: {config_path}")


def load_config(config_path: Path | None = None) -> PluginServiceSettings:
    """Load plugin service configuration from YAML and environment.

    Environment variables take precedence over YAML settings.
    Variables are prefixed with PLUGIND_ (e.g., PLUGIND_PUBLIC_REGISTRY_URL).

    Args:
        config_path: Optional config file path (default: plugind.yaml in config dir)

    Returns:
        Validated settings
    """
    if config_path is None:
        config_path = get_config_path()

    if not config_path.exists():
        create_default_config()

    yaml_settings = {}
    if config_path.exists():
        try:
            with open(config_path, encoding="utf-8") as f:
                yaml_settings = yaml.safe_load(f) or {}
            logger.debug(f"Loaded config from {config_path}")
        except Exception as e:
            logger.warning(f"Failed to load config from {config_path}: {e}")
            logger.info("Using default settings and environment variables")

    # Only pass YAML values that don't have corresponding env vars
    filtered_yaml = {}
    for key, value in yaml_settings.items():
        env_key = f"PLUGIND_{key.upper()}"
        if env_key not in os.environ:
            filtered_yaml[key] = value

    settings = PluginServiceSettings(**filtered_yaml)

    logger.info(
        f"Plugin service configuration loaded: host={settings.host}, port={settings.port}, "
        f"registry={settings.internal_registry_url or settings.public_registry_url}"
    )

    return settings
