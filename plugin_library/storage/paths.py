"""Path resolution for plugind storage locations.

This module provides path resolution based on the PLUGIND_HOME environment
variable, following an XDG-like directory structure within that root.

Contract:
- Inputs: Environment variables (PLUGIND_HOME, PLUGIND_CONFIG_DIR, PLUGIND_STATE_DIR)
- Outputs: Resolved Path objects
- Side Effects: Creates directories if they don't exist
"""

import os
from pathlib import Path


def get_home_dir() -> Path:
    """Get PLUGIND_HOME from environment.

    Returns:
        Path to root directory (default: .plugind)
    """
    root = os.environ.get("PLUGIND_HOME", ".plugind")
    return Path(root).resolve()


def get_config_dir() -> Path:
    """Get configuration directory.

    Returns:
        Path to config directory ($PLUGIND_HOME/config)
    """
    config_dir: Path = get_home_dir() / "config"

    env_override: str | None = os.environ.get("PLUGIND_CONFIG_DIR")
    if env_override is not None:
        config_dir = Path(env_override).resolve()

    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir


def get_state_dir() -> Path:
    """Get state directory (holds the default devfile).

    Returns:
        Path to state directory ($PLUGIND_HOME/state)

    Example:
        >>> state_dir = get_state_dir()
        >>> assert state_dir.name == "state" or "PLUGIND_STATE_DIR" in os.environ
    """
    state_dir: Path = get_home_dir() / "state"

    env_override: str | None = os.environ.get("PLUGIND_STATE_DIR")
    if env_override is not None:
        state_dir = Path(env_override).resolve()

    state_dir.mkdir(parents=True, exist_ok=True)
    return state_dir
