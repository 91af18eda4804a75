"""Storage module for plugin_library.

Public Interface:
    - get_home_dir: Get PLUGIND_HOME
    - get_config_dir: Get config directory
    - get_state_dir: Get state directory
"""

from .paths import get_config_dir
from .paths import get_home_dir
from .paths import get_state_dir

__all__ = [
    "get_home_dir",
    "get_config_dir",
    "get_state_dir",
]
