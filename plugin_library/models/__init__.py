"""Models for plugin_library."""

from .base import CamelCaseModel
from .devfile import Devfile
from .devfile import DevfileComponent
from .devfile import PluginReference
from .plugins import PluginDocument
from .plugins import PluginMetadata
from .registries import PluginLinks
from .registries import PluginRegistry
from .registries import RawPluginSummary

__all__ = [
    "CamelCaseModel",
    "Devfile",
    "DevfileComponent",
    "PluginReference",
    "PluginDocument",
    "PluginMetadata",
    "PluginLinks",
    "PluginRegistry",
    "RawPluginSummary",
]
