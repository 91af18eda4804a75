"""Plugin metadata models.

PluginDocument is the raw ``meta.yaml`` content published by a registry;
PluginMetadata is the normalized form kept in the plugin cache.
"""

from datetime import date
from typing import Any

from pydantic import ConfigDict
from pydantic import field_validator

from .base import CamelCaseModel


def _as_text(value: Any) -> Any:
    # YAML turns `version: 1.0` into a float and bare dates into date objects
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, date):
        return value.isoformat()
    return value


class PluginDocument(CamelCaseModel):
    """Plugin metadata document as published by a registry."""

    model_config = ConfigDict(extra="ignore")

    publisher: str
    name: str
    version: str
    icon: str
    type: str | None = None
    display_name: str | None = None
    title: str | None = None
    description: str | None = None
    url: str | None = None
    repository: str | None = None
    first_publication_date: str | None = None
    category: str | None = None
    latest_update_date: str | None = None

    @field_validator("version", "first_publication_date", "latest_update_date", mode="before")
    @classmethod
    def coerce_text(cls, v: Any) -> Any:
        return _as_text(v)

    @property
    def short_key(self) -> str:
        """Short plugin key ``{publisher}/{name}/{version}``."""
        return f"{self.publisher}/{self.name}/{self.version}"


class PluginMetadata(CamelCaseModel):
    """Normalized plugin metadata stored in the plugin cache.

    Attributes:
        key: Canonical key used to reference the plugin in a devfile
            (short ``publisher/name/version`` or URI-prefixed long form)
        icon: Absolute icon URI
        built_in: Always False for registry-sourced plugins
    """

    publisher: str
    name: str
    version: str
    type: str | None = None
    display_name: str | None = None
    title: str | None = None
    description: str | None = None
    icon: str
    url: str | None = None
    repository: str | None = None
    first_publication_date: str | None = None
    category: str | None = None
    latest_update_date: str | None = None
    key: str
    built_in: bool = False
