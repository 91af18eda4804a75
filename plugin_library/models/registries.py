"""Registry models for plugin registries and their indexes."""

from pydantic import ConfigDict
from pydantic import Field
from pydantic import field_validator
from pydantic import model_validator

from .base import CamelCaseModel


class PluginRegistry(CamelCaseModel):
    """Plugin registry definition.

    Attributes:
        name: Human-readable registry name
        uri: Internally reachable base location of the registry
            (stored without trailing slashes)
        public_uri: Externally reachable base, used to rewrite relative
            resource links such as icons (defaults to ``uri``)
    """

    name: str
    uri: str
    public_uri: str | None = None

    @field_validator("uri", "public_uri")
    @classmethod
    def strip_trailing_slash(cls, v: str | None) -> str | None:
        if v is None:
            return None
        return v.rstrip("/")

    @model_validator(mode="after")
    def default_public_uri(self) -> "PluginRegistry":
        if self.public_uri is None:
            self.public_uri = self.uri
        return self


class PluginLinks(CamelCaseModel):
    """Links advertised by a registry index entry."""

    model_config = ConfigDict(extra="allow")

    self_link: str | None = Field(default=None, alias="self")


class RawPluginSummary(CamelCaseModel):
    """Plugin entry as listed by a registry's ``/plugins/`` index."""

    model_config = ConfigDict(extra="ignore")

    id: str
    display_name: str | None = None
    version: str | None = None
    type: str | None = None
    name: str | None = None
    description: str | None = None
    publisher: str | None = None
    links: PluginLinks | None = None

    @property
    def self_link(self) -> str | None:
        """The ``links.self`` reference, if any."""
        if self.links is None:
            return None
        return self.links.self_link
