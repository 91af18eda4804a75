"""Devfile models.

Only plugin-reference components are interpreted. Every other document
field and component is kept as-is (``extra="allow"``) so that a document
read from the store can be written back without losing content.
"""

from typing import Any

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import PrivateAttr
from pydantic import model_serializer
from pydantic import model_validator


class DocumentModel(BaseModel):
    """Open model that serializes keys in the order they were read."""

    model_config = ConfigDict(extra="allow")

    _key_order: list[str] = PrivateAttr(default_factory=list)

    @model_validator(mode="wrap")
    @classmethod
    def remember_key_order(cls, data: Any, handler: Any) -> Any:
        model = handler(data)
        if isinstance(data, dict):
            model._key_order = list(data)
        return model

    @model_serializer(mode="wrap")
    def restore_key_order(self, handler: Any) -> dict[str, Any]:
        # declared fields are dumped before extras
        data = handler(self)
        ordered = {key: data.pop(key) for key in self._key_order if key in data}
        ordered.update(data)
        return ordered


class PluginReference(DocumentModel):
    """Reference to a plugin, either by ``id`` (plugin key) or ``url``."""

    id: str | None = None
    url: str | None = None


class DevfileComponent(DocumentModel):
    """A devfile component. Plugin references carry a ``plugin`` entry."""

    plugin: PluginReference | None = None

    @property
    def is_plugin_reference(self) -> bool:
        return self.plugin is not None


class Devfile(DocumentModel):
    """Workspace configuration document."""

    components: list[DevfileComponent] | None = None

    def to_document(self) -> dict[str, Any]:
        """Convert to a plain mapping for persistence.

        Only fields present in the source document (or assigned since) are
        emitted, so absent keys stay absent.
        """
        return self.model_dump(exclude_unset=True)
