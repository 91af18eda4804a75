"""YAML file backed devfile store."""

import logging
import os
from pathlib import Path

import yaml
from pydantic import ValidationError

from ..errors import DevfileStoreError
from ..models.devfile import Devfile

logger = logging.getLogger(__name__)


class YamlDevfileStore:
    """Stores the devfile as a YAML file.

    A missing file reads as an empty document. Writes go through a
    temporary file so a failed write never truncates the devfile.
    """

    def __init__(self, path: Path):
        self.path = path

    async def get(self) -> Devfile:
        if not self.path.exists():
            logger.debug(f"No devfile at {self.path}, using empty document")
            return Devfile()

        try:
            data = yaml.safe_load(self.path.read_text(encoding="utf-8")) or {}
        except (OSError, yaml.YAMLError) as e:
            raise DevfileStoreError(f"Failed to read devfile {self.path}: {e}") from e

        if not isinstance(data, dict):
            raise DevfileStoreError(f"Devfile {self.path} is not a mapping")

        try:
            return Devfile.model_validate(data)
        except ValidationError as e:
            raise DevfileStoreError(f"Invalid devfile {self.path}: {e}") from e

    async def update(self, devfile: Devfile) -> None:
        content = yaml.safe_dump(devfile.to_document(), default_flow_style=False, sort_keys=False)
        temp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            temp_path.write_text(content, encoding="utf-8")
            os.replace(temp_path, self.path)
        except OSError as e:
            raise DevfileStoreError(f"Failed to write devfile {self.path}: {e}") from e
        logger.debug(f"Saved devfile to {self.path}")
