"""Manifest document storage with Result-based error handling.

Reads a manifest file and decodes it as JSON or YAML, returning Result
types instead of raising exceptions. No domain logic - just file I/O.
"""

import json
from enum import Enum
from pathlib import Path
from typing import Any

import yaml

from meta_project.domain.shared.result import Err, Ok, Result
from meta_project.domain.workspace.errors import ManifestError


class ManifestFormat(str, Enum):
    """Document syntax of a manifest file."""

    JSON = "json"
    YAML = "yaml"


class DocumentStorage:
    """Low-level manifest document reader.

    Example:
        storage = DocumentStorage()
        result = storage.load(Path(".meta"), ManifestFormat.JSON)
        if isinstance(result, Ok):
            data = result.value
        else:
            print(f"Error: {result.error}")
    """

    def load(self, path: Path, fmt: ManifestFormat) -> Result[Any, ManifestError]:
        """Load and decode a document.

        Args:
            path: Path to the manifest file.
            fmt: Syntax to decode with.

        Returns:
            Ok(decoded document) if successful,
            Err(ManifestError) with kind IO or FORMAT if failed.
        """
        try:
            content = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return Err(ManifestError.io(path, f"File not found: {path}"))
        except PermissionError:
            return Err(ManifestError.io(path, f"Permission denied reading {path}"))
        except UnicodeDecodeError as e:
            return Err(ManifestError.format(path, f"{path} is not UTF-8 text: {e}"))
        except OSError as e:
            return Err(ManifestError.io(path, f"Error reading {path}: {e}"))

        if fmt is ManifestFormat.YAML:
            return self._decode_yaml(path, content)
        return self._decode_json(path, content)

    def _decode_json(self, path: Path, content: str) -> Result[Any, ManifestError]:
        try:
            return Ok(json.loads(content))
        except json.JSONDecodeError as e:
            return Err(ManifestError.format(path, f"Invalid JSON in {path}: {e}"))

    def _decode_yaml(self, path: Path, content: str) -> Result[Any, ManifestError]:
        try:
            return Ok(yaml.safe_load(content))
        except yaml.YAMLError as e:
            return Err(ManifestError.format(path, f"Invalid YAML in {path}: {e}"))
