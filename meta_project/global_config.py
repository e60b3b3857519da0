"""Global configuration storage for meta-project.

Stores user preferences in ~/.meta-project/config.json (or the directory
named by $META_PROJECT_HOME). A missing or broken file yields defaults.
"""

import json
import logging
import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ValidationError, field_validator

logger = logging.getLogger(__name__)

CONFIG_HOME_ENV = "META_PROJECT_HOME"
DEFAULT_CLONE_COMMAND = "git clone {url} {target}"


class GlobalConfig(BaseModel):
    """User-level defaults for planning and output."""

    clone_command: str = DEFAULT_CLONE_COMMAND
    parallel: bool = False
    max_parallel: Optional[int] = None
    log_level: str = "WARNING"

    @field_validator("clone_command")
    @classmethod
    def _check_placeholders(cls, value: str) -> str:
        for placeholder in ("{url}", "{target}"):
            if placeholder not in value:
                raise ValueError(f"clone_command must contain {placeholder}")
        try:
            value.format(url="url", target="target")
        except (AttributeError, KeyError, IndexError, ValueError) as e:
            raise ValueError(
                f"clone_command may only use {{url}} and {{target}} fields: {e}"
            ) from e
        return value

    @field_validator("max_parallel")
    @classmethod
    def _check_max_parallel(cls, value: Optional[int]) -> Optional[int]:
        if value is not None and value < 1:
            raise ValueError("max_parallel must be at least 1")
        return value


def get_config_dir() -> Path:
    """Get the meta-project config directory."""
    override = os.environ.get(CONFIG_HOME_ENV)
    if override:
        return Path(override)
    return Path.home() / ".meta-project"


def get_global_config() -> GlobalConfig:
    """Load global configuration."""
    config_file = get_config_dir() / "config.json"
    if config_file.exists():
        try:
            data = json.loads(config_file.read_text(encoding="utf-8"))
            return GlobalConfig(**data)
        except (json.JSONDecodeError, TypeError, ValidationError) as e:
            logger.warning(f"Ignoring invalid config {config_file}: {e}")
    return GlobalConfig()  # defaults


def save_global_config(config: GlobalConfig) -> None:
    """Save global configuration."""
    config_dir = get_config_dir()
    config_dir.mkdir(parents=True, exist_ok=True)
    (config_dir / "config.json").write_text(
        json.dumps(config.model_dump(), indent=2),
        encoding="utf-8",
    )
