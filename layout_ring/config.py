"""Configuration for layout ring.

Options can come from a TOML or JSON file, optionally nested under a
``layout_ring`` table, and from environment variables:

- LAYOUT_RING_CAPACITY
- LAYOUT_RING_DEFAULT_CONTENT (empty string means "keep the current view")
- LAYOUT_RING_SHOW_NAMES
"""

import json
import logging
import os
import tomllib
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import ConfigLoadError

logger = logging.getLogger(__name__)

DEFAULT_CAPACITY = 7
DEFAULT_CONTENT = "*scratch*"
SECTION = "layout_ring"

ENV_CAPACITY = "LAYOUT_RING_CAPACITY"
ENV_DEFAULT_CONTENT = "LAYOUT_RING_DEFAULT_CONTENT"
ENV_SHOW_NAMES = "LAYOUT_RING_SHOW_NAMES"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


class RingConfig(BaseModel):
    """Recognized layout ring options."""
    model_config = ConfigDict(extra="forbid")

    ring_capacity: int = Field(DEFAULT_CAPACITY, ge=1, description="Saved layouts kept per context")
    default_content: Optional[str] = Field(
        DEFAULT_CONTENT,
        description="View shown after creating a layout (None keeps the current view)"
    )
    show_names_in_status: bool = Field(True, description="Report layout name changes to the status display")


def _read_file(path: Path) -> Dict[str, Any]:
    try:
        if path.suffix == ".json":
            with open(path) as f:
                data = json.load(f)
        else:
            with open(path, "rb") as f:
                data = tomllib.load(f)
    except (OSError, json.JSONDecodeError, tomllib.TOMLDecodeError) as e:
        raise ConfigLoadError(str(path), str(e)) from e

    if not isinstance(data, dict):
        raise ConfigLoadError(str(path), "top level must be a table/object")

    section = data.get(SECTION, data)
    if not isinstance(section, dict):
        raise ConfigLoadError(str(path), f"'{SECTION}' must be a table/object")
    return dict(section)


def _env_overrides(environ: Mapping[str, str]) -> Dict[str, Any]:
    overrides: Dict[str, Any] = {}

    if ENV_CAPACITY in environ:
        overrides["ring_capacity"] = environ[ENV_CAPACITY]

    if ENV_DEFAULT_CONTENT in environ:
        overrides["default_content"] = environ[ENV_DEFAULT_CONTENT] or None

    if ENV_SHOW_NAMES in environ:
        value = environ[ENV_SHOW_NAMES].strip().lower()
        if value in _TRUE_VALUES:
            overrides["show_names_in_status"] = True
        elif value in _FALSE_VALUES:
            overrides["show_names_in_status"] = False
        else:
            logger.warning(f"Ignoring unrecognized {ENV_SHOW_NAMES} value: {value!r}")

    return overrides


def load_config(
    path: Optional[Path] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> RingConfig:
    """Load configuration from file and environment.

    Args:
        path: TOML or JSON file; a missing file yields defaults
        environ: Environment mapping (default: os.environ)

    Returns:
        Validated RingConfig

    Raises:
        ConfigLoadError: If the file cannot be parsed or holds invalid values
    """
    data: Dict[str, Any] = {}

    if path is not None:
        if path.exists():
            data.update(_read_file(path))
            logger.debug(f"Loaded layout ring options from {path}")
        else:
            logger.info(f"Config file does not exist: {path}, using defaults")

    data.update(_env_overrides(os.environ if environ is None else environ))

    try:
        config = RingConfig(**data)
    except ValidationError as e:
        source = str(path) if path is not None else "environment"
        raise ConfigLoadError(source, "; ".join(err["msg"] for err in e.errors())) from e

    logger.debug(f"Layout ring config: {config.model_dump()}")
    return config
