from __future__ import annotations

"""
Configuration Domain Management.

Provides the default generation settings and loads user overrides from a
JSON file. Values are merged over the defaults; normalization happens in
the validator.
"""

import json
import logging
import os
from typing import Any, Dict

from reactdts.domain.constants import (
    DEFAULT_COMPONENT_BASE,
    DEFAULT_LIBRARY_ALIAS,
    DEFAULT_LIBRARY_MODULE,
    DEFAULT_PROP_TYPES_NAMESPACES,
)
from reactdts.domain.errors import ConfigError

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Configuration Models (Dict-based)
# -----------------------------------------------------------------------------
def get_default_config() -> Dict[str, Any]:
    """
    Generate the default generation configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # Target library
        "library_alias": DEFAULT_LIBRARY_ALIAS,
        "library_module": DEFAULT_LIBRARY_MODULE,
        "component_base": DEFAULT_COMPONENT_BASE,

        # Inference
        "prop_types_namespaces": list(DEFAULT_PROP_TYPES_NAMESPACES),

        # Output
        "emit_doc_comments": False,
        "indent_unit": "\t",
    }


# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def load_config(path: str) -> Dict[str, Any]:
    """
    Load a JSON configuration file and merge it over the defaults.

    Args:
        path: Path to a JSON file containing a single object.

    Returns:
        Dict[str, Any]: Defaults updated with the file values.

    Raises:
        ConfigError: If the file is missing, unreadable or not a JSON object.
    """
    if not os.path.isfile(path):
        raise ConfigError(f"Config file not found: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Could not read config file '{path}': {e}") from e
    except json.JSONDecodeError as e:
        raise ConfigError(f"Malformed config file '{path}': {e.msg} (line {e.lineno})") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Config file '{path}' must contain a JSON object.")

    config = get_default_config()
    config.update(data)
    logger.debug(f"Configuration loaded from {path}")
    return config
