from __future__ import annotations

"""
Configuration Validation Service.

Ensures the generation configuration conforms to the expected schema.
Handles type coercion and default value injection so the generator can
rely on strictly typed settings.
"""

import logging
import re
from typing import Any, Dict, List, Tuple

from reactdts.domain.config import get_default_config

logger = logging.getLogger(__name__)

_DOTTED_NAME = re.compile(r"^[A-Za-z_$][\w$]*(\.[A-Za-z_$][\w$]*)*$")


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_config(
        config: Any,
        *,
        strict: bool = False,
) -> Tuple[Dict[str, Any], List[str]]:
    """
    Validate and normalize the provided configuration dictionary.

    Args:
        config: Raw configuration data (usually a dictionary).
        strict: If True, raises exceptions on type mismatch instead of coercing.

    Returns:
        Tuple[Dict[str, Any], List[str]]: The normalized configuration and
                                          a list of warnings.
    """
    warnings: List[str] = []
    defaults = get_default_config()

    # 1. Base Type Validation
    if not isinstance(config, dict):
        msg = f"Invalid config type: expected dict, received {type(config).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using defaults.")
        logger.warning(msg)
        return defaults, warnings

    merged: Dict[str, Any] = dict(defaults)
    merged.update(config)

    unknown = sorted(set(config) - set(defaults))
    for key in unknown:
        warnings.append(f"Unknown config key '{key}' ignored.")
        merged.pop(key)

    # 2. Schema Definition
    string_fields = ["library_alias", "library_module", "component_base"]
    bool_fields = ["emit_doc_comments"]

    # 3. Field Processing & Normalization
    for field in string_fields:
        merged[field] = _as_str(
            merged.get(field), defaults[field], field, warnings, strict
        )

    for field in bool_fields:
        merged[field] = _as_bool(
            merged.get(field), defaults[field], field, warnings, strict
        )

    merged["prop_types_namespaces"] = _as_list_str(
        merged.get("prop_types_namespaces"),
        defaults["prop_types_namespaces"],
        "prop_types_namespaces",
        warnings,
        strict,
    )
    merged["prop_types_namespaces"] = _normalize_namespaces(
        merged["prop_types_namespaces"], defaults["prop_types_namespaces"], warnings, strict
    )

    merged["indent_unit"] = _as_indent(merged.get("indent_unit"), defaults["indent_unit"], warnings, strict)

    return merged, warnings


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TYPE COERCION
# -----------------------------------------------------------------------------

def _as_str(value: Any, fallback: str, field: str, warnings: List[str], strict: bool) -> str:
    """Validate and sanitize string inputs."""
    if value is None:
        return fallback
    if isinstance(value, str):
        v = value.strip()
        return v if v else fallback

    msg = f"Invalid field '{field}': expected str, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_bool(value: Any, fallback: bool, field: str, warnings: List[str], strict: bool) -> bool:
    """Coerce various input types into native booleans."""
    if isinstance(value, bool):
        return value
    if value is None:
        return fallback

    if not strict:
        if isinstance(value, (int, float)) and value in (0, 1):
            warnings.append(f"Field '{field}' converted from number {value} to bool.")
            return bool(value)
        if isinstance(value, str):
            s = value.strip().lower()
            if s in ("true", "1", "yes", "y", "on"):
                warnings.append(f"Field '{field}' converted from '{value}' to True.")
                return True
            if s in ("false", "0", "no", "n", "off"):
                warnings.append(f"Field '{field}' converted from '{value}' to False.")
                return False

    msg = f"Invalid field '{field}': expected bool, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_list_str(value: Any, fallback: List[str], field: str, warnings: List[str], strict: bool) -> List[str]:
    """Ensure input is a list of sanitized strings, supporting CSV parsing."""
    if value is None:
        return list(fallback)

    if isinstance(value, str) and not strict:
        items = [x.strip() for x in value.split(",") if x.strip()]
        if items:
            warnings.append(f"Field '{field}' converted from CSV string to list.")
            return items
        return list(fallback)

    if isinstance(value, list):
        out: List[str] = []
        for i, item in enumerate(value):
            if isinstance(item, str):
                s = item.strip()
                if s:
                    out.append(s)
            else:
                msg = f"Invalid item in '{field}[{i}]': expected str."
                if strict:
                    raise TypeError(msg)
                warnings.append(f"{msg} Item discarded.")
        return out if out else list(fallback)

    msg = f"Invalid field '{field}': expected list[str], received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return list(fallback)


def _as_indent(value: Any, fallback: str, warnings: List[str], strict: bool) -> str:
    """Accept whitespace-only indent units; an int means that many spaces."""
    if value is None:
        return fallback
    if isinstance(value, int) and not isinstance(value, bool) and 0 < value <= 8:
        return " " * value
    if isinstance(value, str) and value and not value.strip():
        return value

    msg = f"Invalid field 'indent_unit': expected whitespace string, received {value!r}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: DOMAIN NORMALIZATION
# -----------------------------------------------------------------------------

def _normalize_namespaces(
        namespaces: List[str],
        fallback: List[str],
        warnings: List[str],
        strict: bool,
) -> List[str]:
    """Keep dotted identifier namespaces, dropping duplicates and trailing dots."""
    out: List[str] = []
    for ns in namespaces:
        n = ns.strip().rstrip(".")
        if not _DOTTED_NAME.match(n):
            if strict:
                raise ValueError(f"Invalid propTypes namespace '{ns}'.")
            warnings.append(f"PropTypes namespace '{ns}' is not a dotted name. Discarded.")
            continue
        if n not in out:
            out.append(n)
    return out if out else list(fallback)
