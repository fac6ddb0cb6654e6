from __future__ import annotations

"""
PropType Inference Mapper.

Maps a propType validator expression to a TypeScript type string. Only
member-access chains such as ``React.PropTypes.bool`` are resolved; every
other shape degrades to ``any``. Inference never raises.
"""

import logging
from typing import Any, Dict, List, Optional, Sequence

import tree_sitter as ts

from reactdts.core.analysis.js_parser import node_text
from reactdts.domain.constants import (
    DEFAULT_LIBRARY_ALIAS,
    DEFAULT_PROP_TYPES_NAMESPACES,
    MEMBER_EXPRESSION,
    PROP_TYPE_SUFFIXES,
    UNTYPED,
)

logger = logging.getLogger(__name__)

# Node kinds allowed at the root of a member-access chain
_CHAIN_ROOTS = ("identifier", "this")


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def build_type_table(
        namespaces: Sequence[str] = DEFAULT_PROP_TYPES_NAMESPACES,
        library_alias: str = DEFAULT_LIBRARY_ALIAS,
) -> Dict[str, str]:
    """
    Build the canonical-name lookup table.

    Args:
        namespaces: Validator namespaces, e.g. 'React.PropTypes'.
        library_alias: Identifier the rendering library is imported as.

    Returns:
        Dict[str, str]: Canonical validator name -> emitted type.
    """
    table: Dict[str, str] = {}
    for ns in namespaces:
        for suffix, type_ in PROP_TYPE_SUFFIXES.items():
            table[f"{ns}.{suffix}"] = type_.format(lib=library_alias)
    return table


DEFAULT_TYPE_TABLE = build_type_table()


def is_member_access(node: Any) -> bool:
    # Chains are only resolved on parsed syntax trees
    return isinstance(node, ts.Node) and node.type == MEMBER_EXPRESSION


def canonical_name(node: Any) -> Optional[str]:
    """
    Flatten a member-access chain into its dotted name.

    Returns:
        Optional[str]: 'A.B.C' for ``A.B.C``, or None if the node is not a
                       chain rooted at a plain identifier.
    """
    if not is_member_access(node):
        return None

    parts: List[str] = []
    current = node
    while is_member_access(current):
        prop = current.child_by_field_name("property")
        if prop is None:
            return None
        parts.append(node_text(prop))
        current = current.child_by_field_name("object")

    if current is None or current.type not in _CHAIN_ROOTS:
        return None
    parts.append(node_text(current))
    return ".".join(reversed(parts))


def infer_type(node: Any, table: Optional[Dict[str, str]] = None) -> str:
    """
    Infer the declared type of a propType validator expression.

    Args:
        node: Validator expression node (the value of a propTypes entry).
        table: Canonical-name lookup table. Defaults to React.PropTypes.

    Returns:
        str: The mapped type, or 'any' for unrecognized expressions.
    """
    lookup = DEFAULT_TYPE_TABLE if table is None else table
    name = canonical_name(node)
    if name is None:
        return UNTYPED

    type_ = lookup.get(name)
    if type_ is None:
        logger.debug(f"Unrecognized propType '{name}', falling back to '{UNTYPED}'.")
        return UNTYPED
    return type_
