from __future__ import annotations

"""
Domain Constants.

Defaults describing the rendering library the generated declarations target
and the propType validator namespaces recognized by the inference table.
"""

from typing import Dict, List

VERSION = "0.2.0"

# -----------------------------------------------------------------------------
# TARGET LIBRARY
# -----------------------------------------------------------------------------

DEFAULT_LIBRARY_ALIAS = "React"
DEFAULT_LIBRARY_MODULE = "react"
DEFAULT_COMPONENT_BASE = "Component"
DEFAULT_PROP_TYPES_NAMESPACES: List[str] = ["React.PropTypes"]

PROPS_INTERFACE_NAME = "Props"
UNTYPED = "any"

# -----------------------------------------------------------------------------
# PROPTYPE INFERENCE TABLE
# -----------------------------------------------------------------------------

# Validator suffix -> emitted type. '{lib}' is replaced by the library alias.
PROP_TYPE_SUFFIXES: Dict[str, str] = {
    "any": "any",
    "array": "any[]",
    "bool": "boolean",
    "func": "(...args: any[]) => any",
    "number": "number",
    "object": "Object",
    "string": "string",
    "node": "{lib}.ReactNode",
    "element": "{lib}.ReactElement<any>",
}

# -----------------------------------------------------------------------------
# SYNTAX NODE KINDS (tree-sitter TSX grammar)
# -----------------------------------------------------------------------------

EXPORT_STATEMENT = "export_statement"
CLASS_DECLARATION_KINDS = ("class_declaration", "abstract_class_declaration")
CLASS_FIELD_KINDS = ("public_field_definition", "field_definition")
OBJECT_LITERAL = "object"
OBJECT_PROPERTY_KINDS = ("pair", "shorthand_property_identifier")
MEMBER_EXPRESSION = "member_expression"
PROP_TYPES_FIELD = "propTypes"
