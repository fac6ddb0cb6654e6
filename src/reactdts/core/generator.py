from __future__ import annotations

"""
Declaration Generation Service.

Parses a component module, locates the default-exported class and its
static ``propTypes`` literal, and renders an ambient TypeScript module
declaration for it.
"""

import logging
import re
from typing import Any, Dict, List, Optional

import tree_sitter as ts

from reactdts.core.analysis.js_parser import node_text, parse
from reactdts.core.analysis.prop_types import build_type_table, infer_type
from reactdts.core.analysis.traversal import walk
from reactdts.core.emit.writer import DeclarationWriter
from reactdts.core.validator import validate_config
from reactdts.domain.constants import (
    CLASS_DECLARATION_KINDS,
    CLASS_FIELD_KINDS,
    EXPORT_STATEMENT,
    OBJECT_LITERAL,
    OBJECT_PROPERTY_KINDS,
    PROP_TYPES_FIELD,
)
from reactdts.domain.models import ComponentDeclaration, PropTypeTable
from reactdts.infra.fs import read_source

logger = logging.getLogger(__name__)

# Keys matching this may be written without quotes
_IDENTIFIER_RE = re.compile(r"^[A-Za-z_$][\w$]*$")


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def generate(module_name: str, source: str, config: Optional[Dict[str, Any]] = None) -> str:
    """
    Generate the ambient module declaration for a component source.

    Args:
        module_name: Name used in ``declare module '<name>'``.
        source: Component module source code.
        config: Optional configuration overrides (see domain.config).

    Returns:
        str: The declaration text.

    Raises:
        ParseError: If the source cannot be parsed.
    """
    cfg = _resolve_config(config)
    tree = parse(source)
    component = find_component(tree.root_node, cfg)
    return render_declaration(module_name, component, cfg)


def generate_from_file(module_name: str, path: str, config: Optional[Dict[str, Any]] = None) -> str:
    """Read a UTF-8 source file and generate its declaration."""
    return generate(module_name, read_source(path), config)


def find_component(root: ts.Node, config: Optional[Dict[str, Any]] = None) -> Optional[ComponentDeclaration]:
    """
    Locate the default-exported class component under ``root``.

    Only a class declared directly by the default export is modeled. The
    traversal keeps descending past that match, so class declarations nested
    anywhere inside the export are reported and skipped.

    Args:
        root: Program node of a parsed module.
        config: Validated configuration.

    Returns:
        Optional[ComponentDeclaration]: The component, or None when the
                                        default export is not a class.
    """
    cfg = _resolve_config(config)
    table = build_type_table(cfg["prop_types_namespaces"], cfg["library_alias"])
    found: List[ComponentDeclaration] = []

    def on_export(export_node: ts.Node) -> None:
        if not _is_default_export(export_node):
            return

        def on_class(class_node: ts.Node) -> None:
            name_node = class_node.child_by_field_name("name")
            name = node_text(name_node) if name_node is not None else "<anonymous>"
            if class_node.parent != export_node:
                logger.warning(
                    f"Ignoring class '{name}' nested in the default export "
                    f"(line {class_node.start_point[0] + 1}); only the exported class is declared."
                )
                return
            found.append(ComponentDeclaration(
                class_name=name,
                prop_types=_extract_prop_types(class_node, table),
                doc_comment=_leading_doc_comment(export_node),
            ))

        walk(export_node, {kind: on_class for kind in CLASS_DECLARATION_KINDS})

    walk(root, {EXPORT_STATEMENT: on_export})

    if not found:
        logger.debug("No default-exported class declaration found.")
        return None
    return found[0]


def render_declaration(
        module_name: str,
        component: Optional[ComponentDeclaration],
        config: Optional[Dict[str, Any]] = None,
) -> str:
    """
    Render the declaration document for a (possibly absent) component.

    Returns:
        str: The finalized declaration text.
    """
    cfg = _resolve_config(config)
    writer = DeclarationWriter(
        library_alias=cfg["library_alias"],
        component_base=cfg["component_base"],
        indent_unit=cfg["indent_unit"],
    )

    with writer.declare_module(module_name):
        writer.import_all(cfg["library_alias"], cfg["library_module"])
        writer.newline()

        if component is not None:
            if component.prop_types is not None:
                writer.props(component.prop_types)
                writer.newline()
            if cfg["emit_doc_comments"] and component.doc_comment is not None:
                writer.comment(component.doc_comment)
            with writer.export_default(), writer.class_decl(component.class_name, component.has_props):
                pass

    return writer.finalize()


# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _resolve_config(config: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    cfg, warnings = validate_config(config if config is not None else {})
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")
    return cfg


def _is_default_export(node: ts.Node) -> bool:
    return any(child.type == "default" for child in node.children)


def _extract_prop_types(class_node: ts.Node, table: Dict[str, str]) -> Optional[PropTypeTable]:
    """
    Build the PropType table from the class's own ``propTypes`` field.

    Returns:
        Optional[PropTypeTable]: The table, or None when the field is absent
                                 or not initialized with an object literal.
    """
    body = class_node.child_by_field_name("body")
    if body is None:
        return None

    prop_types: Optional[PropTypeTable] = None

    def on_field(field: ts.Node) -> None:
        nonlocal prop_types
        # Members of classes nested in method bodies belong to those classes
        if field.parent != body:
            return
        key = field.child_by_field_name("name")
        if key is None:
            key = field.child_by_field_name("property")
        if key is None or node_text(key) != PROP_TYPES_FIELD:
            return

        value = field.child_by_field_name("value")
        if value is None or value.type != OBJECT_LITERAL:
            logger.debug("propTypes is not initialized with an object literal; props left untyped.")
            prop_types = None
            return
        prop_types = _build_prop_type_table(value, table)

    walk(body, {kind: on_field for kind in CLASS_FIELD_KINDS})
    return prop_types


def _build_prop_type_table(obj: ts.Node, table: Dict[str, str]) -> PropTypeTable:
    """Map each own property of an object literal to its inferred type, in source order."""
    entries: PropTypeTable = {}

    def on_property(prop: ts.Node) -> None:
        if prop.parent != obj:
            return
        if prop.type == "shorthand_property_identifier":
            entries[node_text(prop)] = infer_type(prop, table)
            return

        key = _property_key(prop.child_by_field_name("key"))
        if key is None:
            logger.debug(f"Skipping computed propTypes key at line {prop.start_point[0] + 1}.")
            return
        entries[key] = infer_type(prop.child_by_field_name("value"), table)

    walk(obj, {kind: on_property for kind in OBJECT_PROPERTY_KINDS})
    return entries


def _property_key(key: Optional[ts.Node]) -> Optional[str]:
    if key is None or key.type == "computed_property_name":
        return None
    text = node_text(key)
    if key.type == "string" and _IDENTIFIER_RE.match(text[1:-1]):
        return text[1:-1]
    return text


def _leading_doc_comment(export_node: ts.Node) -> Optional[str]:
    """Inner text of a ``/** */`` comment ending right above the export."""
    prev = export_node.prev_sibling
    if prev is None or prev.type != "comment":
        return None
    text = node_text(prev)
    if not text.startswith("/**") or prev.end_point[0] + 1 < export_node.start_point[0]:
        return None
    return text[2:-2]
