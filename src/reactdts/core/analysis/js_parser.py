from __future__ import annotations

"""
JavaScript/JSX Parser Adapter.

Wraps tree-sitter with the TSX grammar, which covers JSX, decorators,
class properties, object rest/spread and async syntax. tree-sitter recovers
from errors silently, so the adapter turns any ERROR or MISSING node into
a ParseError.
"""

import logging
from typing import Optional

import tree_sitter as ts
import tree_sitter_typescript as tsts

from reactdts.domain.errors import ParseError

logger = logging.getLogger(__name__)

TSX_LANGUAGE = ts.Language(tsts.language_tsx())
_parser: Optional[ts.Parser] = None


def _get_parser() -> ts.Parser:
    global _parser
    if _parser is None:
        _parser = ts.Parser(TSX_LANGUAGE)
    return _parser


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def parse(source: str) -> ts.Tree:
    """
    Parse component source text into a syntax tree.

    Args:
        source: Module source code.

    Returns:
        ts.Tree: The parsed tree. Its root node has kind 'program'.

    Raises:
        ParseError: If the source contains a syntax error.
    """
    tree = _get_parser().parse(source.encode("utf-8"))
    root = tree.root_node

    if root.has_error:
        bad = _first_error_node(root)
        if bad is None:
            raise ParseError("Unexpected token")
        line, column = bad.start_point[0] + 1, bad.start_point[1] + 1
        if bad.is_missing:
            raise ParseError(f"Missing '{bad.type}'", line, column)
        raise ParseError("Unexpected token", line, column)

    logger.debug(f"Parsed {len(source)} characters into '{root.type}' node.")
    return tree


def node_text(node: ts.Node) -> str:
    """Decode the source slice spanned by a node."""
    return node.text.decode("utf-8") if node.text is not None else ""


# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _first_error_node(root: ts.Node) -> Optional[ts.Node]:
    """Locate the first ERROR or MISSING node in document order."""
    stack = [root]
    while stack:
        node = stack.pop()
        if node.is_error or node.is_missing:
            return node
        if node.has_error:
            stack.extend(reversed(node.children))
    return None
