from __future__ import annotations

"""
Syntax Tree Traversal Engine.

Generic depth-first visitor that dispatches on a node's kind tag to a
caller-supplied handler table. Works on tree-sitter nodes and on
mapping-shaped (ESTree-like) trees alike.

Matching never stops the descent: the children of a matched node are
visited too, so nested nodes of the same kind fire their handler again.
Callers wanting only the first match keep their own sentinel state.
"""

from collections.abc import Mapping
from typing import Any, Callable, Dict, Iterator, List

Handler = Callable[[Any], None]
HandlerTable = Dict[str, Handler]


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def is_node(obj: Any) -> bool:
    """
    Check whether a value is a syntax node.

    A node carries a kind discriminant and a source location: 'type'/'loc'
    keys for mapping trees, 'type'/'start_point' attributes for tree-sitter.
    """
    if obj is None or isinstance(obj, (str, bytes, int, float)):
        return False
    if isinstance(obj, Mapping):
        return "type" in obj and "loc" in obj
    return hasattr(obj, "type") and hasattr(obj, "start_point")


def node_kind(node: Any) -> str:
    """Return the kind tag of a syntax node."""
    if isinstance(node, Mapping):
        return node["type"]
    return node.type


def iter_children(node: Any) -> Iterator[Any]:
    """
    Yield the values held by a node's fields, flattening sequences.

    Non-node values are yielded as well; walk() discards them.
    """
    fields = node.values() if isinstance(node, Mapping) else node.children
    for value in fields:
        if isinstance(value, (list, tuple)):
            yield from value
        else:
            yield value


def walk(node: Any, handlers: HandlerTable) -> None:
    """
    Visit ``node`` and all of its descendants in pre-order.

    The handler registered for a node's kind is invoked before any of its
    descendants are visited.

    Args:
        node: Root of the (sub)tree to traverse. Non-node values are ignored.
        handlers: Mapping from node kind to callback.
    """
    stack: List[Any] = [node]
    while stack:
        current = stack.pop()
        if not is_node(current):
            continue

        handler = handlers.get(node_kind(current))
        if callable(handler):
            handler(current)

        # Reversed so the first field is popped, and thus visited, first
        children = list(iter_children(current))
        children.reverse()
        stack.extend(children)
