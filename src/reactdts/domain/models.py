from __future__ import annotations

"""
Component Domain Models.

Structures exchanged between the source analysis stage and the declaration
emitter.
"""

from dataclasses import dataclass
from typing import Dict, Optional

# Property name -> declared type, in source order.
PropTypeTable = Dict[str, str]


@dataclass(frozen=True)
class ComponentDeclaration:
    """
    A default-exported class component discovered in the source.

    Attributes:
        class_name: Identifier of the exported class.
        prop_types: Inferred property table, or None when no propTypes
                    object literal was declared on the class.
        doc_comment: Inner text of the block comment preceding the export.
    """
    class_name: str
    prop_types: Optional[PropTypeTable] = None
    doc_comment: Optional[str] = None

    @property
    def has_props(self) -> bool:
        return self.prop_types is not None
