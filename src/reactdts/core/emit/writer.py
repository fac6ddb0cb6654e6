from __future__ import annotations

"""
TypeScript Declaration Writer.

Stateful text emitter with explicit indentation tracking. Block-producing
constructs are context managers, so every opening brace is closed at the
same depth it was opened at.
"""

from contextlib import contextmanager
from typing import ContextManager, Iterator, List, Mapping

from reactdts.domain.constants import (
    DEFAULT_COMPONENT_BASE,
    DEFAULT_LIBRARY_ALIAS,
    PROPS_INTERFACE_NAME,
    UNTYPED,
)
from reactdts.domain.errors import WriterStateError


class DeclarationWriter:
    """
    Append-only buffer of declaration text plus the current nesting depth.

    Every line is prefixed with ``indent_level`` indent units, except when it
    continues an inline prefix such as ``export default``.
    """

    NL = "\n"

    def __init__(
            self,
            library_alias: str = DEFAULT_LIBRARY_ALIAS,
            component_base: str = DEFAULT_COMPONENT_BASE,
            indent_unit: str = "\t",
    ) -> None:
        self.library_alias = library_alias
        self.component_base = component_base
        self.indent_unit = indent_unit
        self.indent_level = 0
        self._parts: List[str] = []
        self._line_open = False
        self._finalized = False

    # -------------------------------------------------------------------------
    # Primitives
    # -------------------------------------------------------------------------

    def emit_line(self, text: str) -> None:
        """Write indentation (unless continuing a line), ``text`` and a newline."""
        self._begin_line()
        self._write(text)
        self._end_line()

    def newline(self) -> None:
        """Terminate the open line, or write a blank unindented line."""
        self._write(self.NL)
        self._line_open = False

    def open_block(self, header: str) -> None:
        self.emit_line(f"{header} {{")
        self.indent_level += 1

    def close_block(self) -> None:
        if self.indent_level == 0:
            raise WriterStateError("close_block() called without a matching open_block().")
        self.indent_level -= 1
        self.emit_line("}")

    @contextmanager
    def block(self, header: str) -> Iterator[DeclarationWriter]:
        self.open_block(header)
        yield self
        self.close_block()

    # -------------------------------------------------------------------------
    # Declarations
    # -------------------------------------------------------------------------

    def declare_module(self, name: str) -> ContextManager[DeclarationWriter]:
        """Ambient ``declare module '<name>'`` block."""
        return self.block(f"declare module '{name}'")

    def import_decl(self, decl: str, source: str) -> None:
        self.emit_line(f"import {decl} from '{source}';")

    def import_all(self, alias: str, source: str) -> None:
        """Namespace import; not a block, indentation is unchanged."""
        self.import_decl(f"* as {alias}", source)

    def prop(self, name: str, type_: str, optional: bool = True) -> None:
        self.emit_line(f"{name}{'?' if optional else ''}: {type_};")

    def interface(self, name: str, props: Mapping[str, str]) -> None:
        """Interface whose members are all optional, in mapping order."""
        with self.block(f"interface {name}"):
            for prop_name, type_ in props.items():
                self.prop(prop_name, type_, optional=True)

    def props(self, props: Mapping[str, str]) -> None:
        self.interface(PROPS_INTERFACE_NAME, props)

    @contextmanager
    def export_declaration(self, default: bool = True) -> Iterator[DeclarationWriter]:
        """
        Write an ``export`` prefix; the body continues on the same line.

        Args:
            default: Emit ``export default`` instead of a named ``export``.
        """
        self._begin_line()
        self._write("export default " if default else "export ")
        yield self

    def export_default(self) -> ContextManager[DeclarationWriter]:
        return self.export_declaration(default=True)

    @contextmanager
    def class_decl(self, name: str, has_props: bool) -> Iterator[DeclarationWriter]:
        """Component class block typed by ``Props`` or left untyped."""
        props_type = PROPS_INTERFACE_NAME if has_props else UNTYPED
        header = (
            f"class {name} extends {self.library_alias}.{self.component_base}"
            f"<{props_type}, {UNTYPED}>"
        )
        with self.block(header):
            yield self

    def comment(self, text: str) -> None:
        """
        Write ``/*<text>*/`` re-indented to the current depth.

        Leading tabs of each source line are dropped so the comment keeps no
        trace of its original nesting.
        """
        for line in f"/*{text}*/".split(self.NL):
            self.emit_line(line.lstrip("\t"))

    # -------------------------------------------------------------------------
    # Output
    # -------------------------------------------------------------------------

    def getvalue(self) -> str:
        return "".join(self._parts)

    def finalize(self) -> str:
        """Return the document text and reject any further writes."""
        text = self.getvalue()
        self._finalized = True
        return text

    def __str__(self) -> str:
        return self.getvalue()

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    def _write(self, text: str) -> None:
        if self._finalized:
            raise WriterStateError("Declaration document already finalized.")
        self._parts.append(text)

    def _begin_line(self) -> None:
        if not self._line_open:
            self._write(self.indent_unit * self.indent_level)
            self._line_open = True

    def _end_line(self) -> None:
        self._write(self.NL)
        self._line_open = False
