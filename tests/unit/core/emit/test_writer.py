from __future__ import annotations

"""
Unit tests for the Declaration Writer.

Verifies:
1. Exact text of each declaration construct.
2. Indentation equals nesting depth and braces stay balanced.
3. Misuse (unbalanced close, writes after finalize) is rejected.
"""

import pytest

from reactdts.core.emit.writer import DeclarationWriter
from reactdts.domain.errors import WriterStateError


@pytest.fixture
def writer() -> DeclarationWriter:
    return DeclarationWriter()


def test_module_declaration(writer: DeclarationWriter) -> None:
    with writer.declare_module("name"):
        pass
    assert writer.getvalue() == "declare module 'name' {\n}\n"


def test_import_statement(writer: DeclarationWriter) -> None:
    writer.import_decl("decls", "from")
    assert writer.getvalue() == "import decls from 'from';\n"


def test_namespace_import(writer: DeclarationWriter) -> None:
    writer.import_all("React", "react")
    assert writer.getvalue() == "import * as React from 'react';\n"


def test_required_property(writer: DeclarationWriter) -> None:
    writer.prop("name", "type", optional=False)
    assert writer.getvalue() == "name: type;\n"


def test_optional_property(writer: DeclarationWriter) -> None:
    writer.prop("name", "type", optional=True)
    assert writer.getvalue() == "name?: type;\n"


def test_interface_members_are_optional_and_ordered(writer: DeclarationWriter) -> None:
    writer.interface("Props", {"zeta": "string", "alpha": "number"})
    assert writer.getvalue() == "interface Props {\n\tzeta?: string;\n\talpha?: number;\n}\n"


def test_class_with_props(writer: DeclarationWriter) -> None:
    with writer.class_decl("Name", True):
        pass
    assert writer.getvalue() == "class Name extends React.Component<Props, any> {\n}\n"


def test_class_without_props(writer: DeclarationWriter) -> None:
    with writer.class_decl("Name", False):
        pass
    assert writer.getvalue() == "class Name extends React.Component<any, any> {\n}\n"


def test_class_uses_configured_library() -> None:
    w = DeclarationWriter(library_alias="Preact", component_base="PureComponent")
    with w.class_decl("Name", False):
        pass
    assert w.getvalue() == "class Name extends Preact.PureComponent<any, any> {\n}\n"


def test_indented_block_comment(writer: DeclarationWriter) -> None:
    writer.comment("* yada\n\t\t\t\tyada\n ")
    assert writer.getvalue() == "/** yada\nyada\n */\n"


def test_comment_follows_current_depth(writer: DeclarationWriter) -> None:
    with writer.declare_module("m"):
        writer.comment("*\n * Doc\n ")
    assert writer.getvalue() == "declare module 'm' {\n\t/**\n\t * Doc\n\t */\n}\n"


def test_export_default_declaration(writer: DeclarationWriter) -> None:
    with writer.export_declaration(default=True):
        pass
    assert writer.getvalue() == "export default "


def test_named_export_declaration(writer: DeclarationWriter) -> None:
    with writer.export_declaration(default=False):
        pass
    assert writer.getvalue() == "export "


def test_export_default_class_continues_line(writer: DeclarationWriter) -> None:
    with writer.declare_module("m"):
        with writer.export_default(), writer.class_decl("Foo", False):
            pass
    assert writer.getvalue() == (
        "declare module 'm' {\n"
        "\texport default class Foo extends React.Component<any, any> {\n"
        "\t}\n"
        "}\n"
    )


def test_blank_lines_carry_no_indentation(writer: DeclarationWriter) -> None:
    with writer.declare_module("m"):
        writer.import_all("React", "react")
        writer.newline()
    assert writer.getvalue() == "declare module 'm' {\n\timport * as React from 'react';\n\n}\n"


def test_indentation_matches_nesting_depth(writer: DeclarationWriter) -> None:
    with writer.declare_module("m"):
        writer.import_all("React", "react")
        writer.interface("Props", {"a": "string", "b": "any"})
        with writer.block("namespace Inner"):
            writer.interface("Deep", {"c": "number"})
        with writer.export_default(), writer.class_decl("Foo", True):
            writer.emit_line("render(): any;")

    depth = 0
    for line in writer.getvalue().splitlines():
        if not line:
            continue
        stripped = line.lstrip("\t")
        if stripped.startswith("}"):
            depth -= 1
        assert len(line) - len(stripped) == depth, line
        if stripped.endswith("{"):
            depth += 1
    assert depth == 0
    assert writer.indent_level == 0


def test_custom_indent_unit() -> None:
    w = DeclarationWriter(indent_unit="  ")
    w.interface("Props", {"a": "string"})
    assert w.getvalue() == "interface Props {\n  a?: string;\n}\n"


def test_unmatched_close_block_is_rejected(writer: DeclarationWriter) -> None:
    with pytest.raises(WriterStateError):
        writer.close_block()


def test_writes_after_finalize_are_rejected(writer: DeclarationWriter) -> None:
    writer.emit_line("x")
    assert writer.finalize() == "x\n"

    with pytest.raises(WriterStateError):
        writer.emit_line("y")
    assert str(writer) == "x\n"
