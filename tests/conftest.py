from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

1. Path manipulation so the 'src' directory is importable without install.
2. Shared component sources used across unit, integration and e2e tests.
"""

import os
import sys

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def component_with_prop_types() -> str:
    """A class component declaring a single boolean propType."""
    return (
        "import React from 'react';\n"
        "\n"
        "export default class Foo extends React.Component {\n"
        "  static propTypes = {\n"
        "    bar: React.PropTypes.bool,\n"
        "  };\n"
        "\n"
        "  render() {\n"
        "    return <div className=\"foo\">{this.props.bar ? 'on' : 'off'}</div>;\n"
        "  }\n"
        "}\n"
    )


@pytest.fixture
def component_without_prop_types() -> str:
    return (
        "import React from 'react';\n"
        "\n"
        "export default class Foo extends React.Component {\n"
        "  render() {\n"
        "    return <span />;\n"
        "  }\n"
        "}\n"
    )


@pytest.fixture
def function_component() -> str:
    return (
        "import React from 'react';\n"
        "\n"
        "export default function Foo(props) {\n"
        "  return <div {...props} />;\n"
        "}\n"
    )


@pytest.fixture
def scenario_a_output() -> str:
    return (
        "declare module 'bar' {\n"
        "\timport * as React from 'react';\n"
        "\n"
        "\tinterface Props {\n"
        "\t\tbar?: boolean;\n"
        "\t}\n"
        "\n"
        "\texport default class Foo extends React.Component<Props, any> {\n"
        "\t}\n"
        "}\n"
    )
