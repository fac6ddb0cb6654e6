from __future__ import annotations

"""
End-to-End (E2E) CLI Tests.

Invokes the entry point script via subprocess to validate exit codes and
stream output (stdout/stderr).
"""

import os
import subprocess
import sys
from pathlib import Path
from typing import List

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
SRC_DIR = PROJECT_ROOT / "src"
ENTRY_POINT = SRC_DIR / "reactdts" / "main.py"


def run_cli(args: List[str], stdin: str = "") -> subprocess.CompletedProcess:
    """
    Execute the CLI in a separate process with ``stdin`` as input.

    Injects the 'src' directory into PYTHONPATH so the package resolves
    without being installed.
    """
    env = os.environ.copy()
    env["PYTHONPATH"] = str(SRC_DIR) + os.pathsep + env.get("PYTHONPATH", "")

    return subprocess.run(
        [sys.executable, str(ENTRY_POINT)] + args,
        input=stdin.encode("utf-8"),
        env=env,
        capture_output=True,
    )


def test_cli_success(component_with_prop_types: str, scenario_a_output: str) -> None:
    result = run_cli(["--name", "bar"], component_with_prop_types)

    assert result.returncode == 0, result.stderr.decode("utf-8")
    assert result.stdout.decode("utf-8") == scenario_a_output


def test_cli_missing_name(component_with_prop_types: str) -> None:
    result = run_cli([], component_with_prop_types)

    assert result.returncode == 1
    assert result.stdout == b""
    assert "Failed to specify --name parameter" in result.stderr.decode("utf-8")


def test_cli_parse_error_prints_stack_trace() -> None:
    result = run_cli(["--name", "broken"], "export default class Foo {\n  render( {\n")

    stderr = result.stderr.decode("utf-8")
    assert result.returncode == 1
    assert result.stdout == b""
    assert "Traceback" in stderr
    assert "ParseError" in stderr


def test_cli_version() -> None:
    result = run_cli(["--version"])

    assert result.returncode == 0
    assert "reactdts" in result.stdout.decode("utf-8")
