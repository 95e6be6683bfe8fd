from __future__ import annotations

"""
End-to-End (E2E) CLI Tests.

Verifies the application's external behavior by invoking the entry point
script via subprocess. These tests validate argument parsing, exit codes,
stream output (stdout/stderr), and file system side effects (artifact generation).
"""

import json
import os
import subprocess
import sys
from pathlib import Path
from typing import List, Optional

import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
SRC_DIR = PROJECT_ROOT / "src"
ENTRY_POINT = SRC_DIR / "huffcode" / "main.py"

SAMPLE_TEXT = "a man, a plan, a canal, panama"


def run_cli(args: List[str], home: Path, cwd: Optional[Path] = None) -> subprocess.CompletedProcess[str]:
    """
    Helper to execute the CLI in a separate process.

    Injects the 'src' directory into PYTHONPATH and points the user home at
    a temporary folder so the persistent configuration is never touched.

    Args:
        args: List of command line arguments (excluding 'python' and script path).
        home: Directory used as the user home.
        cwd: Optional working directory for the subprocess.

    Returns:
        subprocess.CompletedProcess: The result object containing returncode, stdout, and stderr.
    """
    env = os.environ.copy()
    env["PYTHONPATH"] = str(SRC_DIR) + os.pathsep + env.get("PYTHONPATH", "")
    env["HOME"] = str(home)
    env["LOCALAPPDATA"] = str(home)

    cmd = [sys.executable, str(ENTRY_POINT)] + args

    return subprocess.run(
        cmd,
        cwd=cwd,
        env=env,
        capture_output=True,
        text=True,
        encoding="utf-8"
    )


@pytest.fixture
def sandbox(tmp_path: Path) -> Path:
    """
    Create an isolated working area.

    Structure:
    /home
    /input
      sample.txt
    /output
    """
    (tmp_path / "home").mkdir()
    input_dir = tmp_path / "input"
    input_dir.mkdir()
    (input_dir / "sample.txt").write_text(SAMPLE_TEXT, encoding="latin-1")
    return tmp_path


def test_cli_help_exits_cleanly(sandbox: Path) -> None:
    result = run_cli(["--help"], sandbox / "home")

    assert result.returncode == 0
    assert "--tree-source" in result.stdout


def test_cli_encode_with_test_tree(sandbox: Path) -> None:
    output_dir = sandbox / "output"
    result = run_cli([
        "--use-defaults",
        "-t", "test",
        "-e", str(sandbox / "input" / "sample.txt"),
        "-o", str(output_dir),
        "--show-codes",
    ], sandbox / "home")

    assert result.returncode == 0, result.stderr
    assert "GENERATING TREE" in result.stdout
    assert "ENCODING FILE" in result.stdout
    assert "'a': 11" in result.stdout
    assert (output_dir / "treeBitRep.txt").exists()
    assert (output_dir / "encoded.txt").exists()


def test_cli_full_round_trip(sandbox: Path) -> None:
    first_out = sandbox / "first"
    run_cli([
        "--use-defaults",
        "--tree-input", str(sandbox / "input" / "sample.txt"),
        "-e", str(sandbox / "input" / "sample.txt"),
        "-o", str(first_out),
    ], sandbox / "home")

    second_out = sandbox / "second"
    result = run_cli([
        "--use-defaults",
        "--tree-bits", str(first_out / "treeBitRep.txt"),
        "-d", str(first_out / "encoded.txt"),
        "-o", str(second_out),
        "--json",
    ], sandbox / "home")

    assert result.returncode == 0, result.stderr
    payload = json.loads(result.stdout)
    assert payload["ok"] is True
    assert payload["tree_source"] == "file"
    assert payload["decoded_text"] == SAMPLE_TEXT
    assert (second_out / "decoded.txt").read_text(encoding="latin-1") == SAMPLE_TEXT


def test_cli_missing_input_returns_2(sandbox: Path) -> None:
    result = run_cli([
        "--use-defaults",
        "-e", str(sandbox / "input" / "missing.txt"),
        "-o", str(sandbox / "output"),
    ], sandbox / "home")

    assert result.returncode == 2
    assert "does not exist" in result.stderr


def test_cli_collision_returns_1(sandbox: Path) -> None:
    output_dir = sandbox / "output"
    output_dir.mkdir()
    (output_dir / "treeBitRep.txt").write_text("old", encoding="latin-1")

    result = run_cli(["--use-defaults", "-o", str(output_dir)], sandbox / "home")

    assert result.returncode == 1
    assert "ERROR" in result.stderr

    forced = run_cli(["--use-defaults", "-o", str(output_dir), "--overwrite"], sandbox / "home")
    assert forced.returncode == 0


def test_cli_dump_config(sandbox: Path) -> None:
    result = run_cli(["--use-defaults", "-t", "test", "--dump-config"], sandbox / "home")

    assert result.returncode == 0
    cfg = json.loads(result.stdout)
    assert cfg["tree_source"] == "test"
    assert cfg["display_limit"] == 1000


def test_cli_save_config_persists_session(sandbox: Path) -> None:
    home = sandbox / "home"
    run_cli(["--use-defaults", "-t", "test", "--save-config", "--dump-config"], home)

    result = run_cli(["--dump-config"], home)

    assert json.loads(result.stdout)["tree_source"] == "test"


def test_cli_display_tree(sandbox: Path) -> None:
    result = run_cli([
        "--use-defaults", "-t", "test", "--display-tree", "--dry-run",
        "-o", str(sandbox / "output"),
    ], sandbox / "home")

    assert result.returncode == 0
    assert "1 1 'a'" in result.stdout
    assert "Dry run" in result.stdout
    assert not (sandbox / "output").exists()
