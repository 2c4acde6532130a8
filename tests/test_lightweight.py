# SPDX-FileCopyrightText: 2025 Blackcat Informatics® Inc.
# SPDX-License-Identifier: MIT

import subprocess
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]


def test_module_entry_rejects_missing_subcommand():
    result = subprocess.run(
        [sys.executable, "-m", "oni_double.manage"],
        cwd=ROOT,
        capture_output=True,
        text=True,
    )
    assert result.returncode == 1
    assert result.stdout == "No!\n"
    assert result.stderr == ""


def test_module_entry_loads_titles(tmp_path):
    (tmp_path / "marc.xml").write_text("<root><title>Foo</title></root>")
    result = subprocess.run(
        [sys.executable, "-m", "oni_double.manage", "load_titles", str(tmp_path)],
        cwd=ROOT,
        capture_output=True,
        text=True,
    )
    assert result.returncode == 0
    assert result.stdout == 'Loading titles from XML: "<root><title>Foo</title></root>"\n'
