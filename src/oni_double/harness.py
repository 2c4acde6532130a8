# SPDX-FileCopyrightText: 2025 Blackcat Informatics® Inc.
# SPDX-License-Identifier: MIT

"""Drive the ``manage.py`` double the way the Open ONI agent runs it.

The agent writes the MARC record to ``<tempdir>/marc.xml``, then runs
``<oni>/manage.py load_titles <tempdir>`` inside an emulated virtualenv and
judges the load by exit status alone. These helpers reproduce each of those
steps so tests can stage inputs and inspect the captured output.
"""

from __future__ import annotations

import os
import subprocess
from pathlib import Path
from typing import Dict, List, Mapping, Optional, Sequence, Union

from oni_double.manage import MARC_FILENAME

SESSION_DIR = Path(__file__).resolve().parent / "session"


def stage_catalog(directory: Union[str, Path], xml: Union[str, bytes]) -> Path:
    path = Path(directory)
    path.mkdir(parents=True, exist_ok=True)
    target = path / MARC_FILENAME
    payload = xml.encode("utf-8") if isinstance(xml, str) else xml
    target.write_bytes(payload)
    target.chmod(0o600)
    return target


def build_virtual_env(
    oni_path: Union[str, Path], environ: Optional[Mapping[str, str]] = None
) -> Dict[str, str]:
    """Return the environment ``bin/activate`` would set up for ``oni_path``.

    Only ``VIRTUAL_ENV`` and ``PATH`` are produced; ``PYTHONHOME`` and every
    other caller variable are left out, matching what the agent hands to
    ``manage.py``.
    """
    source = os.environ if environ is None else environ
    env_path = Path(oni_path) / "ENV"
    search = [str(env_path / "bin")]
    if source.get("PATH"):
        search.extend(source["PATH"].split(os.pathsep))
    return {"VIRTUAL_ENV": str(env_path), "PATH": os.pathsep.join(search)}


def manage_command(
    oni_path: Union[str, Path], args: Sequence[str], interpreter: Optional[str] = None
) -> List[str]:
    """Build the argv that runs ``<oni_path>/manage.py``.

    By default the script is executed directly through its shebang, as the
    agent does. Pass ``interpreter`` to run it under a specific Python.
    """
    script = str(Path(oni_path) / "manage.py")
    if interpreter is None:
        return [script, *args]
    return [interpreter, script, *args]


def run_manage(
    oni_path: Union[str, Path],
    args: Sequence[str],
    interpreter: Optional[str] = None,
    timeout: Optional[float] = None,
) -> subprocess.CompletedProcess:
    # Output stays as bytes so catalog contents round-trip untouched.
    return subprocess.run(
        manage_command(oni_path, args, interpreter),
        env=build_virtual_env(oni_path),
        capture_output=True,
        check=False,
        timeout=timeout,
    )
