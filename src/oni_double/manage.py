# SPDX-FileCopyrightText: 2025 Blackcat Informatics® Inc.
# SPDX-License-Identifier: MIT

"""Stand-in for Open ONI's ``manage.py load_titles`` command.

Reads ``<directory>/marc.xml`` and answers with a single stdout line and an
exit status. Writing ``<root>fail</root>`` into the file makes the load fail
on purpose; any other content is echoed back as a successful load.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import BinaryIO, Optional, TextIO, Tuple

LOAD_TITLES = "load_titles"
MARC_FILENAME = "marc.xml"
FAILURE_SENTINEL = b"<root>fail</root>"

REJECTED = b"No!"
FAILURE_MESSAGE = b"You asked for failure, bruh!"
LOADING_PREFIX = b'Loading titles from XML: "'

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_ERROR = 2

USAGE = f"usage: manage.py {LOAD_TITLES} <directory>"


class ManageError(Exception):
    exit_code = EXIT_ERROR


class UsageError(ManageError):
    pass


class FileAccessError(ManageError):
    """The catalog file could not be read."""

    def __init__(self, path: Path, reason: OSError):
        self.path = path
        self.reason = reason
        detail = reason.strerror or str(reason)
        super().__init__(f"cannot read {path}: {detail}")


def catalog_path(directory: str) -> Path:
    return Path(f"{directory}/{MARC_FILENAME}")


def read_catalog(directory: str) -> bytes:
    path = catalog_path(directory)
    try:
        return path.read_bytes()
    except OSError as exc:
        raise FileAccessError(path, exc) from exc


def load_titles(xml: bytes) -> Tuple[bytes, int]:
    """Apply the sentinel rule to the raw catalog contents.

    The comparison is exact: a sentinel followed by a newline is ordinary
    content and loads successfully.
    """
    if xml == FAILURE_SENTINEL:
        return FAILURE_MESSAGE, EXIT_FAILURE
    return LOADING_PREFIX + xml + b'"', EXIT_OK


def dispatch(argv: list[str]) -> Tuple[bytes, int]:
    if len(argv) < 2 or argv[1] != LOAD_TITLES:
        return REJECTED, EXIT_FAILURE
    if len(argv) < 3:
        raise UsageError(USAGE)
    return load_titles(read_catalog(argv[2]))


def main(
    argv: list[str],
    stdout: Optional[BinaryIO] = None,
    stderr: Optional[TextIO] = None,
) -> int:
    out = stdout if stdout is not None else sys.stdout.buffer
    err = stderr if stderr is not None else sys.stderr

    try:
        line, code = dispatch(argv)
    except ManageError as exc:
        print(f"[manage] {exc}", file=err)
        return exc.exit_code

    out.write(line + b"\n")
    out.flush()
    return code


def cli() -> None:
    sys.exit(main(sys.argv))


if __name__ == "__main__":  # pragma: no cover - exercised via subprocess
    cli()
