#!/usr/bin/env python3
# SPDX-FileCopyrightText: 2025 Blackcat Informatics® Inc.
# SPDX-License-Identifier: MIT

"""ONI ``manage.py`` double for agent tests; see ``oni_double.manage``."""

import sys
from pathlib import Path

# Run directly by the first python3 on PATH, which may not have oni_double
# installed; the package root (src/ or site-packages) is two levels up.
sys.path.insert(0, str(Path(__file__).resolve().parents[2]))

from oni_double.manage import main  # noqa: E402

if __name__ == "__main__":  # pragma: no cover - exercised via callers
    sys.exit(main(sys.argv))
