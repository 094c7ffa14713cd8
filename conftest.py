"""Pytest configuration shared by the test suite."""

import sys
from pathlib import Path

# Put the project root and ``src`` on sys.path so ``tests``, ``benchmarks``
# and ``append_merkle`` import without an editable install.
_project_root = Path(__file__).resolve().parent
for _path in (str(_project_root / "src"), str(_project_root)):
    if _path not in sys.path:
        sys.path.insert(0, _path)
