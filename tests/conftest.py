"""
Shared pytest setup.

Inserts the project `src/` onto sys.path so tests run without installing the
package, and provides a collecting observer fixture.
"""

from __future__ import annotations

import pathlib
import sys

import pytest

_REPO_ROOT = pathlib.Path(__file__).resolve().parents[1]
_SRC = _REPO_ROOT / "src"
if str(_SRC) not in sys.path:
    sys.path.insert(0, str(_SRC))

from seqalgo.diagnostics import CollectingObserver  # noqa: E402


@pytest.fixture
def observer() -> CollectingObserver:
    return CollectingObserver()
