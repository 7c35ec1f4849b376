"""Test configuration ensuring the local package is importable."""

from __future__ import annotations

import pathlib
import sys

import pytest

ROOT = pathlib.Path(__file__).resolve().parents[1]
SRC = ROOT / "src"

if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from tokenmatch import compile  # noqa: E402


@pytest.fixture
def choice_matcher():
    """Matcher for ``abc(d|e|f).``: a literal, a three-way choice, a wildcard."""
    return compile("abc(d|e|f).")
