"""Test configuration helpers."""
from __future__ import annotations

import json
import sys
from pathlib import Path

import pytest


def _ensure_src_on_path() -> None:
    src = Path(__file__).resolve().parent.parent / "src"
    if str(src) not in sys.path:
        sys.path.insert(0, str(src))


_ensure_src_on_path()


# f(x) = x**2 + 3, four shares in mixed bases.
MIXED_BASE_DOCUMENT = {
    "keys": {"n": 4, "k": 3},
    "1": {"base": "10", "value": "4"},
    "2": {"base": "2", "value": "111"},
    "3": {"base": "10", "value": "12"},
    "6": {"base": "4", "value": "213"},
}


@pytest.fixture
def mixed_base_document():
    return json.loads(json.dumps(MIXED_BASE_DOCUMENT))


@pytest.fixture
def write_shares(tmp_path):
    """Write a share document to a JSON file and return its path."""

    def _write(document, name: str = "shares.json") -> Path:
        path = tmp_path / name
        text = document if isinstance(document, str) else json.dumps(document)
        path.write_text(text, encoding="utf-8")
        return path

    return _write
