# SPDX-FileCopyrightText: 2025 shamir-recover contributors
# SPDX-License-Identifier: MIT

# src/shamir_recover/shares.py
"""Loading share documents and selecting the points to interpolate.

A share document is a JSON object::

    {
      "keys": {"n": 4, "k": 3},
      "1": {"base": "10", "value": "4"},
      "2": {"base": "2", "value": "111"},
      ...
    }

Every key other than ``keys`` is the decimal x-coordinate of one share; its
``value`` is the y-coordinate written in ``base``.
"""

from __future__ import annotations

import json
import logging
import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable, Mapping

from . import config
from .decoder import decode, encode
from .errors import DuplicatePoint, InsufficientPoints, ShareFormatError
from .interpolate import PointLike, SharePoint, as_points, reconstruct

_logger = logging.getLogger(__name__)

KEYS_FIELD = "keys"
_DECIMAL = re.compile(r"[0-9]+")


@dataclass
class ValidationIssue:
    field: str
    message: str

    def __str__(self) -> str:
        return f"{self.field}: {self.message}"


@dataclass(frozen=True)
class ShareSet:
    """Decoded shares of one secret together with its threshold."""

    n: int
    k: int
    points: tuple[SharePoint, ...]

    @property
    def degree(self) -> int:
        return self.k - 1

    def selected(self) -> tuple[SharePoint, ...]:
        """Return the ``k`` points used for reconstruction."""
        return select_points(self.points, self.k)


def select_points(points: Iterable[PointLike], k: int) -> tuple[SharePoint, ...]:
    """Return the first ``k`` points by ascending x.

    The choice is a fixed compatibility policy: any ``k`` consistent shares
    give the same secret, and always taking the lowest x-values keeps runs
    reproducible.
    """
    pts = sorted(as_points(points), key=lambda p: p.x)
    if len(pts) < k:
        raise InsufficientPoints(f"need {encode(k, 10)} points, got {len(pts)}")
    return tuple(pts[:k])


def _parse_count(raw: Any, field: str, issues: list[ValidationIssue]) -> int | None:
    if isinstance(raw, bool):
        issues.append(ValidationIssue(field, "must be a positive integer"))
        return None
    if isinstance(raw, int):
        value = raw
    elif isinstance(raw, str) and _DECIMAL.fullmatch(raw):
        value = decode(raw, 10)
    else:
        issues.append(ValidationIssue(field, f"must be a positive integer, got {raw!r}"))
        return None
    if value < 1:
        issues.append(ValidationIssue(field, f"must be at least 1, got {value}"))
        return None
    return value


def _parse_record(
    key: str,
    record: Any,
    max_digits: int,
    issues: list[ValidationIssue],
) -> tuple[int, int, str] | None:
    if not _DECIMAL.fullmatch(key):
        issues.append(ValidationIssue(key, "share keys must be decimal x-coordinates"))
        return None
    if not isinstance(record, Mapping):
        issues.append(ValidationIssue(key, "share must be an object with 'base' and 'value'"))
        return None

    base = record.get("base")
    if isinstance(base, str) and _DECIMAL.fullmatch(base):
        base = decode(base, 10)
    if isinstance(base, bool) or not isinstance(base, int):
        issues.append(ValidationIssue(f"{key}.base", f"must be an integer, got {record.get('base')!r}"))
        return None

    value = record.get("value")
    if not isinstance(value, str):
        issues.append(ValidationIssue(f"{key}.value", f"must be a string, got {value!r}"))
        return None
    if len(value) > max_digits:
        issues.append(ValidationIssue(f"{key}.value", f"has {len(value)} digits, limit is {max_digits}"))
        return None
    return decode(key, 10), base, value


def parse_share_document(document: Mapping[str, Any]) -> ShareSet:
    """Validate a decoded share document and decode its y-values."""
    if not isinstance(document, Mapping):
        raise ShareFormatError("share document must be a JSON object")

    issues: list[ValidationIssue] = []
    keys = document.get(KEYS_FIELD)
    n = k = None
    if not isinstance(keys, Mapping):
        issues.append(ValidationIssue(KEYS_FIELD, "missing object with 'n' and 'k'"))
    else:
        n = _parse_count(keys.get("n"), "keys.n", issues)
        k = _parse_count(keys.get("k"), "keys.k", issues)

    max_digits = config.settings.max_value_digits
    records: list[tuple[int, int, str]] = []
    for key, record in document.items():
        if key == KEYS_FIELD:
            continue
        parsed = _parse_record(key, record, max_digits, issues)
        if parsed is not None:
            records.append(parsed)

    if issues:
        raise ShareFormatError("; ".join(str(issue) for issue in issues))

    records.sort(key=lambda r: r[0])
    points: list[SharePoint] = []
    for x, base, value in records:
        if points and points[-1].x == x:
            raise DuplicatePoint(f"x = {encode(x, 10)} appears more than once")
        points.append(SharePoint(x, decode(value, base)))

    if n != len(points):
        _logger.warning("keys.n does not match the %d shares in the document", len(points))
    if len(points) < k:
        raise InsufficientPoints(f"threshold k = {encode(k, 10)} but only {len(points)} shares are present")

    _logger.info("loaded %d shares, threshold %d", len(points), k)
    return ShareSet(n=n, k=k, points=tuple(points))


def load_share_text(text: str) -> ShareSet:
    """Parse a JSON share document from ``text``."""
    try:
        document = json.loads(text)
    except ValueError as exc:
        raise ShareFormatError(f"invalid JSON: {exc}") from exc
    return parse_share_document(document)


def load_share_file(path: os.PathLike[str] | str) -> ShareSet:
    """Read and parse the JSON share document stored at ``path``."""
    _logger.debug("reading shares from %s", path)
    try:
        text = Path(path).read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise ShareFormatError(f"not a UTF-8 text file: {exc}") from exc
    return load_share_text(text)


def recover_secret(share_set: ShareSet) -> int:
    """Reconstruct the secret from the first ``k`` shares of ``share_set``."""
    return reconstruct(share_set.selected(), threshold=share_set.k)


__all__ = [
    "ShareSet",
    "ValidationIssue",
    "select_points",
    "parse_share_document",
    "load_share_text",
    "load_share_file",
    "recover_secret",
]
