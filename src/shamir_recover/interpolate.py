# SPDX-FileCopyrightText: 2025 shamir-recover contributors
# SPDX-License-Identifier: MIT

# src/shamir_recover/interpolate.py
"""Exact Lagrange interpolation over integer share points.

This module provides two helper functions:

``interpolate_at``
    Evaluate the unique polynomial of degree ``k - 1`` through ``k`` points
    at an arbitrary integer ``x``.

``reconstruct``
    Recover the secret constant term ``f(0)`` from exactly ``k`` points.

All arithmetic is carried out on Python integers and
:class:`fractions.Fraction`, so no precision is lost. A single Lagrange term is
usually not an integer even when the points are consistent; only the final sum
is, and it is checked before being returned.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from fractions import Fraction
from typing import Iterable, Sequence, Tuple, Union

from .decoder import encode
from .errors import DuplicatePoint, InsufficientPoints, NonExactDivision, ReconstructionError

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SharePoint:
    """One ``(x, y)`` sample of the secret-bearing polynomial."""

    x: int
    y: int

    def __post_init__(self) -> None:
        if self.x < 0:
            raise ReconstructionError(f"x-coordinate must be non-negative, got {encode(self.x, 10)}")

    def __iter__(self):
        yield self.x
        yield self.y

    def __str__(self) -> str:
        return f"({encode(self.x, 10)}, {encode(self.y, 10)})"


PointLike = Union[SharePoint, Tuple[int, int]]


def as_points(points: Iterable[PointLike]) -> list[SharePoint]:
    """Normalise ``(x, y)`` tuples to :class:`SharePoint` instances."""
    return [p if isinstance(p, SharePoint) else SharePoint(*p) for p in points]


def _check_distinct(points: Sequence[SharePoint]) -> None:
    seen: set[int] = set()
    for point in points:
        if point.x in seen:
            raise DuplicatePoint(f"x = {encode(point.x, 10)} appears more than once")
        seen.add(point.x)


def interpolate_at(points: Iterable[PointLike], x: int) -> int:
    """Evaluate the interpolating polynomial through ``points`` at ``x``."""
    pts = as_points(points)
    if not pts:
        raise InsufficientPoints("at least one point is required")
    _check_distinct(pts)

    total = Fraction(0)
    for i, (xi, yi) in enumerate(pts):
        num = 1
        den = 1
        for j, (xj, _) in enumerate(pts):
            if i == j:
                continue
            num *= x - xj
            den *= xi - xj
        total += Fraction(yi * num, den)
        _logger.debug("term %d: numerator %d bits, denominator %d bits", i, num.bit_length(), den.bit_length())

    if total.denominator != 1:
        raise NonExactDivision(
            f"interpolated value at x = {encode(x, 10)} is not an integer "
            f"(denominator {encode(total.denominator, 10)}); "
            "the points are inconsistent or the threshold is wrong"
        )
    return total.numerator


def reconstruct(points: Iterable[PointLike], *, threshold: int | None = None) -> int:
    """
    Recover the secret ``f(0)`` from share points.

    ``points`` must hold exactly the shares to interpolate; choosing which
    ``k`` of the available shares to use is left to the caller. When
    ``threshold`` is given the point count is checked against it.
    """
    pts = as_points(points)
    if threshold is not None:
        if len(pts) < threshold:
            raise InsufficientPoints(f"need {encode(threshold, 10)} points, got {len(pts)}")
        if len(pts) > threshold:
            raise ReconstructionError(f"expected exactly {threshold} points, got {len(pts)}")
    _logger.debug("reconstructing from %d points", len(pts))
    return interpolate_at(pts, 0)


__all__ = ["SharePoint", "PointLike", "as_points", "interpolate_at", "reconstruct"]
