# SPDX-FileCopyrightText: 2025 shamir-recover contributors
# SPDX-License-Identifier: MIT

# src/shamir_recover/errors.py
"""Errors raised while decoding shares and reconstructing a secret.

Every failure is a deterministic validation error: retrying with the same
input cannot succeed, so callers should abort the reconstruction and report
which check failed.
"""

from __future__ import annotations


class ReconstructionError(ValueError):
    """Base class for every share decoding and reconstruction failure."""


class InvalidBase(ReconstructionError):
    """Raised when a numeric base lies outside ``[2, 36]``."""


class InvalidDigit(ReconstructionError):
    """Raised when a digit string contains a character invalid for its base."""


class DuplicatePoint(ReconstructionError):
    """Raised when two share points carry the same x-coordinate."""


class NonExactDivision(ReconstructionError):
    """Raised when the interpolated value is not an integer.

    This means the points do not lie on one integer-coefficient polynomial of
    degree ``k - 1``: a share is corrupted or the threshold is wrong.
    """


class InsufficientPoints(ReconstructionError):
    """Raised when fewer than ``k`` points are available."""


class ShareFormatError(ReconstructionError):
    """Raised when a share document is not valid JSON or has a bad layout."""


__all__ = [
    "ReconstructionError",
    "InvalidBase",
    "InvalidDigit",
    "DuplicatePoint",
    "NonExactDivision",
    "InsufficientPoints",
    "ShareFormatError",
]
