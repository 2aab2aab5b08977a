# SPDX-FileCopyrightText: 2025 shamir-recover contributors
# SPDX-License-Identifier: MIT

# src/shamir_recover/__init__.py
"""Threshold secret reconstruction from mixed-base polynomial shares."""

from .decoder import decode, encode
from .errors import (
    DuplicatePoint,
    InsufficientPoints,
    InvalidBase,
    InvalidDigit,
    NonExactDivision,
    ReconstructionError,
    ShareFormatError,
)
from .interpolate import SharePoint, interpolate_at, reconstruct
from .shares import ShareSet, load_share_file, load_share_text, parse_share_document, recover_secret, select_points

__version__ = "0.1.0"

__all__ = [
    "decode",
    "encode",
    "reconstruct",
    "interpolate_at",
    "SharePoint",
    "ShareSet",
    "select_points",
    "parse_share_document",
    "load_share_text",
    "load_share_file",
    "recover_secret",
    "ReconstructionError",
    "InvalidBase",
    "InvalidDigit",
    "DuplicatePoint",
    "NonExactDivision",
    "InsufficientPoints",
    "ShareFormatError",
]
