# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Rentwise Reporting

Presentation-ready pandas frames built from engine and portfolio results.
"""

from .rent_roll import (
    PROPERTY_SUMMARY_COLUMNS,
    RENT_ROLL_COLUMNS,
    property_summary_frame,
    rent_roll_frame,
)

__all__ = [
    "PROPERTY_SUMMARY_COLUMNS",
    "RENT_ROLL_COLUMNS",
    "property_summary_frame",
    "rent_roll_frame",
]
