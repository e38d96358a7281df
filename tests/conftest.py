# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Test utilities and fixtures for Rentwise testing.

All tests run against a fixed reference date so results never depend on
the machine clock.
"""

from __future__ import annotations

from datetime import date, timedelta
from typing import Optional

import pytest

from rentwise.occupancy import LeaseWindow, UnitLeaseInfo

# Mid-month so "later this month" and "next month" cases both exist.
REFERENCE_DATE = date(2025, 3, 14)


def days(offset: int) -> date:
    """Reference date shifted by ``offset`` days."""
    return REFERENCE_DATE + timedelta(days=offset)


def window(start_offset: Optional[int], end_offset: Optional[int]) -> LeaseWindow:
    """Lease window with bounds given as day offsets from the reference date."""
    return LeaseWindow(
        start=days(start_offset) if start_offset is not None else None,
        end=days(end_offset) if end_offset is not None else None,
    )


@pytest.fixture
def today() -> date:
    return REFERENCE_DATE


@pytest.fixture
def unit_factory():
    """Factory for units; leases are given as (start_offset, end_offset) pairs."""

    def _create_unit(
        current: Optional[tuple] = None,
        incoming: Optional[tuple] = None,
        maintenance_active: bool = False,
        required_rent: Optional[float] = 1500.0,
        **kwargs,
    ) -> UnitLeaseInfo:
        return UnitLeaseInfo(
            current_lease=window(*current) if current else None,
            incoming_lease=window(*incoming) if incoming else None,
            maintenance_active=maintenance_active,
            required_rent=required_rent,
            **kwargs,
        )

    return _create_unit
