# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import logging
from typing import Any

from ..core.primitives import OccupancyStatusEnum, reference_day
from .lease import is_lease_active_on
from .unit import UnitLeaseInfo

logger = logging.getLogger(__name__)


def resolve_status(unit: UnitLeaseInfo, today: Any) -> OccupancyStatusEnum:
    """
    Derive the effective occupancy status of a unit from its lease windows.

    Priority order, first match wins:
      1) open maintenance case -> REPAIRS
      2) incoming lease covers today -> OCCUPIED
      3) current lease covers today -> OCCUPIED
      4) otherwise -> VACANT

    The incoming lease is checked first: a tenant whose lease has started is
    the occupant even before the current record is closed out.
    ``declared_status`` is never consulted.
    """
    day = reference_day(today)

    if unit.maintenance_active:
        return OccupancyStatusEnum.REPAIRS

    if is_lease_active_on(unit.incoming_lease, day):
        logger.debug(f"Unit {unit.unit_id}: occupied via incoming lease")
        return OccupancyStatusEnum.OCCUPIED

    if is_lease_active_on(unit.current_lease, day):
        return OccupancyStatusEnum.OCCUPIED

    return OccupancyStatusEnum.VACANT


def has_active_tenant(unit: UnitLeaseInfo, today: Any) -> bool:
    """Check if a unit has an occupying tenant on the reference date."""
    return resolve_status(unit, today) == OccupancyStatusEnum.OCCUPIED
