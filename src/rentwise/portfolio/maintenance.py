# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import logging
from typing import FrozenSet, Iterable, List, Optional

from ..core.primitives import GlobalSettings, Model
from ..occupancy import UnitLeaseInfo

logger = logging.getLogger(__name__)


class MaintenanceRequest(Model):
    """A maintenance case as loaded from the data layer."""

    request_id: Optional[str] = None
    property_id: Optional[str] = None
    unit_id: Optional[str] = None
    status: str


def units_with_open_maintenance(
    requests: Iterable[MaintenanceRequest],
    settings: Optional[GlobalSettings] = None,
) -> FrozenSet[str]:
    """
    Collect the ids of units that have at least one open maintenance case.

    Requests not tied to a unit (property-wide work) are ignored.
    """
    settings = settings or GlobalSettings()
    open_statuses = set(settings.maintenance.open_statuses)
    return frozenset(
        request.unit_id
        for request in requests
        if request.unit_id is not None and request.status in open_statuses
    )


def apply_maintenance_flags(
    units: Iterable[UnitLeaseInfo], open_unit_ids: FrozenSet[str]
) -> List[UnitLeaseInfo]:
    """Return copies of the units with ``maintenance_active`` set for open cases."""
    flagged = []
    for unit in units:
        if unit.unit_id in open_unit_ids and not unit.maintenance_active:
            unit = unit.model_copy(update={"maintenance_active": True})
        flagged.append(unit)
    logger.debug(f"Flagged {len(open_unit_ids)} units with open maintenance")
    return flagged
