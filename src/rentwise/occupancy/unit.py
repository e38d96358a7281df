# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from typing import Any, Mapping, Optional

from pydantic import Field

from ..core.primitives import Model, NonNegativeFloat
from .lease import LeaseWindow


class UnitLeaseInfo(Model):
    """
    Tenancy state of one rental unit as loaded from the data layer.

    Attributes:
        unit_id: Data-layer identifier of the unit
        property_id: Identifier of the property the unit belongs to
        current_tenant: Occupant holding the unit's primary lease
        current_lease: Window of the primary lease
        incoming_tenant: Tenant scheduled to take over the unit
        incoming_lease: Window of the incoming lease, may already have started
        maintenance_active: Unit has an open maintenance case
        declared_status: Manually set label; carried along but never authoritative
        required_rent: Monthly rent for the unit, ``None`` counts as zero
    """

    unit_id: Optional[str] = None
    property_id: Optional[str] = None
    current_tenant: Optional[str] = None
    current_lease: Optional[LeaseWindow] = None
    incoming_tenant: Optional[str] = None
    incoming_lease: Optional[LeaseWindow] = None
    maintenance_active: bool = False
    declared_status: Optional[str] = None
    required_rent: Optional[NonNegativeFloat] = Field(
        default=None, description="Monthly rent required for the unit."
    )

    @property
    def rent(self) -> float:
        """Required rent with absence treated as zero."""
        return float(self.required_rent or 0.0)

    @classmethod
    def from_record(
        cls, record: Mapping[str, Any], maintenance_active: Optional[bool] = None
    ) -> "UnitLeaseInfo":
        """
        Build a unit from a data-layer row.

        Args:
            record: Mapping using the ``units`` table column names.
            maintenance_active: Overrides ``has_active_maintenance`` from the
                row when given (the flag is usually derived from a separate
                maintenance query).
        """
        if maintenance_active is None:
            maintenance_active = bool(record.get("has_active_maintenance", False))
        unit_id = record.get("id", record.get("unit_id"))
        property_id = record.get("property_id")
        return cls(
            unit_id=str(unit_id) if unit_id is not None else None,
            property_id=str(property_id) if property_id is not None else None,
            current_tenant=record.get("current_tenant"),
            current_lease=LeaseWindow.from_bounds(
                record.get("current_lease_start"), record.get("current_lease_end")
            ),
            incoming_tenant=record.get("incoming_tenant"),
            incoming_lease=LeaseWindow.from_bounds(
                record.get("incoming_lease_start"), record.get("incoming_lease_end")
            ),
            maintenance_active=maintenance_active,
            declared_status=record.get("status"),
            required_rent=record.get("required_rent"),
        )
