# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Property and portfolio rollups built on the occupancy engine.

Properties with unit records are measured unit by unit through
`resolve_status` and `compute_unit_revenue`. Single-family properties have no
unit records; their tenants stand in for the one unit, contributing rent and
occupancy while their lease covers the reference date.

Occupancy counts follow the dashboard convention: any unit that is not
vacant is counted as occupied, including units under repair.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from typing import Any, Dict, Iterable, List, Optional, Sequence

from pydantic import Field, computed_field

from ..core.primitives import (
    GlobalSettings,
    Model,
    NonNegativeFloat,
    NonNegativeInt,
    OccupancyStatusEnum,
    reference_day,
)
from ..occupancy import UnitLeaseInfo, UnitRevenue, compute_unit_revenue, resolve_status
from .maintenance import (
    MaintenanceRequest,
    apply_maintenance_flags,
    units_with_open_maintenance,
)
from .tenant import TenantRecord, tenant_has_active_lease

logger = logging.getLogger(__name__)


class PropertyRecord(Model):
    """A property row from the data layer."""

    property_id: str
    name: str = ""
    unit_count: NonNegativeInt = Field(
        default=0, description="Declared number of units, used when no unit records exist."
    )
    purchase_price: Optional[NonNegativeFloat] = None
    current_value: Optional[NonNegativeFloat] = None
    down_payment: Optional[NonNegativeFloat] = None

    @property
    def market_value(self) -> float:
        """Current value when appraised, otherwise purchase price."""
        return float(self.current_value or self.purchase_price or 0.0)

    @property
    def equity_basis(self) -> float:
        """Down payment when recorded, otherwise purchase price."""
        return float(self.down_payment or self.purchase_price or 0.0)


class PropertyMetrics(Model):
    """Occupancy and revenue of one property on the reference date."""

    property_id: str
    name: str = ""
    total_units: NonNegativeInt = 0
    occupied_units: NonNegativeInt = 0
    status_counts: Dict[OccupancyStatusEnum, int] = Field(default_factory=dict)
    monthly_revenue: NonNegativeFloat = 0.0
    expected_revenue: NonNegativeFloat = 0.0
    market_value: NonNegativeFloat = 0.0
    equity_basis: NonNegativeFloat = 0.0

    @computed_field
    @property
    def vacant_units(self) -> int:
        return max(self.total_units - self.occupied_units, 0)

    @computed_field
    @property
    def occupancy_rate(self) -> float:
        """Share of units not vacant, 0.0 for a property without units."""
        if self.total_units == 0:
            return 0.0
        return self.occupied_units / self.total_units

    @computed_field
    @property
    def annual_revenue(self) -> float:
        return self.monthly_revenue * 12

    @computed_field
    @property
    def cash_on_cash(self) -> float:
        """Annual rent over equity basis, 0.0 when the basis is unknown."""
        if self.equity_basis <= 0:
            return 0.0
        return self.annual_revenue / self.equity_basis


class PortfolioSummary(Model):
    """Per-property metrics plus portfolio totals."""

    properties: List[PropertyMetrics] = Field(default_factory=list)

    @computed_field
    @property
    def total_properties(self) -> int:
        return len(self.properties)

    @computed_field
    @property
    def total_value(self) -> float:
        return sum(p.market_value for p in self.properties)

    @computed_field
    @property
    def monthly_revenue(self) -> float:
        return sum(p.monthly_revenue for p in self.properties)

    @computed_field
    @property
    def expected_revenue(self) -> float:
        return sum(p.expected_revenue for p in self.properties)

    @computed_field
    @property
    def total_units(self) -> int:
        return sum(p.total_units for p in self.properties)

    @computed_field
    @property
    def occupied_units(self) -> int:
        return sum(p.occupied_units for p in self.properties)

    @computed_field
    @property
    def vacant_units(self) -> int:
        return self.total_units - self.occupied_units

    @computed_field
    @property
    def occupancy_rate(self) -> float:
        if self.total_units == 0:
            return 0.0
        return self.occupied_units / self.total_units


def summarize_property(
    property_record: PropertyRecord,
    units: Sequence[UnitLeaseInfo],
    tenants: Iterable[TenantRecord],
    today: Any,
) -> PropertyMetrics:
    """
    Measure one property's occupancy and revenue on the reference date.

    Args:
        property_record: The property being measured.
        units: Unit records of the property, maintenance flags already applied.
        tenants: Tenant records of the property; only used when it has no units.
        today: Reference date.

    Returns:
        PropertyMetrics for the property.
    """
    day = reference_day(today)
    status_counts = {status: 0 for status in OccupancyStatusEnum}
    revenue = UnitRevenue()
    occupied = 0

    if units:
        for unit in units:
            status = resolve_status(unit, day)
            status_counts[status] += 1
            if status != OccupancyStatusEnum.VACANT:
                occupied += 1
            revenue = revenue + compute_unit_revenue(unit, day)
        total_units = len(units)
    else:
        for tenant in tenants:
            if tenant_has_active_lease(tenant, day):
                revenue = revenue + UnitRevenue(
                    monthly_revenue=tenant.rent, expected_revenue=tenant.rent
                )
                occupied += 1
        total_units = property_record.unit_count
        status_counts[OccupancyStatusEnum.OCCUPIED] = occupied
        status_counts[OccupancyStatusEnum.VACANT] = max(total_units - occupied, 0)

    return PropertyMetrics(
        property_id=property_record.property_id,
        name=property_record.name,
        total_units=max(total_units, occupied),
        occupied_units=occupied,
        status_counts=status_counts,
        monthly_revenue=revenue.monthly_revenue,
        expected_revenue=revenue.expected_revenue,
        market_value=property_record.market_value,
        equity_basis=property_record.equity_basis,
    )


def summarize_portfolio(
    properties: Iterable[PropertyRecord],
    units: Iterable[UnitLeaseInfo],
    today: Any,
    tenants: Iterable[TenantRecord] = (),
    maintenance_requests: Iterable[MaintenanceRequest] = (),
    settings: Optional[GlobalSettings] = None,
) -> PortfolioSummary:
    """
    Roll the engine up across a portfolio.

    Open maintenance cases are applied to the units first. Units and tenants
    referencing a property that is not in ``properties`` are logged and left
    out, so portfolio totals always equal the sum of the property metrics.
    """
    settings = settings or GlobalSettings()
    day = reference_day(today)
    properties = list(properties)
    known_ids = {p.property_id for p in properties}

    open_unit_ids = units_with_open_maintenance(maintenance_requests, settings)
    flagged_units = apply_maintenance_flags(units, open_unit_ids)

    units_by_property: Dict[str, List[UnitLeaseInfo]] = defaultdict(list)
    for unit in flagged_units:
        if unit.property_id not in known_ids:
            logger.warning(
                f"Skipping unit {unit.unit_id}: unknown property {unit.property_id}"
            )
            continue
        units_by_property[unit.property_id].append(unit)

    tenants_by_property: Dict[str, List[TenantRecord]] = defaultdict(list)
    for tenant in tenants:
        if tenant.property_id not in known_ids:
            logger.warning(
                f"Skipping tenant {tenant.tenant_id}: unknown property {tenant.property_id}"
            )
            continue
        tenants_by_property[tenant.property_id].append(tenant)

    metrics = [
        summarize_property(
            p,
            units_by_property.get(p.property_id, []),
            tenants_by_property.get(p.property_id, []),
            day,
        )
        for p in properties
    ]
    summary = PortfolioSummary(properties=metrics)
    logger.info(
        f"Portfolio of {summary.total_properties} properties: "
        f"{summary.occupied_units}/{summary.total_units} units occupied, "
        f"monthly ${summary.monthly_revenue:,.2f}, expected ${summary.expected_revenue:,.2f}"
    )
    return summary
