# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Tabular views of engine output for dashboards and report generators.

These functions only arrange values the engine has already derived; they
perform no calculations of their own.
"""

from __future__ import annotations

from typing import Any, Iterable, Optional

import pandas as pd

from ..core.primitives import LeaseStatusEnum, reference_day
from ..occupancy import LeaseWindow, UnitLeaseInfo, compute_unit_revenue, resolve_status
from ..portfolio import PortfolioSummary

RENT_ROLL_COLUMNS = [
    "unit_id",
    "property_id",
    "current_tenant",
    "incoming_tenant",
    "declared_status",
    "status",
    "current_lease_status",
    "incoming_lease_status",
    "required_rent",
    "monthly_revenue",
    "expected_revenue",
]

PROPERTY_SUMMARY_COLUMNS = [
    "property_id",
    "name",
    "total_units",
    "occupied_units",
    "vacant_units",
    "occupancy_rate",
    "monthly_revenue",
    "expected_revenue",
    "annual_revenue",
    "market_value",
    "cash_on_cash",
]


def _window_status(lease: Optional[LeaseWindow], day: pd.Timestamp) -> Optional[str]:
    if lease is None:
        return None
    status: LeaseStatusEnum = lease.status_on(day)
    return status.value


def rent_roll_frame(units: Iterable[UnitLeaseInfo], today: Any) -> pd.DataFrame:
    """One row per unit with its resolved status and revenue contribution."""
    day = reference_day(today)
    rows = []
    for unit in units:
        revenue = compute_unit_revenue(unit, day)
        rows.append(
            {
                "unit_id": unit.unit_id,
                "property_id": unit.property_id,
                "current_tenant": unit.current_tenant,
                "incoming_tenant": unit.incoming_tenant,
                "declared_status": unit.declared_status,
                "status": resolve_status(unit, day).value,
                "current_lease_status": _window_status(unit.current_lease, day),
                "incoming_lease_status": _window_status(unit.incoming_lease, day),
                "required_rent": unit.rent,
                "monthly_revenue": revenue.monthly_revenue,
                "expected_revenue": revenue.expected_revenue,
            }
        )
    return pd.DataFrame(rows, columns=RENT_ROLL_COLUMNS)


def property_summary_frame(summary: PortfolioSummary) -> pd.DataFrame:
    """One row per property, indexed by property id."""
    rows = [
        {column: getattr(metrics, column) for column in PROPERTY_SUMMARY_COLUMNS}
        for metrics in summary.properties
    ]
    return pd.DataFrame(rows, columns=PROPERTY_SUMMARY_COLUMNS).set_index("property_id")
