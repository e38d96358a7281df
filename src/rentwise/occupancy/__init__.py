# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Occupancy and Revenue Engine

Pure functions deriving a unit's effective occupancy status, the status of
individual leases, and a unit's monthly and expected revenue from lease
windows and a caller-supplied reference date.
"""

from .lease import (
    LeaseWindow,
    classify_lease,
    is_lease_active_on,
    lease_starts_later_this_month,
)
from .revenue import UnitRevenue, aggregate_revenue, compute_unit_revenue
from .status import has_active_tenant, resolve_status
from .unit import UnitLeaseInfo

__all__ = [
    # Leases
    "LeaseWindow",
    "classify_lease",
    "is_lease_active_on",
    "lease_starts_later_this_month",
    # Units
    "UnitLeaseInfo",
    # Occupancy
    "has_active_tenant",
    "resolve_status",
    # Revenue
    "UnitRevenue",
    "aggregate_revenue",
    "compute_unit_revenue",
]
