# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import logging
from typing import Any, Iterable

from pydantic import computed_field

from ..core.primitives import Model, NonNegativeFloat, reference_day
from .lease import is_lease_active_on, lease_starts_later_this_month
from .unit import UnitLeaseInfo

logger = logging.getLogger(__name__)


class UnitRevenue(Model):
    """
    Revenue contribution of a unit (or a sum of units) for the reference month.

    Attributes:
        monthly_revenue: Rent being collected as of the reference date
        expected_revenue: Rent the unit should yield by month-end
    """

    monthly_revenue: NonNegativeFloat = 0.0
    expected_revenue: NonNegativeFloat = 0.0

    @computed_field
    @property
    def pending_revenue(self) -> float:
        """Expected revenue not yet being collected."""
        return self.expected_revenue - self.monthly_revenue

    def __add__(self, other: "UnitRevenue") -> "UnitRevenue":
        if not isinstance(other, UnitRevenue):
            return NotImplemented
        return UnitRevenue(
            monthly_revenue=self.monthly_revenue + other.monthly_revenue,
            expected_revenue=self.expected_revenue + other.expected_revenue,
        )


def compute_unit_revenue(unit: UnitLeaseInfo, today: Any) -> UnitRevenue:
    """
    Compute the monthly and expected revenue of a single unit.

    Either lease covering today earns the full required rent for both
    figures. Otherwise an incoming lease that starts later this month earns
    nothing yet but is expected to. The maintenance flag is not consulted.
    """
    day = reference_day(today)
    rent = unit.rent

    current_active = is_lease_active_on(unit.current_lease, day)
    incoming_active = is_lease_active_on(unit.incoming_lease, day)

    if current_active or incoming_active:
        return UnitRevenue(monthly_revenue=rent, expected_revenue=rent)

    if lease_starts_later_this_month(unit.incoming_lease, day):
        return UnitRevenue(monthly_revenue=0.0, expected_revenue=rent)

    return UnitRevenue()


def aggregate_revenue(units: Iterable[UnitLeaseInfo], today: Any) -> UnitRevenue:
    """Sum unit revenue with no rounding; totals equal the sum of the parts."""
    day = reference_day(today)
    total = UnitRevenue()
    count = 0
    for unit in units:
        total = total + compute_unit_revenue(unit, day)
        count += 1
    logger.debug(
        f"Aggregated revenue over {count} units: "
        f"monthly ${total.monthly_revenue:,.2f}, expected ${total.expected_revenue:,.2f}"
    )
    return total
