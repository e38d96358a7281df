# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from enum import Enum
from typing import Optional


class OccupancyStatusEnum(str, Enum):
    """
    Effective occupancy status of a rental unit.

    Options:
        OCCUPIED: A current or incoming lease covers the reference date
        VACANT: No lease covers the reference date
        REPAIRS: The unit has an open maintenance case (overrides lease state)
    """

    OCCUPIED = "occupied"
    VACANT = "vacant"
    REPAIRS = "repairs"

    @classmethod
    def from_value(cls, value: str) -> Optional["OccupancyStatusEnum"]:
        """Look up enum member by its string value."""
        for member in cls:
            if member.value == value:
                return member
        return None


class LeaseStatusEnum(str, Enum):
    """
    Status of a single lease interval relative to a reference date.

    Options:
        ACTIVE: start <= today <= end
        EXPIRED: today is after the lease end
        UPCOMING: today is before the lease start
    """

    ACTIVE = "active"
    EXPIRED = "expired"
    UPCOMING = "upcoming"


class PaymentStatusEnum(str, Enum):
    """
    Rent collection status of a tenant for the current month.

    Options:
        PAID: A payment this month covers the full rent
        PARTIAL: A payment this month covers part of the rent
        PENDING: No payment yet, still within the grace period
        OVERDUE: No payment and the grace period has passed
    """

    PAID = "paid"
    PARTIAL = "partial"
    PENDING = "pending"
    OVERDUE = "overdue"
