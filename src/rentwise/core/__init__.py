# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Rentwise Core Framework

Foundational building blocks for occupancy and revenue calculations.
"""

from . import primitives
from .primitives import (
    CollectionSettings,
    GlobalSettings,
    LeaseStatusEnum,
    MaintenanceSettings,
    Model,
    NonNegativeFloat,
    NonNegativeInt,
    OccupancyStatusEnum,
    PaymentStatusEnum,
    is_same_month,
    reference_day,
    to_day,
)

__all__ = [
    "primitives",
    "CollectionSettings",
    "GlobalSettings",
    "LeaseStatusEnum",
    "MaintenanceSettings",
    "Model",
    "NonNegativeFloat",
    "NonNegativeInt",
    "OccupancyStatusEnum",
    "PaymentStatusEnum",
    "is_same_month",
    "reference_day",
    "to_day",
]
