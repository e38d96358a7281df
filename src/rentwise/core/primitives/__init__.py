# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Rentwise Core Primitives

Essential building blocks shared by the occupancy engine and portfolio
rollups: the immutable model base, day-granularity date handling,
status enumerations and settings.
"""

from .dates import is_same_month, reference_day, to_day
from .enums import LeaseStatusEnum, OccupancyStatusEnum, PaymentStatusEnum
from .model import Model
from .settings import CollectionSettings, GlobalSettings, MaintenanceSettings
from .types import NonNegativeFloat, NonNegativeInt

__all__ = [
    # Core models
    "Model",
    # Dates
    "is_same_month",
    "reference_day",
    "to_day",
    # Enums
    "LeaseStatusEnum",
    "OccupancyStatusEnum",
    "PaymentStatusEnum",
    # Settings
    "CollectionSettings",
    "GlobalSettings",
    "MaintenanceSettings",
    # Types
    "NonNegativeFloat",
    "NonNegativeInt",
]
