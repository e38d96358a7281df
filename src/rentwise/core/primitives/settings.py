# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from typing import Tuple

from pydantic import Field, field_validator

from .model import Model
from .types import NonNegativeInt


class MaintenanceSettings(Model):
    """Which maintenance request statuses count as an open case."""

    open_statuses: Tuple[str, ...] = Field(
        default=("pending", "in_progress"),
        description="Request statuses that put a unit into repairs.",
    )

    @field_validator("open_statuses")
    @classmethod
    def _require_statuses(cls, v: Tuple[str, ...]) -> Tuple[str, ...]:
        if not v:
            raise ValueError("open_statuses must name at least one status")
        return v


class CollectionSettings(Model):
    """Settings for monthly rent collection status."""

    grace_days: NonNegativeInt = Field(
        default=5,
        le=31,
        description="Day of month after which an unpaid invoice is overdue.",
    )
    active_tenant_status: str = Field(
        default="active",
        description="Tenant status label that receives a monthly invoice.",
    )


class GlobalSettings(Model):
    """
    Global configuration for portfolio-level calculations.

    The occupancy and revenue engine itself takes no settings; these only
    affect how data-layer records are interpreted before and after it runs.

    Usage Examples:
        # Dashboard defaults
        settings = GlobalSettings()

        # Treat scheduled work orders as open cases too
        settings = GlobalSettings(
            maintenance={"open_statuses": ("pending", "in_progress", "scheduled")}
        )
    """

    maintenance: MaintenanceSettings = Field(default_factory=MaintenanceSettings)
    collections: CollectionSettings = Field(default_factory=CollectionSettings)
