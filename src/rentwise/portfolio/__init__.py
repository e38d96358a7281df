# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Portfolio Rollups

Data-layer record models and the property/portfolio summaries, maintenance
flags and rent collection status that consume the occupancy engine.
"""

from .maintenance import (
    MaintenanceRequest,
    apply_maintenance_flags,
    units_with_open_maintenance,
)
from .summary import (
    PortfolioSummary,
    PropertyMetrics,
    PropertyRecord,
    summarize_portfolio,
    summarize_property,
)
from .tenant import (
    PaymentRecord,
    TenantInvoice,
    TenantRecord,
    build_invoices,
    classify_payment,
    latest_payments,
    tenant_has_active_lease,
    tenant_lease_status,
)

__all__ = [
    # Maintenance
    "MaintenanceRequest",
    "apply_maintenance_flags",
    "units_with_open_maintenance",
    # Summaries
    "PortfolioSummary",
    "PropertyMetrics",
    "PropertyRecord",
    "summarize_portfolio",
    "summarize_property",
    # Tenants and collections
    "PaymentRecord",
    "TenantInvoice",
    "TenantRecord",
    "build_invoices",
    "classify_payment",
    "latest_payments",
    "tenant_has_active_lease",
    "tenant_lease_status",
]
