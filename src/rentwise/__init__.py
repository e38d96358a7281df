# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

import importlib
import logging

"""
Rentwise - Occupancy and Revenue Resolution for Rental Portfolios

Derives each unit's effective occupancy status, lease status and monthly /
expected revenue from lease windows and an explicit reference date, and
rolls the results up into property and portfolio summaries.

Key Entry Points:
- rentwise.occupancy.resolve_status() - Effective status of a unit
- rentwise.occupancy.compute_unit_revenue() - Monthly and expected revenue
- rentwise.occupancy.classify_lease() - Active / expired / upcoming
- rentwise.portfolio.summarize_portfolio() - Property and portfolio rollups

Example Usage:
    ```python
    from datetime import date

    from rentwise.occupancy import UnitLeaseInfo, compute_unit_revenue, resolve_status

    unit = UnitLeaseInfo.from_record(row, maintenance_active=False)
    status = resolve_status(unit, date(2025, 3, 14))
    revenue = compute_unit_revenue(unit, date(2025, 3, 14))
    print(f"{status.value}: ${revenue.expected_revenue:,.2f} expected")
    ```
"""

# Library logging stays silent unless the application configures handlers.
logging.getLogger(__name__).addHandler(logging.NullHandler())


# Public API surface (lazy-loaded on first attribute access)
__all__ = [  # noqa: F822 - lazy loading
    "core",
    "occupancy",
    "portfolio",
    "reporting",
]


_LAZY_MODULES = {
    "core": "rentwise.core",
    "occupancy": "rentwise.occupancy",
    "portfolio": "rentwise.portfolio",
    "reporting": "rentwise.reporting",
}


def __getattr__(name: str):
    module_path = _LAZY_MODULES.get(name)
    if module_path is None:
        raise AttributeError(f"module 'rentwise' has no attribute '{name}'")
    module = importlib.import_module(module_path)
    globals()[name] = module
    return module
