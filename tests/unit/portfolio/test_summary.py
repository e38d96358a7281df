# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import logging

import pytest

from conftest import window
from rentwise.core.primitives import OccupancyStatusEnum
from rentwise.occupancy import UnitLeaseInfo, aggregate_revenue
from rentwise.portfolio import (
    MaintenanceRequest,
    PropertyRecord,
    TenantRecord,
    summarize_portfolio,
    summarize_property,
)


@pytest.fixture
def apartments() -> PropertyRecord:
    return PropertyRecord(
        property_id="p1",
        name="Maple Court",
        unit_count=4,
        purchase_price=400_000,
        down_payment=100_000,
    )


@pytest.fixture
def house() -> PropertyRecord:
    return PropertyRecord(
        property_id="p2", name="Oak House", unit_count=1, purchase_price=250_000, current_value=300_000
    )


@pytest.fixture
def apartment_units() -> list:
    return [
        # occupied by the current tenant
        UnitLeaseInfo(unit_id="u1", property_id="p1", required_rent=1000, current_lease=window(-30, 300)),
        # empty until an incoming tenant moves in later this month
        UnitLeaseInfo(unit_id="u2", property_id="p1", required_rent=1200, incoming_lease=window(6, 371)),
        # leased but under repair
        UnitLeaseInfo(unit_id="u3", property_id="p1", required_rent=900, current_lease=window(-100, 200)),
        # vacant
        UnitLeaseInfo(unit_id="u4", property_id="p1", required_rent=800),
    ]


@pytest.fixture
def house_tenants() -> list:
    return [
        TenantRecord(tenant_id="t1", property_id="p2", monthly_rent=2000, lease=window(-60, 300)),
        TenantRecord(tenant_id="t0", property_id="p2", monthly_rent=1800, lease=window(-800, -61)),
    ]


@pytest.fixture
def open_requests() -> list:
    return [MaintenanceRequest(request_id="m1", property_id="p1", unit_id="u3", status="pending")]


class TestSummarizeProperty:
    def test_multi_unit_property(self, apartments, apartment_units, today):
        units = [
            u.model_copy(update={"maintenance_active": u.unit_id == "u3"}) for u in apartment_units
        ]
        metrics = summarize_property(apartments, units, [], today)

        assert metrics.total_units == 4
        assert metrics.occupied_units == 2  # u1 occupied, u3 under repair
        assert metrics.vacant_units == 2
        assert metrics.occupancy_rate == 0.5
        assert metrics.status_counts == {
            OccupancyStatusEnum.OCCUPIED: 1,
            OccupancyStatusEnum.REPAIRS: 1,
            OccupancyStatusEnum.VACANT: 2,
        }
        assert metrics.monthly_revenue == 1900.0
        assert metrics.expected_revenue == 3100.0
        assert metrics.annual_revenue == 22_800.0
        assert metrics.cash_on_cash == pytest.approx(0.228)

    def test_revenue_matches_unit_aggregate(self, apartments, apartment_units, today):
        metrics = summarize_property(apartments, apartment_units, [], today)
        total = aggregate_revenue(apartment_units, today)
        assert metrics.monthly_revenue == total.monthly_revenue
        assert metrics.expected_revenue == total.expected_revenue

    def test_single_family_property_uses_tenants(self, house, house_tenants, today):
        metrics = summarize_property(house, [], house_tenants, today)

        assert metrics.total_units == 1
        assert metrics.occupied_units == 1
        assert metrics.occupancy_rate == 1.0
        assert metrics.monthly_revenue == 2000.0
        assert metrics.expected_revenue == 2000.0
        assert metrics.market_value == 300_000
        assert metrics.cash_on_cash == pytest.approx(24_000 / 250_000)

    def test_tenants_ignored_when_property_has_units(self, apartments, apartment_units, house_tenants, today):
        with_tenants = summarize_property(apartments, apartment_units, house_tenants, today)
        without = summarize_property(apartments, apartment_units, [], today)
        assert with_tenants == without

    def test_empty_property(self, today):
        metrics = summarize_property(PropertyRecord(property_id="p9"), [], [], today)
        assert metrics.total_units == 0
        assert metrics.occupancy_rate == 0.0
        assert metrics.cash_on_cash == 0.0
        assert metrics.market_value == 0.0


class TestSummarizePortfolio:
    def test_portfolio_totals(
        self, apartments, house, apartment_units, house_tenants, open_requests, today
    ):
        summary = summarize_portfolio(
            [apartments, house],
            apartment_units,
            today,
            tenants=house_tenants,
            maintenance_requests=open_requests,
        )

        assert summary.total_properties == 2
        assert summary.total_value == 700_000
        assert summary.monthly_revenue == 3900.0
        assert summary.expected_revenue == 5100.0
        assert summary.total_units == 5
        assert summary.occupied_units == 3
        assert summary.vacant_units == 2
        assert summary.occupancy_rate == pytest.approx(0.6)

        apartments_metrics = summary.properties[0]
        assert apartments_metrics.status_counts[OccupancyStatusEnum.REPAIRS] == 1

    def test_totals_equal_sum_of_properties(self, apartments, house, apartment_units, house_tenants, today):
        summary = summarize_portfolio([apartments, house], apartment_units, today, tenants=house_tenants)
        assert summary.monthly_revenue == sum(p.monthly_revenue for p in summary.properties)
        assert summary.expected_revenue == sum(p.expected_revenue for p in summary.properties)

    def test_unknown_property_is_skipped(self, apartments, apartment_units, today, caplog):
        stray = UnitLeaseInfo(unit_id="x1", property_id="gone", required_rent=5000, current_lease=window(-1, 1))
        with caplog.at_level(logging.WARNING, logger="rentwise.portfolio.summary"):
            summary = summarize_portfolio([apartments], apartment_units + [stray], today)

        assert summary.total_units == 4
        assert summary.monthly_revenue == 1900.0
        assert "unknown property gone" in caplog.text

    def test_empty_portfolio(self, today):
        summary = summarize_portfolio([], [], today)
        assert summary.total_properties == 0
        assert summary.occupancy_rate == 0.0
        assert summary.monthly_revenue == 0
