# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Tenant records and monthly rent collection status.

Tenant rows back single-family properties (which have no unit records) and
drive the collection view: each active tenant gets an invoice due on the
first of the reference month, classified from their most recent payment.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Any, Dict, Iterable, List, Mapping, Optional

import pandas as pd
from pydantic import Field, field_validator

from ..core.primitives import (
    GlobalSettings,
    LeaseStatusEnum,
    Model,
    NonNegativeFloat,
    PaymentStatusEnum,
    is_same_month,
    reference_day,
    to_day,
)
from ..occupancy import LeaseWindow, classify_lease, is_lease_active_on

logger = logging.getLogger(__name__)


class TenantRecord(Model):
    """A tenant row from the data layer."""

    tenant_id: str
    name: str = ""
    property_id: Optional[str] = None
    unit_id: Optional[str] = None
    monthly_rent: Optional[NonNegativeFloat] = None
    status: str = "active"
    balance: float = 0.0
    lease: Optional[LeaseWindow] = None

    @property
    def rent(self) -> float:
        return float(self.monthly_rent or 0.0)

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "TenantRecord":
        tenant_id = record.get("id", record.get("tenant_id"))
        property_id = record.get("property_id")
        unit_id = record.get("unit_id")
        return cls(
            tenant_id=str(tenant_id) if tenant_id is not None else None,
            name=record.get("name") or "",
            property_id=str(property_id) if property_id is not None else None,
            unit_id=str(unit_id) if unit_id is not None else None,
            monthly_rent=record.get("monthly_rent"),
            status=record.get("status") or "active",
            balance=float(record.get("balance") or 0.0),
            lease=LeaseWindow.from_bounds(
                record.get("lease_start"), record.get("lease_end")
            ),
        )


class PaymentRecord(Model):
    """A rent payment made by a tenant."""

    tenant_id: str
    amount: float
    payment_date: date

    @field_validator("payment_date", mode="before")
    @classmethod
    def _normalize_payment_date(cls, v: Any) -> date:
        day = to_day(v)
        if day is None:
            raise ValueError(f"payment_date must be a valid date, got {v!r}")
        return day.date()


class TenantInvoice(Model):
    """Collection line for one tenant in the reference month."""

    tenant_id: str
    name: str
    property_id: Optional[str] = None
    unit_id: Optional[str] = None
    rent: NonNegativeFloat
    due_date: date
    balance: float = 0.0
    last_payment_date: Optional[date] = None
    last_payment_amount: Optional[float] = None
    status: PaymentStatusEnum = Field(default=PaymentStatusEnum.PENDING)


def tenant_lease_status(tenant: TenantRecord, today: Any) -> Optional[LeaseStatusEnum]:
    """Lease status of a tenant, ``None`` when no lease dates are recorded."""
    if tenant.lease is None:
        return None
    return classify_lease(tenant.lease.start, tenant.lease.end, today)


def tenant_has_active_lease(tenant: TenantRecord, today: Any) -> bool:
    return is_lease_active_on(tenant.lease, today)


def latest_payments(payments: Iterable[PaymentRecord]) -> Dict[str, PaymentRecord]:
    """Most recent payment per tenant; ties keep the first one seen."""
    latest: Dict[str, PaymentRecord] = {}
    for payment in payments:
        seen = latest.get(payment.tenant_id)
        if seen is None or payment.payment_date > seen.payment_date:
            latest[payment.tenant_id] = payment
    return latest


def classify_payment(
    rent: float,
    last_payment: Optional[PaymentRecord],
    today: Any,
    settings: Optional[GlobalSettings] = None,
) -> PaymentStatusEnum:
    """
    Classify the collection status of one tenant for the reference month.

    Only a payment made in the reference month counts: covering the rent is
    PAID, any positive amount is PARTIAL. Without one the invoice is PENDING
    until the grace period passes, then OVERDUE.
    """
    settings = settings or GlobalSettings()
    day = reference_day(today)

    if last_payment is not None:
        paid_on = pd.Timestamp(last_payment.payment_date)
        if is_same_month(paid_on, day):
            if last_payment.amount >= rent:
                return PaymentStatusEnum.PAID
            if last_payment.amount > 0:
                return PaymentStatusEnum.PARTIAL

    if day.day > settings.collections.grace_days:
        return PaymentStatusEnum.OVERDUE
    return PaymentStatusEnum.PENDING


def build_invoices(
    tenants: Iterable[TenantRecord],
    payments: Iterable[PaymentRecord],
    today: Any,
    settings: Optional[GlobalSettings] = None,
) -> List[TenantInvoice]:
    """Build the reference month's collection lines for active tenants."""
    settings = settings or GlobalSettings()
    day = reference_day(today)
    due_date = day.replace(day=1).date()
    latest = latest_payments(payments)

    invoices = []
    for tenant in tenants:
        if tenant.status != settings.collections.active_tenant_status:
            continue
        last_payment = latest.get(tenant.tenant_id)
        invoices.append(
            TenantInvoice(
                tenant_id=tenant.tenant_id,
                name=tenant.name,
                property_id=tenant.property_id,
                unit_id=tenant.unit_id,
                rent=tenant.rent,
                due_date=due_date,
                balance=tenant.balance,
                last_payment_date=last_payment.payment_date if last_payment else None,
                last_payment_amount=last_payment.amount if last_payment else None,
                status=classify_payment(tenant.rent, last_payment, day, settings),
            )
        )
    logger.debug(f"Built {len(invoices)} invoices due {due_date.isoformat()}")
    return invoices
