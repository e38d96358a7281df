# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from datetime import date
from typing import Any, Optional

from pydantic import field_validator

from ..core.primitives import (
    LeaseStatusEnum,
    Model,
    is_same_month,
    reference_day,
    to_day,
)


class LeaseWindow(Model):
    """
    Inclusive start/end dates of a tenancy.

    Bounds are coerced through `to_day` on construction, so time-of-day is
    dropped and unparsable values become ``None``. A window missing either
    bound is incomplete and never counts as active. ``start <= end`` is the
    caller's responsibility and is not validated here.
    """

    start: Optional[date] = None
    end: Optional[date] = None

    @field_validator("start", "end", mode="before")
    @classmethod
    def _normalize_bound(cls, v: Any) -> Optional[date]:
        day = to_day(v)
        return day.date() if day is not None else None

    @property
    def is_complete(self) -> bool:
        """Both bounds are set."""
        return self.start is not None and self.end is not None

    @classmethod
    def from_bounds(cls, start: Any, end: Any) -> Optional["LeaseWindow"]:
        """Build a window from raw column values; ``None`` when neither bound is set."""
        window = cls(start=start, end=end)
        if window.start is None and window.end is None:
            return None
        return window

    def status_on(self, today: Any) -> LeaseStatusEnum:
        return classify_lease(self.start, self.end, today)


def is_lease_active_on(lease: Optional[LeaseWindow], today: Any) -> bool:
    """
    Check whether a lease covers the reference date (start <= today <= end).

    Missing or incomplete windows are never active.
    """
    day = reference_day(today)
    if lease is None or not lease.is_complete:
        return False
    return to_day(lease.start) <= day <= to_day(lease.end)


def lease_starts_later_this_month(lease: Optional[LeaseWindow], today: Any) -> bool:
    """
    Check whether a signed lease begins later in the reference month.

    The start must fall in today's calendar month and strictly after today,
    so a lease starting today is active rather than upcoming.
    """
    day = reference_day(today)
    if lease is None or lease.start is None:
        return False
    start = to_day(lease.start)
    return is_same_month(start, day) and start > day


def classify_lease(start: Any, end: Any, today: Any) -> LeaseStatusEnum:
    """
    Classify a lease interval relative to the reference date.

    The expiry check runs before the upcoming check, so an inverted window
    (end < start) reads as expired once today passes its end. An unset or
    unparsable bound skips the comparison it takes part in: a lease with no
    end never expires and a lease with no start is never upcoming.

    Args:
        start: Lease start (date-like, inclusive).
        end: Lease end (date-like, inclusive).
        today: Reference date.

    Returns:
        LeaseStatusEnum for the interval.
    """
    day = reference_day(today)
    start_day = to_day(start)
    end_day = to_day(end)

    if end_day is not None and day > end_day:
        return LeaseStatusEnum.EXPIRED
    if start_day is not None and day < start_day:
        return LeaseStatusEnum.UPCOMING
    return LeaseStatusEnum.ACTIVE
