# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Day-granularity date primitives.

Every comparison in the occupancy engine goes through `to_day`, so two
timestamps on the same calendar day always compare as equal regardless of
clock time. Nothing in this module reads the system clock.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

import pandas as pd

logger = logging.getLogger(__name__)


def to_day(value: Any) -> Optional[pd.Timestamp]:
    """
    Normalize a date-like value to a start-of-day timestamp.

    Args:
        value: ISO date string, ``date``, ``datetime`` or ``pd.Timestamp``.

    Returns:
        Naive ``pd.Timestamp`` at midnight, or ``None`` when the value is
        missing or cannot be parsed. Timezone-aware inputs keep their
        wall-clock date.
    """
    if value is None:
        return None
    if isinstance(value, str) and not value.strip():
        return None

    ts = pd.to_datetime(value, errors="coerce")
    if pd.isna(ts):
        logger.debug(f"Treating unparsable date {value!r} as unset")
        return None

    if ts.tzinfo is not None:
        ts = ts.tz_localize(None)
    return ts.normalize()


def reference_day(today: Any) -> pd.Timestamp:
    """Normalize the caller-supplied reference date; it must be valid."""
    day = to_day(today)
    if day is None:
        raise ValueError(f"Reference date must be a valid date, got {today!r}")
    return day


def is_same_month(a: pd.Timestamp, b: pd.Timestamp) -> bool:
    """True when both timestamps fall in the same calendar month."""
    return pd.Period(a, freq="M") == pd.Period(b, freq="M")
