# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from datetime import date

import pytest
from pydantic import ValidationError

from rentwise.occupancy import LeaseWindow, UnitLeaseInfo


@pytest.fixture
def unit_row() -> dict:
    return {
        "id": 101,
        "property_id": "p-1",
        "status": "occupied",
        "required_rent": "1450.00",
        "current_tenant": "Ada Lovelace",
        "current_lease_start": "2024-04-01",
        "current_lease_end": "2025-03-31",
        "incoming_tenant": None,
        "incoming_lease_start": None,
        "incoming_lease_end": None,
    }


def test_from_record_maps_columns(unit_row):
    unit = UnitLeaseInfo.from_record(unit_row)

    assert unit.unit_id == "101"
    assert unit.property_id == "p-1"
    assert unit.declared_status == "occupied"
    assert unit.required_rent == 1450.0
    assert unit.current_tenant == "Ada Lovelace"
    assert unit.current_lease == LeaseWindow(start=date(2024, 4, 1), end=date(2025, 3, 31))
    assert unit.incoming_lease is None
    assert unit.maintenance_active is False


def test_from_record_maintenance_override(unit_row):
    unit_row["has_active_maintenance"] = True
    assert UnitLeaseInfo.from_record(unit_row).maintenance_active is True
    assert UnitLeaseInfo.from_record(unit_row, maintenance_active=False).maintenance_active is False


def test_from_record_keeps_partial_lease(unit_row):
    unit_row["incoming_lease_start"] = "2025-04-01"
    unit = UnitLeaseInfo.from_record(unit_row)
    assert unit.incoming_lease is not None
    assert not unit.incoming_lease.is_complete


def test_rent_defaults_to_zero():
    assert UnitLeaseInfo().rent == 0.0
    assert UnitLeaseInfo(required_rent=0).rent == 0.0


def test_unit_is_immutable():
    unit = UnitLeaseInfo(unit_id="u-1")
    with pytest.raises(ValidationError):
        unit.maintenance_active = True


def test_unknown_fields_are_rejected():
    with pytest.raises(ValidationError):
        UnitLeaseInfo(unit_id="u-1", hasActiveMaintenance=True)
