import logging
from datetime import datetime, timezone

import pytest

from ocpp_validate.compare import Comparison, compare_build, has_schema, test_build as oracle
from ocpp_validate.errors import FieldConstraintError
from ocpp_validate.messages.common import ChargingProfile, ChargingSchedule, ChargingSchedulePeriod
from ocpp_validate.messages.core import BootNotificationResponse, ResetRequest, StatusNotificationRequest
from ocpp_validate.messages.smart_charging import SetChargingProfileRequest


def test_agreeing_rejection_keeps_both_error_lists():
    candidate = StatusNotificationRequest.model_construct(connector_id=1, error_code="NoError", status="Sleeping")
    comparison = compare_build(candidate)
    assert comparison.agrees
    assert not comparison.builder_ok and not comparison.schema_ok
    assert comparison.schema_errors == [
        "$.status: 'Sleeping' is not one of ['Available', 'Preparing', 'Charging', 'SuspendedEVSE', "
        "'SuspendedEV', 'Finishing', 'Reserved', 'Unavailable', 'Faulted']"
    ]
    assert comparison.builder_errors


def test_missing_required_field_is_rejected_by_both():
    comparison = compare_build(ResetRequest.model_construct(type=None))
    assert comparison.agrees
    assert comparison.builder_errors == ["type: missing"]
    assert comparison.schema_errors == ["$: 'type' is a required property"]


@pytest.mark.parametrize(
    "current_time, accepted",
    [
        (5, False),
        (1714566600.0, False),
        (True, False),
        ("not a date", False),
        ("2024-05-01T12:00:00", False),
        ("2024-05-01", False),
        ("2024-02-30T00:00:00Z", False),
        ("2024-05-01T24:00:00Z", False),
        ("2024-05-01T12:30:00Z", True),
        ("2024-05-01T12:30:00+02:00", True),
        ("2024-05-01t12:30:00.123456789z", True),
        (datetime(2024, 5, 1, 12, 30), False),
        (datetime(2024, 5, 1, 12, 30, tzinfo=timezone.utc), True),
    ],
)
def test_date_time_verdicts_agree(current_time, accepted):
    candidate = BootNotificationResponse.model_construct(status="Accepted", current_time=current_time, interval=10)
    comparison = compare_build(candidate)
    assert comparison.agrees, comparison.describe()
    assert comparison.builder_ok is accepted


def test_epoch_timestamp_is_a_type_error_on_the_wire():
    candidate = BootNotificationResponse.model_construct(status="Accepted", current_time=5, interval=10)
    assert compare_build(candidate).schema_errors == ["$.currentTime: 5 is not of type 'string'"]


def test_malformed_timestamp_fails_the_format():
    candidate = BootNotificationResponse.model_construct(status="Accepted", current_time="not a date", interval=10)
    assert compare_build(candidate).schema_errors == ["$.currentTime: 'not a date' is not a 'date-time'"]


def _profile_request(limit):
    period = ChargingSchedulePeriod.model_construct(start_period=0, limit=limit)
    schedule = ChargingSchedule.model_construct(charging_rate_unit="A", charging_schedule_period=[period])
    profile = ChargingProfile.model_construct(
        charging_profile_id=1,
        stack_level=0,
        charging_profile_purpose="TxDefaultProfile",
        charging_profile_kind="Absolute",
        charging_schedule=schedule,
    )
    return SetChargingProfileRequest.model_construct(connector_id=1, cs_charging_profiles=profile)


@pytest.mark.parametrize(
    "limit, accepted",
    [(16.0, True), (16, True), (8.5, True), (7400, True), (0.15, False), (0.3, False), (-1.25, False)],
)
def test_charging_limit_multiple_of_verdicts_agree(limit, accepted):
    comparison = compare_build(_profile_request(limit))
    assert comparison.agrees, comparison.describe()
    assert comparison.schema_ok is accepted


def test_off_grid_limit_error_names_the_step():
    comparison = compare_build(_profile_request(0.15))
    assert comparison.schema_errors == [
        "$.csChargingProfiles.chargingSchedule.chargingSchedulePeriod[0].limit: 0.15 is not a multiple of 0.1"
    ]
    assert any("0.15 is not a multiple of 0.1" in line for line in comparison.builder_errors)


def test_describe_shows_document_and_verdicts():
    text = compare_build(ResetRequest.model_construct(type="Hard")).describe()
    assert text.splitlines() == [
        "ResetRequest: agree",
        '  document: {"type": "Hard"}',
        "  builder accepted: []",
        "  schema  accepted: []",
    ]


def test_describe_survives_an_unserializable_candidate():
    comparison = Comparison(
        model=ResetRequest,
        candidate=ResetRequest.model_construct(type=object()),
        builder_ok=False,
        schema_ok=False,
    )
    lines = comparison.describe().splitlines()
    assert lines[0] == "ResetRequest: agree"
    assert lines[1].startswith("  document: <unserializable: ")


def test_divergence_is_reported(monkeypatch, caplog):
    def refuse(self):
        raise FieldConstraintError(["type: forced"])

    monkeypatch.setattr(ResetRequest.Builder, "pre_build", refuse)
    candidate = ResetRequest.model_construct(type="Hard")
    with caplog.at_level(logging.WARNING, logger="ocpp_validate.compare"):
        comparison = compare_build(candidate)
    assert not comparison.agrees
    assert comparison.builder_errors == ["type: forced"]
    assert comparison.schema_ok
    assert comparison.describe().splitlines()[0] == "ResetRequest: DIVERGE"
    assert "Builder and schema disagree" in caplog.text
    assert oracle(candidate) is False


def test_classmethod_oracle_checks_the_type():
    with pytest.raises(TypeError):
        ResetRequest.test_build(StatusNotificationRequest.model_construct())


def test_has_schema():
    assert has_schema(ResetRequest)
    assert not has_schema(Comparison)
