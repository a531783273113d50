from datetime import datetime, timezone

import pytest
from ocpp.v16.enums import DataTransferStatus, GetCompositeScheduleStatus, RegistrationStatus
from pydantic import ValidationError

from ocpp_validate.errors import JsonValidateError, UnknownMessageError
from ocpp_validate.messages import CATALOG, PROFILES, find, iter_messages, lookup
from ocpp_validate.messages.common import (
    ChargingProfile,
    ChargingSchedule,
    ChargingSchedulePeriod,
    MeterValue,
    SampledValue,
)
from ocpp_validate.messages.core import (
    BootNotificationRequest,
    BootNotificationResponse,
    DataTransferRequest,
    DataTransferResponse,
    MeterValuesRequest,
)
from ocpp_validate.messages.smart_charging import (
    GetCompositeScheduleRequest,
    GetCompositeScheduleResponse,
    SetChargingProfileRequest,
)

NOW = datetime(2024, 5, 1, 12, 30, tzinfo=timezone.utc)


def test_catalog_covers_every_profile():
    assert len(CATALOG) == 26
    assert {pair.profile for pair in CATALOG.values()} == set(PROFILES)
    assert list(CATALOG) == sorted(CATALOG)
    assert CATALOG["TriggerMessage"].profile == "remote_trigger"
    assert CATALOG["SendLocalList"].profile == "local_auth_list"


def test_lookup_by_action_and_direction():
    assert lookup("BootNotification") is CATALOG["BootNotification"].request
    assert lookup("BootNotification", "response") is BootNotificationResponse


@pytest.mark.parametrize(
    "action, direction",
    [("Unknown", "request"), ("BootNotification", "reply"), ("bootnotification", "request")],
)
def test_lookup_failures(action, direction):
    with pytest.raises(UnknownMessageError):
        lookup(action, direction)


def test_unknown_message_is_a_lookup_error():
    with pytest.raises(LookupError):
        find("NoSuchRequest")
    assert find("ResetRequest").__name__ == "ResetRequest"


def test_iter_messages_yields_pairs():
    classes = list(iter_messages())
    assert len(classes) == 52
    assert classes[0] is CATALOG["Authorize"].request
    assert classes[1] is CATALOG["Authorize"].response


def test_wire_document_round_trip():
    message = BootNotificationResponse(status=RegistrationStatus.accepted, current_time=NOW, interval=300)
    document = message.to_document()
    assert document == {"status": "Accepted", "currentTime": "2024-05-01T12:30:00Z", "interval": 300}
    assert BootNotificationResponse.from_document(document) == message


def test_from_document_rejects_unknown_and_mistyped_keys():
    with pytest.raises(ValidationError):
        BootNotificationResponse.from_document({"status": "Accepted", "currentTime": NOW.isoformat(), "interval": "300"})
    with pytest.raises(ValidationError):
        DataTransferRequest.from_document({"vendorId": "acme", "extra": 1})


def test_from_document_accepts_wire_names_only():
    with pytest.raises(ValidationError) as excinfo:
        BootNotificationRequest.from_document({"charge_point_vendor": "a", "charge_point_model": "b"})
    assert {error["type"] for error in excinfo.value.errors()} == {"missing", "extra_forbidden"}
    message = BootNotificationRequest.from_document({"chargePointVendor": "a", "chargePointModel": "b"})
    assert message.charge_point_vendor == "a"


def test_from_document_applies_wire_names_to_nested_records():
    document = {
        "connectorId": 1,
        "meterValue": [{"timestamp": "2024-05-01T12:30:00Z", "sampled_value": [{"value": "1"}]}],
    }
    with pytest.raises(ValidationError):
        MeterValuesRequest.from_document(document)


def test_python_callers_may_still_use_field_names():
    message = BootNotificationRequest(charge_point_vendor="a", charge_point_model="b")
    assert message.to_document() == {"chargePointVendor": "a", "chargePointModel": "b"}


class TestTimestamps:
    def test_rfc3339_string_is_parsed(self):
        message = BootNotificationResponse(status="Accepted", current_time="2024-05-01T14:30:00+02:00", interval=1)
        assert message.current_time == NOW

    def test_long_fraction_is_truncated_to_microseconds(self):
        message = BootNotificationResponse(status="Accepted", current_time="2024-05-01t12:30:00.123456789z", interval=1)
        assert message.current_time == NOW.replace(microsecond=123456)

    @pytest.mark.parametrize(
        "value",
        [0, 1714566600, 1714566600.0, "2024-05-01", "2024-05-01T12:30:00", "2024-05-01 12:30:00Z", "soon"],
    )
    def test_values_outside_the_date_time_format_are_rejected(self, value):
        with pytest.raises(ValidationError):
            BootNotificationResponse(status="Accepted", current_time=value, interval=1)

    def test_naive_datetime_is_rejected(self):
        with pytest.raises(ValidationError, match="UTC offset"):
            BootNotificationResponse(status="Accepted", current_time=datetime(2024, 5, 1), interval=1)


class TestChargingRates:
    @pytest.mark.parametrize("limit", [0.15, 0.3, 1e-3])
    def test_off_grid_limit_is_rejected(self, limit):
        with pytest.raises(ValidationError, match="is not a multiple of 0.1"):
            ChargingSchedulePeriod(start_period=0, limit=limit)

    def test_min_charging_rate_is_checked(self):
        with pytest.raises(ValidationError, match="is not a multiple of 0.1"):
            ChargingSchedule(charging_rate_unit="A", charging_schedule_period=[], min_charging_rate=0.05)

    def test_non_finite_limit_is_rejected(self):
        with pytest.raises(ValidationError):
            ChargingSchedulePeriod(start_period=0, limit=float("inf"))


def test_meter_values_document():
    message = MeterValuesRequest(
        connector_id=1,
        meter_value=[
            MeterValue(
                timestamp=NOW,
                sampled_value=[SampledValue(value="12.5", measurand="Energy.Active.Import.Register", unit="kWh")],
            )
        ],
    )
    message.schema_validate()
    assert message.to_document()["meterValue"][0]["sampledValue"] == [
        {"value": "12.5", "measurand": "Energy.Active.Import.Register", "unit": "kWh"}
    ]


def test_legacy_celsius_spelling_is_accepted():
    for unit in ("Celsius", "Celcius"):
        assert SampledValue(value="21", unit=unit).unit.value == unit


def test_charging_profile_request_validates():
    profile = ChargingProfile(
        charging_profile_id=3,
        stack_level=0,
        charging_profile_purpose="TxDefaultProfile",
        charging_profile_kind="Recurring",
        recurrency_kind="Daily",
        charging_schedule=ChargingSchedule(
            charging_rate_unit="A",
            charging_schedule_period=[
                ChargingSchedulePeriod(start_period=0, limit=16.0),
                ChargingSchedulePeriod(start_period=3600, limit=8.5, number_phases=3),
            ],
        ),
    )
    request = SetChargingProfileRequest.builder().connector_id(0).cs_charging_profiles(profile).build()
    assert request.to_document()["csChargingProfiles"]["chargingSchedule"]["chargingSchedulePeriod"][1] == {
        "startPeriod": 3600,
        "limit": 8.5,
        "numberPhases": 3,
    }


class TestBuildResponse:
    def test_data_transfer(self):
        request = DataTransferRequest(vendor_id="com.example", message_id="ping")
        response = request.build_response(DataTransferStatus.accepted, data="pong")
        assert isinstance(response, DataTransferResponse)
        assert response.to_document() == {"status": "Accepted", "data": "pong"}

    def test_data_transfer_without_data(self):
        response = DataTransferRequest(vendor_id="com.example").build_response(DataTransferStatus.unknown_vendor_id)
        assert response.to_document() == {"status": "UnknownVendorId"}

    def test_composite_schedule_copies_connector(self):
        request = GetCompositeScheduleRequest(connector_id=2, duration=600)
        schedule = ChargingSchedule(
            charging_rate_unit="W",
            charging_schedule_period=[ChargingSchedulePeriod(start_period=0, limit=7400)],
        )
        response = request.build_response(GetCompositeScheduleStatus.accepted, NOW, schedule)
        assert isinstance(response, GetCompositeScheduleResponse)
        assert response.connector_id == 2
        assert response.to_document()["scheduleStart"] == "2024-05-01T12:30:00Z"

    def test_composite_schedule_rejected(self):
        response = GetCompositeScheduleRequest(connector_id=1, duration=60).build_response(
            GetCompositeScheduleStatus.rejected
        )
        assert response.to_document() == {"status": "Rejected", "connectorId": 1}


def test_schema_rejection_is_an_ocpp_error():
    message = DataTransferRequest.model_construct(vendor_id="v" * 256)
    with pytest.raises(JsonValidateError):
        message.schema_validate()
