"""Smart charging profile: charging profiles and composite schedules."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from ocpp.v16.enums import (
    ChargingProfilePurposeType,
    ChargingProfileStatus,
    ChargingRateUnitType,
    ClearChargingProfileStatus,
    GetCompositeScheduleStatus,
)
from pydantic import StrictInt

from ..codegen import json_validate
from .base import DateTime, OcppMessage
from .common import ChargingProfile, ChargingSchedule


@json_validate("ClearChargingProfile.json")
class ClearChargingProfileRequest(OcppMessage):
    """Clear profiles matching every given criterion; no criteria clears them all."""

    id: Optional[StrictInt] = None
    connector_id: Optional[StrictInt] = None
    charging_profile_purpose: Optional[ChargingProfilePurposeType] = None
    stack_level: Optional[StrictInt] = None


@json_validate("ClearChargingProfileResponse.json")
class ClearChargingProfileResponse(OcppMessage):
    status: ClearChargingProfileStatus


@json_validate("GetCompositeSchedule.json")
class GetCompositeScheduleRequest(OcppMessage):
    """Request the schedule a connector will follow for the next ``duration`` seconds."""

    connector_id: StrictInt
    duration: StrictInt
    charging_rate_unit: Optional[ChargingRateUnitType] = None

    def build_response(
        self,
        status: GetCompositeScheduleStatus,
        schedule_start: Optional[datetime] = None,
        charging_schedule: Optional[ChargingSchedule] = None,
    ) -> "GetCompositeScheduleResponse":
        """Answer this request, echoing its connector id."""
        builder = GetCompositeScheduleResponse.builder().status(status).connector_id(self.connector_id)
        if schedule_start is not None:
            builder.schedule_start(schedule_start)
        if charging_schedule is not None:
            builder.charging_schedule(charging_schedule)
        return builder.build()


@json_validate("GetCompositeScheduleResponse.json")
class GetCompositeScheduleResponse(OcppMessage):
    status: GetCompositeScheduleStatus
    connector_id: Optional[StrictInt] = None
    schedule_start: Optional[DateTime] = None
    charging_schedule: Optional[ChargingSchedule] = None


@json_validate("SetChargingProfile.json")
class SetChargingProfileRequest(OcppMessage):
    connector_id: StrictInt
    cs_charging_profiles: ChargingProfile


@json_validate("SetChargingProfileResponse.json")
class SetChargingProfileResponse(OcppMessage):
    status: ChargingProfileStatus
