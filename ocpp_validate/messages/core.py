"""Core profile messages.

Requests originate from the charge point (Authorize, BootNotification,
DataTransfer, Heartbeat, MeterValues, StartTransaction, StatusNotification,
StopTransaction) or from the central system (ChangeAvailability,
ChangeConfiguration, ClearCache, DataTransfer, GetConfiguration,
RemoteStartTransaction, RemoteStopTransaction, Reset, UnlockConnector).
"""

from __future__ import annotations

from typing import List, Optional

from ocpp.v16.enums import (
    AvailabilityStatus,
    AvailabilityType,
    ChargePointErrorCode,
    ChargePointStatus,
    ClearCacheStatus,
    ConfigurationStatus,
    DataTransferStatus,
    Reason,
    RegistrationStatus,
    RemoteStartStopStatus,
    ResetStatus,
    ResetType,
    UnlockStatus,
)
from pydantic import StrictInt, StrictStr

from ..codegen import json_validate
from .base import CiString20, CiString25, CiString50, CiString255, CiString500, DateTime, IdToken, OcppMessage
from .common import ChargingProfile, IdTagInfo, KeyValue, MeterValue


@json_validate("Authorize.json")
class AuthorizeRequest(OcppMessage):
    """Ask the central system whether an idTag may start or stop charging."""

    id_tag: IdToken


@json_validate("AuthorizeResponse.json")
class AuthorizeResponse(OcppMessage):
    id_tag_info: IdTagInfo


@json_validate("BootNotification.json")
class BootNotificationRequest(OcppMessage):
    """Payload sent by a charge point when announcing itself.

    Only the vendor and model are required; everything else identifies
    hardware and firmware and may be omitted.
    """

    charge_point_vendor: CiString20
    charge_point_model: CiString20
    charge_point_serial_number: Optional[CiString25] = None
    charge_box_serial_number: Optional[CiString25] = None
    firmware_version: Optional[CiString50] = None
    iccid: Optional[CiString20] = None
    imsi: Optional[CiString20] = None
    meter_type: Optional[CiString25] = None
    meter_serial_number: Optional[CiString25] = None


@json_validate("BootNotificationResponse.json")
class BootNotificationResponse(OcppMessage):
    """Response returned by the central system after BootNotification.

    When accepted, ``interval`` is the heartbeat interval in seconds;
    otherwise it is the minimum wait before the next BootNotification.
    """

    status: RegistrationStatus
    current_time: DateTime
    interval: StrictInt


@json_validate("ChangeAvailability.json")
class ChangeAvailabilityRequest(OcppMessage):
    """Change the availability of one connector, or of the whole charge point for connector 0."""

    connector_id: StrictInt
    type: AvailabilityType


@json_validate("ChangeAvailabilityResponse.json")
class ChangeAvailabilityResponse(OcppMessage):
    status: AvailabilityStatus


@json_validate("ChangeConfiguration.json")
class ChangeConfigurationRequest(OcppMessage):
    key: CiString50
    value: CiString500


@json_validate("ChangeConfigurationResponse.json")
class ChangeConfigurationResponse(OcppMessage):
    status: ConfigurationStatus


@json_validate("ClearCache.json")
class ClearCacheRequest(OcppMessage):
    """Empty payload asking the charge point to clear its authorization cache."""


@json_validate("ClearCacheResponse.json")
class ClearCacheResponse(OcppMessage):
    status: ClearCacheStatus


@json_validate("DataTransfer.json")
class DataTransferRequest(OcppMessage):
    """Vendor specific data, sent in either direction."""

    vendor_id: CiString255
    message_id: Optional[CiString50] = None
    data: Optional[StrictStr] = None

    def build_response(self, status: DataTransferStatus, data: Optional[str] = None) -> "DataTransferResponse":
        builder = DataTransferResponse.builder().status(status)
        if data is not None:
            builder.data(data)
        return builder.build()


@json_validate("DataTransferResponse.json")
class DataTransferResponse(OcppMessage):
    status: DataTransferStatus
    data: Optional[StrictStr] = None


@json_validate("GetConfiguration.json")
class GetConfigurationRequest(OcppMessage):
    """Request configuration values; all keys are reported when ``key`` is absent."""

    key: Optional[List[CiString50]] = None


@json_validate("GetConfigurationResponse.json")
class GetConfigurationResponse(OcppMessage):
    configuration_key: Optional[List[KeyValue]] = None
    unknown_key: Optional[List[CiString50]] = None


@json_validate("Heartbeat.json")
class HeartbeatRequest(OcppMessage):
    """Empty payload for heartbeat calls."""


@json_validate("HeartbeatResponse.json")
class HeartbeatResponse(OcppMessage):
    """Return the central system's current time."""

    current_time: DateTime


@json_validate("MeterValues.json")
class MeterValuesRequest(OcppMessage):
    """Sampled meter values for a connector, optionally tied to a transaction."""

    connector_id: StrictInt
    transaction_id: Optional[StrictInt] = None
    meter_value: List[MeterValue]


@json_validate("MeterValuesResponse.json")
class MeterValuesResponse(OcppMessage):
    pass


@json_validate("RemoteStartTransaction.json")
class RemoteStartTransactionRequest(OcppMessage):
    connector_id: Optional[StrictInt] = None
    id_tag: IdToken
    charging_profile: Optional[ChargingProfile] = None


@json_validate("RemoteStartTransactionResponse.json")
class RemoteStartTransactionResponse(OcppMessage):
    status: RemoteStartStopStatus


@json_validate("RemoteStopTransaction.json")
class RemoteStopTransactionRequest(OcppMessage):
    transaction_id: StrictInt


@json_validate("RemoteStopTransactionResponse.json")
class RemoteStopTransactionResponse(OcppMessage):
    status: RemoteStartStopStatus


@json_validate("Reset.json")
class ResetRequest(OcppMessage):
    type: ResetType


@json_validate("ResetResponse.json")
class ResetResponse(OcppMessage):
    status: ResetStatus


@json_validate("StartTransaction.json")
class StartTransactionRequest(OcppMessage):
    """Announce the start of a transaction on a connector."""

    connector_id: StrictInt
    id_tag: IdToken
    meter_start: StrictInt
    reservation_id: Optional[StrictInt] = None
    timestamp: DateTime


@json_validate("StartTransactionResponse.json")
class StartTransactionResponse(OcppMessage):
    id_tag_info: IdTagInfo
    transaction_id: StrictInt


@json_validate("StatusNotification.json")
class StatusNotificationRequest(OcppMessage):
    """Notify the central system about a connector status change."""

    connector_id: StrictInt
    error_code: ChargePointErrorCode
    info: Optional[CiString50] = None
    status: ChargePointStatus
    timestamp: Optional[DateTime] = None
    vendor_id: Optional[CiString255] = None
    vendor_error_code: Optional[CiString50] = None


@json_validate("StatusNotificationResponse.json")
class StatusNotificationResponse(OcppMessage):
    """Acknowledge a :class:`StatusNotificationRequest`."""


@json_validate("StopTransaction.json")
class StopTransactionRequest(OcppMessage):
    """Announce the end of a transaction, with optional transaction meter data."""

    id_tag: Optional[IdToken] = None
    meter_stop: StrictInt
    timestamp: DateTime
    transaction_id: StrictInt
    reason: Optional[Reason] = None
    transaction_data: Optional[List[MeterValue]] = None


@json_validate("StopTransactionResponse.json")
class StopTransactionResponse(OcppMessage):
    id_tag_info: Optional[IdTagInfo] = None


@json_validate("UnlockConnector.json")
class UnlockConnectorRequest(OcppMessage):
    connector_id: StrictInt


@json_validate("UnlockConnectorResponse.json")
class UnlockConnectorResponse(OcppMessage):
    status: UnlockStatus
