"""Firmware management profile: diagnostics upload and firmware update."""

from __future__ import annotations

from typing import Optional

from ocpp.v16.enums import DiagnosticsStatus, FirmwareStatus
from pydantic import StrictInt

from ..codegen import json_validate
from .base import CiString255, DateTime, OcppMessage, Uri


@json_validate("GetDiagnostics.json")
class GetDiagnosticsRequest(OcppMessage):
    """Ask the charge point to upload a diagnostics file to ``location``, a URI."""

    location: Uri
    retries: Optional[StrictInt] = None
    retry_interval: Optional[StrictInt] = None
    start_time: Optional[DateTime] = None
    stop_time: Optional[DateTime] = None


@json_validate("GetDiagnosticsResponse.json")
class GetDiagnosticsResponse(OcppMessage):
    file_name: Optional[CiString255] = None


@json_validate("DiagnosticsStatusNotification.json")
class DiagnosticsStatusNotificationRequest(OcppMessage):
    status: DiagnosticsStatus


@json_validate("DiagnosticsStatusNotificationResponse.json")
class DiagnosticsStatusNotificationResponse(OcppMessage):
    pass


@json_validate("FirmwareStatusNotification.json")
class FirmwareStatusNotificationRequest(OcppMessage):
    status: FirmwareStatus


@json_validate("FirmwareStatusNotificationResponse.json")
class FirmwareStatusNotificationResponse(OcppMessage):
    pass


@json_validate("UpdateFirmware.json")
class UpdateFirmwareRequest(OcppMessage):
    """Instruct the charge point to download and install new firmware after ``retrieve_date``."""

    location: Uri
    retries: Optional[StrictInt] = None
    retrieve_date: DateTime
    retry_interval: Optional[StrictInt] = None


@json_validate("UpdateFirmwareResponse.json")
class UpdateFirmwareResponse(OcppMessage):
    pass
