"""Remote trigger profile."""

from __future__ import annotations

from typing import Optional

from ocpp.v16.enums import MessageTrigger, TriggerMessageStatus
from pydantic import StrictInt

from ..codegen import json_validate
from .base import OcppMessage


@json_validate("TriggerMessage.json")
class TriggerMessageRequest(OcppMessage):
    """Ask the charge point to send ``requested_message``, for one connector if given."""

    requested_message: MessageTrigger
    connector_id: Optional[StrictInt] = None


@json_validate("TriggerMessageResponse.json")
class TriggerMessageResponse(OcppMessage):
    status: TriggerMessageStatus
