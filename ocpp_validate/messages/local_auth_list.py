"""Local authorization list management profile."""

from __future__ import annotations

from typing import List, Optional

from ocpp.v16.enums import UpdateStatus, UpdateType
from pydantic import StrictInt

from ..codegen import json_validate
from .base import OcppMessage
from .common import AuthorizationData


@json_validate("GetLocalListVersion.json")
class GetLocalListVersionRequest(OcppMessage):
    pass


@json_validate("GetLocalListVersionResponse.json")
class GetLocalListVersionResponse(OcppMessage):
    # 0 means no list is installed, -1 that local authorization is not supported.
    list_version: StrictInt


@json_validate("SendLocalList.json")
class SendLocalListRequest(OcppMessage):
    """Replace (Full) or patch (Differential) the charge point's local list."""

    list_version: StrictInt
    local_authorization_list: Optional[List[AuthorizationData]] = None
    update_type: UpdateType


@json_validate("SendLocalListResponse.json")
class SendLocalListResponse(OcppMessage):
    status: UpdateStatus
