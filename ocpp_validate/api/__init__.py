"""HTTP API exposing the message catalog and its two validation paths."""

import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Type

from fastapi import Body, Depends, FastAPI, Header, HTTPException, Request
from pydantic import ValidationError

from .. import schema
from ..builder import format_validation_errors
from ..errors import UnknownMessageError
from ..messages import CATALOG, OcppMessage, iter_messages, lookup
from ..settings import Settings, get_settings
from ..validate import validate_document
from .models import ComparisonReport, MessageInfo, ValidationReport

logger = logging.getLogger(__name__)


def catalog_resources() -> List[str]:
    return [cls.__schema_resource__ for cls in iter_messages() if cls.__schema_resource__]


@asynccontextmanager
async def lifespan(app: FastAPI):
    if get_settings().preload_schemas:
        schema.registry.preload(catalog_resources())
    yield


app = FastAPI(title="OCPP 1.6 Validation API", version="1.0.0", lifespan=lifespan)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    logger.info(">>> %s %s", request.method, request.url.path)
    try:
        response = await call_next(request)
    except Exception:
        logger.exception("Handler crashed")
        raise
    logger.info("<<< %s %s -> %s", request.method, request.url.path, response.status_code)
    return response


def require_key(
    x_api_key: Optional[str] = Header(default=None),
    settings: Settings = Depends(get_settings),
) -> None:
    if settings.api_key and x_api_key != settings.api_key:
        raise HTTPException(status_code=401, detail="invalid api key")


def _resolve(action: str, direction: str) -> Type[OcppMessage]:
    try:
        return lookup(action, direction)
    except UnknownMessageError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc


@app.get("/api/v1/health")
def health():
    return {"ok": True, "time": datetime.now(timezone.utc).isoformat()}


@app.get("/api/v1/messages", response_model=List[MessageInfo], dependencies=[Depends(require_key)])
def list_messages() -> List[MessageInfo]:
    return [
        MessageInfo(
            action=pair.action,
            profile=pair.profile,
            request=pair.request.__name__,
            response=pair.response.__name__,
            request_schema=pair.request.__schema_resource__,
            response_schema=pair.response.__schema_resource__,
        )
        for pair in CATALOG.values()
    ]


@app.get("/api/v1/messages/{action}/{direction}/schema", dependencies=[Depends(require_key)])
def get_schema(action: str, direction: str) -> Dict[str, Any]:
    cls = _resolve(action, direction)
    return schema.registry.document(cls.__schema_resource__)


@app.post(
    "/api/v1/messages/{action}/{direction}/validate",
    response_model=ValidationReport,
    dependencies=[Depends(require_key)],
)
def validate_payload(action: str, direction: str, payload: Dict[str, Any] = Body(...)) -> ValidationReport:
    cls = _resolve(action, direction)
    errors = validate_document(cls.__schema_resource__, payload)
    if errors:
        logger.info("%s rejected by %s: %s", cls.__name__, cls.__schema_resource__, errors)
    return ValidationReport(action=action, direction=direction, valid=not errors, errors=errors)


@app.post(
    "/api/v1/messages/{action}/{direction}/compare",
    response_model=ComparisonReport,
    dependencies=[Depends(require_key)],
)
def compare_payload(action: str, direction: str, payload: Dict[str, Any] = Body(...)) -> ComparisonReport:
    cls = _resolve(action, direction)
    builder_errors: List[str] = []
    try:
        cls.from_document(payload)
    except ValidationError as exc:
        builder_errors = format_validation_errors(exc)
    schema_errors = validate_document(cls.__schema_resource__, payload)
    report = ComparisonReport(
        action=action,
        direction=direction,
        builder_valid=not builder_errors,
        schema_valid=not schema_errors,
        agrees=(not builder_errors) == (not schema_errors),
        builder_errors=builder_errors,
        schema_errors=schema_errors,
    )
    if not report.agrees:
        logger.warning("Builder and schema disagree on %s: %s", cls.__name__, report)
    return report
