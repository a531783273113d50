"""Compare the builder path with the schema path for one message instance.

A message class's builder is meant to restate its JSON schema.  For a given
candidate instance the builder must accept it exactly when the schema does.
:func:`compare_build` runs both checks and keeps both verdicts so a
disagreement can be diagnosed.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any, List, Type

from pydantic_core import PydanticSerializationError

from .errors import FieldConstraintError, JsonValidateError, OcppError, UninitializedFieldError

logger = logging.getLogger(__name__)


@dataclass
class Comparison:
    model: Type[Any]
    candidate: Any
    builder_ok: bool
    schema_ok: bool
    builder_errors: List[str] = field(default_factory=list)
    schema_errors: List[str] = field(default_factory=list)

    @property
    def agrees(self) -> bool:
        return self.builder_ok == self.schema_ok

    def describe(self) -> str:
        try:
            document = json.dumps(self.candidate.to_document(), default=str, sort_keys=True)
        except (PydanticSerializationError, TypeError, ValueError) as exc:
            document = f"<unserializable: {exc}>"
        verdict = {True: "accepted", False: "rejected"}
        return "\n".join(
            [
                f"{self.model.__name__}: {'agree' if self.agrees else 'DIVERGE'}",
                f"  document: {document}",
                f"  builder {verdict[self.builder_ok]}: {self.builder_errors}",
                f"  schema  {verdict[self.schema_ok]}: {self.schema_errors}",
            ]
        )


def _error_lines(exc: OcppError) -> List[str]:
    if isinstance(exc, (FieldConstraintError, JsonValidateError)):
        return list(exc.errors)
    if isinstance(exc, UninitializedFieldError):
        return [f"{name}: missing" for name in exc.fields]
    return [str(exc)]


def has_schema(model: Type[Any]) -> bool:
    return getattr(model, "__schema_resource__", None) is not None


def compare_build(candidate: Any) -> Comparison:
    """Run ``candidate`` through its builder and through its schema."""
    model = type(candidate)
    builder_ok, builder_errors = True, []
    try:
        model.Builder.feed(candidate).build()
    except OcppError as exc:
        builder_ok, builder_errors = False, _error_lines(exc)

    schema_ok, schema_errors = True, []
    try:
        candidate.schema_validate()
    except JsonValidateError as exc:
        schema_ok, schema_errors = False, list(exc.errors)

    comparison = Comparison(
        model=model,
        candidate=candidate,
        builder_ok=builder_ok,
        schema_ok=schema_ok,
        builder_errors=builder_errors,
        schema_errors=schema_errors,
    )
    if not comparison.agrees:
        logger.warning("Builder and schema disagree\n%s", comparison.describe())
    return comparison


def test_build(candidate: Any) -> bool:
    """True when the builder and the schema agree on ``candidate``."""
    return compare_build(candidate).agrees


# pytest would otherwise try to collect the oracle from modules that import it.
test_build.__test__ = False
