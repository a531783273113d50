"""Errors raised while building or validating OCPP messages.

Every runtime failure derives from :class:`OcppError`.  :class:`SchemaLoadError`
is outside that hierarchy: a schema resource that cannot be loaded or compiled
stops the process.
"""

from __future__ import annotations

from typing import Iterable, List, Tuple


class OcppError(Exception):
    """Base class for errors related to building an OCPP object."""


class UninitializedFieldError(OcppError):
    """Required builder slots were never set (or were set to ``None``)."""

    def __init__(self, fields: Iterable[str]) -> None:
        self.fields: Tuple[str, ...] = tuple(fields)
        super().__init__(f"Field missing from builder: {', '.join(self.fields)}")


class FieldConstraintError(OcppError):
    """A value given to a builder violates a declared field constraint."""

    def __init__(self, errors: Iterable[str]) -> None:
        self.errors: List[str] = list(errors)
        super().__init__(f"Struct is invalid: {self.errors}")


class JsonValidateError(OcppError):
    """A serialized message failed validation against its JSON schema."""

    def __init__(self, errors: Iterable[str]) -> None:
        self.errors: List[str] = list(errors)
        if not self.errors:
            raise ValueError("a schema validation failure must name at least one violation")
        super().__init__(f"Validation Error: {self.errors}")


class BuilderConsumedError(OcppError):
    """``build()`` was called on a builder that already built a message."""


class UnknownMessageError(OcppError, LookupError):
    """No message class is registered for the requested action or name."""


class SchemaLoadError(RuntimeError):
    """An embedded schema resource is missing, malformed or not a valid schema."""

    def __init__(self, resource: str, reason: str) -> None:
        self.resource = resource
        self.reason = reason
        super().__init__(f"Invalid Schema File: {resource}: {reason}")
