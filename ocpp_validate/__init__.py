"""OCPP 1.6 message catalog with builder and JSON schema validation."""

from .builder import Builder
from .codegen import json_validate, message_pair
from .compare import Comparison, compare_build, test_build
from .errors import (
    BuilderConsumedError,
    FieldConstraintError,
    JsonValidateError,
    OcppError,
    SchemaLoadError,
    UninitializedFieldError,
    UnknownMessageError,
)
from .messages import CATALOG, find, lookup
from .schema import SchemaRegistry, registry
from .validate import JsonValidate, validate_document

__version__ = "1.0.0"

__all__ = [
    "Builder",
    "BuilderConsumedError",
    "CATALOG",
    "Comparison",
    "FieldConstraintError",
    "JsonValidate",
    "JsonValidateError",
    "OcppError",
    "SchemaLoadError",
    "SchemaRegistry",
    "UninitializedFieldError",
    "UnknownMessageError",
    "compare_build",
    "find",
    "json_validate",
    "lookup",
    "message_pair",
    "registry",
    "test_build",
    "validate_document",
]
