"""Compiled JSON schema resources.

Schema documents ship inside the package (``ocpp_validate/schemas``) and are
never reloaded.  Each one is compiled at most once per process, on first use,
and the compiled validator is shared by every caller afterwards.
"""

from __future__ import annotations

import json
import logging
import threading
from importlib import resources
from typing import Any, Dict, Iterable, Iterator, List

from jsonschema import Draft4Validator
from jsonschema.exceptions import SchemaError, ValidationError
from jsonschema.protocols import Validator
from jsonschema.validators import validator_for

from .errors import SchemaLoadError

logger = logging.getLogger(__name__)

SCHEMA_PACKAGE = "ocpp_validate.schemas"

# Every embedded schema declares draft-04; message fields check their
# date-time and uri values against the same checker.
FORMAT_CHECKER = Draft4Validator.FORMAT_CHECKER


class SchemaRegistry:
    """Map schema resource names to compiled validators.

    Lookups of an already compiled schema are plain dict reads.  The first
    lookup of a resource takes a lock and re-checks, so concurrent first
    access compiles once and every caller receives the same validator.
    """

    def __init__(self, package: str = SCHEMA_PACKAGE) -> None:
        self.package = package
        self.compile_count = 0
        self._validators: Dict[str, Validator] = {}
        self._lock = threading.Lock()

    def get(self, resource: str) -> Validator:
        """Return the compiled validator for ``resource``, compiling it once."""
        validator = self._validators.get(resource)
        if validator is not None:
            return validator
        with self._lock:
            validator = self._validators.get(resource)
            if validator is None:
                validator = self._compile(resource)
                self._validators[resource] = validator
        return validator

    def preload(self, names: Iterable[str]) -> List[str]:
        """Compile ``names`` eagerly, e.g. during application startup."""
        loaded = []
        compiled = 0
        for resource in names:
            if not self.is_compiled(resource):
                self.get(resource)
                compiled += 1
            loaded.append(resource)
        logger.info(
            "Preloaded %d OCPP schemas from %s (%d newly compiled)", len(loaded), self.package, compiled
        )
        return loaded

    def is_compiled(self, resource: str) -> bool:
        return resource in self._validators

    def document(self, resource: str) -> Dict[str, Any]:
        """Return the parsed schema document behind ``resource``."""
        return self.get(resource).schema

    def iter_errors(self, resource: str, instance: Any) -> Iterator[ValidationError]:
        """Yield every violation of ``instance`` in the validator's own order."""
        return self.get(resource).iter_errors(instance)

    def load(self, resource: str) -> Dict[str, Any]:
        """Read and parse the embedded text of ``resource``."""
        try:
            text = resources.files(self.package).joinpath(resource).read_text(encoding="utf-8")
        except (FileNotFoundError, IsADirectoryError, ModuleNotFoundError) as exc:
            raise SchemaLoadError(resource, f"resource not found in {self.package}") from exc
        try:
            document = json.loads(text)
        except json.JSONDecodeError as exc:
            raise SchemaLoadError(resource, f"Invalid Schema File Format: {exc}") from exc
        if not isinstance(document, dict):
            raise SchemaLoadError(resource, "schema document must be a JSON object")
        return document

    def _compile(self, resource: str) -> Validator:
        document = self.load(resource)
        validator_cls = validator_for(document)
        try:
            validator_cls.check_schema(document)
        except SchemaError as exc:
            raise SchemaLoadError(resource, exc.message) from exc
        self.compile_count += 1
        logger.debug("Compiled schema %s with %s", resource, validator_cls.__name__)
        return validator_cls(document, format_checker=validator_cls.FORMAT_CHECKER)


registry = SchemaRegistry()
