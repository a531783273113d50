"""Validator trait for structures that have an associated JSON schema."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, ClassVar, List, Optional

from jsonschema.exceptions import ValidationError

from . import schema
from .errors import JsonValidateError

logger = logging.getLogger(__name__)


def format_error(error: ValidationError) -> str:
    """Render one validator error as ``"<json path>: <message>"``."""
    return f"{error.json_path}: {error.message}"


def validate_document(resource: str, document: Any) -> List[str]:
    """Validate a raw wire document against ``resource``.

    Returns every violation, in the validator's order.  An empty list means
    the document is valid.
    """
    return [format_error(error) for error in schema.registry.iter_errors(resource, document)]


class JsonValidate(ABC):
    """Trait for structures that can be validated against a schema.

    Implementors provide :meth:`to_document`, the structural (JSON) form of the
    instance.  The schema itself is bound per class through
    ``__schema_resource__``, normally by the
    :func:`~ocpp_validate.codegen.json_validate` decorator.  A class with no
    bound schema always validates.
    """

    __schema_resource__: ClassVar[Optional[str]] = None

    @abstractmethod
    def to_document(self) -> Any:
        """Return the wire document that the schema applies to."""

    def schema_errors(self) -> List[str]:
        """Return every schema violation of this instance (empty if valid)."""
        resource = type(self).__schema_resource__
        if resource is None:
            return []
        return validate_document(resource, self.to_document())

    def schema_validate(self) -> None:
        """Validate this instance against its schema.

        Raises :class:`JsonValidateError` carrying the full violation list.
        """
        name = type(self).__name__
        if type(self).__schema_resource__ is None:
            logger.debug("%s has no bound schema, nothing to validate", name)
            return
        errors = self.schema_errors()
        if errors:
            logger.warning("Validate failed on %s %r, with errors: %s", name, self, errors)
            raise JsonValidateError(errors)
        logger.debug("Successfully validated %s %r", name, self)

    def is_schema_valid(self) -> bool:
        try:
            self.schema_validate()
        except JsonValidateError:
            return False
        return True
