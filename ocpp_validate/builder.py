"""Staged construction of OCPP messages.

Builders are generated per message class by :mod:`ocpp_validate.codegen`;
this module holds the behaviour they share.  Setters only record values.
Constraints are checked when the message is finalized:

* :meth:`Builder.pre_build` checks required fields and the model's field
  constraints;
* :meth:`Builder.build` additionally requires the result to pass its JSON
  schema.
"""

from __future__ import annotations

from typing import Any, ClassVar, Dict, List, Tuple, Type

from pydantic import BaseModel, ValidationError

from .errors import BuilderConsumedError, FieldConstraintError, UninitializedFieldError


def format_validation_errors(exc: ValidationError) -> List[str]:
    """Flatten a pydantic ``ValidationError`` into ``"<loc>: <msg>"`` lines."""
    lines = []
    for error in exc.errors():
        loc = ".".join(str(part) for part in error["loc"]) or "<root>"
        lines.append(f"{loc}: {error['msg']}")
    return lines


class Builder:
    """Base class of every generated ``<Message>Builder``."""

    __model__: ClassVar[Type[BaseModel]]
    __fields__: ClassVar[Tuple[str, ...]] = ()
    __required__: ClassVar[Tuple[str, ...]] = ()

    __slots__ = ("_values", "_consumed")

    def __init__(self) -> None:
        self._values: Dict[str, Any] = {}
        self._consumed = False

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._values!r})"

    def _set(self, name: str, value: Any) -> "Builder":
        self._values[name] = value
        return self

    @property
    def values(self) -> Dict[str, Any]:
        """Copy of the slots set so far."""
        return dict(self._values)

    @property
    def consumed(self) -> bool:
        return self._consumed

    def missing(self) -> List[str]:
        """Required fields whose slot is empty."""
        return [name for name in self.__required__ if self._values.get(name) is None]

    def pre_build(self) -> Any:
        """Assemble the message and apply its field-level constraints."""
        missing = self.missing()
        if missing:
            raise UninitializedFieldError(missing)
        try:
            return self.__model__.model_validate(self._values)
        except ValidationError as exc:
            raise FieldConstraintError(format_validation_errors(exc)) from exc

    def build(self) -> Any:
        """Finalize the message: field constraints plus schema validation."""
        if self._consumed:
            raise BuilderConsumedError(f"{type(self).__name__} was already used to build a message")
        self._consumed = True
        message = self.pre_build()
        message.schema_validate()
        return message
