"""Generation of schema bindings and builders for message classes.

``@json_validate("<Resource>.json")`` is applied once to each message class
when it is defined.  It binds the class to its embedded schema resource and
generates the companion ``<ClassName>Builder``.  The builder is assembled with
``type()`` from a :class:`BuilderSpec`, which depends only on the class name
and its declared fields: one setter per field plus a ``feed`` classmethod.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterator, List, Tuple, Type, TypeVar

from pydantic import BaseModel

from .builder import Builder
from .validate import JsonValidate

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=Type[BaseModel])

# Names a generated setter may not take, they belong to Builder itself.
RESERVED_NAMES = frozenset(
    name for name in dir(Builder) if not name.startswith("__")
) | {"feed"}

_generated: List[Type[BaseModel]] = []


@dataclass(frozen=True)
class BuilderSpec:
    """Everything a generated builder depends on."""

    name: str
    model_name: str
    fields: Tuple[str, ...]
    required: Tuple[str, ...]


def builder_spec(model: Type[BaseModel]) -> BuilderSpec:
    fields = tuple(model.model_fields)
    required = tuple(name for name, info in model.model_fields.items() if info.is_required())
    clashes = sorted(set(fields) & RESERVED_NAMES)
    if clashes:
        raise TypeError(f"{model.__name__} has fields that clash with builder methods: {clashes}")
    return BuilderSpec(
        name=f"{model.__name__}Builder",
        model_name=model.__name__,
        fields=fields,
        required=required,
    )


def _setter(owner: str, field: str) -> Callable[[Builder, Any], Builder]:
    def setter(self: Builder, value: Any) -> Builder:
        return self._set(field, value)

    setter.__name__ = field
    setter.__qualname__ = f"{owner}.{field}"
    setter.__doc__ = f"Set ``{field}``; the value is checked when the message is built."
    return setter


def _feed(owner: str, fields: Tuple[str, ...]) -> classmethod:
    def feed(cls: Type[Builder], candidate: Any) -> Builder:
        builder = cls()
        for field in fields:
            getattr(builder, field)(getattr(candidate, field, None))
        return builder

    feed.__qualname__ = f"{owner}.feed"
    feed.__doc__ = "Copy every field of ``candidate`` into a fresh builder, unset ones as None."
    return classmethod(feed)


def builder_namespace(spec: BuilderSpec) -> Dict[str, Any]:
    """Class body of the builder described by ``spec``."""
    namespace: Dict[str, Any] = {
        "__doc__": f"Builder for :class:`{spec.model_name}`.",
        "__slots__": (),
        "__fields__": spec.fields,
        "__required__": spec.required,
    }
    for field in spec.fields:
        namespace[field] = _setter(spec.name, field)
    namespace["feed"] = _feed(spec.name, spec.fields)
    return namespace


def generate_builder(model: Type[BaseModel]) -> Type[Builder]:
    """Create the builder class for ``model``."""
    spec = builder_spec(model)
    namespace = builder_namespace(spec)
    namespace["__module__"] = model.__module__
    namespace["__qualname__"] = spec.name
    namespace["__model__"] = model
    return type(spec.name, (Builder,), namespace)


def json_validate(resource: str) -> Callable[[M], M]:
    """Bind a message class to ``resource`` and generate its builder.

    The generated builder is attached as ``cls.Builder`` and exported from the
    class's module as ``<ClassName>Builder``.
    """

    def decorate(cls: M) -> M:
        if not issubclass(cls, JsonValidate):
            raise TypeError(f"{cls.__name__} must implement JsonValidate to bind a schema")
        cls.__schema_resource__ = resource
        builder = generate_builder(cls)
        cls.Builder = builder
        module = sys.modules.get(cls.__module__)
        if module is not None:
            setattr(module, builder.__name__, builder)
        _generated.append(cls)
        logger.debug("Generated %s bound to %s", builder.__name__, resource)
        return cls

    return decorate


def message_pair(request: Type[BaseModel], response: Type[BaseModel]) -> str:
    """Return the action name shared by a ``<Name>Request``/``<Name>Response`` pair."""
    req_name, res_name = request.__name__, response.__name__
    if not req_name.endswith("Request") or not res_name.endswith("Response"):
        raise TypeError(f"{req_name}/{res_name} do not follow the <Name>Request/<Name>Response convention")
    action = req_name[: -len("Request")]
    if res_name[: -len("Response")] != action:
        raise TypeError(f"{req_name} and {res_name} belong to different actions")
    return action


def iter_generated() -> Iterator[Type[BaseModel]]:
    """Yield every class decorated with :func:`json_validate`, in definition order."""
    return iter(list(_generated))
