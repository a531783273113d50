"""OCPP 1.6 message catalog, grouped by feature profile."""

from __future__ import annotations

from types import ModuleType
from typing import Dict, Iterator, NamedTuple, Type

from ..codegen import message_pair
from ..errors import UnknownMessageError
from . import core, firmware_management, local_auth_list, remote_trigger, smart_charging
from .base import OcppMessage, OcppRecord

PROFILES: Dict[str, ModuleType] = {
    "core": core,
    "firmware_management": firmware_management,
    "local_auth_list": local_auth_list,
    "smart_charging": smart_charging,
    "remote_trigger": remote_trigger,
}

DIRECTIONS = ("request", "response")


class MessagePair(NamedTuple):
    action: str
    profile: str
    request: Type[OcppMessage]
    response: Type[OcppMessage]

    def get(self, direction: str) -> Type[OcppMessage]:
        if direction not in DIRECTIONS:
            raise UnknownMessageError(f"direction must be one of {DIRECTIONS}, not {direction!r}")
        return self.request if direction == "request" else self.response


def _collect() -> Dict[str, MessagePair]:
    catalog = {}
    for profile, module in PROFILES.items():
        for name, obj in vars(module).items():
            if not (isinstance(obj, type) and issubclass(obj, OcppMessage)):
                continue
            if obj.__module__ != module.__name__ or not name.endswith("Request"):
                continue
            response = getattr(module, name[: -len("Request")] + "Response")
            action = message_pair(obj, response)
            catalog[action] = MessagePair(action, profile, obj, response)
    return dict(sorted(catalog.items()))


CATALOG: Dict[str, MessagePair] = _collect()


def lookup(action: str, direction: str = "request") -> Type[OcppMessage]:
    """Return the message class for ``action`` in ``direction``."""
    try:
        pair = CATALOG[action]
    except KeyError:
        raise UnknownMessageError(f"Unknown OCPP 1.6 action: {action!r}") from None
    return pair.get(direction)


def find(class_name: str) -> Type[OcppMessage]:
    """Return the catalog class called ``class_name`` (e.g. ``ResetRequest``)."""
    for cls in iter_messages():
        if cls.__name__ == class_name:
            return cls
    raise UnknownMessageError(f"Unknown OCPP 1.6 message class: {class_name!r}")


def iter_messages() -> Iterator[Type[OcppMessage]]:
    """Yield every request and response class in the catalog."""
    for pair in CATALOG.values():
        yield pair.request
        yield pair.response


__all__ = [
    "CATALOG",
    "DIRECTIONS",
    "MessagePair",
    "OcppMessage",
    "OcppRecord",
    "PROFILES",
    "find",
    "iter_messages",
    "lookup",
]
