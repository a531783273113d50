"""Base classes and field types shared by every OCPP 1.6 message."""

from __future__ import annotations

import math
import re
from datetime import datetime, timedelta
from fractions import Fraction
from typing import Annotated, Any, Callable, ClassVar, Dict, Type

from pydantic import AfterValidator, BaseModel, BeforeValidator, ConfigDict, StrictFloat, StrictStr, StringConstraints
from pydantic.alias_generators import to_camel

from ..builder import Builder
from ..compare import test_build as compare_test_build
from ..schema import FORMAT_CHECKER
from ..validate import JsonValidate

# Case-insensitive bounded strings, named as in OCPP 1.6.
CiString20 = Annotated[str, StringConstraints(strict=True, max_length=20)]
CiString25 = Annotated[str, StringConstraints(strict=True, max_length=25)]
CiString50 = Annotated[str, StringConstraints(strict=True, max_length=50)]
CiString255 = Annotated[str, StringConstraints(strict=True, max_length=255)]
CiString500 = Annotated[str, StringConstraints(strict=True, max_length=500)]
IdToken = CiString20

_FRACTION = re.compile(r"\.(\d+)")


def wire_datetime(value: Any) -> datetime:
    """Accept what the schema's ``date-time`` format accepts.

    Strings must pass the same RFC 3339 check the compiled schemas use.
    Datetimes must carry a whole-minute UTC offset so they serialize to such a
    string.  Anything else, epoch numbers included, is rejected.
    """
    if isinstance(value, datetime):
        offset = value.utcoffset()
        if offset is None:
            raise ValueError("datetime must carry a UTC offset")
        if offset % timedelta(minutes=1):
            raise ValueError(f"UTC offset {offset} is not expressible in RFC 3339")
        return value
    if not isinstance(value, str):
        raise ValueError("Input should be an RFC 3339 date-time string")
    if not FORMAT_CHECKER.conforms(value, "date-time"):
        raise ValueError(f"{value!r} is not a 'date-time'")
    text = value.upper().replace("Z", "+00:00")
    # fromisoformat takes at most six fraction digits
    text = _FRACTION.sub(lambda match: "." + match.group(1)[:6].ljust(6, "0"), text)
    return datetime.fromisoformat(text)


def wire_uri(value: str) -> str:
    if not FORMAT_CHECKER.conforms(value, "uri"):
        raise ValueError(f"{value!r} is not a 'uri'")
    return value


def multiple_of(step: float) -> Callable[[float], float]:
    """Check ``multipleOf`` with the float arithmetic jsonschema uses."""

    def check(value: float) -> float:
        if not math.isfinite(value):
            raise ValueError(f"{value!r} is not a finite number")
        quotient = value / step
        try:
            failed = int(quotient) != quotient
        except OverflowError:
            failed = (Fraction(value) / Fraction(step)).denominator != 1
        if failed:
            raise ValueError(f"{value!r} is not a multiple of {step}")
        return value

    return check


DateTime = Annotated[datetime, BeforeValidator(wire_datetime)]
Uri = Annotated[StrictStr, AfterValidator(wire_uri)]
# Charging rates and limits, in A or W, with one decimal place.
ChargingRate = Annotated[StrictFloat, AfterValidator(multiple_of(0.1))]


class OcppRecord(BaseModel):
    """A record nested inside a message payload.

    Fields are snake_case in Python and lowerCamelCase on the wire.  Instances
    are re-validated whenever they are placed into another model, so a record
    created with ``model_construct`` cannot smuggle invalid values into a
    message.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        validate_by_alias=True,
        validate_by_name=True,
        revalidate_instances="always",
        extra="forbid",
    )


class OcppMessage(OcppRecord, JsonValidate):
    """One OCPP request or response PDU."""

    Builder: ClassVar[Type[Builder]]

    def to_document(self) -> Dict[str, Any]:
        """Serialize to the wire document; unset optional fields are omitted."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True, warnings=False)

    @classmethod
    def from_document(cls, payload: Dict[str, Any]) -> "OcppMessage":
        """Parse a wire document into a message.

        Only the lowerCamelCase wire names are accepted here; the snake_case
        field names are for Python callers and builders.
        """
        return cls.model_validate(payload, by_alias=True, by_name=False)

    @classmethod
    def builder(cls) -> Builder:
        return cls.Builder()

    @classmethod
    def test_build(cls, candidate: "OcppMessage") -> bool:
        """True when this class's builder and schema agree on ``candidate``."""
        if not isinstance(candidate, cls):
            raise TypeError(f"expected a {cls.__name__}, got {type(candidate).__name__}")
        return compare_test_build(candidate)
