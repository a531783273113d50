"""Records and enums shared by several messages.

Status enums come from :mod:`ocpp.v16.enums`.  The sampled value enums are
kept here because their value sets follow this catalog's MeterValues schema,
which accepts both the erratum spelling ``Celsius`` and the legacy
``Celcius``.
"""

from __future__ import annotations

from enum import Enum
from typing import List, Optional

from ocpp.v16.enums import (
    AuthorizationStatus,
    ChargingProfileKindType,
    ChargingProfilePurposeType,
    ChargingRateUnitType,
    RecurrencyKind,
)
from pydantic import StrictBool, StrictInt, StrictStr

from .base import ChargingRate, CiString50, CiString500, DateTime, IdToken, OcppRecord


class ReadingContext(str, Enum):
    """Values of the context field of a value in SampledValue."""

    interruption_begin = "Interruption.Begin"
    interruption_end = "Interruption.End"
    other = "Other"
    sample_clock = "Sample.Clock"
    sample_periodic = "Sample.Periodic"
    transaction_begin = "Transaction.Begin"
    transaction_end = "Transaction.End"
    trigger = "Trigger"


class ValueFormat(str, Enum):
    raw = "Raw"
    signed_data = "SignedData"


class Measurand(str, Enum):
    """Allowable values of the optional measurand field of a SampledValue."""

    energy_active_export_register = "Energy.Active.Export.Register"
    energy_active_import_register = "Energy.Active.Import.Register"
    energy_reactive_export_register = "Energy.Reactive.Export.Register"
    energy_reactive_import_register = "Energy.Reactive.Import.Register"
    energy_active_export_interval = "Energy.Active.Export.Interval"
    energy_active_import_interval = "Energy.Active.Import.Interval"
    energy_reactive_export_interval = "Energy.Reactive.Export.Interval"
    energy_reactive_import_interval = "Energy.Reactive.Import.Interval"
    power_active_export = "Power.Active.Export"
    power_active_import = "Power.Active.Import"
    power_offered = "Power.Offered"
    power_reactive_export = "Power.Reactive.Export"
    power_reactive_import = "Power.Reactive.Import"
    power_factor = "Power.Factor"
    current_import = "Current.Import"
    current_export = "Current.Export"
    current_offered = "Current.Offered"
    voltage = "Voltage"
    frequency = "Frequency"
    temperature = "Temperature"
    soc = "SoC"
    rpm = "RPM"


class Phase(str, Enum):
    l1 = "L1"
    l2 = "L2"
    l3 = "L3"
    n = "N"
    l1_n = "L1-N"
    l2_n = "L2-N"
    l3_n = "L3-N"
    l1_l2 = "L1-L2"
    l2_l3 = "L2-L3"
    l3_l1 = "L3-L1"


class Location(str, Enum):
    body = "Body"
    cable = "Cable"
    ev = "EV"
    inlet = "Inlet"
    outlet = "Outlet"


class UnitOfMeasure(str, Enum):
    """Unit of a sampled value.  Defaults to Wh for energy measurands."""

    wh = "Wh"
    kwh = "kWh"
    varh = "varh"
    kvarh = "kvarh"
    w = "W"
    kw = "kW"
    va = "VA"
    kva = "kVA"
    var = "var"
    kvar = "kvar"
    a = "A"
    v = "V"
    k = "K"
    celcius = "Celcius"
    celsius = "Celsius"
    fahrenheit = "Fahrenheit"
    percent = "Percent"


class IdTagInfo(OcppRecord):
    """Status information about an identifier."""

    expiry_date: Optional[DateTime] = None
    parent_id_tag: Optional[IdToken] = None
    status: AuthorizationStatus


class AuthorizationData(OcppRecord):
    """One entry of a local authorization list."""

    id_tag: IdToken
    id_tag_info: Optional[IdTagInfo] = None


class SampledValue(OcppRecord):
    # Field type is string to allow for digitally signed data readings.
    value: StrictStr
    context: Optional[ReadingContext] = None
    format: Optional[ValueFormat] = None
    measurand: Optional[Measurand] = None
    phase: Optional[Phase] = None
    location: Optional[Location] = None
    unit: Optional[UnitOfMeasure] = None


class MeterValue(OcppRecord):
    """One or more sampled values, all sampled at the same time."""

    timestamp: DateTime
    sampled_value: List[SampledValue]


class ChargingSchedulePeriod(OcppRecord):
    start_period: StrictInt
    limit: ChargingRate
    number_phases: Optional[StrictInt] = None


class ChargingSchedule(OcppRecord):
    """A list of charging periods, with the unit their limits are expressed in."""

    duration: Optional[StrictInt] = None
    start_schedule: Optional[DateTime] = None
    charging_rate_unit: ChargingRateUnitType
    charging_schedule_period: List[ChargingSchedulePeriod]
    min_charging_rate: Optional[ChargingRate] = None


class ChargingProfile(OcppRecord):
    """A charging schedule together with its purpose, kind and validity."""

    charging_profile_id: StrictInt
    transaction_id: Optional[StrictInt] = None
    stack_level: StrictInt
    charging_profile_purpose: ChargingProfilePurposeType
    charging_profile_kind: ChargingProfileKindType
    recurrency_kind: Optional[RecurrencyKind] = None
    valid_from: Optional[DateTime] = None
    valid_to: Optional[DateTime] = None
    charging_schedule: ChargingSchedule


class KeyValue(OcppRecord):
    """A configuration key as reported by GetConfiguration."""

    key: CiString50
    readonly: StrictBool
    value: Optional[CiString500] = None
