"""OCPP 1.6 MeterValues request models."""

from __future__ import annotations

import datetime
from enum import Enum
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt, StrictStr


class Measurand(str, Enum):
    """Measurands the extractor knows; everything else is OTHER."""
    CURRENT_IMPORT = "Current.Import"
    CURRENT_OFFERED = "Current.Offered"
    POWER_OFFERED = "Power.Offered"
    POWER_ACTIVE_IMPORT = "Power.Active.Import"
    VOLTAGE = "Voltage"
    OTHER = "Other"

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            # Accept 'CurrentImport' as well as 'Current.Import'
            compact = value.replace(".", "")
            for member in cls:
                if member.value.replace(".", "") == compact:
                    return member
        return cls.OTHER


class Phase(str, Enum):
    """Phases the extractor knows; 'N', 'L1-N', 'L1-L2'... are OTHER."""
    L1 = "L1"
    L2 = "L2"
    L3 = "L3"
    OTHER = "Other"

    @classmethod
    def _missing_(cls, value):
        return cls.OTHER


class SampledValue(BaseModel):
    value: Union[StrictStr, StrictInt, StrictFloat]
    context: Optional[str] = None
    format: Optional[str] = None
    measurand: Optional[Measurand] = None
    phase: Optional[Phase] = None
    location: Optional[str] = None
    unit: Optional[str] = None


class MeterValue(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    timestamp: datetime.datetime
    sampled_value: List[SampledValue] = Field(alias="sampledValue")


class MeterValuesRequest(BaseModel):
    """Payload of an OCPP 1.6 MeterValues.req."""
    model_config = ConfigDict(populate_by_name=True)

    connector_id: Optional[int] = Field(default=None, alias="connectorId")
    transaction_id: Optional[int] = Field(default=None, alias="transactionId")
    meter_value: List[MeterValue] = Field(alias="meterValue")
