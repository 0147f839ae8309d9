"""
Pydantic models for instrument data.

``InstrumentBase`` holds the fields shared by every payload.
``InstrumentCreate`` is the request body for creation (any ``id`` the
client sends is ignored, the store assigns one), ``InstrumentUpdate``
is the full replacement body for updates and must carry the ``id`` of
the instrument being replaced, and ``InstrumentRead`` is what the API
returns.

Monetary values are handled as ``Decimal`` internally and rendered as
plain JSON numbers.
"""

from decimal import Decimal
from enum import Enum
from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer


class InstrumentType(str, Enum):
    """Closed set of instrument classifications."""

    PERCUSSION = "Percussion"
    STRING = "String"
    WIND = "Wind"
    KEYBOARD = "Keyboard"
    ELECTRONIC = "Electronic"


_as_json_number = PlainSerializer(float, return_type=float, when_used="json")

# Price of a single instrument.
Money = Annotated[Decimal, Field(ge=0, max_digits=12, decimal_places=2), _as_json_number]

# Unbounded sum of prices.  Only used to document the aggregate response;
# the endpoint writes the exact decimal text itself.
MoneyTotal = Annotated[Decimal, _as_json_number]


class InstrumentBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=200, examples=["Drum"])
    description: Optional[str] = Field(None, max_length=2000, examples=["Snare drum, 14 inch"])
    type: InstrumentType = Field(..., examples=[InstrumentType.PERCUSSION])
    value: Money = Field(..., examples=[150.00])


class InstrumentCreate(InstrumentBase):
    """Schema for creating an instrument."""

    model_config = ConfigDict(extra="ignore")


class InstrumentUpdate(InstrumentBase):
    """Schema for replacing an instrument.

    ``id`` must match the identifier in the request path.
    """

    id: int


class InstrumentRead(InstrumentBase):
    """Schema for reading an instrument from the API."""

    id: int

    model_config = ConfigDict(from_attributes=True)
