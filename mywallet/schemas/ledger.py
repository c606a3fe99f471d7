"""
mywallet/schemas/ledger.py

Pydantic schemas for the wallet ledger.

- EntryCreate: body of POST /balance ({value, title, type})
- EntryRead: one line of GET /balance, with the amount rendered as a
  two-decimal string and the date as DD/MM
"""

import datetime
from decimal import Decimal, ROUND_HALF_UP
from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from mywallet.models.ledger import EntryKind

TWO_PLACES = Decimal("0.01")


def to_cents(value: Decimal) -> Decimal:
    """
    Round a monetary amount half-up to exactly two fractional digits.
    e.g. 10 -> 10.00, 3.456 -> 3.46
    """
    return Decimal(value).quantize(TWO_PLACES, rounding=ROUND_HALF_UP)


class EntryCreate(BaseModel):
    """
    A new deposit or withdrawal. 'value' is a non-negative magnitude;
    the direction comes from 'type'.
    """
    value: Decimal = Field(ge=0)
    title: str = Field(min_length=1, max_length=255)
    type: EntryKind

    @field_validator("title", mode="before")
    def strip_title(cls, v):
        if isinstance(v, str):
            return v.strip()
        return v

    @field_validator("value")
    def validate_value(cls, v: Decimal) -> Decimal:
        if not v.is_finite():
            raise ValueError("Value must be a finite number.")
        if to_cents(v).adjusted() >= 12:
            raise ValueError("Value cannot exceed 12 integer digits.")
        return v


class EntryRead(BaseModel):
    """
    One ledger line as returned to clients.
    """
    model_config = ConfigDict(from_attributes=True)

    sequence_id: int
    date: datetime.date
    amount: Decimal
    title: str
    kind: EntryKind

    @field_serializer("date")
    def serialize_date(self, v: datetime.date) -> str:
        return v.strftime("%d/%m")

    @field_serializer("amount")
    def serialize_amount(self, v: Decimal) -> str:
        return f"{to_cents(v):.2f}"
