from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, StrictFloat, StrictInt
from pydantic.alias_generators import to_camel
from pydantic.networks import validate_email

JSONNumber = StrictInt | StrictFloat
"""A JSON number as sent: ints stay ints, fractions pass, numeric strings are rejected."""


def check_email(value: str | None) -> str | None:
    """Validate an email address and return it exactly as given.

    The display-name form (``"Ada <ada@example.com>"``) is rejected; the
    backend receives the caller's string, never a normalized copy.
    """
    if value is None:
        return None
    if "<" in value or ">" in value:
        raise ValueError("value is not a valid email address: display names are not allowed")
    validate_email(value)
    return value


EmailAddress = Annotated[
    str,
    AfterValidator(check_email),
    Field(json_schema_extra={"format": "email"}),
]


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_payload(self) -> dict:
        """Dump with the backend's camelCase keys, only fields that were set."""
        return self.model_dump(by_alias=True, exclude_unset=True)


class NewBooking(_CamelModel):
    """Full body for ``POST /api/bookings``."""

    restaurant_id: JSONNumber
    table_id: JSONNumber
    customer_name: str
    customer_email: str
    customer_phone: str
    booking_date: str  # YYYY-MM-DD, checked by the backend
    booking_time: str  # HH:MM 24-hour
    party_size: JSONNumber
    special_requests: str = ""

    def to_payload(self) -> dict:
        return self.model_dump(by_alias=True)


class BookingUpdate(_CamelModel):
    """Sparse patch for ``PUT /api/bookings/{id}``.

    Only fields passed to the constructor are dumped. ``from_supplied``
    treats ``None`` as "not supplied" (tool arguments that were omitted or
    sent as JSON ``null``), so ``0`` and ``""`` are still sent.
    """

    customer_name: str | None = None
    customer_email: str | None = None
    booking_date: str | None = None
    booking_time: str | None = None
    party_size: JSONNumber | None = None
    special_requests: str | None = None
    table_id: JSONNumber | None = None

    @classmethod
    def from_supplied(cls, **fields: object) -> "BookingUpdate":
        """Build a patch from keyword arguments, skipping those left as ``None``."""
        return cls(**{name: value for name, value in fields.items() if value is not None})

    @property
    def is_empty(self) -> bool:
        return not self.model_fields_set
