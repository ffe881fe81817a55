from freetable_mcp.models.booking import (
    BookingUpdate,
    EmailAddress,
    JSONNumber,
    NewBooking,
    check_email,
)

__all__ = [
    "BookingUpdate",
    "EmailAddress",
    "JSONNumber",
    "NewBooking",
    "check_email",
]
