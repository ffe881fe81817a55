"""MCP tools for creating and updating FreeTable bookings."""

import logging
from typing import Annotated

from fastmcp import FastMCP
from pydantic import AfterValidator, Field

from freetable_mcp.clients.errors import BackendHTTPError
from freetable_mcp.models import BookingUpdate, EmailAddress, JSONNumber, NewBooking, check_email
from freetable_mcp.server import get_client
from freetable_mcp.tools.error_messages import (
    format_json,
    http_error_message,
    tool_error_message,
)

logger = logging.getLogger(__name__)


def register_booking_tools(mcp: FastMCP) -> None:
    """Register booking management tools on the MCP server."""

    @mcp.tool
    async def create_booking(  # noqa: PLR0913
        restaurantId: Annotated[JSONNumber, Field(description="ID of the restaurant to book")],  # noqa: N803
        tableId: Annotated[JSONNumber, Field(description="ID of the table to book")],  # noqa: N803
        customerName: Annotated[str, Field(description="Customer's full name")],  # noqa: N803
        customerEmail: Annotated[EmailAddress, Field(description="Customer's email address")],  # noqa: N803
        customerPhone: Annotated[str, Field(description="Customer's phone number")],  # noqa: N803
        bookingDate: Annotated[str, Field(description="Booking date in YYYY-MM-DD format")],  # noqa: N803
        bookingTime: Annotated[  # noqa: N803
            str, Field(description="Booking time in HH:MM format (24-hour)")
        ],
        partySize: Annotated[  # noqa: N803
            JSONNumber, Field(description="Number of people in the party")
        ],
        specialRequests: Annotated[  # noqa: N803
            str | None, Field(description="Any special requests for the booking")
        ] = None,
    ) -> str:
        """Book a table at a FreeTable restaurant.

        Returns:
            The created booking as indented JSON, or an error description
            including the backend's validation details.
        """
        client = get_client()
        try:
            booking = NewBooking(
                restaurant_id=restaurantId,
                table_id=tableId,
                customer_name=customerName,
                customer_email=customerEmail,
                customer_phone=customerPhone,
                booking_date=bookingDate,
                booking_time=bookingTime,
                party_size=partySize,
                special_requests=specialRequests or "",
            )
            created = await client.create_booking(booking.to_payload())
        except Exception as exc:  # noqa: BLE001
            return tool_error_message("creating booking", exc, include_details=True)

        logger.info("Created booking at restaurant %s for %s", restaurantId, bookingDate)
        return format_json(created)

    @mcp.tool
    async def update_booking(  # noqa: PLR0913
        bookingId: Annotated[JSONNumber, Field(description="ID of the booking to update")],  # noqa: N803
        customerName: Annotated[  # noqa: N803
            str | None, Field(description="Updated customer name")
        ] = None,
        customerEmail: Annotated[  # noqa: N803
            str | None,
            AfterValidator(check_email),
            Field(description="Updated customer email", json_schema_extra={"format": "email"}),
        ] = None,
        bookingDate: Annotated[  # noqa: N803
            str | None, Field(description="New booking date in YYYY-MM-DD format")
        ] = None,
        bookingTime: Annotated[  # noqa: N803
            str | None, Field(description="New booking time in HH:MM format (24-hour)")
        ] = None,
        partySize: Annotated[  # noqa: N803
            JSONNumber | None, Field(description="New party size")
        ] = None,
        specialRequests: Annotated[  # noqa: N803
            str | None, Field(description="Updated special requests for the booking")
        ] = None,
        tableId: Annotated[  # noqa: N803
            JSONNumber | None, Field(description="New table ID (if changing table)")
        ] = None,
    ) -> str:
        """Change an existing FreeTable booking.

        Only the fields you pass are changed; everything else on the
        booking stays as it is. The booking is looked up first and nothing
        is written if it cannot be fetched.

        Returns:
            The updated booking as indented JSON, or an error description.
        """
        client = get_client()

        try:
            await client.get_booking(bookingId)
        except BackendHTTPError as exc:
            return http_error_message("fetching booking", exc)
        except Exception as exc:  # noqa: BLE001
            return tool_error_message("updating booking", exc)

        try:
            patch = BookingUpdate.from_supplied(
                customer_name=customerName,
                customer_email=customerEmail,
                booking_date=bookingDate,
                booking_time=bookingTime,
                party_size=partySize,
                special_requests=specialRequests,
                table_id=tableId,
            )
            if patch.is_empty:
                logger.info("Booking %s update carries no fields", bookingId)
            updated = await client.update_booking(bookingId, patch.to_payload())
        except Exception as exc:  # noqa: BLE001
            return tool_error_message("updating booking", exc, include_details=True)

        logger.info("Updated booking %s: %s", bookingId, sorted(patch.model_fields_set))
        return format_json(updated)
