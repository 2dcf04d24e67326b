"""Booking and availability data models."""

from typing import Any, Optional

from pydantic import BaseModel, Field


class BookingRecord(BaseModel):
    """Finalized demo booking handed to the storage collaborator."""
    name: str
    email: str
    company: str
    phone: str
    product_interest: str
    attendee_count: int = Field(..., ge=1)
    preferred_date: Optional[str] = None
    notes: str = ""

    def to_row(self) -> dict[str, Any]:
        """Map onto the hosted ``demo_bookings`` table columns."""
        return {
            "name": self.name,
            "email": self.email,
            "company": self.company,
            "phone": self.phone,
            "product_interest": self.product_interest,
            "preferred_date": self.preferred_date,
            "message": self.notes,
        }


class AvailabilitySlot(BaseModel):
    """Bookable times for a single weekday."""
    day: str
    times: list[str] = Field(default_factory=list)
