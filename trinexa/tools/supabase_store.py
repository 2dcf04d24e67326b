"""
Hosted booking store backed by the Supabase ``demo_bookings`` table.

The website's admin panel reads the same table, so rows written here show
up in demo session management. Only the insert is needed by the assistant.

Row Level Security (RLS) Notes:
==============================
The anon key is enough when the table carries an insert-only policy for
anonymous visitors, for example:

CREATE POLICY "Visitors can request demos"
ON demo_bookings FOR INSERT
WITH CHECK (true);
"""

import asyncio
import logging
from typing import Any, Optional

from supabase import Client as SupabaseClientType
from supabase import create_client

from trinexa.config import settings
from trinexa.schemas.booking_schema import BookingRecord
from trinexa.tools.booking import BookingStoreError

logger = logging.getLogger(__name__)


class SupabaseBookingStore:
    """Inserts completed bookings into the hosted table."""

    def __init__(
        self,
        url: Optional[str] = None,
        key: Optional[str] = None,
        table: Optional[str] = None,
    ) -> None:
        url = url or settings.storage.supabase_url
        key = key or settings.storage.supabase_key
        if not url or not key:
            raise ValueError("SUPABASE_URL and SUPABASE_KEY must be set to use the hosted store")
        self.table = table or settings.storage.bookings_table
        self.client: SupabaseClientType = create_client(url, key)

    def _insert(self, row: dict[str, Any]) -> dict[str, Any]:
        response = self.client.table(self.table).insert([row]).execute()
        if not response.data:
            raise BookingStoreError("Failed to create booking: no data returned")
        return response.data[0]

    async def create_booking(self, record: BookingRecord) -> dict[str, Any]:
        """Insert one row and return it as stored."""
        row = record.to_row()
        try:
            stored = await asyncio.to_thread(self._insert, row)
        except BookingStoreError:
            raise
        except Exception as e:
            raise BookingStoreError(f"Failed to create booking: {e}") from e
        logger.debug("Inserted booking into %s: %s", self.table, stored.get("id"))
        return stored
