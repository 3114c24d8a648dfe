"""
Planner state - the terminal counterpart of the web UI
"""
from typing import Any, Dict, List, Optional
import logging

import httpx

from planner.api_client import DestinationsClient
from planner.vacation_types import VacationType

logger = logging.getLogger(__name__)


class VacationPlanner:
    """
    Holds the planning UI state and drives the API.

    Every action re-fetches the full list after a successful write. Failures
    are logged and leave the state untouched; actions return False instead of
    raising.
    """

    def __init__(self, client: DestinationsClient):
        self.client = client
        self.destinations: List[Dict[str, Any]] = []
        self.country: str = ""
        self.selected_vacation_type: Optional[VacationType] = None
        self.show_form: bool = False

    async def load(self) -> bool:
        """Fetch the current list"""
        try:
            self.destinations = await self.client.list_destinations()
        except httpx.HTTPError as e:
            logger.error(f"Error fetching destinations: {e}")
            return False
        return True

    def select_vacation_type(self, vacation_type: str):
        """Pick a vacation card; reveals the destination form"""
        self.selected_vacation_type = VacationType(vacation_type)
        self.show_form = True

    async def submit(self) -> bool:
        """Post the current form, then clear the input and reload"""
        vacation_type = self.selected_vacation_type.value if self.selected_vacation_type else None
        try:
            await self.client.create_destination(self.country, vacation_type)
        except httpx.HTTPError as e:
            logger.error(f"Error adding destination: {e}")
            return False

        self.country = ""
        await self.load()
        return True

    async def delete(self, destination_id: int) -> bool:
        """Remove a destination, then reload"""
        try:
            await self.client.delete_destination(destination_id)
        except httpx.HTTPError as e:
            logger.error(f"Error deleting destination: {e}")
            return False

        await self.load()
        return True
