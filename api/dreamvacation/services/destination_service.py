"""
Destination Service - single-statement access to the destinations table
"""
from typing import List, Optional
import logging

from sqlalchemy import select, insert, delete
from sqlalchemy.ext.asyncio import AsyncSession

from dreamvacation.models.destination import (
    Destination,
    PLACEHOLDER_CAPITAL,
    PLACEHOLDER_POPULATION,
    PLACEHOLDER_REGION,
)

logger = logging.getLogger(__name__)


class DestinationService:
    """
    Runs one SQL statement per operation against the destinations table.

    Errors from the store are not handled here; callers decide how a
    SQLAlchemyError maps to a response.
    """

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_all(self) -> List[Destination]:
        """All destinations, newest first"""
        result = await self.db.execute(
            select(Destination).order_by(Destination.id.desc())
        )
        return list(result.scalars().all())

    async def create(self, country: str, vacation_type: Optional[str] = None) -> Destination:
        """
        Insert a destination with placeholder details and return the stored row.

        Uses INSERT ... RETURNING so the generated id and created_at come back
        from the same statement.
        """
        result = await self.db.scalars(
            insert(Destination).returning(Destination),
            [{
                "country": country,
                "capital": PLACEHOLDER_CAPITAL,
                "population": PLACEHOLDER_POPULATION,
                "region": PLACEHOLDER_REGION,
                "vacation_type": vacation_type,
            }],
        )
        destination = result.one()
        await self.db.commit()

        logger.info(f"Destination created: {destination.id} ({destination.country})")
        return destination

    async def delete(self, destination_id: int) -> int:
        """Delete by id; returns the number of rows removed (0 or 1)"""
        result = await self.db.execute(
            delete(Destination).where(Destination.id == destination_id)
        )
        await self.db.commit()

        if result.rowcount:
            logger.info(f"Destination deleted: {destination_id}")
        else:
            logger.debug(f"Delete of unknown destination {destination_id} ignored")
        return result.rowcount
