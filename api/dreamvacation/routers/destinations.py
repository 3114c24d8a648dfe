"""
Destination Endpoints
"""
from typing import List, Optional

from fastapi import APIRouter, Body, Depends, HTTPException, Response, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
import logging

from dreamvacation.utils.database import get_db
from dreamvacation.schemas.destination import DestinationCreate, DestinationResponse, ErrorResponse
from dreamvacation.services.destination_service import DestinationService

router = APIRouter()
logger = logging.getLogger(__name__)

INTERNAL_ERROR = "Internal server error"

ERROR_RESPONSES = {
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
}


@router.get("", response_model=List[DestinationResponse], responses=ERROR_RESPONSES)
async def list_destinations(db: AsyncSession = Depends(get_db)):
    """
    List all destinations, newest first
    """
    try:
        return await DestinationService(db).list_all()
    except SQLAlchemyError as e:
        logger.error(f"Error fetching destinations: {e}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=INTERNAL_ERROR)


@router.post(
    "",
    response_model=DestinationResponse,
    status_code=status.HTTP_201_CREATED,
    responses={status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}, **ERROR_RESPONSES},
)
async def create_destination(
    payload: Optional[DestinationCreate] = Body(None),
    db: AsyncSession = Depends(get_db),
):
    """
    Add a destination. Capital, population and region get placeholder values.
    """
    if payload is None or not payload.country:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Country is required")

    try:
        return await DestinationService(db).create(payload.country, payload.vacation_type)
    except SQLAlchemyError as e:
        logger.error(f"Error adding destination: {e}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=INTERNAL_ERROR)


@router.delete(
    "/{destination_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=ERROR_RESPONSES,
)
async def delete_destination(destination_id: int, db: AsyncSession = Depends(get_db)):
    """
    Delete a destination. Unknown ids are not an error.
    """
    try:
        await DestinationService(db).delete(destination_id)
    except SQLAlchemyError as e:
        logger.error(f"Error deleting destination: {e}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=INTERNAL_ERROR)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
