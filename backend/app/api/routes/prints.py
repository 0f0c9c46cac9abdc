"""API routes for saved print calculations."""

import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from backend.app.api.routes.calculator import calculation_error
from backend.app.core.database import get_db
from backend.app.schemas.calculator import PrintResponse, PrintSave
from backend.app.services.calculator import CostBasisNotFound
from backend.app.services.print_snapshot import (
    delete_print,
    duplicate_print,
    get_print,
    list_prints,
    save_print,
    update_print,
)
from backend.app.utils.time_format import ParseError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/prints", tags=["prints"])


async def _get_or_404(db: AsyncSession, print_id: int):
    record = await get_print(db, print_id)
    if not record:
        raise HTTPException(404, "Print not found")
    return record


@router.get("/", response_model=list[PrintResponse])
async def list_saved_prints(db: AsyncSession = Depends(get_db)):
    """List saved prints, newest first."""
    return await list_prints(db)


@router.post("/", response_model=PrintResponse)
async def create_print(data: PrintSave, db: AsyncSession = Depends(get_db)):
    """Calculate and save a print."""
    try:
        return await save_print(db, data)
    except (ParseError, CostBasisNotFound) as e:
        raise calculation_error(e)


@router.get("/{print_id}", response_model=PrintResponse)
async def get_saved_print(print_id: int, db: AsyncSession = Depends(get_db)):
    """Get a saved print exactly as it was stored."""
    return await _get_or_404(db, print_id)


@router.put("/{print_id}", response_model=PrintResponse)
async def resave_print(print_id: int, data: PrintSave, db: AsyncSession = Depends(get_db)):
    """Re-edit a saved print, recomputing its figures from current cost basis values."""
    record = await _get_or_404(db, print_id)
    try:
        return await update_print(db, record, data)
    except (ParseError, CostBasisNotFound) as e:
        raise calculation_error(e)


@router.post("/{print_id}/duplicate", response_model=PrintResponse)
async def duplicate_saved_print(print_id: int, db: AsyncSession = Depends(get_db)):
    """Save a copy of a print, recalculated with current cost basis values."""
    record = await _get_or_404(db, print_id)
    try:
        return await duplicate_print(db, record)
    except (ParseError, CostBasisNotFound) as e:
        raise calculation_error(e)


@router.delete("/{print_id}")
async def remove_print(print_id: int, db: AsyncSession = Depends(get_db)):
    record = await _get_or_404(db, print_id)
    await delete_print(db, record)
    return {"message": "Print deleted"}
