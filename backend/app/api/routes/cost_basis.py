"""API routes for the cost basis registry (printers, filaments, tariffs, ...)."""

import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from backend.app.core.database import get_db
from backend.app.models.expenses import Consumable, ElectricityTariff, FixedExpense, ShippingOption
from backend.app.models.filament import CalcFilament
from backend.app.models.printer import CalcPrinter
from backend.app.models.settings import LaborSettings, VatSettings
from backend.app.schemas.cost_basis import (
    ConsumableCreate,
    ConsumableResponse,
    ElectricityTariffCreate,
    ElectricityTariffResponse,
    FilamentCreate,
    FilamentResponse,
    FilamentUpdate,
    FixedExpenseCreate,
    FixedExpenseResponse,
    LaborSettingsSchema,
    PrinterCreate,
    PrinterResponse,
    PrinterUpdate,
    ShippingOptionCreate,
    ShippingOptionResponse,
    VatSettingsSchema,
)
from backend.app.services.calculator import get_labor_settings, get_vat_settings

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/cost-basis", tags=["cost-basis"])


async def _get_or_404(db: AsyncSession, model, record_id: int, label: str):
    result = await db.execute(select(model).where(model.id == record_id))
    record = result.scalar_one_or_none()
    if not record:
        raise HTTPException(404, f"{label} not found")
    return record


def _active(query, model, include_inactive: bool):
    if include_inactive:
        return query
    return query.where(model.is_active.is_(True))


async def _create(db: AsyncSession, model, data):
    record = model(**data.model_dump())
    db.add(record)
    await db.commit()
    await db.refresh(record)
    return record


async def _delete(db: AsyncSession, model, record_id: int, label: str) -> dict:
    record = await _get_or_404(db, model, record_id, label)
    await db.delete(record)
    await db.commit()
    logger.info(f"Deleted {label.lower()} {record_id}")
    return {"message": f"{label} deleted"}


# --- Printers ---


@router.get("/printers", response_model=list[PrinterResponse])
async def list_printers(include_inactive: bool = False, db: AsyncSession = Depends(get_db)):
    """List printers, active ones only unless include_inactive is set."""
    result = await db.execute(_active(select(CalcPrinter), CalcPrinter, include_inactive).order_by(CalcPrinter.name))
    return list(result.scalars().all())


@router.post("/printers", response_model=PrinterResponse)
async def create_printer(data: PrinterCreate, db: AsyncSession = Depends(get_db)):
    """Create a printer."""
    printer = await _create(db, CalcPrinter, data)
    logger.info(f"Created printer '{printer.name}'")
    return printer


@router.get("/printers/{printer_id}", response_model=PrinterResponse)
async def get_printer(printer_id: int, db: AsyncSession = Depends(get_db)):
    return await _get_or_404(db, CalcPrinter, printer_id, "Printer")


@router.patch("/printers/{printer_id}", response_model=PrinterResponse)
async def update_printer(printer_id: int, data: PrinterUpdate, db: AsyncSession = Depends(get_db)):
    """Update a printer. Saved prints keep their stored figures."""
    printer = await _get_or_404(db, CalcPrinter, printer_id, "Printer")

    for field, value in data.model_dump(exclude_unset=True).items():
        setattr(printer, field, value)

    await db.commit()
    await db.refresh(printer)

    logger.info(f"Updated printer '{printer.name}'")
    return printer


@router.delete("/printers/{printer_id}")
async def delete_printer(printer_id: int, db: AsyncSession = Depends(get_db)):
    return await _delete(db, CalcPrinter, printer_id, "Printer")


# --- Filaments ---


@router.get("/filaments", response_model=list[FilamentResponse])
async def list_filaments(include_inactive: bool = False, db: AsyncSession = Depends(get_db)):
    """List filaments with their current cost per gram."""
    result = await db.execute(_active(select(CalcFilament), CalcFilament, include_inactive).order_by(CalcFilament.name))
    return list(result.scalars().all())


@router.post("/filaments", response_model=FilamentResponse)
async def create_filament(data: FilamentCreate, db: AsyncSession = Depends(get_db)):
    filament = await _create(db, CalcFilament, data)
    logger.info(f"Created filament '{filament.name}' ({filament.material})")
    return filament


@router.get("/filaments/{filament_id}", response_model=FilamentResponse)
async def get_filament(filament_id: int, db: AsyncSession = Depends(get_db)):
    return await _get_or_404(db, CalcFilament, filament_id, "Filament")


@router.patch("/filaments/{filament_id}", response_model=FilamentResponse)
async def update_filament(filament_id: int, data: FilamentUpdate, db: AsyncSession = Depends(get_db)):
    """Update a filament.

    A new spool price affects live previews immediately; saved prints keep
    the cost per gram they were saved with.
    """
    filament = await _get_or_404(db, CalcFilament, filament_id, "Filament")

    for field, value in data.model_dump(exclude_unset=True).items():
        setattr(filament, field, value)

    await db.commit()
    await db.refresh(filament)

    logger.info(f"Updated filament '{filament.name}'")
    return filament


@router.delete("/filaments/{filament_id}")
async def delete_filament(filament_id: int, db: AsyncSession = Depends(get_db)):
    return await _delete(db, CalcFilament, filament_id, "Filament")


# --- Electricity tariffs ---


@router.get("/electricity", response_model=list[ElectricityTariffResponse])
async def list_tariffs(db: AsyncSession = Depends(get_db)):
    result = await db.execute(select(ElectricityTariff).order_by(ElectricityTariff.name))
    return list(result.scalars().all())


@router.post("/electricity", response_model=ElectricityTariffResponse)
async def create_tariff(data: ElectricityTariffCreate, db: AsyncSession = Depends(get_db)):
    """Create a tariff. Marking it default clears the flag on the others."""
    if data.is_default:
        result = await db.execute(select(ElectricityTariff).where(ElectricityTariff.is_default.is_(True)))
        for other in result.scalars().all():
            other.is_default = False
    return await _create(db, ElectricityTariff, data)


@router.delete("/electricity/{tariff_id}")
async def delete_tariff(tariff_id: int, db: AsyncSession = Depends(get_db)):
    return await _delete(db, ElectricityTariff, tariff_id, "Electricity tariff")


# --- Shipping options ---


@router.get("/shipping", response_model=list[ShippingOptionResponse])
async def list_shipping_options(include_inactive: bool = False, db: AsyncSession = Depends(get_db)):
    result = await db.execute(
        _active(select(ShippingOption), ShippingOption, include_inactive).order_by(ShippingOption.price)
    )
    return list(result.scalars().all())


@router.post("/shipping", response_model=ShippingOptionResponse)
async def create_shipping_option(data: ShippingOptionCreate, db: AsyncSession = Depends(get_db)):
    return await _create(db, ShippingOption, data)


@router.delete("/shipping/{option_id}")
async def delete_shipping_option(option_id: int, db: AsyncSession = Depends(get_db)):
    return await _delete(db, ShippingOption, option_id, "Shipping option")


# --- Consumables ---


@router.get("/consumables", response_model=list[ConsumableResponse])
async def list_consumables(include_inactive: bool = False, db: AsyncSession = Depends(get_db)):
    result = await db.execute(_active(select(Consumable), Consumable, include_inactive).order_by(Consumable.name))
    return list(result.scalars().all())


@router.post("/consumables", response_model=ConsumableResponse)
async def create_consumable(data: ConsumableCreate, db: AsyncSession = Depends(get_db)):
    return await _create(db, Consumable, data)


@router.delete("/consumables/{consumable_id}")
async def delete_consumable(consumable_id: int, db: AsyncSession = Depends(get_db)):
    return await _delete(db, Consumable, consumable_id, "Consumable")


# --- Fixed expenses ---


@router.get("/fixed-expenses", response_model=list[FixedExpenseResponse])
async def list_fixed_expenses(include_inactive: bool = False, db: AsyncSession = Depends(get_db)):
    result = await db.execute(
        _active(select(FixedExpense), FixedExpense, include_inactive).order_by(FixedExpense.name)
    )
    return list(result.scalars().all())


@router.post("/fixed-expenses", response_model=FixedExpenseResponse)
async def create_fixed_expense(data: FixedExpenseCreate, db: AsyncSession = Depends(get_db)):
    return await _create(db, FixedExpense, data)


@router.delete("/fixed-expenses/{expense_id}")
async def delete_fixed_expense(expense_id: int, db: AsyncSession = Depends(get_db)):
    return await _delete(db, FixedExpense, expense_id, "Fixed expense")


# --- Labor and VAT settings ---


@router.get("/labor", response_model=LaborSettingsSchema)
async def get_labor(db: AsyncSession = Depends(get_db)):
    labor = await get_labor_settings(db)
    return labor or LaborSettingsSchema()


@router.put("/labor", response_model=LaborSettingsSchema)
async def put_labor(data: LaborSettingsSchema, db: AsyncSession = Depends(get_db)):
    labor = await get_labor_settings(db)
    if labor is None:
        labor = LaborSettings()
        db.add(labor)
    for field, value in data.model_dump().items():
        setattr(labor, field, value)
    await db.commit()
    await db.refresh(labor)
    logger.info(f"Updated labor settings: {labor.hourly_rate}/h, include_in_cost={labor.include_in_cost}")
    return labor


@router.get("/vat", response_model=VatSettingsSchema)
async def get_vat(db: AsyncSession = Depends(get_db)):
    vat = await get_vat_settings(db)
    return vat or VatSettingsSchema()


@router.put("/vat", response_model=VatSettingsSchema)
async def put_vat(data: VatSettingsSchema, db: AsyncSession = Depends(get_db)):
    vat = await get_vat_settings(db)
    if vat is None:
        vat = VatSettings()
        db.add(vat)
    for field, value in data.model_dump().items():
        setattr(vat, field, value)
    await db.commit()
    await db.refresh(vat)
    return vat
