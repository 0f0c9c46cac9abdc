"""Saved print calculations.

A saved print keeps a value copy of the breakdown and pricing it was
saved with. Reads never recompute; the stored figures only change when
the print is explicitly re-saved through update_print.
"""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from backend.app.models.calc_print import CalcPrint, CalcPrintFilament
from backend.app.models.expenses import Consumable, ElectricityTariff, FixedExpense, ShippingOption
from backend.app.models.filament import CalcFilament
from backend.app.models.printer import CalcPrinter
from backend.app.schemas.calculator import PrintSave
from backend.app.services.calculator import CalculationResult, calculate, usable_ids

logger = logging.getLogger(__name__)

_BREAKDOWN_FIELDS = (
    "filament_cost",
    "electricity_cost",
    "depreciation_cost",
    "maintenance_cost",
    "labor_cost",
    "labor_cost_info",
    "shipping_cost",
    "consumables_cost",
    "fixed_expenses_cost",
    "wastage_cost",
    "failure_cost",
    "base_subtotal",
    "cost_per_unit",
    "total_cost",
)

_PRICING_FIELDS = ("sell_price", "profit", "profit_margin_percent")

# PrintCostInput fields whose values come from registry records or settings
_INPUT_FIELDS = (
    "printer_power_watts",
    "electricity_price_per_kwh",
    "printer_purchase_cost",
    "printer_depreciation_hours",
    "maintenance_cost_per_year",
    "printing_hours_per_year",
    "hourly_rate",
    "include_labor_in_cost",
)


def _apply_snapshot(record: CalcPrint, data: PrintSave, result: CalculationResult) -> None:
    """Copy request inputs and computed figures onto the record."""
    prepared = result.prepared
    inputs = prepared.inputs

    record.name = data.name
    record.notes = data.notes
    record.print_time_minutes = prepared.print_time_minutes
    record.printer_id = data.printer_id
    record.electricity_tariff_id = data.electricity_tariff_id
    record.shipping_option_id = data.shipping_option_id
    record.consumable_ids = list(data.consumable_ids)
    record.fixed_expense_ids = list(data.fixed_expense_ids)
    record.labor_time_minutes = prepared.labor_time_minutes
    record.quantity = inputs.quantity
    record.wastage_percent = inputs.wastage_percent
    record.failure_rate_percent = inputs.failure_rate_percent
    record.model_cost = inputs.model_cost
    record.markup_percent = prepared.markup_percent
    record.prints_per_month = prepared.prints_per_month
    record.discount_tiers = list(prepared.discount_tiers)

    for name in _INPUT_FIELDS:
        setattr(record, name, getattr(inputs, name))
    for name in _BREAKDOWN_FIELDS:
        setattr(record, name, getattr(result.breakdown, name))
    for name in _PRICING_FIELDS:
        setattr(record, name, getattr(result.pricing, name))

    record.filaments = [
        CalcPrintFilament(
            filament_id=line.filament_id,
            grams_used=line.usage.grams_used,
            cost_per_gram=line.usage.cost_per_gram,
        )
        for line in prepared.filaments
    ]


async def get_print(db: AsyncSession, print_id: int) -> CalcPrint | None:
    result = await db.execute(select(CalcPrint).where(CalcPrint.id == print_id))
    return result.scalar_one_or_none()


async def list_prints(db: AsyncSession) -> list[CalcPrint]:
    result = await db.execute(select(CalcPrint).order_by(CalcPrint.created_at.desc(), CalcPrint.id.desc()))
    return list(result.scalars().all())


async def save_print(db: AsyncSession, data: PrintSave) -> CalcPrint:
    """Calculate from current cost basis values and store a new snapshot."""
    result = await calculate(db, data)

    record = CalcPrint()
    _apply_snapshot(record, data, result)
    db.add(record)
    await db.commit()
    await db.refresh(record)

    logger.info(
        "[PrintSnapshot] Saved print %d '%s': unit cost %.2f, sell %.2f",
        record.id,
        record.name,
        record.cost_per_unit,
        record.sell_price,
    )
    return record


async def update_print(db: AsyncSession, record: CalcPrint, data: PrintSave) -> CalcPrint:
    """Re-edit and re-save: recompute from current cost basis values and overwrite the snapshot."""
    result = await calculate(db, data)

    previous_total = record.total_cost
    _apply_snapshot(record, data, result)
    await db.commit()
    await db.refresh(record)

    logger.info(
        "[PrintSnapshot] Re-saved print %d '%s': total %.2f -> %.2f",
        record.id,
        record.name,
        previous_total,
        record.total_cost,
    )
    return record


def snapshot_to_request(record: CalcPrint) -> PrintSave:
    """Rebuild the form state of a saved print, e.g. to duplicate it."""
    return PrintSave(
        name=record.name,
        notes=record.notes,
        print_time=record.print_time_minutes,
        filaments=[
            {"filament_id": line.filament_id, "grams_used": line.grams_used}
            for line in record.filaments
            if line.filament_id is not None
        ],
        printer_id=record.printer_id,
        electricity_tariff_id=record.electricity_tariff_id,
        shipping_option_id=record.shipping_option_id,
        consumable_ids=list(record.consumable_ids or []),
        fixed_expense_ids=list(record.fixed_expense_ids or []),
        labor_time_minutes=record.labor_time_minutes,
        quantity=record.quantity,
        wastage_percent=record.wastage_percent,
        failure_rate_percent=record.failure_rate_percent,
        model_cost=record.model_cost,
        markup_percent=record.markup_percent,
        prints_per_month=record.prints_per_month,
        printing_hours_per_year=record.printing_hours_per_year,
        discount_tiers=list(record.discount_tiers) if record.discount_tiers is not None else None,
    )


async def duplicate_print(db: AsyncSession, record: CalcPrint) -> CalcPrint:
    """Save a copy of a print, recalculated with current cost basis values.

    References to records that were deleted or retired since the print
    was saved are dropped; the copy falls back to the configured defaults
    for them.
    """
    data = snapshot_to_request(record)
    data.name = f"{record.name} (copy)"

    dropped = []
    if data.printer_id is not None and not await usable_ids(db, CalcPrinter, [data.printer_id]):
        dropped.append(f"printer {data.printer_id}")
        data.printer_id = None
    if data.electricity_tariff_id is not None and not await usable_ids(
        db, ElectricityTariff, [data.electricity_tariff_id]
    ):
        dropped.append(f"tariff {data.electricity_tariff_id}")
        data.electricity_tariff_id = None
    if data.shipping_option_id is not None and not await usable_ids(db, ShippingOption, [data.shipping_option_id]):
        dropped.append(f"shipping option {data.shipping_option_id}")
        data.shipping_option_id = None

    filament_ids = await usable_ids(db, CalcFilament, [line.filament_id for line in data.filaments])
    consumable_ids = await usable_ids(db, Consumable, data.consumable_ids)
    expense_ids = await usable_ids(db, FixedExpense, data.fixed_expense_ids)
    dropped.extend(f"filament {line.filament_id}" for line in data.filaments if line.filament_id not in filament_ids)
    dropped.extend(f"consumable {i}" for i in data.consumable_ids if i not in consumable_ids)
    dropped.extend(f"fixed expense {i}" for i in data.fixed_expense_ids if i not in expense_ids)
    data.filaments = [line for line in data.filaments if line.filament_id in filament_ids]
    data.consumable_ids = [i for i in data.consumable_ids if i in consumable_ids]
    data.fixed_expense_ids = [i for i in data.fixed_expense_ids if i in expense_ids]

    if dropped:
        logger.warning("[PrintSnapshot] Duplicating print %d without %s", record.id, ", ".join(dropped))

    return await save_print(db, data)


async def delete_print(db: AsyncSession, record: CalcPrint) -> None:
    print_id = record.id
    await db.delete(record)
    await db.commit()
    logger.info("[PrintSnapshot] Deleted print %d", print_id)
