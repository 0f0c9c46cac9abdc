"""Assemble engine inputs from form state and cost basis records.

This is the only place where calculator requests touch the database:
records are looked up by id, live values (cost per gram, prorated
fixed expenses) are derived, and an immutable PrintCostInput is built.
The engine functions in print_cost/pricing run afterwards on plain
numbers.
"""

import logging
from dataclasses import dataclass

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from backend.app.core.config import settings
from backend.app.models.expenses import Consumable, ElectricityTariff, FixedExpense, ShippingOption
from backend.app.models.filament import CalcFilament
from backend.app.models.printer import CalcPrinter
from backend.app.models.settings import LaborSettings, VatSettings
from backend.app.schemas.calculator import PrintCalculationRequest
from backend.app.services.pricing import (
    DiscountRow,
    PricingResult,
    VatBreakdown,
    calculate_pricing_from_markup,
    calculate_vat,
    generate_discount_table,
)
from backend.app.services.print_cost import (
    CostBreakdown,
    FilamentUsage,
    PrintCostInput,
    calculate_print_cost,
    prorate_fixed_expenses,
)
from backend.app.utils.time_format import parse_time_to_minutes

logger = logging.getLogger(__name__)


class CostBasisNotFound(LookupError):
    """A request referenced a cost basis record that does not exist or is retired."""

    def __init__(self, kind: str, record_id: int, inactive: bool = False):
        self.kind = kind
        self.record_id = record_id
        self.inactive = inactive
        reason = "is inactive" if inactive else "not found"
        super().__init__(f"{kind} {record_id} {reason}")


def _is_usable(record) -> bool:
    # Tariffs have no is_active flag
    return getattr(record, "is_active", True) is not False


@dataclass(frozen=True)
class ResolvedFilament:
    filament_id: int
    usage: FilamentUsage


@dataclass(frozen=True)
class PreparedCalculation:
    """Engine input plus the bits of context needed to persist it."""

    inputs: PrintCostInput
    print_time_minutes: int
    labor_time_minutes: int
    markup_percent: float
    filaments: tuple[ResolvedFilament, ...]
    prints_per_month: float
    discount_tiers: tuple[float, ...]


@dataclass(frozen=True)
class CalculationResult:
    prepared: PreparedCalculation
    breakdown: CostBreakdown
    pricing: PricingResult
    discount_table: list[DiscountRow]
    vat: VatBreakdown | None = None


async def _get_or_raise(db: AsyncSession, model, record_id: int, kind: str):
    result = await db.execute(select(model).where(model.id == record_id))
    record = result.scalar_one_or_none()
    if record is None:
        raise CostBasisNotFound(kind, record_id)
    if not _is_usable(record):
        raise CostBasisNotFound(kind, record_id, inactive=True)
    return record


async def _get_many_or_raise(db: AsyncSession, model, record_ids: list[int], kind: str) -> list:
    if not record_ids:
        return []
    result = await db.execute(select(model).where(model.id.in_(record_ids)))
    records = {r.id: r for r in result.scalars().all()}
    for record_id in record_ids:
        if record_id not in records:
            raise CostBasisNotFound(kind, record_id)
        if not _is_usable(records[record_id]):
            raise CostBasisNotFound(kind, record_id, inactive=True)
    return [records[record_id] for record_id in record_ids]


async def usable_ids(db: AsyncSession, model, record_ids: list[int]) -> set[int]:
    """Subset of record_ids that still exist and are active."""
    if not record_ids:
        return set()
    result = await db.execute(select(model).where(model.id.in_(record_ids)))
    return {r.id for r in result.scalars().all() if _is_usable(r)}


async def get_labor_settings(db: AsyncSession) -> LaborSettings | None:
    result = await db.execute(select(LaborSettings).order_by(LaborSettings.id).limit(1))
    return result.scalar_one_or_none()


async def get_vat_settings(db: AsyncSession) -> VatSettings | None:
    result = await db.execute(select(VatSettings).order_by(VatSettings.id).limit(1))
    return result.scalar_one_or_none()


async def _default_tariff(db: AsyncSession) -> ElectricityTariff | None:
    result = await db.execute(
        select(ElectricityTariff).order_by(ElectricityTariff.is_default.desc(), ElectricityTariff.id).limit(1)
    )
    return result.scalar_one_or_none()


async def build_print_cost_input(db: AsyncSession, request: PrintCalculationRequest) -> PreparedCalculation:
    """Resolve a calculation request into an immutable engine input.

    Raises ParseError for an unparsable print time and CostBasisNotFound
    for unknown record ids. Unselected cost bases fall back to the
    configured defaults.
    """
    print_time_minutes = parse_time_to_minutes(request.print_time)

    printer = None
    if request.printer_id is not None:
        printer = await _get_or_raise(db, CalcPrinter, request.printer_id, "Printer")

    if request.electricity_tariff_id is not None:
        tariff = await _get_or_raise(db, ElectricityTariff, request.electricity_tariff_id, "Electricity tariff")
    else:
        tariff = await _default_tariff(db)

    shipping = None
    if request.shipping_option_id is not None:
        shipping = await _get_or_raise(db, ShippingOption, request.shipping_option_id, "Shipping option")

    consumables = await _get_many_or_raise(db, Consumable, request.consumable_ids, "Consumable")
    expenses = await _get_many_or_raise(db, FixedExpense, request.fixed_expense_ids, "Fixed expense")

    filament_records = await _get_many_or_raise(
        db, CalcFilament, [line.filament_id for line in request.filaments], "Filament"
    )
    filaments = tuple(
        ResolvedFilament(
            filament_id=record.id,
            usage=FilamentUsage(grams_used=line.grams_used, cost_per_gram=record.cost_per_gram),
        )
        for line, record in zip(request.filaments, filament_records)
    )

    labor = await get_labor_settings(db)
    if request.labor_time_minutes is not None:
        labor_time_minutes = request.labor_time_minutes
    elif labor and labor.default_minutes_per_print is not None:
        labor_time_minutes = labor.default_minutes_per_print
    else:
        labor_time_minutes = settings.default_labor_minutes

    prints_per_month = (
        request.prints_per_month if request.prints_per_month is not None else settings.fixed_expense_prints_per_month
    )
    printing_hours_per_year = (
        request.printing_hours_per_year
        if request.printing_hours_per_year is not None
        else settings.default_printing_hours_per_year
    )
    markup_percent = (
        request.markup_percent if request.markup_percent is not None else settings.default_markup_percent
    )
    discount_tiers = tuple(
        request.discount_tiers if request.discount_tiers is not None else settings.default_discount_tiers
    )

    inputs = PrintCostInput(
        filaments=tuple(f.usage for f in filaments),
        printer_power_watts=(
            printer.power_watts
            if printer and printer.power_watts is not None
            else settings.default_printer_power_watts
        ),
        print_time_minutes=print_time_minutes,
        electricity_price_per_kwh=(
            tariff.price_per_kwh if tariff else settings.default_electricity_price_per_kwh
        ),
        printer_purchase_cost=printer.purchase_cost if printer else 0.0,
        printer_depreciation_hours=(printer.depreciation_hours or 0.0) if printer else 0.0,
        maintenance_cost_per_year=printer.maintenance_cost if printer else 0.0,
        printing_hours_per_year=printing_hours_per_year,
        labor_time_minutes=labor_time_minutes,
        hourly_rate=labor.hourly_rate if labor else settings.default_hourly_rate,
        include_labor_in_cost=labor.include_in_cost if labor else True,
        shipping_cost=shipping.price if shipping else 0.0,
        consumables_cost=sum((c.cost for c in consumables), 0.0),
        fixed_expenses_cost=prorate_fixed_expenses([e.monthly_amount for e in expenses], prints_per_month),
        model_cost=request.model_cost,
        wastage_percent=(
            request.wastage_percent if request.wastage_percent is not None else settings.default_wastage_percent
        ),
        failure_rate_percent=(
            request.failure_rate_percent
            if request.failure_rate_percent is not None
            else settings.default_failure_rate_percent
        ),
        quantity=request.quantity,
    )

    return PreparedCalculation(
        inputs=inputs,
        print_time_minutes=print_time_minutes,
        labor_time_minutes=labor_time_minutes,
        markup_percent=markup_percent,
        filaments=filaments,
        prints_per_month=prints_per_month,
        discount_tiers=discount_tiers,
    )


async def calculate(db: AsyncSession, request: PrintCalculationRequest) -> CalculationResult:
    """Run cost, pricing and discount table for a request."""
    prepared = await build_print_cost_input(db, request)
    breakdown = calculate_print_cost(prepared.inputs)
    pricing = calculate_pricing_from_markup(breakdown.cost_per_unit, prepared.markup_percent)
    discount_table = generate_discount_table(pricing.sell_price, breakdown.cost_per_unit, prepared.discount_tiers)

    vat = None
    vat_settings = await get_vat_settings(db)
    if vat_settings and vat_settings.enabled:
        vat = calculate_vat(pricing.sell_price, vat_settings.rate_percent)

    logger.debug(
        "[Calculator] %d min, %d filament(s): unit cost %.2f, sell %.2f (markup %.1f%%)",
        prepared.print_time_minutes,
        len(prepared.filaments),
        breakdown.cost_per_unit,
        pricing.sell_price,
        prepared.markup_percent,
    )

    return CalculationResult(
        prepared=prepared,
        breakdown=breakdown,
        pricing=pricing,
        discount_table=discount_table,
        vat=vat,
    )
