"""Print cost calculation.

Turns one print's physical and operational parameters into a per-unit
cost breakdown. Everything here is a pure function of its inputs: no
database access, no settings lookups, no rounding. Callers resolve the
cost basis records (printer, filament, tariff, ...) and hand over plain
numbers in a PrintCostInput.
"""

import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)

DEFAULT_PRINTING_HOURS_PER_YEAR = 1000.0


def cost_per_gram(spool_cost: float, spool_weight_grams: float) -> float:
    """Price of one gram of filament from a spool's price and net weight."""
    if not spool_weight_grams:
        return 0.0
    return spool_cost / spool_weight_grams


def depreciation_per_hour(purchase_cost: float, depreciation_hours: float) -> float:
    """Straight-line depreciation per operating hour, 0 when the lifetime is not tracked."""
    if not depreciation_hours:
        return 0.0
    return purchase_cost / depreciation_hours


def maintenance_per_hour(maintenance_cost_per_year: float, printing_hours_per_year: float) -> float:
    if not printing_hours_per_year:
        return 0.0
    return maintenance_cost_per_year / printing_hours_per_year


def prorate_fixed_expenses(monthly_amounts: list[float], prints_per_month: float) -> float:
    """Share of the monthly fixed expenses charged to a single print."""
    if not prints_per_month:
        return 0.0
    return sum(monthly_amounts) / prints_per_month


@dataclass(frozen=True)
class FilamentUsage:
    """One filament consumed by a print.

    cost_per_gram is the live value derived from the filament record at
    the moment the input is built, never a cached one.
    """

    grams_used: float
    cost_per_gram: float

    @classmethod
    def from_spool(cls, grams_used: float, spool_cost: float, spool_weight_grams: float) -> "FilamentUsage":
        return cls(grams_used=grams_used, cost_per_gram=cost_per_gram(spool_cost, spool_weight_grams))

    @property
    def cost(self) -> float:
        return self.grams_used * self.cost_per_gram


@dataclass(frozen=True)
class PrintCostInput:
    """Complete, immutable input to one cost calculation."""

    filaments: tuple[FilamentUsage, ...] = ()

    # Printer / electricity
    printer_power_watts: float = 0.0
    print_time_minutes: float = 0.0
    electricity_price_per_kwh: float = 0.0

    # Depreciation and maintenance
    printer_purchase_cost: float = 0.0
    printer_depreciation_hours: float = 0.0
    maintenance_cost_per_year: float = 0.0
    printing_hours_per_year: float = DEFAULT_PRINTING_HOURS_PER_YEAR

    # Labor
    labor_time_minutes: float = 0.0
    hourly_rate: float = 0.0
    include_labor_in_cost: bool = True

    # Pass-through costs
    shipping_cost: float = 0.0
    consumables_cost: float = 0.0
    fixed_expenses_cost: float = 0.0  # already prorated to this print
    model_cost: float = 0.0

    # Risk buffers (percent of the base subtotal)
    wastage_percent: float = 0.0
    failure_rate_percent: float = 0.0

    quantity: int = 1

    def __post_init__(self):
        # Accept any iterable of usages but store a tuple so the input stays hashable
        object.__setattr__(self, "filaments", tuple(self.filaments))

    @property
    def print_time_hours(self) -> float:
        return self.print_time_minutes / 60


@dataclass(frozen=True)
class CostBreakdown:
    filament_cost: float
    electricity_cost: float
    depreciation_cost: float
    maintenance_cost: float
    labor_cost: float
    shipping_cost: float
    consumables_cost: float
    fixed_expenses_cost: float
    model_cost: float
    base_subtotal: float
    wastage_cost: float
    failure_cost: float
    cost_per_unit: float
    total_cost: float
    quantity: int = 1
    # Labor value as computed from time and rate, even when excluded from the cost
    labor_cost_info: float = 0.0

    @property
    def buffers_cost(self) -> float:
        return self.wastage_cost + self.failure_cost


def calculate_print_cost(inputs: PrintCostInput) -> CostBreakdown:
    """Calculate the per-unit and total cost of a print.

    Wastage and failure are independent percentages of the same base
    subtotal; they are summed, never compounded. Zero divisors (unset
    depreciation life, zero annual hours) make that component 0.
    """
    hours = inputs.print_time_hours

    filament_cost = sum((usage.cost for usage in inputs.filaments), 0.0)
    electricity_cost = (inputs.printer_power_watts / 1000) * hours * inputs.electricity_price_per_kwh
    depreciation_cost = (
        depreciation_per_hour(inputs.printer_purchase_cost, inputs.printer_depreciation_hours) * hours
    )
    maintenance_cost = (
        maintenance_per_hour(inputs.maintenance_cost_per_year, inputs.printing_hours_per_year) * hours
    )

    labor_value = inputs.labor_time_minutes / 60 * inputs.hourly_rate
    labor_cost = labor_value if inputs.include_labor_in_cost else 0.0

    base_subtotal = (
        filament_cost
        + electricity_cost
        + depreciation_cost
        + maintenance_cost
        + labor_cost
        + inputs.shipping_cost
        + inputs.consumables_cost
        + inputs.fixed_expenses_cost
        + inputs.model_cost
    )

    wastage_cost = base_subtotal * inputs.wastage_percent / 100
    failure_cost = base_subtotal * inputs.failure_rate_percent / 100

    cost_per_unit = base_subtotal + wastage_cost + failure_cost
    total_cost = cost_per_unit * inputs.quantity

    logger.debug(
        "[PrintCost] %d filament line(s), %.0f min -> base %.4f, unit %.4f, total %.4f (qty %d)",
        len(inputs.filaments),
        inputs.print_time_minutes,
        base_subtotal,
        cost_per_unit,
        total_cost,
        inputs.quantity,
    )

    return CostBreakdown(
        filament_cost=filament_cost,
        electricity_cost=electricity_cost,
        depreciation_cost=depreciation_cost,
        maintenance_cost=maintenance_cost,
        labor_cost=labor_cost,
        shipping_cost=inputs.shipping_cost,
        consumables_cost=inputs.consumables_cost,
        fixed_expenses_cost=inputs.fixed_expenses_cost,
        model_cost=inputs.model_cost,
        base_subtotal=base_subtotal,
        wastage_cost=wastage_cost,
        failure_cost=failure_cost,
        cost_per_unit=cost_per_unit,
        total_cost=total_cost,
        quantity=inputs.quantity,
        labor_cost_info=labor_value,
    )
