from datetime import datetime

from pydantic import BaseModel, Field


class FilamentLine(BaseModel):
    filament_id: int
    grams_used: float = Field(..., ge=0)


class PrintCalculationRequest(BaseModel):
    """Form state for one print, referencing cost basis records by id."""

    print_time: str | int = Field(..., description='Minutes ("90") or "<H>h <M>m" ("2h 30m")')
    filaments: list[FilamentLine] = Field(default_factory=list)
    printer_id: int | None = None
    electricity_tariff_id: int | None = None
    shipping_option_id: int | None = None
    consumable_ids: list[int] = Field(default_factory=list)
    fixed_expense_ids: list[int] = Field(default_factory=list)
    labor_time_minutes: int | None = Field(default=None, ge=0)
    quantity: int = Field(default=1, ge=1)
    wastage_percent: float | None = Field(default=None, ge=0)
    failure_rate_percent: float | None = Field(default=None, ge=0)
    model_cost: float = Field(default=0.0, ge=0)
    markup_percent: float | None = None  # Negative allowed (loss leader)
    prints_per_month: float | None = Field(default=None, ge=0, description="Fixed expense proration divisor")
    printing_hours_per_year: float | None = Field(default=None, ge=0)
    discount_tiers: list[float] | None = None

    class Config:
        protected_namespaces = ()


class CostBreakdownResponse(BaseModel):
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
    quantity: int
    labor_cost_info: float

    class Config:
        from_attributes = True
        protected_namespaces = ()


class PricingResponse(BaseModel):
    sell_price: float
    profit: float
    profit_margin_percent: float
    markup_percent: float

    class Config:
        from_attributes = True


class DiscountRowResponse(BaseModel):
    discount: float
    price: float
    cost: float
    discount_amount: float
    profit: float

    class Config:
        from_attributes = True


class VatResponse(BaseModel):
    net: float
    tax_amount: float
    gross: float
    rate_percent: float

    class Config:
        from_attributes = True


class CalculationResponse(BaseModel):
    print_time_minutes: int
    print_time_display: str
    breakdown: CostBreakdownResponse
    pricing: PricingResponse
    discount_table: list[DiscountRowResponse]
    vat: VatResponse | None = None
    display: dict[str, str]


# --- Saved prints ---


class PrintSave(PrintCalculationRequest):
    name: str = Field(..., min_length=1, max_length=200)
    notes: str | None = None


class PrintFilamentResponse(BaseModel):
    filament_id: int | None
    grams_used: float
    cost_per_gram: float

    class Config:
        from_attributes = True


class PrintResponse(BaseModel):
    id: int
    name: str
    notes: str | None

    print_time_minutes: int
    printer_id: int | None
    electricity_tariff_id: int | None
    shipping_option_id: int | None
    consumable_ids: list[int]
    fixed_expense_ids: list[int]
    labor_time_minutes: int
    quantity: int
    wastage_percent: float
    failure_rate_percent: float
    model_cost: float
    markup_percent: float

    printer_power_watts: float
    electricity_price_per_kwh: float
    printer_purchase_cost: float
    printer_depreciation_hours: float
    maintenance_cost_per_year: float
    printing_hours_per_year: float
    hourly_rate: float
    include_labor_in_cost: bool
    prints_per_month: float
    discount_tiers: list[float]

    filament_cost: float
    electricity_cost: float
    depreciation_cost: float
    maintenance_cost: float
    labor_cost: float
    labor_cost_info: float
    shipping_cost: float
    consumables_cost: float
    fixed_expenses_cost: float
    wastage_cost: float
    failure_cost: float
    base_subtotal: float
    cost_per_unit: float
    total_cost: float

    sell_price: float
    profit: float
    profit_margin_percent: float

    filaments: list[PrintFilamentResponse]

    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
        protected_namespaces = ()
