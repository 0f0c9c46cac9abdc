from datetime import datetime

from pydantic import BaseModel, Field

# --- Printer schemas ---


class PrinterBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    brand: str | None = None
    model: str | None = None
    purchase_cost: float = Field(default=0.0, ge=0)
    depreciation_hours: float | None = Field(default=None, ge=0)
    depreciation_months: int | None = Field(default=None, ge=0)
    maintenance_cost: float = Field(default=0.0, ge=0, description="Maintenance cost per year")
    power_watts: float | None = Field(default=None, ge=0)
    notes: str | None = None
    is_active: bool = True


class PrinterCreate(PrinterBase):
    pass


class PrinterUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=100)
    brand: str | None = None
    model: str | None = None
    purchase_cost: float | None = Field(default=None, ge=0)
    depreciation_hours: float | None = Field(default=None, ge=0)
    depreciation_months: int | None = Field(default=None, ge=0)
    maintenance_cost: float | None = Field(default=None, ge=0)
    power_watts: float | None = Field(default=None, ge=0)
    notes: str | None = None
    is_active: bool | None = None


class PrinterResponse(PrinterBase):
    id: int
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


# --- Filament schemas ---


class FilamentBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    brand: str | None = None
    material: str = "PLA"
    color: str | None = None
    spool_weight_grams: float = Field(default=1000.0, ge=0)
    spool_cost: float = Field(default=0.0, ge=0)
    density: float | None = Field(default=None, gt=0)
    notes: str | None = None
    is_active: bool = True


class FilamentCreate(FilamentBase):
    pass


class FilamentUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=100)
    brand: str | None = None
    material: str | None = None
    color: str | None = None
    spool_weight_grams: float | None = Field(default=None, ge=0)
    spool_cost: float | None = Field(default=None, ge=0)
    density: float | None = Field(default=None, gt=0)
    notes: str | None = None
    is_active: bool | None = None


class FilamentResponse(FilamentBase):
    id: int
    cost_per_gram: float
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


# --- Electricity, shipping, consumables, fixed expenses ---


class ElectricityTariffCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    price_per_kwh: float = Field(..., ge=0)
    contracted_power_kva: float | None = Field(default=None, ge=0)
    daily_fixed_cost: float | None = Field(default=None, ge=0)
    notes: str | None = None
    is_default: bool = False


class ElectricityTariffResponse(ElectricityTariffCreate):
    id: int
    created_at: datetime

    class Config:
        from_attributes = True


class ShippingOptionCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    description: str | None = None
    price: float = Field(default=0.0, ge=0)
    is_active: bool = True


class ShippingOptionResponse(ShippingOptionCreate):
    id: int
    created_at: datetime

    class Config:
        from_attributes = True


class ConsumableCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    cost: float = Field(default=0.0, ge=0)
    is_active: bool = True


class ConsumableResponse(ConsumableCreate):
    id: int
    created_at: datetime

    class Config:
        from_attributes = True


class FixedExpenseCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    monthly_amount: float = Field(default=0.0, ge=0)
    is_active: bool = True


class FixedExpenseResponse(FixedExpenseCreate):
    id: int
    created_at: datetime

    class Config:
        from_attributes = True


# --- Single-row settings ---


class LaborSettingsSchema(BaseModel):
    hourly_rate: float = Field(default=10.0, ge=0)
    include_in_cost: bool = True
    default_minutes_per_print: int | None = Field(default=None, ge=0)

    class Config:
        from_attributes = True


class VatSettingsSchema(BaseModel):
    enabled: bool = False
    rate_percent: float = Field(default=23.0, ge=0)

    class Config:
        from_attributes = True
