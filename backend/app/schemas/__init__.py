from backend.app.schemas.cost_basis import (
    PrinterBase,
    PrinterCreate,
    PrinterUpdate,
    PrinterResponse,
    FilamentBase,
    FilamentCreate,
    FilamentUpdate,
    FilamentResponse,
    ElectricityTariffCreate,
    ElectricityTariffResponse,
    ShippingOptionCreate,
    ShippingOptionResponse,
    ConsumableCreate,
    ConsumableResponse,
    FixedExpenseCreate,
    FixedExpenseResponse,
    LaborSettingsSchema,
    VatSettingsSchema,
)
from backend.app.schemas.calculator import (
    FilamentLine,
    PrintCalculationRequest,
    CostBreakdownResponse,
    PricingResponse,
    DiscountRowResponse,
    VatResponse,
    CalculationResponse,
    PrintSave,
    PrintFilamentResponse,
    PrintResponse,
)
from backend.app.schemas.presets import FilamentPresetResponse, PrinterPresetResponse

__all__ = [
    "PrinterBase",
    "PrinterCreate",
    "PrinterUpdate",
    "PrinterResponse",
    "FilamentBase",
    "FilamentCreate",
    "FilamentUpdate",
    "FilamentResponse",
    "ElectricityTariffCreate",
    "ElectricityTariffResponse",
    "ShippingOptionCreate",
    "ShippingOptionResponse",
    "ConsumableCreate",
    "ConsumableResponse",
    "FixedExpenseCreate",
    "FixedExpenseResponse",
    "LaborSettingsSchema",
    "VatSettingsSchema",
    "FilamentLine",
    "PrintCalculationRequest",
    "CostBreakdownResponse",
    "PricingResponse",
    "DiscountRowResponse",
    "VatResponse",
    "CalculationResponse",
    "PrintSave",
    "PrintFilamentResponse",
    "PrintResponse",
    "PrinterPresetResponse",
    "FilamentPresetResponse",
]
