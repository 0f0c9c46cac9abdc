from backend.app.models.calc_print import CalcPrint, CalcPrintFilament
from backend.app.models.expenses import Consumable, ElectricityTariff, FixedExpense, ShippingOption
from backend.app.models.filament import CalcFilament
from backend.app.models.printer import CalcPrinter
from backend.app.models.settings import LaborSettings, VatSettings

__all__ = [
    "CalcPrint",
    "CalcPrintFilament",
    "CalcFilament",
    "CalcPrinter",
    "Consumable",
    "ElectricityTariff",
    "FixedExpense",
    "LaborSettings",
    "ShippingOption",
    "VatSettings",
]
