"""Reference catalogue of common printers and filaments.

Used to pre-fill new cost basis records. Values are list prices and
manufacturer power ratings; users are expected to adjust them.
"""

from dataclasses import dataclass

DEFAULT_DENSITY = 1.24  # g/cm³, PLA
HOURS_PER_DAY = 8
DAYS_PER_MONTH = 30

MATERIAL_DENSITIES: dict[str, float] = {
    "PLA": 1.24,
    "PLA+": 1.24,
    "PETG": 1.27,
    "ABS": 1.04,
    "ASA": 1.07,
    "TPU": 1.21,
    "Nylon": 1.14,
    "PC": 1.20,
    "HIPS": 1.04,
    "PVA": 1.23,
    "Wood PLA": 1.15,
    "Carbon Fiber": 1.30,
    "Silk PLA": 1.24,
    "Marble PLA": 1.24,
    "Glow-in-dark": 1.25,
    "Other": 1.24,
}


@dataclass(frozen=True)
class PrinterPreset:
    brand: str
    model: str
    power_watts: float
    depreciation_months: int
    depreciation_hours: float
    maintenance_cost: float
    purchase_cost: float


@dataclass(frozen=True)
class FilamentPreset:
    brand: str
    material: str
    name: str
    spool_weight_grams: float
    spool_cost: float
    density: float


PRINTER_PRESETS: tuple[PrinterPreset, ...] = (
    PrinterPreset("Bambu Lab", "A1 mini", 150, 36, 5000, 50, 299),
    PrinterPreset("Bambu Lab", "A1", 200, 36, 5000, 60, 449),
    PrinterPreset("Bambu Lab", "P1S", 350, 48, 8000, 80, 699),
    PrinterPreset("Bambu Lab", "P1P", 350, 48, 8000, 80, 599),
    PrinterPreset("Bambu Lab", "X1 Carbon", 400, 60, 10000, 100, 1199),
    PrinterPreset("Prusa", "MK4", 250, 48, 8000, 70, 799),
    PrinterPreset("Prusa", "MK3S+", 200, 48, 8000, 60, 649),
    PrinterPreset("Prusa", "MINI+", 120, 36, 5000, 40, 429),
    PrinterPreset("Prusa", "XL", 400, 60, 10000, 100, 1999),
    PrinterPreset("Creality", "Ender 3 V3", 200, 24, 3000, 40, 219),
    PrinterPreset("Creality", "K1", 350, 36, 5000, 60, 399),
    PrinterPreset("Creality", "K1 Max", 400, 36, 5000, 70, 699),
    PrinterPreset("Anycubic", "Kobra 3", 350, 36, 5000, 60, 399),
    PrinterPreset("Elegoo", "Neptune 4 Pro", 300, 36, 4000, 50, 299),
)

FILAMENT_PRESETS: tuple[FilamentPreset, ...] = (
    FilamentPreset("Bambu Lab", "PLA", "PLA Basic", 1000, 24.99, 1.24),
    FilamentPreset("Bambu Lab", "PLA+", "PLA Matte", 1000, 29.99, 1.24),
    FilamentPreset("Bambu Lab", "PETG", "PETG Basic", 1000, 29.99, 1.27),
    FilamentPreset("Bambu Lab", "TPU", "TPU 95A", 500, 34.99, 1.21),
    FilamentPreset("Prusament", "PLA", "PLA", 1000, 32.99, 1.24),
    FilamentPreset("Prusament", "ASA", "ASA", 850, 36.99, 1.07),
    FilamentPreset("eSUN", "PLA+", "PLA+", 1000, 19.99, 1.24),
    FilamentPreset("eSUN", "ABS", "ABS+", 1000, 21.99, 1.04),
    FilamentPreset("Polymaker", "PLA", "PolyTerra PLA", 1000, 19.99, 1.24),
    FilamentPreset("Polymaker", "PETG", "PolyLite PETG", 1000, 24.99, 1.27),
    FilamentPreset("Overture", "PLA", "PLA", 1000, 17.99, 1.24),
    FilamentPreset("Sunlu", "Silk PLA", "Silk PLA", 1000, 19.99, 1.24),
    FilamentPreset("Other", "PLA", "Generic PLA", 1000, 18.00, 1.24),
    FilamentPreset("Other", "PETG", "Generic PETG", 1000, 20.00, 1.27),
)


def get_material_density(material: str) -> float:
    return MATERIAL_DENSITIES.get(material, DEFAULT_DENSITY)


def get_printer_preset(brand: str, model: str) -> PrinterPreset | None:
    return next((p for p in PRINTER_PRESETS if p.brand == brand and p.model == model), None)


def get_filament_presets(brand: str | None = None, material: str | None = None) -> list[FilamentPreset]:
    """Filter filament presets by brand and/or material."""
    return [
        f
        for f in FILAMENT_PRESETS
        if (brand is None or f.brand == brand) and (material is None or f.material == material)
    ]


def hours_to_months(hours: float, hours_per_day: float = HOURS_PER_DAY) -> int:
    return round(hours / (hours_per_day * DAYS_PER_MONTH))


def months_to_hours(months: float, hours_per_day: float = HOURS_PER_DAY) -> float:
    return months * hours_per_day * DAYS_PER_MONTH
