from fastapi import APIRouter

from backend.app.schemas.presets import FilamentPresetResponse, PrinterPresetResponse
from backend.app.utils.presets import PRINTER_PRESETS, get_filament_presets

router = APIRouter(prefix="/presets", tags=["presets"])


@router.get("/printers", response_model=list[PrinterPresetResponse])
async def list_printer_presets(brand: str | None = None):
    return [p for p in PRINTER_PRESETS if brand is None or p.brand == brand]


@router.get("/filaments", response_model=list[FilamentPresetResponse])
async def list_filament_presets(brand: str | None = None, material: str | None = None):
    return get_filament_presets(brand=brand, material=material)
