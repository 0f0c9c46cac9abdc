from pydantic import BaseModel


class PrinterPresetResponse(BaseModel):
    brand: str
    model: str
    power_watts: float
    depreciation_months: int
    depreciation_hours: float
    maintenance_cost: float
    purchase_cost: float

    class Config:
        from_attributes = True


class FilamentPresetResponse(BaseModel):
    brand: str
    material: str
    name: str
    spool_weight_grams: float
    spool_cost: float
    density: float

    class Config:
        from_attributes = True
