from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    app_name: str = "PrintShop Calculator"
    debug: bool = False
    log_level: str = "INFO"

    # Paths
    base_dir: Path = Path(__file__).resolve().parent.parent.parent.parent
    database_url: str = f"sqlite+aiosqlite:///{base_dir}/printshop.db"

    # API
    api_prefix: str = "/api/v1"

    # Display
    currency: str = "EUR"
    locale: str = "pt_PT"

    # Calculator policy (applied by callers, never by the cost engine itself)
    default_printing_hours_per_year: float = 1000.0
    fixed_expense_prints_per_month: float = 100.0
    default_discount_tiers: list[float] = Field(default_factory=lambda: [0, 5, 10, 20, 30, 50])

    # Fallbacks when a form leaves a cost basis unselected
    default_printer_power_watts: float = 200.0
    default_electricity_price_per_kwh: float = 0.15
    default_hourly_rate: float = 10.0
    default_labor_minutes: int = 15
    default_wastage_percent: float = 5.0
    default_failure_rate_percent: float = 5.0
    default_markup_percent: float = 50.0

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings()
