from datetime import datetime

from sqlalchemy import Boolean, DateTime, Float, Integer, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from backend.app.core.database import Base


class CalcPrinter(Base):
    """A printer as a cost basis: purchase price, lifetime, upkeep and power draw."""

    __tablename__ = "calc_printers"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(100))
    brand: Mapped[str | None] = mapped_column(String(50))
    model: Mapped[str | None] = mapped_column(String(50))
    purchase_cost: Mapped[float] = mapped_column(Float, default=0.0)
    depreciation_hours: Mapped[float | None] = mapped_column(Float, nullable=True)  # None = not tracked
    depreciation_months: Mapped[int | None] = mapped_column(Integer, nullable=True)
    maintenance_cost: Mapped[float] = mapped_column(Float, default=0.0)  # Per year
    power_watts: Mapped[float | None] = mapped_column(Float, nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, server_default=func.now())
    updated_at: Mapped[datetime] = mapped_column(DateTime, server_default=func.now(), onupdate=func.now())
