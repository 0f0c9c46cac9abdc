"""Single-row calculator settings."""

from datetime import datetime

from sqlalchemy import Boolean, DateTime, Float, Integer, func
from sqlalchemy.orm import Mapped, mapped_column

from backend.app.core.database import Base


class LaborSettings(Base):
    __tablename__ = "calc_labor_settings"

    id: Mapped[int] = mapped_column(primary_key=True)
    hourly_rate: Mapped[float] = mapped_column(Float, default=10.0)
    include_in_cost: Mapped[bool] = mapped_column(Boolean, default=True)
    default_minutes_per_print: Mapped[int | None] = mapped_column(Integer, nullable=True)
    updated_at: Mapped[datetime] = mapped_column(DateTime, server_default=func.now(), onupdate=func.now())


class VatSettings(Base):
    """Whether to show VAT-inclusive prices next to the VAT-exclusive calculation."""

    __tablename__ = "calc_vat_settings"

    id: Mapped[int] = mapped_column(primary_key=True)
    enabled: Mapped[bool] = mapped_column(Boolean, default=False)
    rate_percent: Mapped[float] = mapped_column(Float, default=23.0)
    updated_at: Mapped[datetime] = mapped_column(DateTime, server_default=func.now(), onupdate=func.now())
