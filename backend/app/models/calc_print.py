from datetime import datetime

from sqlalchemy import JSON, Boolean, DateTime, Float, ForeignKey, Integer, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from backend.app.core.database import Base


class CalcPrint(Base):
    """A saved print calculation.

    Holds the form inputs together with a value copy of the cost
    breakdown and pricing computed at save time. Stored figures are only
    replaced by an explicit re-save, never by later edits to the
    referenced cost basis records.
    """

    __tablename__ = "calc_prints"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(200))
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Inputs
    print_time_minutes: Mapped[int] = mapped_column(Integer, default=0)
    printer_id: Mapped[int | None] = mapped_column(ForeignKey("calc_printers.id", ondelete="SET NULL"))
    electricity_tariff_id: Mapped[int | None] = mapped_column(
        ForeignKey("calc_electricity_tariffs.id", ondelete="SET NULL")
    )
    shipping_option_id: Mapped[int | None] = mapped_column(
        ForeignKey("calc_shipping_options.id", ondelete="SET NULL")
    )
    consumable_ids: Mapped[list] = mapped_column(JSON, default=list)
    fixed_expense_ids: Mapped[list] = mapped_column(JSON, default=list)
    labor_time_minutes: Mapped[int] = mapped_column(Integer, default=0)
    quantity: Mapped[int] = mapped_column(Integer, default=1)
    wastage_percent: Mapped[float] = mapped_column(Float, default=0.0)
    failure_rate_percent: Mapped[float] = mapped_column(Float, default=0.0)
    model_cost: Mapped[float] = mapped_column(Float, default=0.0)
    markup_percent: Mapped[float] = mapped_column(Float, default=0.0)

    # Resolved engine input at save time
    printer_power_watts: Mapped[float] = mapped_column(Float, default=0.0)
    electricity_price_per_kwh: Mapped[float] = mapped_column(Float, default=0.0)
    printer_purchase_cost: Mapped[float] = mapped_column(Float, default=0.0)
    printer_depreciation_hours: Mapped[float] = mapped_column(Float, default=0.0)
    maintenance_cost_per_year: Mapped[float] = mapped_column(Float, default=0.0)
    printing_hours_per_year: Mapped[float] = mapped_column(Float, default=0.0)
    hourly_rate: Mapped[float] = mapped_column(Float, default=0.0)
    include_labor_in_cost: Mapped[bool] = mapped_column(Boolean, default=True)
    prints_per_month: Mapped[float] = mapped_column(Float, default=0.0)
    discount_tiers: Mapped[list] = mapped_column(JSON, default=list)

    # Cost breakdown snapshot
    filament_cost: Mapped[float] = mapped_column(Float, default=0.0)
    electricity_cost: Mapped[float] = mapped_column(Float, default=0.0)
    depreciation_cost: Mapped[float] = mapped_column(Float, default=0.0)
    maintenance_cost: Mapped[float] = mapped_column(Float, default=0.0)
    labor_cost: Mapped[float] = mapped_column(Float, default=0.0)
    labor_cost_info: Mapped[float] = mapped_column(Float, default=0.0)
    shipping_cost: Mapped[float] = mapped_column(Float, default=0.0)
    consumables_cost: Mapped[float] = mapped_column(Float, default=0.0)
    fixed_expenses_cost: Mapped[float] = mapped_column(Float, default=0.0)
    wastage_cost: Mapped[float] = mapped_column(Float, default=0.0)
    failure_cost: Mapped[float] = mapped_column(Float, default=0.0)
    base_subtotal: Mapped[float] = mapped_column(Float, default=0.0)
    cost_per_unit: Mapped[float] = mapped_column(Float, default=0.0)
    total_cost: Mapped[float] = mapped_column(Float, default=0.0)

    # Pricing snapshot
    sell_price: Mapped[float] = mapped_column(Float, default=0.0)
    profit: Mapped[float] = mapped_column(Float, default=0.0)
    profit_margin_percent: Mapped[float] = mapped_column(Float, default=0.0)

    created_at: Mapped[datetime] = mapped_column(DateTime, server_default=func.now())
    updated_at: Mapped[datetime] = mapped_column(DateTime, server_default=func.now(), onupdate=func.now())

    filaments: Mapped[list["CalcPrintFilament"]] = relationship(
        back_populates="calc_print", cascade="all, delete-orphan", lazy="selectin"
    )


class CalcPrintFilament(Base):
    """Filament line of a saved print, with the cost per gram used at save time."""

    __tablename__ = "calc_print_filaments"

    id: Mapped[int] = mapped_column(primary_key=True)
    print_id: Mapped[int] = mapped_column(ForeignKey("calc_prints.id", ondelete="CASCADE"))
    filament_id: Mapped[int | None] = mapped_column(ForeignKey("calc_filaments.id", ondelete="SET NULL"))
    grams_used: Mapped[float] = mapped_column(Float, default=0.0)
    cost_per_gram: Mapped[float] = mapped_column(Float, default=0.0)

    calc_print: Mapped["CalcPrint"] = relationship(back_populates="filaments")
