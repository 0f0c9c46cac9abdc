from datetime import datetime

from sqlalchemy import Boolean, DateTime, Float, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from backend.app.core.database import Base
from backend.app.services.print_cost import cost_per_gram


class CalcFilament(Base):
    """A filament spool as a cost basis.

    Cost per gram is always derived from the current spool price and
    weight, it is not a column.
    """

    __tablename__ = "calc_filaments"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(100))
    brand: Mapped[str | None] = mapped_column(String(50))
    material: Mapped[str] = mapped_column(String(50), default="PLA")
    color: Mapped[str | None] = mapped_column(String(50))
    spool_weight_grams: Mapped[float] = mapped_column(Float, default=1000.0)
    spool_cost: Mapped[float] = mapped_column(Float, default=0.0)
    density: Mapped[float | None] = mapped_column(Float, nullable=True)  # g/cm³
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, server_default=func.now())
    updated_at: Mapped[datetime] = mapped_column(DateTime, server_default=func.now(), onupdate=func.now())

    @property
    def cost_per_gram(self) -> float:
        return cost_per_gram(self.spool_cost or 0.0, self.spool_weight_grams or 0.0)
