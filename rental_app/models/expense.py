"""Modele Depense / Expense model."""

from sqlalchemy import Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from rental_app.database import Base


class Expense(Base):
    """Depense du parc / Fleet expense."""
    __tablename__ = "expenses"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    category: Mapped[str] = mapped_column(String(50), nullable=False)  # maintenance, fuel, insurance...
    amount: Mapped[float] = mapped_column(Numeric(12, 2), nullable=False)
    expense_date: Mapped[str] = mapped_column(String(10), nullable=False)  # YYYY-MM-DD
    car_id: Mapped[int | None] = mapped_column(Integer, index=True)
    description: Mapped[str | None] = mapped_column(Text)
    created_at: Mapped[str] = mapped_column(String(32), nullable=False)  # ISO 8601

    def __repr__(self) -> str:
        return f"<Expense {self.category} {self.amount} - car {self.car_id}>"
