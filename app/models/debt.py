# app/models/debt.py

from sqlmodel import SQLModel, Field

from app.utils.amounts import remaining_balance


class Debt(SQLModel, table=True):
    __tablename__ = "deudas"
    id: str = Field(primary_key=True)
    user_id: str = Field(index=True)
    month_key: str = Field(index=True)
    name: str = ""  # Ej: "Préstamo Bancolombia", "Tarjeta Visa"
    kind: str = "otro"
    total_amount: float = 0.0  # Capital original, no cambia al pagar
    monthly_payment: float = 0.0
    paid_installments: int = 0
    total_installments: int = 0
    interest_rate: float = 0.0  # En porcentaje anual

    @property
    def remaining(self) -> float:
        return remaining_balance(self.total_amount, self.monthly_payment, self.paid_installments)
