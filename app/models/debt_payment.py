# app/models/debt_payment.py

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime
from sqlmodel import SQLModel, Field

from app.utils.months import utc_now


class DebtPayment(SQLModel, table=True):
    __tablename__ = "pagos_deuda"
    id: Optional[int] = Field(default=None, primary_key=True)
    debt_id: str = Field(foreign_key="deudas.id", index=True)
    user_id: str = Field(index=True)
    month_key: str
    amount: float
    installment: int  # número de cuota que cubre este pago
    paid_at: datetime = Field(default_factory=utc_now, sa_type=DateTime(timezone=True))
