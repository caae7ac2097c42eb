# app/schemas/month.py

from pydantic import BaseModel, ConfigDict, Field
from typing import List

from app.models.month import MonthStatus
from app.schemas.common import OptionalMonthKey
from app.schemas.debt import DebtRead
from app.schemas.expense import ExpenseRead
from app.schemas.income import IncomeRead


class MonthRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    month: OptionalMonthKey = Field(default=None, alias="mes")


class MonthStatusRead(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    month: str = Field(alias="mes")
    estado: MonthStatus


class MonthSnapshot(MonthStatusRead):
    incomes: List[IncomeRead] = Field(alias="ingresos")
    expenses: List[ExpenseRead] = Field(alias="gastos")
    debts: List[DebtRead] = Field(alias="deudas")


class MonthList(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    months: List[str] = Field(alias="meses")


class MonthTotals(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    month: str = Field(alias="mes")
    total_income: float = Field(alias="totalIngresos")
    total_expenses: float = Field(alias="totalGastos")
    total_debt_payments: float = Field(alias="totalPagosDeudas")
    available: float = Field(alias="disponible")  # ingresos - gastos - pagos de deudas
