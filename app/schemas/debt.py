# app/schemas/debt.py

from pydantic import BaseModel, ConfigDict, Field
from typing import Optional

from app.models.debt import Debt
from app.schemas.common import Amount, Count, OptionalMonthKey, Text, UtcDatetime


class DebtCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    month: OptionalMonthKey = Field(default=None, alias="mes")
    name: Text = Field(default="", alias="nombre")
    kind: Text = Field(default="otro", alias="tipoDeuda")
    total_amount: Amount = Field(default=0.0, alias="montoTotal")
    monthly_payment: Amount = Field(default=0.0, alias="pagoMensual")
    paid_installments: Count = Field(default=0, alias="cuotasPagadas")
    total_installments: Count = Field(default=0, alias="cuotasTotales")
    interest_rate: Amount = Field(default=0.0, alias="tasaInteres")  # % anual


class DebtUpdate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: Optional[Text] = Field(default=None, alias="nombre")
    kind: Optional[Text] = Field(default=None, alias="tipoDeuda")
    total_amount: Optional[Amount] = Field(default=None, alias="montoTotal")
    monthly_payment: Optional[Amount] = Field(default=None, alias="pagoMensual")
    paid_installments: Optional[Count] = Field(default=None, alias="cuotasPagadas")
    total_installments: Optional[Count] = Field(default=None, alias="cuotasTotales")
    interest_rate: Optional[Amount] = Field(default=None, alias="tasaInteres")


class DebtRead(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: str
    user_id: str = Field(alias="userId")
    month_key: str = Field(alias="mesKey")
    name: str = Field(alias="nombre")
    kind: str = Field(alias="tipoDeuda")
    total_amount: float = Field(alias="montoTotal")
    monthly_payment: float = Field(alias="pagoMensual")
    paid_installments: int = Field(alias="cuotasPagadas")
    total_installments: int = Field(alias="cuotasTotales")
    interest_rate: float = Field(alias="tasaInteres")
    remaining: float = Field(alias="restante")  # saldo pendiente, calculado

    @classmethod
    def from_row(cls, debt: Debt) -> "DebtRead":
        return cls.model_validate({**debt.model_dump(), "remaining": debt.remaining})


class DebtPaymentRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    month: OptionalMonthKey = Field(default=None, alias="mes")
    amount: Optional[Amount] = Field(default=None, alias="monto")  # por defecto, pagoMensual


class DebtPaymentResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    ok: bool = True
    debt: DebtRead = Field(alias="deuda")


class DebtPaymentRead(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: int
    debt_id: str = Field(alias="deudaId")
    month_key: str = Field(alias="mesKey")
    amount: float = Field(alias="monto")
    installment: int = Field(alias="cuota")
    paid_at: UtcDatetime = Field(alias="fecha")

    @classmethod
    def from_row(cls, row):
        return cls.model_validate(row.model_dump())
