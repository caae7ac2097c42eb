# app/schemas/income.py

from pydantic import BaseModel, ConfigDict, Field
from typing import Optional

from app.schemas.common import Amount, OptionalMonthKey, Text


class IncomeCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    month: OptionalMonthKey = Field(default=None, alias="mes")
    name: Text = Field(default="", alias="nombre")
    source: Text = Field(default="", alias="fuente")  # Ej: "Salario"
    amount: Amount = Field(default=0.0, alias="monto")


class IncomeUpdate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: Optional[Text] = Field(default=None, alias="nombre")
    source: Optional[Text] = Field(default=None, alias="fuente")
    amount: Optional[Amount] = Field(default=None, alias="monto")


class IncomeRead(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: str
    user_id: str = Field(alias="userId")
    month_key: str = Field(alias="mesKey")
    name: str = Field(alias="nombre")
    source: str = Field(alias="fuente")
    amount: float = Field(alias="monto")

    @classmethod
    def from_row(cls, row):
        return cls.model_validate(row.model_dump())
