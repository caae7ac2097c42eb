# app/schemas/expense.py

from pydantic import BaseModel, ConfigDict, Field
from typing import Optional

from app.schemas.common import Amount, OptionalMonthKey, Text


class ExpenseCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    month: OptionalMonthKey = Field(default=None, alias="mes")
    name: Text = Field(default="", alias="nombre")
    category: Text = Field(default="", alias="categoria")
    amount: Amount = Field(default=0.0, alias="monto")


class ExpenseUpdate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: Optional[Text] = Field(default=None, alias="nombre")
    category: Optional[Text] = Field(default=None, alias="categoria")
    amount: Optional[Amount] = Field(default=None, alias="monto")


class ExpenseRead(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: str
    user_id: str = Field(alias="userId")
    month_key: str = Field(alias="mesKey")
    name: str = Field(alias="nombre")
    category: str = Field(alias="categoria")
    amount: float = Field(alias="monto")

    @classmethod
    def from_row(cls, row):
        return cls.model_validate(row.model_dump())
