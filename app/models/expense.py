# app/models/expense.py

from sqlmodel import SQLModel, Field


class Expense(SQLModel, table=True):
    __tablename__ = "gastos"
    id: str = Field(primary_key=True)
    user_id: str = Field(index=True)
    month_key: str = Field(index=True)
    name: str = ""
    category: str = ""
    amount: float = 0.0
