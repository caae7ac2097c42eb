# app/models/income.py

from sqlmodel import SQLModel, Field


class Income(SQLModel, table=True):
    __tablename__ = "ingresos"
    id: str = Field(primary_key=True)  # UUID generado por la API
    user_id: str = Field(index=True)
    month_key: str = Field(index=True)
    name: str = ""
    source: str = ""  # Ej: "Salario", "Freelance"
    amount: float = 0.0
