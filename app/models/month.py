# app/models/month.py

from enum import Enum
from typing import Optional

from sqlalchemy import UniqueConstraint
from sqlmodel import SQLModel, Field


class MonthStatus(str, Enum):
    abierto = "abierto"
    cerrado = "cerrado"


class Month(SQLModel, table=True):
    __tablename__ = "months"
    __table_args__ = (
        UniqueConstraint("user_id", "key", name="uq_month_user_key"),
    )
    id: Optional[int] = Field(default=None, primary_key=True)
    key: str = Field(index=True)  # "YYYY-MM"
    user_id: str = Field(index=True)
    estado: MonthStatus = Field(default=MonthStatus.abierto)
