from sqlalchemy import DateTime
from sqlmodel import SQLModel, Field
from datetime import datetime

from app.utils.months import utc_now

class User(SQLModel, table=True):
    __tablename__ = "users"
    id: str = Field(primary_key=True)  # en modo dev, el email
    email: str = Field(index=True)
    created_at: datetime = Field(default_factory=utc_now, sa_type=DateTime(timezone=True))
