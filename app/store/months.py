# app/store/months.py

import logging
from typing import List

from sqlalchemy import update
from sqlmodel import Session, select

from app.database import Database
from app.models.month import Month, MonthStatus

logger = logging.getLogger(__name__)


def _dialect_insert(dialect: str):
    if dialect == "postgresql":
        from sqlalchemy.dialects.postgresql import insert
        return insert
    if dialect == "sqlite":
        from sqlalchemy.dialects.sqlite import insert
        return insert
    return None


class MonthBook:
    """Estado abierto/cerrado de cada mes (user_id, "YYYY-MM")."""

    def __init__(self, database: Database):
        self.database = database

    def ensure_in(self, session: Session, user_id: str, key: str):
        """Crea el mes (abierto) si no existe; un mes existente no se toca."""
        insert = _dialect_insert(session.get_bind().dialect.name)
        if insert is not None:
            stmt = (
                insert(Month.__table__)
                .values(key=key, user_id=user_id, estado=MonthStatus.abierto)
                .on_conflict_do_nothing(index_elements=["user_id", "key"])
            )
            session.execute(stmt)
            return

        exists = session.exec(
            select(Month.id).where(Month.user_id == user_id, Month.key == key)
        ).first()
        if exists is None:
            session.add(Month(key=key, user_id=user_id))
            session.flush()

    def ensure(self, user_id: str, key: str):
        with self.database.session() as session:
            self.ensure_in(session, user_id, key)
            session.commit()

    def get(self, user_id: str, key: str) -> Month:
        with self.database.session() as session:
            self.ensure_in(session, user_id, key)
            session.commit()
            month = session.exec(
                select(Month).where(Month.user_id == user_id, Month.key == key)
            ).first()
            # lectura tras escritura puede venir vacía: el mes recién creado está abierto
            return month or Month(key=key, user_id=user_id, estado=MonthStatus.abierto)

    def set_estado(self, user_id: str, key: str, estado: MonthStatus) -> Month:
        estado = MonthStatus(estado)
        with self.database.session() as session:
            self.ensure_in(session, user_id, key)
            session.execute(
                update(Month.__table__)
                .where(Month.__table__.c.user_id == user_id, Month.__table__.c.key == key)
                .values(estado=estado)
            )
            session.commit()
        logger.info("Mes %s de %s marcado como %s", key, user_id, estado.value)
        return self.get(user_id, key)

    def list_keys(self, user_id: str) -> List[str]:
        with self.database.session() as session:
            keys = session.exec(
                select(Month.key).where(Month.user_id == user_id).order_by(Month.key)
            ).all()
            return list(keys)
