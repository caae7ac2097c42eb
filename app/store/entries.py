# app/store/entries.py

from typing import Any, Dict, List, Optional, Tuple, Type

from sqlalchemy import delete
from sqlmodel import SQLModel, Session, select

from app.database import Database
from app.models.expense import Expense
from app.models.income import Income
from app.store.months import MonthBook
from app.utils.amounts import to_amount, to_count, to_text


class EntryBook:
    """CRUD de movimientos de un mes, siempre filtrado por (id, user_id).

    Las subclases declaran el modelo y qué campos son texto, montos o
    contadores; solo esos campos se aceptan desde el cliente.
    """

    model: Type[SQLModel]
    text_fields: Tuple[str, ...] = ("name",)
    amount_fields: Tuple[str, ...] = ("amount",)
    count_fields: Tuple[str, ...] = ()
    defaults: Dict[str, Any] = {}

    def __init__(self, database: Database, months: MonthBook):
        self.database = database
        self.months = months

    # Helpers

    def _coerce(self, fields: Dict[str, Any]) -> Dict[str, Any]:
        values = {}
        for name, value in fields.items():
            if name in self.text_fields:
                values[name] = to_text(value)
            elif name in self.amount_fields:
                values[name] = to_amount(value)
            elif name in self.count_fields:
                values[name] = to_count(value)
        return values

    def _build(self, item: Dict[str, Any]) -> Dict[str, Any]:
        values = self._coerce({name: item.get(name) for name in self._fields()})
        for name in self.text_fields:
            # texto vacío toma el valor por defecto del campo
            values[name] = values[name] or self.defaults.get(name, "")
        return values

    def _fields(self) -> Tuple[str, ...]:
        return self.text_fields + self.amount_fields + self.count_fields

    def _scoped(self, user_id: str, entry_id: str):
        return select(self.model).where(self.model.id == entry_id, self.model.user_id == user_id)

    def _reload(self, session: Session, user_id: str, entry_id: str):
        return session.exec(
            self._scoped(user_id, entry_id).execution_options(populate_existing=True)
        ).first()

    def _lock(self, session: Session, user_id: str, entry_id: str):
        # SELECT ... FOR UPDATE: bloquea la fila hasta el commit
        return session.exec(self._scoped(user_id, entry_id).with_for_update()).first()

    # Operaciones

    def list(self, user_id: str, key: str) -> List[SQLModel]:
        with self.database.session() as session:
            self.months.ensure_in(session, user_id, key)
            session.commit()
            rows = session.exec(
                select(self.model).where(self.model.user_id == user_id, self.model.month_key == key)
            ).all()
            return list(rows)

    def add(self, user_id: str, key: str, item: Dict[str, Any]):
        record = self.model(id=item["id"], user_id=user_id, month_key=key, **self._build(item))
        with self.database.session() as session:
            self.months.ensure_in(session, user_id, key)
            session.add(record)
            session.commit()
            return self._reload(session, user_id, record.id) or record

    def update(self, user_id: str, entry_id: str, fields: Dict[str, Any]) -> Optional[SQLModel]:
        with self.database.session() as session:
            row = self._lock(session, user_id, entry_id)
            if row is None:
                return None

            for name, value in self._coerce(fields).items():
                setattr(row, name, value)

            session.add(row)
            session.commit()
            return self._reload(session, user_id, entry_id) or row

    def delete(self, user_id: str, entry_id: str):
        with self.database.session() as session:
            session.execute(
                delete(self.model).where(self.model.id == entry_id, self.model.user_id == user_id)
            )
            session.commit()


class IncomeBook(EntryBook):
    model = Income
    text_fields = ("name", "source")


class ExpenseBook(EntryBook):
    model = Expense
    text_fields = ("name", "category")
