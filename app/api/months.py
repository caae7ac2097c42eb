from fastapi import APIRouter, Depends, Request
from typing import Optional

from app.api.deps import default_month, get_store, month_query
from app.core.security import get_current_user
from app.models.month import MonthStatus
from app.schemas.debt import DebtRead
from app.schemas.expense import ExpenseRead
from app.schemas.income import IncomeRead
from app.schemas.month import MonthList, MonthRequest, MonthSnapshot, MonthStatusRead, MonthTotals
from app.store.ledger import LedgerStore

router = APIRouter(prefix="/meses", tags=["meses"])


@router.get("", response_model=MonthSnapshot)
def get_month_snapshot(
    key: str = Depends(month_query),
    user_id: str = Depends(get_current_user),
    store: LedgerStore = Depends(get_store),
):
    month = store.months.get(user_id, key)
    return MonthSnapshot(
        month=key,
        estado=month.estado,
        incomes=[IncomeRead.from_row(row) for row in store.incomes.list(user_id, key)],
        expenses=[ExpenseRead.from_row(row) for row in store.expenses.list(user_id, key)],
        debts=[DebtRead.from_row(row) for row in store.debts.list(user_id, key)],
    )


def _set_estado(request: Request, body: Optional[MonthRequest], user_id: str, store: LedgerStore, estado: MonthStatus):
    key = default_month(request, body.month if body else None)
    month = store.months.set_estado(user_id, key, estado)
    return MonthStatusRead(month=key, estado=month.estado)


@router.post("/cerrar", response_model=MonthStatusRead)
def close_month(
    request: Request,
    body: Optional[MonthRequest] = None,
    user_id: str = Depends(get_current_user),
    store: LedgerStore = Depends(get_store),
):
    return _set_estado(request, body, user_id, store, MonthStatus.cerrado)


@router.post("/abrir", response_model=MonthStatusRead)
def open_month(
    request: Request,
    body: Optional[MonthRequest] = None,
    user_id: str = Depends(get_current_user),
    store: LedgerStore = Depends(get_store),
):
    return _set_estado(request, body, user_id, store, MonthStatus.abierto)


@router.get("/list", response_model=MonthList)
def list_months(user_id: str = Depends(get_current_user), store: LedgerStore = Depends(get_store)):
    return MonthList(months=store.months.list_keys(user_id))


@router.get("/totales", response_model=MonthTotals)
def get_month_totals(
    key: str = Depends(month_query),
    user_id: str = Depends(get_current_user),
    store: LedgerStore = Depends(get_store),
):
    return MonthTotals(month=key, **store.calculate_totals(user_id, key))
