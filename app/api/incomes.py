from uuid import uuid4

from fastapi import APIRouter, Depends, HTTPException, Request
from typing import List, Optional

from app.api.deps import default_month, get_store, month_query
from app.core.security import get_current_user
from app.schemas.income import IncomeCreate, IncomeRead, IncomeUpdate
from app.store.ledger import LedgerStore

router = APIRouter(prefix="/ingresos", tags=["ingresos"])


@router.get("", response_model=List[IncomeRead])
def list_incomes(
    key: str = Depends(month_query),
    user_id: str = Depends(get_current_user),
    store: LedgerStore = Depends(get_store),
):
    return [IncomeRead.from_row(row) for row in store.incomes.list(user_id, key)]


@router.post("", response_model=IncomeRead, status_code=201)
def create_income(
    request: Request,
    income_data: Optional[IncomeCreate] = None,
    user_id: str = Depends(get_current_user),
    store: LedgerStore = Depends(get_store),
):
    income_data = income_data or IncomeCreate()
    key = default_month(request, income_data.month)
    item = {**income_data.model_dump(exclude={"month"}), "id": str(uuid4())}
    return IncomeRead.from_row(store.incomes.add(user_id, key, item))


@router.put("/{income_id}", response_model=IncomeRead)
def update_income(
    income_id: str,
    income_data: Optional[IncomeUpdate] = None,
    user_id: str = Depends(get_current_user),
    store: LedgerStore = Depends(get_store),
):
    changes = income_data.model_dump(exclude_unset=True) if income_data else {}
    income = store.incomes.update(user_id, income_id, changes)
    if not income:
        raise HTTPException(status_code=404, detail="Ingreso no encontrado")
    return IncomeRead.from_row(income)


@router.delete("/{income_id}")
def delete_income(
    income_id: str,
    key: str = Depends(month_query),
    user_id: str = Depends(get_current_user),
    store: LedgerStore = Depends(get_store),
):
    store.months.ensure(user_id, key)
    store.incomes.delete(user_id, income_id)
    return {"ok": True}
