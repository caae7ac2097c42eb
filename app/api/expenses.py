from uuid import uuid4

from fastapi import APIRouter, Depends, HTTPException, Request
from typing import List, Optional

from app.api.deps import default_month, get_store, month_query
from app.core.security import get_current_user
from app.schemas.expense import ExpenseCreate, ExpenseRead, ExpenseUpdate
from app.store.ledger import LedgerStore

router = APIRouter(prefix="/gastos", tags=["gastos"])


@router.get("", response_model=List[ExpenseRead])
def list_expenses(
    key: str = Depends(month_query),
    user_id: str = Depends(get_current_user),
    store: LedgerStore = Depends(get_store),
):
    return [ExpenseRead.from_row(row) for row in store.expenses.list(user_id, key)]


@router.post("", response_model=ExpenseRead, status_code=201)
def create_expense(
    request: Request,
    expense_data: Optional[ExpenseCreate] = None,
    user_id: str = Depends(get_current_user),
    store: LedgerStore = Depends(get_store),
):
    expense_data = expense_data or ExpenseCreate()
    key = default_month(request, expense_data.month)
    item = {**expense_data.model_dump(exclude={"month"}), "id": str(uuid4())}
    return ExpenseRead.from_row(store.expenses.add(user_id, key, item))


@router.put("/{expense_id}", response_model=ExpenseRead)
def update_expense(
    expense_id: str,
    expense_data: Optional[ExpenseUpdate] = None,
    user_id: str = Depends(get_current_user),
    store: LedgerStore = Depends(get_store),
):
    changes = expense_data.model_dump(exclude_unset=True) if expense_data else {}
    expense = store.expenses.update(user_id, expense_id, changes)
    if not expense:
        raise HTTPException(status_code=404, detail="Gasto no encontrado")
    return ExpenseRead.from_row(expense)


@router.delete("/{expense_id}")
def delete_expense(
    expense_id: str,
    key: str = Depends(month_query),
    user_id: str = Depends(get_current_user),
    store: LedgerStore = Depends(get_store),
):
    store.months.ensure(user_id, key)
    store.expenses.delete(user_id, expense_id)
    return {"ok": True}
