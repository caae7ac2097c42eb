from uuid import uuid4

from fastapi import APIRouter, Depends, HTTPException, Request
from typing import List, Optional

from app.api.deps import default_month, get_store, month_query
from app.core.security import get_current_user
from app.schemas.debt import DebtCreate, DebtPaymentRead, DebtPaymentRequest, DebtPaymentResult, DebtRead, DebtUpdate
from app.store.ledger import LedgerStore

router = APIRouter(prefix="/deudas", tags=["deudas"])


@router.get("", response_model=List[DebtRead])
def get_debts(
    key: str = Depends(month_query),
    user_id: str = Depends(get_current_user),
    store: LedgerStore = Depends(get_store),
):
    return [DebtRead.from_row(debt) for debt in store.debts.list(user_id, key)]


@router.post("", response_model=DebtRead, status_code=201)
def create_debt(
    request: Request,
    debt_data: Optional[DebtCreate] = None,
    user_id: str = Depends(get_current_user),
    store: LedgerStore = Depends(get_store),
):
    debt_data = debt_data or DebtCreate()
    key = default_month(request, debt_data.month)
    item = {**debt_data.model_dump(exclude={"month"}), "id": str(uuid4())}
    return DebtRead.from_row(store.debts.add(user_id, key, item))


@router.put("/{debt_id}", response_model=DebtRead)
def update_debt(
    debt_id: str,
    debt_data: Optional[DebtUpdate] = None,
    user_id: str = Depends(get_current_user),
    store: LedgerStore = Depends(get_store),
):
    changes = debt_data.model_dump(exclude_unset=True) if debt_data else {}
    debt = store.debts.update(user_id, debt_id, changes)
    if not debt:
        raise HTTPException(status_code=404, detail="Deuda no encontrada")
    return DebtRead.from_row(debt)


@router.delete("/{debt_id}")
def delete_debt(
    debt_id: str,
    key: str = Depends(month_query),
    user_id: str = Depends(get_current_user),
    store: LedgerStore = Depends(get_store),
):
    store.months.ensure(user_id, key)
    store.debts.delete(user_id, debt_id)
    return {"ok": True}


@router.post("/{debt_id}/pagar-cuota", response_model=DebtPaymentResult)
def pay_installment(
    request: Request,
    debt_id: str,
    payment: Optional[DebtPaymentRequest] = None,
    user_id: str = Depends(get_current_user),
    store: LedgerStore = Depends(get_store),
):
    payment = payment or DebtPaymentRequest()
    store.months.ensure(user_id, default_month(request, payment.month))

    debt = store.debts.pay_installment(user_id, debt_id, payment.amount)
    if not debt:
        raise HTTPException(404, "Deuda no encontrada")
    return DebtPaymentResult(debt=DebtRead.from_row(debt))


@router.get("/{debt_id}/pagos", response_model=List[DebtPaymentRead])
def get_debt_payments(
    debt_id: str,
    user_id: str = Depends(get_current_user),
    store: LedgerStore = Depends(get_store),
):
    payments = store.debts.list_payments(user_id, debt_id)
    if payments is None:
        raise HTTPException(status_code=404, detail="Deuda no encontrada")
    return [DebtPaymentRead.from_row(payment) for payment in payments]
