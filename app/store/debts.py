# app/store/debts.py

import logging
from typing import Any, List, Optional

from sqlalchemy import delete
from sqlmodel import select

from app.models.debt import Debt
from app.models.debt_payment import DebtPayment
from app.store.entries import EntryBook
from app.utils.amounts import to_amount

logger = logging.getLogger(__name__)


class DebtBook(EntryBook):
    """Deudas en cuotas.

    Pagar una cuota solo incrementa `paid_installments` (tope:
    `total_installments`); `total_amount` conserva el capital original y el
    saldo pendiente se calcula al leer (`Debt.remaining`).
    """

    model = Debt
    text_fields = ("name", "kind")
    amount_fields = ("total_amount", "monthly_payment", "interest_rate")
    count_fields = ("paid_installments", "total_installments")
    defaults = {"kind": "otro"}

    def pay_installment(self, user_id: str, debt_id: str, amount: Any = None) -> Optional[Debt]:
        with self.database.session() as session:
            debt = self._lock(session, user_id, debt_id)
            if debt is None:
                return None

            # el monto explícito aplica solo a este pago; pagoMensual no cambia
            payment = to_amount(amount) or debt.monthly_payment or 0.0
            previous = debt.paid_installments or 0
            paid = min(debt.total_installments or 0, previous + 1)

            if paid > previous:
                session.add(DebtPayment(
                    debt_id=debt.id,
                    user_id=user_id,
                    month_key=debt.month_key,
                    amount=payment,
                    installment=paid,
                ))
                logger.info("Cuota %s/%s pagada en deuda %s", paid, debt.total_installments, debt.id)
            else:
                logger.info("Deuda %s ya estaba pagada por completo", debt.id)

            debt.paid_installments = paid
            session.add(debt)
            session.commit()
            return self._reload(session, user_id, debt_id) or debt

    def list_payments(self, user_id: str, debt_id: str) -> Optional[List[DebtPayment]]:
        with self.database.session() as session:
            debt = session.exec(self._scoped(user_id, debt_id)).first()
            if debt is None:
                return None

            payments = session.exec(
                select(DebtPayment)
                .where(DebtPayment.debt_id == debt_id, DebtPayment.user_id == user_id)
                .order_by(DebtPayment.installment, DebtPayment.id)
            ).all()
            return list(payments)

    def delete(self, user_id: str, entry_id: str):
        with self.database.session() as session:
            session.execute(
                delete(DebtPayment).where(DebtPayment.debt_id == entry_id, DebtPayment.user_id == user_id)
            )
            session.execute(
                delete(Debt).where(Debt.id == entry_id, Debt.user_id == user_id)
            )
            session.commit()
