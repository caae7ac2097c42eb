# app/store/ledger.py

from typing import Dict

from sqlmodel import func, select

from app.database import Database
from app.models.debt import Debt
from app.models.expense import Expense
from app.models.income import Income
from app.models.user import User
from app.store.debts import DebtBook
from app.store.entries import ExpenseBook, IncomeBook
from app.store.months import MonthBook


class LedgerStore:
    """Punto de entrada a los datos: meses, ingresos, gastos y deudas por usuario."""

    def __init__(self, database: Database):
        self.database = database
        self.months = MonthBook(database)
        self.incomes = IncomeBook(database, self.months)
        self.expenses = ExpenseBook(database, self.months)
        self.debts = DebtBook(database, self.months)

    def upsert_user(self, user_id: str, email: str) -> User:
        with self.database.session() as session:
            user = session.get(User, user_id)
            if user is None:
                user = User(id=user_id, email=email)
            else:
                user.email = email
            session.add(user)
            session.commit()
            return user

    def calculate_totals(self, user_id: str, key: str) -> Dict[str, float]:
        with self.database.session() as session:
            self.months.ensure_in(session, user_id, key)
            session.commit()

            total_income = session.exec(
                select(func.sum(Income.amount)).where(Income.user_id == user_id, Income.month_key == key)
            ).one() or 0

            total_expenses = session.exec(
                select(func.sum(Expense.amount)).where(Expense.user_id == user_id, Expense.month_key == key)
            ).one() or 0

            total_debt_payments = session.exec(
                select(func.sum(Debt.monthly_payment)).where(Debt.user_id == user_id, Debt.month_key == key)
            ).one() or 0

        return {
            "total_income": float(total_income),
            "total_expenses": float(total_expenses),
            "total_debt_payments": float(total_debt_payments),
            "available": float(total_income - total_expenses - total_debt_payments),
        }
