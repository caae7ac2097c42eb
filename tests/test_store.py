"""
Tests de la capa de datos (LedgerStore) contra SQLite en memoria.

Las deudas son de cuotas contadas: pagar solo incrementa
`paid_installments`; el capital no cambia y el saldo se deriva al leer.
"""
from uuid import uuid4

import pytest
from sqlmodel import select

from app.models.debt_payment import DebtPayment
from app.models.month import MonthStatus
from app.schemas.debt import DebtPaymentRead
from app.store import ledger
from app.utils.amounts import MAX_COUNT
from app.utils.months import utc_now

ANA = "ana@example.com"
BETO = "beto@example.com"
MES = "2024-05"


def new_id():
    return str(uuid4())


def add_debt(store, user_id=ANA, key=MES, **fields):
    item = {
        "id": new_id(),
        "name": "Préstamo",
        "total_amount": 1200,
        "monthly_payment": 100,
        "paid_installments": 0,
        "total_installments": 12,
        "interest_rate": 1.5,
    }
    item.update(fields)
    return store.debts.add(user_id, key, item)


class TestMonths:

    def test_new_month_is_open(self, store):
        store.months.ensure(ANA, MES)
        month = store.months.get(ANA, MES)
        assert month.key == MES
        assert month.estado == MonthStatus.abierto

    def test_ensure_is_idempotent(self, store):
        store.months.ensure(ANA, MES)
        store.months.ensure(ANA, MES)
        assert store.months.list_keys(ANA) == [MES]

    def test_set_estado_twice(self, store):
        first = store.months.set_estado(ANA, MES, MonthStatus.cerrado)
        second = store.months.set_estado(ANA, MES, "cerrado")
        assert first.estado == MonthStatus.cerrado
        assert second.estado == MonthStatus.cerrado

    def test_ensure_does_not_reopen_closed_month(self, store):
        store.months.set_estado(ANA, MES, MonthStatus.cerrado)
        store.months.ensure(ANA, MES)
        store.incomes.list(ANA, MES)
        assert store.months.get(ANA, MES).estado == MonthStatus.cerrado

    def test_reopen(self, store):
        store.months.set_estado(ANA, MES, MonthStatus.cerrado)
        assert store.months.set_estado(ANA, MES, MonthStatus.abierto).estado == MonthStatus.abierto

    def test_list_keys_sorted_and_per_user(self, store):
        for key in ("2024-11", "2023-02", "2024-01"):
            store.months.ensure(ANA, key)
        store.months.ensure(BETO, "2022-07")
        assert store.months.list_keys(ANA) == ["2023-02", "2024-01", "2024-11"]
        assert store.months.list_keys(BETO) == ["2022-07"]

    def test_touching_entries_creates_month(self, store):
        store.expenses.list(ANA, "2025-02")
        assert store.months.list_keys(ANA) == ["2025-02"]


class TestEntries:

    def test_add_income_defaults(self, store):
        income = store.incomes.add(ANA, MES, {"id": new_id()})
        assert income.name == ""
        assert income.source == ""
        assert income.amount == 0
        assert income.month_key == MES
        assert income.user_id == ANA

    @pytest.mark.parametrize("raw, expected", [
        ("abc", 0),
        (None, 0),
        ("250.75", 250.75),
        (-80, -80),
    ])
    def test_add_coerces_amount(self, store, raw, expected):
        expense = store.expenses.add(ANA, MES, {"id": new_id(), "name": "Mercado", "amount": raw})
        assert expense.amount == expected

    def test_list_is_scoped_by_user_and_month(self, store):
        store.incomes.add(ANA, MES, {"id": new_id(), "name": "Salario", "amount": 1000})
        store.incomes.add(ANA, "2024-06", {"id": new_id(), "name": "Salario", "amount": 1000})
        store.incomes.add(BETO, MES, {"id": new_id(), "name": "Bono", "amount": 50})

        rows = store.incomes.list(ANA, MES)
        assert [row.name for row in rows] == ["Salario"]

    def test_partial_update_keeps_other_fields(self, store):
        income = store.incomes.add(ANA, MES, {"id": new_id(), "name": "Salario", "source": "Empresa", "amount": 1000})

        updated = store.incomes.update(ANA, income.id, {"name": "X"})

        assert updated.name == "X"
        assert updated.source == "Empresa"
        assert updated.amount == 1000

    def test_update_recoerces_amount(self, store):
        expense = store.expenses.add(ANA, MES, {"id": new_id(), "category": "Hogar", "amount": 90})
        updated = store.expenses.update(ANA, expense.id, {"amount": "no es número"})
        assert updated.amount == 0
        assert updated.category == "Hogar"

    def test_update_ignores_unknown_fields(self, store):
        income = store.incomes.add(ANA, MES, {"id": new_id(), "amount": 10})
        updated = store.incomes.update(ANA, income.id, {"user_id": BETO, "month_key": "1999-01"})
        assert updated.user_id == ANA
        assert updated.month_key == MES

    def test_update_missing_returns_none(self, store):
        assert store.incomes.update(ANA, new_id(), {"name": "X"}) is None

    def test_delete(self, store):
        income = store.incomes.add(ANA, MES, {"id": new_id(), "amount": 10})
        store.incomes.delete(ANA, income.id)
        assert store.incomes.list(ANA, MES) == []

    def test_delete_nonexistent_is_noop(self, store):
        store.expenses.delete(ANA, new_id())
        store.debts.delete(ANA, new_id())

    def test_other_user_cannot_update_or_delete(self, store):
        expense = store.expenses.add(ANA, MES, {"id": new_id(), "name": "Arriendo", "amount": 700})

        assert store.expenses.update(BETO, expense.id, {"amount": 1}) is None
        store.expenses.delete(BETO, expense.id)

        rows = store.expenses.list(ANA, MES)
        assert len(rows) == 1
        assert rows[0].amount == 700


class TestDebts:

    def test_add_debt_defaults_kind(self, store):
        debt = add_debt(store, kind="")
        assert debt.kind == "otro"
        assert debt.total_installments == 12

    def test_add_debt_coerces_counts(self, store):
        debt = add_debt(store, paid_installments="2.7", total_installments="x")
        assert debt.paid_installments == 2
        assert debt.total_installments == 0

    def test_pay_installment_increments(self, store):
        debt = add_debt(store, paid_installments=3)
        paid = store.debts.pay_installment(ANA, debt.id)
        assert paid.paid_installments == 4
        assert paid.remaining == 1200 - 100 * 4

    def test_pay_installment_is_clamped(self, store):
        debt = add_debt(store, paid_installments=11, total_installments=12)

        first = store.debts.pay_installment(ANA, debt.id)
        second = store.debts.pay_installment(ANA, debt.id)

        assert first.paid_installments == 12
        assert second.paid_installments == 12
        assert second.remaining == 0
        assert [p.installment for p in store.debts.list_payments(ANA, debt.id)] == [12]

    def test_payment_keeps_principal(self, store):
        debt = add_debt(store, total_amount=5000, monthly_payment=500, total_installments=10)

        paid = store.debts.pay_installment(ANA, debt.id, 800)

        # el capital original no se modifica; solo avanza el contador de cuotas
        assert paid.total_amount == 5000
        assert paid.monthly_payment == 500
        assert paid.remaining == 4500

    def test_payment_amount_override_is_recorded(self, store):
        debt = add_debt(store, monthly_payment=100)

        store.debts.pay_installment(ANA, debt.id)
        store.debts.pay_installment(ANA, debt.id, "250")
        store.debts.pay_installment(ANA, debt.id, "no numérico")

        payments = store.debts.list_payments(ANA, debt.id)
        assert [p.amount for p in payments] == [100, 250, 100]
        assert [p.installment for p in payments] == [1, 2, 3]

    def test_pay_missing_or_foreign_debt(self, store):
        debt = add_debt(store)
        assert store.debts.pay_installment(ANA, new_id()) is None
        assert store.debts.pay_installment(BETO, debt.id) is None
        assert store.debts.list_payments(BETO, debt.id) is None
        assert store.debts.list(ANA, MES)[0].paid_installments == 0

    def test_delete_debt_removes_payments(self, store):
        debt = add_debt(store)
        store.debts.pay_installment(ANA, debt.id)
        store.debts.delete(ANA, debt.id)

        assert store.debts.list_payments(ANA, debt.id) is None
        with store.database.session() as session:
            assert session.exec(select(DebtPayment)).all() == []

    def test_partial_update(self, store):
        debt = add_debt(store)
        updated = store.debts.update(ANA, debt.id, {"monthly_payment": "150"})
        assert updated.monthly_payment == 150
        assert updated.total_amount == 1200
        assert updated.name == "Préstamo"

    def test_payments_are_timestamped_in_utc(self, store):
        debt = add_debt(store)
        store.debts.pay_installment(ANA, debt.id)

        [payment] = store.debts.list_payments(ANA, debt.id)
        read = DebtPaymentRead.from_row(payment)

        assert read.paid_at.tzinfo is not None
        assert read.paid_at <= utc_now()

    def test_huge_counts_are_bounded(self, store):
        debt = add_debt(store, total_installments=1e20, paid_installments="1e30")
        assert debt.total_installments == MAX_COUNT
        assert store.debts.list(ANA, MES)[0].paid_installments == MAX_COUNT


class TestTotals:

    def test_totals_scenario(self, store):
        store.incomes.add(ANA, MES, {"id": new_id(), "amount": 1000})
        store.incomes.add(ANA, MES, {"id": new_id(), "amount": 200})
        store.expenses.add(ANA, MES, {"id": new_id(), "amount": 300})
        add_debt(store, monthly_payment=150)

        totals = store.calculate_totals(ANA, MES)

        assert totals == {
            "total_income": 1200,
            "total_expenses": 300,
            "total_debt_payments": 150,
            "available": 750,
        }

    def test_empty_month(self, store):
        totals = store.calculate_totals(ANA, "2030-01")
        assert totals["total_income"] == 0
        assert totals["available"] == 0
        assert store.months.list_keys(ANA) == ["2030-01"]

    def test_totals_ignore_other_users_and_months(self, store):
        store.incomes.add(ANA, MES, {"id": new_id(), "amount": 1000})
        store.incomes.add(BETO, MES, {"id": new_id(), "amount": 999})
        store.expenses.add(ANA, "2024-06", {"id": new_id(), "amount": 400})

        totals = store.calculate_totals(ANA, MES)
        assert totals["total_income"] == 1000
        assert totals["total_expenses"] == 0

    def test_totals_use_monthly_payment_not_remaining(self, store):
        add_debt(store, total_amount=10000, monthly_payment=250, paid_installments=2)
        assert store.calculate_totals(ANA, MES)["total_debt_payments"] == 250


class TestUsers:

    def test_upsert_user_is_timestamped_in_utc(self, store):
        user = store.upsert_user(ANA, ANA)
        assert user.created_at.tzinfo is not None

        again = store.upsert_user(ANA, "nuevo@example.com")
        assert again.email == "nuevo@example.com"


def test_store_layer_has_no_http_dependencies():
    assert "Request" not in vars(ledger)
    assert "get_store" not in vars(ledger)
