from typing import Optional

from fastapi import Query, Request

from app.store.ledger import LedgerStore
from app.utils.months import MONTH_KEY_PATTERN, current_month_key


def get_store(request: Request) -> LedgerStore:
    return request.app.state.store


def default_month(request: Request, mes: Optional[str] = None) -> str:
    """El mes indicado o, si falta, el mes en curso ("YYYY-MM")."""
    return mes or current_month_key(request.app.state.settings.APP_TIMEZONE)


def month_query(
    request: Request,
    mes: Optional[str] = Query(None, pattern=MONTH_KEY_PATTERN, description="Mes YYYY-MM; por defecto el actual"),
) -> str:
    return default_month(request, mes)
