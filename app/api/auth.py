import logging

from fastapi import APIRouter, Depends, HTTPException, Request
from typing import Optional

from app.core.security import TokenResolver, get_current_user, get_token_resolver
from app.schemas.user import LoginRequest, LoginResponse, UserRead
from app.api.deps import get_store
from app.store.ledger import LedgerStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])

# Login de desarrollo: el email es el id estable del usuario
@router.post("/login", response_model=LoginResponse)
def login(
    request: Request,
    credentials: Optional[LoginRequest] = None,
    store: LedgerStore = Depends(get_store),
    resolver: TokenResolver = Depends(get_token_resolver),
):
    if not request.app.state.settings.DEV_LOGIN_ENABLED:
        raise HTTPException(status_code=404, detail="Login de desarrollo deshabilitado")

    email = (credentials or LoginRequest()).email
    user = store.upsert_user(email, email)
    logger.info("Login de desarrollo para %s", email)
    return LoginResponse(token=resolver.issue(user.id), user=UserRead(id=user.id, email=user.email))

# Identidad resuelta a partir del token
@router.get("/me")
def current_user(user_id: str = Depends(get_current_user)):
    return {"user_id": user_id}
