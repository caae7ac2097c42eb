from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import JWTError, jwt
from fastapi import Depends, HTTPException, Query, Request, status
from fastapi.security import OAuth2PasswordBearer

from app.core.config import Settings

# OAuth2 esquema; auto_error=False para aceptar también ?token=
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/auth/login", auto_error=False)


class TokenResolver:
    """Traduce un token bearer al id de usuario (y emite tokens en el login)."""

    def resolve(self, token: str) -> Optional[str]:
        raise NotImplementedError

    def issue(self, user_id: str) -> str:
        raise NotImplementedError


class EmailTokenResolver(TokenResolver):
    """Modo desarrollo: el token es el propio email, sin verificación."""

    def resolve(self, token: str) -> Optional[str]:
        return token.strip() or None

    def issue(self, user_id: str) -> str:
        return user_id


class JWTTokenResolver(TokenResolver):
    def __init__(self, secret_key: str, algorithm: str = "HS256", expire_minutes: int = 1440):
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.expire_minutes = expire_minutes

    def resolve(self, token: str) -> Optional[str]:
        try:
            payload = jwt.decode(token, self.secret_key, algorithms=[self.algorithm])
        except JWTError:
            return None
        return payload.get("sub")

    def issue(self, user_id: str) -> str:
        expire = datetime.now(timezone.utc) + timedelta(minutes=self.expire_minutes)
        return jwt.encode({"sub": user_id, "exp": expire}, self.secret_key, algorithm=self.algorithm)


def build_token_resolver(settings: Settings) -> TokenResolver:
    if settings.AUTH_MODE == "dev":
        return EmailTokenResolver()
    if settings.AUTH_MODE == "jwt":
        return JWTTokenResolver(settings.SECRET_KEY, settings.ALGORITHM, settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    raise ValueError(f"AUTH_MODE desconocido: {settings.AUTH_MODE!r}")


def get_token_resolver(request: Request) -> TokenResolver:
    return request.app.state.auth


def get_current_user(
    header_token: Optional[str] = Depends(oauth2_scheme),
    query_token: Optional[str] = Query(None, alias="token", include_in_schema=False),
    resolver: TokenResolver = Depends(get_token_resolver),
) -> str:
    token = header_token or query_token
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="No autorizado",
            headers={"WWW-Authenticate": "Bearer"},
        )

    user_id = resolver.resolve(token)
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Token inválido",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return user_id
