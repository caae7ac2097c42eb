import os
from typing import List, Optional

from dotenv import load_dotenv
from pydantic import BaseModel

load_dotenv()  # Carga las variables de entorno


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ("1", "true", "yes")


def _env_list(name: str, default: str) -> List[str]:
    return [item.strip() for item in os.getenv(name, default).split(",") if item.strip()]


class Settings(BaseModel):
    """Configuración de la API, leída del entorno (.env)."""

    APP_NAME: str = "Finanzas personales"

    # Base de datos (Postgres hospedado, p.ej. Supabase)
    DATABASE_URL: Optional[str] = os.getenv("DATABASE_URL")
    SQL_ECHO: bool = _env_bool("SQL_ECHO", "false")

    CORS_ORIGINS: List[str] = _env_list("CORS_ORIGINS", "http://localhost:3000")

    # Auth: "dev" usa el email como token, "jwt" verifica tokens firmados
    AUTH_MODE: str = os.getenv("AUTH_MODE", "dev")
    SECRET_KEY: str = os.getenv("SECRET_KEY", "cambia-esta-clave-en-produccion")
    ALGORITHM: str = os.getenv("ALGORITHM", "HS256")
    ACCESS_TOKEN_EXPIRE_MINUTES: int = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "1440"))
    DEV_LOGIN_ENABLED: bool = _env_bool("DEV_LOGIN_ENABLED", "true")

    # Zona horaria IANA para el mes por defecto; None = hora local del servidor
    APP_TIMEZONE: Optional[str] = os.getenv("APP_TIMEZONE") or None

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # Servidor (uvicorn)
    HOST: str = os.getenv("HOST", "127.0.0.1")
    PORT: int = int(os.getenv("PORT", "8000"))


settings = Settings()
