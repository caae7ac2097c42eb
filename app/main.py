import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import uvicorn
from sqlalchemy.exc import SQLAlchemyError

from app.api import auth, debts, expenses, incomes, months
from app.core.config import Settings, settings as default_settings
from app.core.security import build_token_resolver
from app.database import Database
from app.store.ledger import LedgerStore

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or default_settings
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        database = Database(settings.DATABASE_URL, echo=settings.SQL_ECHO)
        database.create_db_and_tables()
        app.state.database = database
        app.state.store = LedgerStore(database)
        logger.info("API lista (auth=%s, db=%s)", settings.AUTH_MODE, database.dialect)
        yield
        database.dispose()
        logger.info("Conexiones a la base de datos cerradas")

    app = FastAPI(title=settings.APP_NAME, lifespan=lifespan)
    app.state.settings = settings
    app.state.auth = build_token_resolver(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(SQLAlchemyError)
    async def store_error_handler(request: Request, exc: SQLAlchemyError):
        logger.error("Error de base de datos en %s %s: %s", request.method, request.url.path, exc)
        return JSONResponse(status_code=500, content={"detail": str(exc) or "Error interno del servidor"})

    app.include_router(auth.router)
    app.include_router(months.router)
    app.include_router(incomes.router)
    app.include_router(expenses.router)
    app.include_router(debts.router)

    @app.get("/")
    def root():
        return {"message": "Servidor de finanzas personales"}

    return app


app = create_app()


def run():
    """Punto de entrada del comando `finanzas-api`."""
    uvicorn.run("app.main:app", host=default_settings.HOST, port=default_settings.PORT)
