import logging

from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, Session, create_engine

logger = logging.getLogger(__name__)


class Database:
    """Conexión a la base de datos: engine + fábrica de sesiones.

    Se construye una vez en el lifespan de la app y se inyecta en los
    handlers; no hay cliente global de módulo.
    """

    def __init__(self, url: str, echo: bool = False):
        if not url:
            raise RuntimeError("DATABASE_URL no está definida. Verifica tu .env")

        kwargs = {"echo": echo}
        if url.startswith("sqlite"):
            # SQLite en memoria: una sola conexión compartida entre hilos
            kwargs["connect_args"] = {"check_same_thread": False}
            if url in ("sqlite://", "sqlite:///:memory:"):
                kwargs["poolclass"] = StaticPool
        else:
            kwargs["pool_pre_ping"] = True

        self.engine = create_engine(url, **kwargs)

    @property
    def dialect(self) -> str:
        return self.engine.dialect.name

    def create_db_and_tables(self):
        # importar los modelos para registrarlos en la metadata
        from app.models import debt, debt_payment, expense, income, month, user  # noqa: F401

        SQLModel.metadata.create_all(self.engine)
        logger.info("Tablas verificadas en %s", self.dialect)

    def session(self) -> Session:
        # expire_on_commit=False: los objetos siguen legibles tras el commit
        return Session(self.engine, expire_on_commit=False)

    def dispose(self):
        self.engine.dispose()
