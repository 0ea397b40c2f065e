# app/data/database.py
from typing import Iterator

from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from app.utils.settings import DATABASE_URL
from app.utils.logging import get_logger

logger = get_logger(__name__)


class Base(DeclarativeBase):
    pass


class Database:
    """
    Engine + fabryka sesji dla jednej instancji aplikacji.
    Tworzona jawnie w create_app i trzymana w app.state, nie jako globalny singleton.
    """

    def __init__(self, url: str | None = None, echo: bool = False):
        self.url = url or DATABASE_URL

        connect_args = {}
        if self.url.startswith("sqlite"):
            # TestClient wola endpointy synchroniczne z threadpoola
            connect_args["check_same_thread"] = False

        self.engine = create_engine(self.url, echo=echo, connect_args=connect_args)
        self.SessionLocal = sessionmaker(bind=self.engine, autoflush=False, expire_on_commit=True)

    def create_all(self) -> None:
        # modele musza byc zaimportowane zanim metadata zna tabele
        import app.data.models  # noqa: F401

        logger.info(f"Tworzenie tabel: {list(Base.metadata.tables.keys())}")
        Base.metadata.create_all(bind=self.engine)

    def dispose(self) -> None:
        self.engine.dispose()


def get_db(request: Request) -> Iterator[Session]:
    db = request.app.state.database.SessionLocal()
    try:
        yield db
    finally:
        db.close()
