# product_api/data/database.py
from collections.abc import Iterator

from fastapi import Request
from sqlalchemy import Engine, create_engine, text
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from product_api.utils.logging import get_logger

logger = get_logger(__name__)

Base = declarative_base()


def build_engine(url: str) -> Engine:
    """
    Tworzy wspólny pool połączeń (storage handle) dla całego procesu.
    """
    connect_args = {}
    if url.startswith("sqlite"):
        # uvicorn obsługuje requesty w wielu wątkach
        connect_args["check_same_thread"] = False
    return create_engine(url, connect_args=connect_args)


def build_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(bind=engine, autoflush=False, autocommit=False, expire_on_commit=False)


def check_connection(engine: Engine) -> None:
    with engine.connect() as conn:
        conn.execute(text("SELECT 1"))
    logger.info(f"Connected to database ({engine.url.render_as_string(hide_password=True)})")


def init_db(engine: Engine) -> None:
    # rejestracja modeli w Base.metadata przed create_all
    import product_api.data.models  # noqa: F401

    logger.info(f"Creating tables: {list(Base.metadata.tables.keys())}")
    Base.metadata.create_all(bind=engine)


def get_db(request: Request) -> Iterator[Session]:
    """
    FastAPI dependency: jedna sesja na request, zamykana po odpowiedzi.
    """
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()
