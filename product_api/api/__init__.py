# product_api/api/__init__.py
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse
from sqlalchemy import Engine
from starlette.exceptions import HTTPException as StarletteHTTPException

from product_api.api.routers import products
from product_api.data.database import build_session_factory, check_connection, init_db
from product_api.utils.logging import get_logger

logger = get_logger(__name__)


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> PlainTextResponse:
    return PlainTextResponse(str(exc.detail), status_code=exc.status_code, headers=exc.headers)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> PlainTextResponse:
    # niepoprawny JSON / typy w body -> 400, bez strukturalnej koperty
    message = "; ".join(
        f"{'.'.join(str(part) for part in err.get('loc', ()))}: {err.get('msg', '')}" for err in exc.errors()
    )
    return PlainTextResponse(message or "Invalid request", status_code=400)


def create_app(engine: Engine, create_tables: bool = False) -> FastAPI:
    """
    Buduje aplikację wokół przekazanego engine (storage handle).
    Przy starcie sprawdza połączenie; błąd przerywa start procesu.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        check_connection(engine)
        if create_tables:
            init_db(engine)
        yield
        engine.dispose()
        logger.info("Database connection pool closed")

    app = FastAPI(
        title="Product Service",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.state.engine = engine
    app.state.session_factory = build_session_factory(engine)

    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)

    # Include routers
    app.include_router(products.router)

    return app
