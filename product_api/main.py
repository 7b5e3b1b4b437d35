# product_api/main.py
import sys

import uvicorn

from product_api.api import create_app
from product_api.data.database import build_engine
from product_api.utils import settings
from product_api.utils.logging import get_logger, setup_logging

logger = get_logger(__name__)


def main() -> None:
    setup_logging(settings.LOG_LEVEL)

    try:
        engine = build_engine(settings.DATABASE_URL)
    except Exception as e:
        logger.critical(f"Failed to create database engine: {e}")
        sys.exit(1)

    app = create_app(engine, create_tables=settings.AUTO_CREATE_TABLES)

    logger.info(f"Server running on port {settings.PORT}")
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())


if __name__ == "__main__":
    main()
