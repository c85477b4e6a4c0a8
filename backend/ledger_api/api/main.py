import logging

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError

from ledger_api.db import init_db
from ledger_api.settings import get_settings

from ledger_api.api.error_handlers import validation_exception_handler
from ledger_api.api.routes.health import router as health_router
from ledger_api.api.routes.accounts import router as accounts_router


logger = logging.getLogger(__name__)


def configure_logging() -> None:
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


configure_logging()

app = FastAPI(title="Ledger API", version="0.1.0")


@app.on_event("startup")
def _startup() -> None:
    settings = get_settings()
    if settings.database_url:
        # Fail fast if DB unreachable + ensure tables exist
        init_db()
        logger.info("SQL storage enabled")
    else:
        logger.info("LEDGER_DATABASE_URL not set, using in-memory storage")


app.add_exception_handler(RequestValidationError, validation_exception_handler)

app.include_router(health_router)
app.include_router(accounts_router)
