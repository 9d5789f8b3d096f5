import logging
import os

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from api import errors
from api.routers import currencies, health, rates
from core.config import get_cors_origins, get_log_level
from core.errors import RatesError

API_TITLE = "ECB Exchange Rate API"
API_VERSION = "v1"
API_DESCRIPTION = "API for retrieving ECB exchange rates"
API_CONTACT = {"name": "Chris Huckle", "email": "noone@nowhere.com"}

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def init_logging() -> None:
    logging.basicConfig(level=get_log_level(), format=LOG_FORMAT)


def create_app() -> FastAPI:
    init_logging()
    app = FastAPI(
        title=API_TITLE,
        version=API_VERSION,
        description=API_DESCRIPTION,
        contact=API_CONTACT,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=get_cors_origins(),
        allow_credentials=False,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    app.add_exception_handler(RatesError, errors.rates_error_handler)
    app.add_exception_handler(StarletteHTTPException, errors.http_error_handler)
    app.add_exception_handler(RequestValidationError, errors.validation_error_handler)
    app.add_exception_handler(Exception, errors.server_error_handler)

    app.include_router(health.router)
    app.include_router(currencies.router)
    app.include_router(rates.router)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=os.getenv("HOST", "0.0.0.0"), port=int(os.getenv("PORT", "8000")))
