from __future__ import annotations

import logging
import traceback
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from datetime import datetime

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from pixcheckout.constants import SP_TZ
from pixcheckout.gateway.base import PaymentGateway
from pixcheckout.gateway.factory import get_gateway
from pixcheckout.logging import configure_logging
from pixcheckout.repositories.factory import get_billing_repository, get_customer_repository
from pixcheckout.settings import Settings, settings
from web.deps import error_response
from web.middleware import SecurityHeadersMiddleware
from web.routes.checkout import router as checkout_router
from web.routes.customer import router as customer_router
from web.routes.payment import router as payment_router

configure_logging()
logger = logging.getLogger(__name__)


def _timestamp() -> str:
    return datetime.now(SP_TZ).isoformat()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    config: Settings = app.state.settings
    logger.info(
        "Application started: environment=%s frontend=%s abacatepay_configured=%s",
        config.environment,
        config.frontend_url or "-",
        "yes" if app.state.gateway.is_configured else "no",
    )
    yield
    app.state.gateway.close()
    logger.info("Application stopped")


def create_app(config: Settings | None = None, gateway: PaymentGateway | None = None) -> FastAPI:
    """Build the API with its own storage and gateway.

    Storage is created here, once per app, and shared by every request.
    """
    config = config or settings

    app = FastAPI(docs_url=None, redoc_url=None, lifespan=lifespan)
    app.state.settings = config
    app.state.customer_repo = get_customer_repository()
    app.state.billing_repo = get_billing_repository()
    app.state.gateway = gateway or get_gateway(config)

    app.add_middleware(GZipMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins(),
        allow_origin_regex=config.allowed_origin_regex or None,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization", "X-Requested-With"],
    )
    app.add_middleware(SecurityHeadersMiddleware)

    app.include_router(checkout_router)
    app.include_router(payment_router)
    app.include_router(customer_router)

    @app.get("/health")
    async def health():
        return {"status": "ok", "timestamp": _timestamp(), "environment": config.environment}

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code == 404:
            logger.info("Route not found: %s %s", request.method, request.url.path)
            return JSONResponse(
                {"error": "Route not found", "path": request.url.path, "timestamp": _timestamp()},
                status_code=404,
            )
        return JSONResponse({"error": exc.detail}, status_code=exc.status_code, headers=exc.headers)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        logger.warning("Malformed request on %s %s", request.method, request.url.path)
        details = [
            {"field": ".".join(str(p) for p in err.get("loc", ())), "message": err.get("msg", "")}
            for err in exc.errors()
        ]
        return error_response(400, "Dados inválidos", details)

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.error(
            "Unhandled exception on %s %s:\n%s",
            request.method,
            request.url.path,
            traceback.format_exc(),
        )
        message = str(exc) if config.is_development else "Something went wrong"
        return JSONResponse(
            {"error": "Internal server error", "message": message, "timestamp": _timestamp()},
            status_code=500,
        )

    return app


app = create_app()
