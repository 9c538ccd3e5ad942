# foodpos/api/errors.py
import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from foodpos.core.errors import OrderingError, PersistenceFailed

logger = logging.getLogger(__name__)


def register_exception_handlers(app: FastAPI):
    @app.exception_handler(OrderingError)
    async def ordering_error_handler(request: Request, exc: OrderingError):
        logger.warning("%s %s rejected: %s", request.method, request.url.path, exc.message)
        return JSONResponse(
            status_code=exc.http_status,
            content={"error": exc.code, "detail": exc.message},
        )

    @app.exception_handler(PersistenceFailed)
    async def persistence_error_handler(request: Request, exc: PersistenceFailed):
        logger.error("%s %s failed: %s", request.method, request.url.path, exc)
        return JSONResponse(
            status_code=500,
            content={"error": "persistence_failed", "detail": "The order could not be saved. No payment was taken."},
        )
