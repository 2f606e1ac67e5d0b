import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError

logger = logging.getLogger(__name__)


class NotFoundError(Exception):
    detail = "Not found"

    def __init__(self, ident):
        super().__init__(f"{self.detail}: {ident}")
        self.ident = ident


class UserNotFoundError(NotFoundError):
    detail = "User not found"


class PaintingNotFoundError(NotFoundError):
    detail = "Painting not found"


async def not_found_handler(request: Request, exc: NotFoundError):
    logger.warning("not_found path=%s detail=%r id=%s", request.url.path, exc.detail, exc.ident)
    return JSONResponse(status_code=404, content={"detail": exc.detail})


async def integrity_error_handler(request: Request, exc: IntegrityError):
    logger.warning("constraint_violation path=%s error=%s", request.url.path, exc.orig)
    return JSONResponse(status_code=409, content={"detail": "Constraint violation"})


def register_exception_handlers(app: FastAPI):
    app.add_exception_handler(NotFoundError, not_found_handler)
    app.add_exception_handler(IntegrityError, integrity_error_handler)
