"""Custom exception handlers"""
# pylint: disable=unused-argument
import logging

from starlette.requests import Request
from starlette.responses import JSONResponse
from starlette.status import HTTP_500_INTERNAL_SERVER_ERROR

logger = logging.getLogger(__name__)


async def default_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """overriding default_exception_handler"""
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": str(exc)},
    )
