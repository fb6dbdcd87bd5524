"""
Error handling utilities.

Provides a decorator that maps the domain exception taxonomy onto
HTTPExceptions for route handlers, and an application-level handler for
domain exceptions raised from dependencies (authentication, user lookup).
"""

import functools
import logging
from typing import Any, Callable, TypeVar

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.responses import JSONResponse

from talentiq.core.exceptions import ExternalServiceError, TalentIQException

logger = logging.getLogger(__name__)

# Type for the decorated function
F = TypeVar("F", bound=Callable[..., Any])


def handle_service_errors(failure_message: str) -> Callable[[F], F]:
    """
    Decorator factory transforming service errors into HTTPExceptions.

    - 4xx domain errors keep their message and are logged as warnings
    - downstream and unexpected failures become a 500 carrying
      ``failure_message`` and are logged with traceback

    Args:
        failure_message: Detail returned to the client on a 500
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                return await func(*args, **kwargs)

            except HTTPException:
                raise

            except ExternalServiceError as e:
                logger.exception(
                    failure_message,
                    extra={"error": str(e), **e.details},
                )
                raise HTTPException(
                    status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                    detail=failure_message,
                ) from e

            except TalentIQException as e:
                if e.status_code >= 500:
                    logger.exception(failure_message, extra={"error": str(e)})
                    raise HTTPException(
                        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                        detail=failure_message,
                    ) from e
                logger.warning(
                    "Request rejected",
                    extra={"status_code": e.status_code, "error": str(e)},
                )
                raise HTTPException(status_code=e.status_code, detail=e.message) from e

            except Exception as e:
                logger.exception(failure_message, extra={"error": str(e)})
                raise HTTPException(
                    status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                    detail=failure_message,
                ) from e

        return wrapper  # type: ignore

    return decorator


async def talentiq_exception_handler(request: Request, exc: TalentIQException) -> JSONResponse:
    """Render domain errors raised outside route bodies as ``{"detail": ...}``."""
    if exc.status_code >= 500:
        logger.error(
            "Request failed",
            extra={"path": request.url.path, "error": str(exc)},
        )
        detail = "Internal server error"
    else:
        logger.warning(
            "Request rejected",
            extra={"path": request.url.path, "status_code": exc.status_code},
        )
        detail = exc.message
    return JSONResponse(status_code=exc.status_code, content={"detail": detail})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(TalentIQException, talentiq_exception_handler)
