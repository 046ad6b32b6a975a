# apps/core/exceptions.py
import logging

from rest_framework import status
from rest_framework.exceptions import APIException
from rest_framework.views import exception_handler as drf_exception_handler

logger = logging.getLogger(__name__)


class ResourceConflict(APIException):
    """Concurrent write lost the race (e.g. the row was deleted under us)."""

    status_code = status.HTTP_409_CONFLICT
    default_detail = "The resource was modified or removed concurrently."
    default_code = "conflict"


def api_exception_handler(exc, context):
    """
    Let DRF build the response, but leave a log line behind.
    Client errors are warnings; anything DRF doesn't handle propagates as a 500.
    """
    resp = drf_exception_handler(exc, context)
    view = context.get("view")
    extra = {
        "view": type(view).__name__ if view is not None else "",
        "exception": type(exc).__name__,
    }
    if resp is None:
        logger.error("unhandled api error", exc_info=exc, extra=extra)
        return None
    extra["status_code"] = resp.status_code
    logger.warning("api client error: %s", exc, extra=extra)
    return resp
