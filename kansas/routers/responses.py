"""Translation of service result variants into HTTP responses."""
import logging

from fastapi import Response, status
from fastapi.responses import JSONResponse

from kansas.results import Conflict, Failed, NotFound, Result

logger = logging.getLogger(__name__)


def to_response(result: Result, action: str, success_status: int = status.HTTP_200_OK):
    """
    Map a service result to the value to return, or to a bodiless error.

    Args:
        result: Found, NotFound, Conflict or Failed from a service call
        action: Log prefix describing the endpoint, e.g. "getting goal"
        success_status: 204 discards the found value

    Returns:
        The found value for FastAPI to serialize, or an empty Response
    """
    if isinstance(result, Failed):
        logger.error("Exception %s: %s", action, result.error)
        return Response(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
    if isinstance(result, NotFound):
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    if isinstance(result, Conflict):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST, content={"detail": result.detail}
        )
    if success_status == status.HTTP_204_NO_CONTENT:
        return Response(status_code=success_status)
    return result.value
