import html
import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import HTMLResponse

logger = logging.getLogger(__name__)

ERROR_PAGE = """<!DOCTYPE html>
<html>
  <head><title>Error</title></head>
  <body>
    <h1>{message}</h1>
    <pre>{detail}</pre>
  </body>
</html>
"""


def register_error_handlers(app: FastAPI) -> None:
    """Register the catch-all handler for errors that escape a route."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        # Exception detail is only exposed in debug mode
        detail = repr(exc) if request.app.state.settings.debug else ""
        return HTMLResponse(
            ERROR_PAGE.format(message=html.escape(str(exc)), detail=html.escape(detail)),
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )
