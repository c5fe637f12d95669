"""Redirect route implementation."""

import logging

from fastapi import APIRouter, Request, status
from fastapi.responses import RedirectResponse

from shortener.common.validators import is_valid_short_code
from shortener.errors import CodeNotFoundError

router = APIRouter()

logger = logging.getLogger("url_shortener.web")


@router.get(
    "/{short_code}",
    response_class=RedirectResponse,
    status_code=status.HTTP_307_TEMPORARY_REDIRECT,
    include_in_schema=False,
)
def redirect_to_url(request: Request, short_code: str):
    """Redirect a short code to its original URL.

    307 keeps the request method, and the mapping is not promised to be
    permanent.
    """
    service = request.app.state.service
    generator = service.generator

    code = short_code.strip()
    if code:
        is_valid, error = is_valid_short_code(code, generator.default_length, generator.alphabet)
        if not is_valid:
            logger.debug(f"Rejected malformed short code '{code}': {error}")
            raise CodeNotFoundError(code)

    original_url = service.resolve(code)

    return RedirectResponse(
        url=original_url,
        status_code=status.HTTP_307_TEMPORARY_REDIRECT,
    )
