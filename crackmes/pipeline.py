import logging

import requests

from crackmes.challenge import Challenge
from crackmes.config import BASE_URL, TIMEOUT_SEC, make_session, search_url
from crackmes.errors import RetrievalError, TokenError
from crackmes.filters import FilterSpec
from crackmes.parser import parse
from crackmes.query import encode, query_fields, request_headers
from crackmes.session import negotiate

logger = logging.getLogger(__name__)


def fetch(
    spec: FilterSpec,
    session: requests.Session | None = None,
    base_url: str = BASE_URL,
) -> list[Challenge]:
    """
    Run one catalog search: handshake, POST the form, scrape the table.

    Raises TokenError when the search page gives no usable cookie/token and
    RetrievalError when either request fails on the wire. No matches is an
    empty list, not an error.
    """
    session = session or make_session()

    try:
        creds = negotiate(session, base_url)
    except TokenError as exc:
        if isinstance(exc.__cause__, requests.RequestException):
            raise RetrievalError(f"handshake failed: {exc.__cause__}") from exc.__cause__
        raise

    url = search_url(base_url)
    body = encode(spec, creds)
    logger.debug(
        "POST %s %s",
        url,
        {k: v for k, v in query_fields(spec, creds) if k != "token"},
    )
    try:
        r = session.post(url, data=body, headers=request_headers(creds), timeout=TIMEOUT_SEC)
        r.raise_for_status()
    except requests.RequestException as exc:
        raise RetrievalError(f"search failed: {exc}") from exc

    logger.debug("response HTML length: %d", len(r.text))
    return parse(r.text)
