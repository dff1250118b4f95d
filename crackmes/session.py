"""
Search-page handshake.

crackmes.one hands out two independent secrets on `GET /search`: a session
cookie and an anti-forgery token inside the search form. Every search POST
needs both, the cookie as a header and the token in the body.
"""

import logging
from dataclasses import dataclass

import requests
from bs4 import BeautifulSoup

from crackmes.config import BASE_URL, TIMEOUT_SEC, search_url
from crackmes.errors import TokenError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionCredentials:
    session_id: str
    form_token: str


def cookie_value(set_cookie: str | None) -> str:
    """Value of the first `key=value` attribute of a Set-Cookie header."""
    if not set_cookie:
        raise TokenError("search page sent no Set-Cookie header")
    first = set_cookie.split(";", 1)[0]
    key, sep, value = first.partition("=")
    value = value.strip()
    if not sep or not key.strip() or not value:
        raise TokenError(f"malformed session cookie: {first!r}")
    return value


def form_token(html: str) -> str:
    soup = BeautifulSoup(html, "html.parser")
    el = soup.find(id="token")
    value = (el.get("value") or "").strip() if el else ""
    if not value:
        raise TokenError("search page has no token element")
    return value


def negotiate(session: requests.Session, base_url: str = BASE_URL) -> SessionCredentials:
    url = search_url(base_url)
    try:
        r = session.get(url, timeout=TIMEOUT_SEC)
        r.raise_for_status()
    except requests.RequestException as exc:
        raise TokenError(f"search page unreachable: {exc}") from exc

    creds = SessionCredentials(
        session_id=cookie_value(r.headers.get("Set-Cookie")),
        form_token=form_token(r.text),
    )
    logger.debug("negotiated session with %s", url)
    return creds
