import requests
import urllib3

BASE_URL = "https://crackmes.one"
SEARCH_PATH = "/search"
STATIC_PATH = "/static"

COOKIE_NAME = "gosess"
USER_AGENT = "Mozilla/5.0 (crackmes browser)"
TIMEOUT_SEC = None  # requests waits forever unless told otherwise

DEFAULT_DIFFICULTY = (1, 6)
DEFAULT_QUALITY = (1, 6)


def search_url(base_url: str = BASE_URL) -> str:
    return base_url.rstrip("/") + SEARCH_PATH


def make_session(proxy: str | None = None, insecure: bool = False) -> requests.Session:
    """
    Build the HTTP session every catalog call goes through.
    `proxy` routes both schemes through one listener (e.g. Burp on 127.0.0.1:8080).
    """
    session = requests.Session()
    session.headers.update(
        {
            "User-Agent": USER_AGENT,
            "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
        }
    )
    if proxy:
        session.proxies.update({"http": proxy, "https": proxy})
    if insecure:
        session.verify = False
        urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)
    return session
