from urllib.parse import urlencode

from crackmes.config import COOKIE_NAME
from crackmes.filters import FilterSpec
from crackmes.session import SessionCredentials

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


def query_fields(spec: FilterSpec, creds: SessionCredentials) -> list[tuple[str, str]]:
    """Search form fields in the order the site's own form submits them."""
    d_min, d_max = spec.difficulty_range
    q_min, q_max = spec.quality_range
    return [
        ("name", spec.name or ""),
        ("author", spec.author or ""),
        ("difficulty-min", str(d_min)),
        ("difficulty-max", str(d_max)),
        ("quality-min", str(q_min)),
        ("quality-max", str(q_max)),
        ("token", creds.form_token),
        ("language", spec.language.value if spec.language else ""),
        ("arch", spec.arch.value if spec.arch else ""),
        ("platform", spec.platform.value if spec.platform else ""),
    ]


def encode(spec: FilterSpec, creds: SessionCredentials) -> str:
    return urlencode(query_fields(spec, creds))


def request_headers(creds: SessionCredentials) -> dict[str, str]:
    # session id rides in the cookie, never in the body
    return {
        "Cookie": f"{COOKIE_NAME}={creds.session_id}",
        "Content-Type": FORM_CONTENT_TYPE,
    }
