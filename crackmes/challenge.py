import logging
from dataclasses import dataclass
from pathlib import Path

import requests

from crackmes.config import BASE_URL, STATIC_PATH, TIMEOUT_SEC, make_session
from crackmes.errors import DownloadError
from crackmes.vocab import Arch, Language, Platform

logger = logging.getLogger(__name__)

CHUNK_SIZE = 8192


@dataclass(frozen=True)
class Challenge:
    name: str
    author: str
    url_fragment: str  # catalog-relative href, e.g. "/crackme/5f0c..."
    language: Language
    arch: Arch
    platform: Platform
    difficulty: float
    quality: float


def download_url(challenge: Challenge, base_url: str = BASE_URL) -> str:
    return f"{base_url.rstrip('/')}{STATIC_PATH}{challenge.url_fragment}.zip"


def archive_name(challenge: Challenge) -> str:
    # names are free text on the catalog; keep the file inside dest_dir
    name = challenge.name.replace("/", "_").replace("\\", "_")
    return f"{name}.zip"


def download(
    challenge: Challenge,
    session: requests.Session | None = None,
    dest_dir: str | Path = ".",
    base_url: str = BASE_URL,
) -> Path:
    """Stream the challenge archive to `<dest_dir>/<name>.zip` and return the path."""
    session = session or make_session()
    url = download_url(challenge, base_url)
    dest = Path(dest_dir) / archive_name(challenge)
    # an existing archive is only replaced once the new one is complete
    part = dest.with_name(dest.name + ".part")

    logger.info("downloading %s -> %s", url, dest)
    try:
        with session.get(url, stream=True, timeout=TIMEOUT_SEC) as r:
            r.raise_for_status()
            with open(part, "wb") as fh:
                for chunk in r.iter_content(chunk_size=CHUNK_SIZE):
                    if chunk:
                        fh.write(chunk)
        part.replace(dest)
    except (requests.RequestException, OSError) as exc:
        part.unlink(missing_ok=True)
        raise DownloadError(f"could not download {challenge.name}: {exc}") from exc

    return dest
