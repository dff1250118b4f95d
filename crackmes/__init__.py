"""Search, browse and download crackmes from crackmes.one."""

from crackmes.challenge import Challenge, download
from crackmes.errors import CrackmesError, DownloadError, RetrievalError, TokenError
from crackmes.filters import FilterSpec
from crackmes.pipeline import fetch
from crackmes.vocab import Arch, DifficultyLevel, Language, Platform, QualityLevel

__all__ = [
    "Arch",
    "Challenge",
    "CrackmesError",
    "DifficultyLevel",
    "DownloadError",
    "FilterSpec",
    "Language",
    "Platform",
    "QualityLevel",
    "RetrievalError",
    "TokenError",
    "download",
    "fetch",
]
