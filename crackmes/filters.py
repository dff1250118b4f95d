from dataclasses import dataclass

from crackmes.config import DEFAULT_DIFFICULTY, DEFAULT_QUALITY
from crackmes.vocab import Arch, DifficultyLevel, Language, Platform, QualityLevel


def _check_range(label: str, bounds: tuple[int, int]) -> tuple[int, int]:
    if len(bounds) != 2:
        raise ValueError(f"{label} must have exactly two bounds")
    low, high = int(bounds[0]), int(bounds[1])
    if low > high:
        raise ValueError(f"{label} low bound {low} is above high bound {high}")
    return low, high


@dataclass(frozen=True)
class FilterSpec:
    """
    One catalog search.

    Ranges are inclusive on the server side. The (1, 6) defaults cover every
    score the catalog hands out, so "no filter" is just the full range.
    """

    name: str | None = None
    author: str | None = None
    difficulty_range: tuple[int, int] = DEFAULT_DIFFICULTY
    quality_range: tuple[int, int] = DEFAULT_QUALITY
    language: Language | None = None
    arch: Arch | None = None
    platform: Platform | None = None

    def __post_init__(self):
        object.__setattr__(self, "difficulty_range", _check_range("difficulty_range", self.difficulty_range))
        object.__setattr__(self, "quality_range", _check_range("quality_range", self.quality_range))

    @classmethod
    def from_levels(
        cls,
        difficulty: DifficultyLevel | None = None,
        quality: QualityLevel | None = None,
        **kwargs,
    ) -> "FilterSpec":
        """Resolve presentation bands to ranges; a missing band means the default range."""
        return cls(
            difficulty_range=difficulty.range if difficulty else DEFAULT_DIFFICULTY,
            quality_range=quality.range if quality else DEFAULT_QUALITY,
            **kwargs,
        )
