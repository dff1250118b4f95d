"""
Result-table scraping.

The search response lists one challenge per row of `tbody#content-list`:

    name+link | author+link | language | arch | difficulty | quality | platform | date | writeups

Rows that don't fit that shape are skipped and logged; the rest still come out
in document order. Nothing here raises on bad markup.
"""

import logging
import math
from dataclasses import dataclass, field

from bs4 import BeautifulSoup, Tag

from crackmes.challenge import Challenge
from crackmes.vocab import Arch, Language, Platform

logger = logging.getLogger(__name__)

ROWS_SELECTOR = "tbody#content-list > tr"
MIN_CELLS = 9

# column positions
NAME, AUTHOR, LANGUAGE, ARCH, DIFFICULTY, QUALITY, PLATFORM, DATE, WRITEUPS = range(9)


class RowError(ValueError):
    pass


@dataclass
class ParseResult:
    challenges: list[Challenge] = field(default_factory=list)
    rows: int = 0
    skipped: int = 0


def _text(cell: Tag) -> str:
    return cell.get_text().strip()


def _anchor(cell: Tag, column: str) -> Tag:
    a = cell.find("a")
    if a is None:
        raise RowError(f"no link in {column} cell")
    return a


def _score(cell: Tag, column: str) -> float:
    raw = _text(cell)
    try:
        value = float(raw)
    except ValueError:
        raise RowError(f"{column} {raw!r} is not a number") from None
    if not math.isfinite(value):
        raise RowError(f"{column} {raw!r} is not a number")
    return value


def parse_row(row: Tag) -> Challenge:
    cells = row.find_all("td")
    if len(cells) < MIN_CELLS:
        raise RowError(f"expected {MIN_CELLS} cells, got {len(cells)}")

    link = _anchor(cells[NAME], "name")
    href = (link.get("href") or "").strip()
    if not href:
        raise RowError("name link has no href")

    return Challenge(
        name=link.get_text().strip(),
        author=_anchor(cells[AUTHOR], "author").get_text().strip(),
        url_fragment=href,
        language=Language.parse(_text(cells[LANGUAGE])),
        arch=Arch.parse(_text(cells[ARCH])),
        platform=Platform.parse(_text(cells[PLATFORM])),
        difficulty=_score(cells[DIFFICULTY], "difficulty"),
        quality=_score(cells[QUALITY], "quality"),
    )


def parse_rows(html: str) -> ParseResult:
    soup = BeautifulSoup(html or "", "html.parser")
    result = ParseResult()

    for n, row in enumerate(soup.select(ROWS_SELECTOR), start=1):
        result.rows += 1
        try:
            result.challenges.append(parse_row(row))
        except RowError as exc:
            result.skipped += 1
            logger.warning("skipping row %d: %s", n, exc)

    logger.info("found %d rows, parsed %d challenges", result.rows, len(result.challenges))
    return result


def parse(html: str) -> list[Challenge]:
    return parse_rows(html).challenges
